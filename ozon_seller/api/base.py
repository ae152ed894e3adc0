"""
Ozon API 客户端基础类
包含连接管理、核心请求方法，以及各分类 API 的基类
"""

import json
import time
import uuid
from typing import Any, Callable, Dict, Optional, Type, TypeVar

import httpx

from ..config import DEFAULT_API_BASE_URL
from ..utils.logger import get_logger
from .models import CommonResponse, OzonParams

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=CommonResponse)

# 日志中请求/响应体的最大长度
DEFAULT_LOG_BODY_MAX_LEN = 5000


def truncate_for_log(obj: Any, max_len: int = DEFAULT_LOG_BODY_MAX_LEN) -> Optional[str]:
    """截断对象用于日志记录"""
    if obj is None:
        return None
    try:
        s = json.dumps(obj, ensure_ascii=False)
    except (TypeError, ValueError):
        s = str(obj)
    if len(s) > max_len:
        return s[:max_len] + f"... [truncated, total {len(s)} chars]"
    return s


class CoreClient:
    """
    Ozon API 传输层

    持有一个 httpx.Client（base_url + 认证头），所有分类 API 共享同一个实例。
    """

    def __init__(
        self,
        http_client: httpx.Client,
        log_body_max_len: int = DEFAULT_LOG_BODY_MAX_LEN,
    ):
        self.http_client = http_client
        self.log_body_max_len = log_body_max_len

    @classmethod
    def create(
        cls,
        base_url: str,
        headers: Dict[str, str],
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = 30.0,
        log_body_max_len: int = DEFAULT_LOG_BODY_MAX_LEN,
    ) -> "CoreClient":
        """
        创建传输层

        Args:
            base_url: API 根地址
            headers: 每个请求都携带的请求头（Client-Id / Api-Key）
            transport: 自定义 httpx 传输层（代理、连接池等），默认使用 httpx 自带
            timeout: 请求超时（秒）
        """
        http_client = httpx.Client(
            base_url=base_url,
            headers={**headers, "Content-Type": "application/json"},
            transport=transport,
            timeout=timeout,
        )
        return cls(http_client, log_body_max_len=log_body_max_len)

    @classmethod
    def mock(cls, handler: Callable[[httpx.Request], httpx.Response]) -> "CoreClient":
        """创建不走网络的传输层，handler 负责模拟 Ozon 的响应"""
        return cls.create(
            base_url=DEFAULT_API_BASE_URL,
            headers={"Client-Id": "mock-client-id", "Api-Key": "mock-api-key"},
            transport=httpx.MockTransport(handler),
        )

    @property
    def base_url(self) -> str:
        return str(self.http_client.base_url).rstrip("/")

    def close(self) -> None:
        """关闭客户端连接"""
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[OzonParams],
        response_model: Type[ResponseT],
    ) -> ResponseT:
        """
        发送 API 请求并解析为响应模型

        传输错误、JSON 解码错误、模型校验错误原样抛出；
        非 2xx 响应不抛异常，错误信息保存在响应信封中。

        Args:
            method: HTTP 方法
            endpoint: API 端点
            params: 请求参数（GET 请求忽略）
            response_model: 响应模型类型

        Returns:
            响应模型实例（status_code 为本次 HTTP 状态码）
        """
        data = None
        if method != "GET":
            data = params.to_payload() if params is not None else {}

        request_id = str(uuid.uuid4())
        api_start = time.perf_counter()

        logger.info(
            "OZON API request",
            direction="outbound",
            method=method,
            endpoint=endpoint,
            url=f"{self.base_url}{endpoint}",
            request_id=request_id,
            request_body=truncate_for_log(data, self.log_body_max_len),
        )

        try:
            response = self.http_client.request(
                method, endpoint, json=data, headers={"X-Request-Id": request_id}
            )
            api_elapsed_ms = (time.perf_counter() - api_start) * 1000

            payload = response.json()
            result = response_model.model_validate(payload)
        except Exception as e:
            api_elapsed_ms = (time.perf_counter() - api_start) * 1000
            logger.error(
                "OZON API request failed",
                direction="outbound",
                method=method,
                endpoint=endpoint,
                latency_ms=int(api_elapsed_ms),
                request_id=request_id,
                request_body=truncate_for_log(data, self.log_body_max_len),
                error=str(e),
                error_type=type(e).__name__,
                result="error",
            )
            raise

        result.status_code = response.status_code

        if response.is_success:
            logger.info(
                "OZON API response",
                direction="outbound",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                latency_ms=int(api_elapsed_ms),
                request_id=request_id,
                response_body=truncate_for_log(payload, self.log_body_max_len),
                result="success",
            )
        else:
            logger.warning(
                "OZON API error response",
                direction="outbound",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                latency_ms=int(api_elapsed_ms),
                request_id=request_id,
                request_body=truncate_for_log(data, self.log_body_max_len),
                response_body=truncate_for_log(payload, self.log_body_max_len),
                error_code=result.code,
                error_message=result.message,
                result="error",
            )

        return result


class APIGroup:
    """分类 API 基类，持有共享的传输层引用"""

    def __init__(self, client: CoreClient):
        self._client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._client.base_url!r})"
