"""
Ozon Seller 客户端日志系统
- JSON 格式输出（structlog）
- 上下文字段：ts, level, trace_id, client_id, action
- 凭证自动脱敏（Api-Key 不允许出现在日志中）
"""
import logging
import re
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from structlog.processors import JSONRenderer, add_log_level

# 调用级上下文（trace_id 由调用方通过 LogContext 设置）
trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)
client_id_var: ContextVar[Optional[str]] = ContextVar("client_id", default=None)


class CredentialMaskingProcessor:
    """凭证脱敏处理器

    Api-Key 等字段整体屏蔽；字符串值（包括嵌套在请求/响应体中的）按规则替换。
    """

    # (规则, 替换模板)，按顺序应用
    RULES = (
        # api_key=... / "token": "..." 之类的键值对
        (
            re.compile(r"(api[-_]?key|token|secret|password)([\"']?\s*[:=]\s*[\"']?)([^\"'\s,}]+)", re.IGNORECASE),
            r"\1\2***MASKED***",
        ),
        # 买家邮箱（聊天、退货中会出现）
        (re.compile(r"([a-zA-Z0-9])[a-zA-Z0-9._-]*@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})"), r"\1***@\2"),
        # 买家电话
        (re.compile(r"(\+\d{1,3}\s?\d{3})\d{4,8}(\d{3})"), r"\1****\2"),
    )

    SENSITIVE_KEYS = frozenset({"api_key", "api-key", "Api-Key"})
    MASK = "***MASKED***"

    def __call__(self, logger, method_name, event_dict):
        return {key: self._mask_field(key, value) for key, value in event_dict.items()}

    def _mask_field(self, key: Any, value: Any) -> Any:
        if key in self.SENSITIVE_KEYS and value:
            return self.MASK
        return self._mask_value(value)

    def _mask_value(self, value: Any) -> Any:
        if isinstance(value, str):
            for pattern, template in self.RULES:
                value = pattern.sub(template, value)
            return value
        if isinstance(value, dict):
            return {k: self._mask_field(k, v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._mask_value(item) for item in value]
        return value


class OzonSellerProcessor:
    """添加上下文字段，统一字段命名（event -> action, exception -> err）"""

    CONTEXT_VARS = (("trace_id", trace_id_var), ("client_id", client_id_var))

    def __call__(self, logger, method_name, event_dict):
        event_dict["ts"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

        for field, var in self.CONTEXT_VARS:
            value = var.get()
            if value:
                event_dict[field] = value

        if "event" in event_dict:
            event_dict["action"] = event_dict.pop("event")
        if "exception" in event_dict:
            event_dict["err"] = str(event_dict.pop("exception"))

        return event_dict


def setup_logging(log_level: str = "INFO", log_format: str = "json", enable_masking: bool = True) -> None:
    """配置日志系统

    客户端本身不调用它；应用在启动时调用一次（参数通常来自 Settings）。
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {log_level}")

    # 时间戳由 OzonSellerProcessor 写入 ts 字段
    processors = [add_log_level, OzonSellerProcessor()]
    if enable_masking:
        processors.append(CredentialMaskingProcessor())
    processors.append(JSONRenderer(ensure_ascii=False) if log_format == "json" else structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # structlog 已渲染好整行，stdout handler 只输出 message
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    logging.getLogger("ozon_seller").setLevel(level)
    # httpx 自己的请求日志与 OZON API request 重复
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str = "ozon_seller") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


class LogContext:
    """设置调用级日志上下文

    Example:
        with LogContext(trace_id="sync-42", client_id="123456"):
            client.finance.report_on_sold_products(params)
    """

    def __init__(self, trace_id: Optional[str] = None, client_id: Optional[str] = None):
        self.values = {trace_id_var: trace_id, client_id_var: client_id}
        self._tokens = []

    def __enter__(self):
        self._tokens = [var.set(value) for var, value in self.values.items() if value]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        while self._tokens:
            token = self._tokens.pop()
            token.var.reset(token)
