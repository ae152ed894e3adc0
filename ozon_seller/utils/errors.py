"""
Ozon Seller 客户端错误类型

传输层错误（httpx）和解码错误不做包装，原样抛给调用方。
这里只定义由调用方显式触发的业务错误。
"""
from typing import Any, Dict, List, Optional


class OzonSellerError(Exception):
    """基础异常类"""


class ConfigurationError(OzonSellerError):
    """配置缺失或无效"""


class OzonAPIError(OzonSellerError):
    """Ozon 返回的业务错误（由 CommonResponse.raise_for_error 触发）"""

    def __init__(
        self,
        status: int,
        code: int,
        title: str,
        detail: Optional[str] = None,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        self.status = status
        self.code = code
        self.title = title
        self.detail = detail
        self.details = details or []
        super().__init__(detail or title)

    def to_dict(self) -> Dict[str, Any]:
        """转换为 Problem Details 风格的字典"""
        problem = {
            "type": "about:blank",
            "title": self.title,
            "status": self.status,
            "code": self.code,
        }
        if self.detail:
            problem["detail"] = self.detail
        if self.details:
            problem["details"] = self.details
        return problem

    def __repr__(self) -> str:
        return f"OzonAPIError(status={self.status}, code={self.code}, detail={self.detail!r})"
