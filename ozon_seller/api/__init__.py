"""
Ozon Seller API 客户端
"""

from .base import APIGroup, CoreClient
from .client import OzonClient, new_client, new_mock_client
from .models import CommonResponse, CommonResponseDetail, OzonDateTime, OzonModel, OzonParams

__all__ = [
    "OzonClient",
    "new_client",
    "new_mock_client",
    "CoreClient",
    "APIGroup",
    "CommonResponse",
    "CommonResponseDetail",
    "OzonDateTime",
    "OzonModel",
    "OzonParams",
]
