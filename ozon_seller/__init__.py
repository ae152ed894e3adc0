"""
Ozon Seller API 类型化客户端
"""

from .api import CommonResponse, CoreClient, OzonClient, new_client, new_mock_client
from .config import DEFAULT_API_BASE_URL, Settings, get_settings
from .utils.errors import ConfigurationError, OzonAPIError, OzonSellerError

__version__ = "1.0.0"

__all__ = [
    "OzonClient",
    "new_client",
    "new_mock_client",
    "CoreClient",
    "CommonResponse",
    "DEFAULT_API_BASE_URL",
    "Settings",
    "get_settings",
    "OzonSellerError",
    "OzonAPIError",
    "ConfigurationError",
]
