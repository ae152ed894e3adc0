"""
Ozon Seller 实用工具模块
"""

from .errors import ConfigurationError, OzonAPIError, OzonSellerError
from .logger import LogContext, get_logger, setup_logging

__all__ = [
    "get_logger",
    "LogContext",
    "setup_logging",
    "OzonSellerError",
    "OzonAPIError",
    "ConfigurationError",
]
