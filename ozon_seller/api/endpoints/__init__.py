"""
Ozon API 分类接口

每个模块对应一个 API 分类，模块内包含该分类的请求参数模型、响应模型和方法。
"""

from .analytics import Analytics
from .barcodes import Barcodes
from .brands import Brands
from .cancellations import Cancellations
from .categories import Categories
from .certificates import Certificates
from .chats import Chats
from .fbo import FBO
from .fbs import FBS
from .finance import Finance
from .invoices import Invoices
from .polygons import Polygons
from .products import Products
from .promotions import Promotions
from .rating import Rating
from .reports import Reports
from .returns import Returns
from .strategies import Strategies
from .warehouses import Warehouses

__all__ = [
    "Analytics",
    "FBO",
    "FBS",
    "Finance",
    "Products",
    "Promotions",
    "Rating",
    "Warehouses",
    "Returns",
    "Reports",
    "Cancellations",
    "Categories",
    "Polygons",
    "Invoices",
    "Brands",
    "Chats",
    "Certificates",
    "Strategies",
    "Barcodes",
]
