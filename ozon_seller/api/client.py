"""
Ozon API 客户端
处理与 Ozon Seller API 的所有交互

各分类接口在 endpoints/ 目录下，所有分类共享同一个传输层（CoreClient）：
- finance.py: 财务报告、交易汇总、交易明细
- products.py: 商品列表、价格、库存、归档
- fbo.py / fbs.py: 发货单
- promotions.py: 促销活动
- analytics.py / rating.py / reports.py: 分析、评级、报告
- warehouses.py / polygons.py: 仓库、配送方式、配送区域
- returns.py / cancellations.py: 退货、取消申请
- categories.py / brands.py / certificates.py / barcodes.py: 类目、品牌、证书、条形码
- chats.py / invoices.py / strategies.py: 聊天、海关发票、定价策略
"""

from typing import Callable, Optional

import httpx

from ..config import DEFAULT_API_BASE_URL, Settings, get_settings
from ..utils.errors import ConfigurationError
from .base import DEFAULT_LOG_BODY_MAX_LEN, CoreClient
from .endpoints import (
    FBO,
    FBS,
    Analytics,
    Barcodes,
    Brands,
    Cancellations,
    Categories,
    Certificates,
    Chats,
    Finance,
    Invoices,
    Polygons,
    Products,
    Promotions,
    Rating,
    Reports,
    Returns,
    Strategies,
    Warehouses,
)


class OzonClient:
    """
    Ozon API 客户端

    使用方式:
        with new_client(client_id, api_key) as client:
            report = client.finance.report_on_sold_products(
                ReportOnSoldProductsParams(date="2023-05")
            )

    构造后只读：各分类对象在构造时创建，共享同一个 CoreClient。
    """

    def __init__(self, core: CoreClient):
        self._core = core

        self._analytics = Analytics(core)
        self._fbo = FBO(core)
        self._fbs = FBS(core)
        self._finance = Finance(core)
        self._products = Products(core)
        self._promotions = Promotions(core)
        self._rating = Rating(core)
        self._warehouses = Warehouses(core)
        self._returns = Returns(core)
        self._reports = Reports(core)
        self._cancellations = Cancellations(core)
        self._categories = Categories(core)
        self._polygons = Polygons(core)
        self._invoices = Invoices(core)
        self._brands = Brands(core)
        self._chats = Chats(core)
        self._certificates = Certificates(core)
        self._strategies = Strategies(core)
        self._barcodes = Barcodes(core)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "OzonClient":
        """根据配置（环境变量 OZON__*）创建客户端"""
        settings = settings or get_settings()
        if not settings.has_credentials:
            raise ConfigurationError("OZON__CLIENT_ID and OZON__API_KEY must be set")

        return new_client(
            settings.client_id,
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            log_body_max_len=settings.log_body_max_len,
        )

    @property
    def core(self) -> CoreClient:
        return self._core

    @property
    def analytics(self) -> Analytics:
        return self._analytics

    @property
    def fbo(self) -> FBO:
        return self._fbo

    @property
    def fbs(self) -> FBS:
        return self._fbs

    @property
    def finance(self) -> Finance:
        return self._finance

    @property
    def products(self) -> Products:
        return self._products

    @property
    def promotions(self) -> Promotions:
        return self._promotions

    @property
    def rating(self) -> Rating:
        return self._rating

    @property
    def warehouses(self) -> Warehouses:
        return self._warehouses

    @property
    def returns(self) -> Returns:
        return self._returns

    @property
    def reports(self) -> Reports:
        return self._reports

    @property
    def cancellations(self) -> Cancellations:
        return self._cancellations

    @property
    def categories(self) -> Categories:
        return self._categories

    @property
    def polygons(self) -> Polygons:
        return self._polygons

    @property
    def invoices(self) -> Invoices:
        return self._invoices

    @property
    def brands(self) -> Brands:
        return self._brands

    @property
    def chats(self) -> Chats:
        return self._chats

    @property
    def certificates(self) -> Certificates:
        return self._certificates

    @property
    def strategies(self) -> Strategies:
        return self._strategies

    @property
    def barcodes(self) -> Barcodes:
        return self._barcodes

    def close(self):
        """关闭客户端连接"""
        self._core.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def new_client(
    client_id: str,
    api_key: str,
    transport: Optional[httpx.BaseTransport] = None,
    base_url: str = DEFAULT_API_BASE_URL,
    timeout: float = 30.0,
    log_body_max_len: int = DEFAULT_LOG_BODY_MAX_LEN,
) -> OzonClient:
    """
    创建 Ozon API 客户端

    Args:
        client_id: Ozon 客户端 ID
        api_key: Ozon API 密钥
        transport: 自定义 httpx 传输层（可选）
        base_url: API 根地址
        timeout: 请求超时（秒）
    """
    core = CoreClient.create(
        base_url=base_url,
        headers={"Client-Id": client_id, "Api-Key": api_key},
        transport=transport,
        timeout=timeout,
        log_body_max_len=log_body_max_len,
    )
    return OzonClient(core)


def new_mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> OzonClient:
    """
    创建测试用客户端，不发起真实网络请求

    Args:
        handler: 接收 httpx.Request，返回模拟的 httpx.Response
    """
    return OzonClient(CoreClient.mock(handler))
