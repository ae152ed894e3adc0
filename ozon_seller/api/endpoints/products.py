"""
Ozon API 商品相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class ProductListFilter(OzonParams):
    offer_id: Optional[List[str]] = None
    product_id: Optional[List[int]] = None
    # ALL / VISIBLE / INVISIBLE / ARCHIVED ...
    visibility: Optional[str] = None


class GetListOfProductsParams(OzonParams):
    filter: Optional[ProductListFilter] = None
    # 上一页响应中的 last_id，第一页留空
    last_id: Optional[str] = None
    # 最大 1000
    limit: Optional[int] = None


class ProductListItem(OzonModel):
    product_id: int = 0
    offer_id: str = ""
    archived: bool = False
    has_fbo_stocks: bool = False
    has_fbs_stocks: bool = False
    is_discounted: bool = False


class ProductList(OzonModel):
    items: List[ProductListItem] = []
    last_id: str = ""
    total: int = 0


class GetListOfProductsResponse(CommonResponse):
    result: ProductList = Field(default_factory=ProductList)


class ListProductInformationParams(OzonParams):
    # 三者任选其一，每个最多 1000 个
    offer_id: Optional[List[str]] = None
    product_id: Optional[List[int]] = None
    sku: Optional[List[int]] = None


class ProductStatuses(OzonModel):
    status: str = ""
    status_name: str = ""
    moderate_status: str = ""
    validation_status: str = ""
    is_created: bool = False


class ProductInformation(OzonModel):
    id: int = 0
    name: str = ""
    offer_id: str = ""
    barcodes: List[str] = []
    currency_code: str = ""
    description_category_id: int = 0
    type_id: int = 0
    price: str = ""
    old_price: str = ""
    min_price: str = ""
    marketing_price: str = ""
    vat: str = ""
    images: List[str] = []
    primary_image: List[str] = []
    is_archived: bool = False
    is_autoarchived: bool = False
    is_discounted: bool = False
    is_kgt: bool = False
    statuses: ProductStatuses = Field(default_factory=ProductStatuses)
    created_at: OzonDateTime = None
    updated_at: OzonDateTime = None


class ListProductInformationResponse(CommonResponse):
    items: List[ProductInformation] = []


class PriceUpdate(OzonParams):
    # ENABLED / DISABLED / UNKNOWN
    auto_action_enabled: Optional[str] = None
    currency_code: Optional[str] = None
    min_price: Optional[str] = None
    offer_id: Optional[str] = None
    old_price: Optional[str] = None
    price: Optional[str] = None
    price_strategy_enabled: Optional[str] = None
    product_id: Optional[int] = None


class UpdatePricesParams(OzonParams):
    # 每次最多 1000 个
    prices: Optional[List[PriceUpdate]] = None


class UpdateError(OzonModel):
    code: str = ""
    message: str = ""


class UpdatePriceResult(OzonModel):
    product_id: int = 0
    offer_id: str = ""
    updated: bool = False
    errors: List[UpdateError] = []


class UpdatePricesResponse(CommonResponse):
    result: List[UpdatePriceResult] = []


class StockUpdate(OzonParams):
    offer_id: Optional[str] = None
    product_id: Optional[int] = None
    stock: Optional[int] = None
    warehouse_id: Optional[int] = None


class UpdateStocksParams(OzonParams):
    # 每次最多 100 个
    stocks: Optional[List[StockUpdate]] = None


class UpdateStockResult(OzonModel):
    warehouse_id: int = 0
    product_id: int = 0
    offer_id: str = ""
    updated: bool = False
    errors: List[UpdateError] = []


class UpdateStocksResponse(CommonResponse):
    result: List[UpdateStockResult] = []


class ArchiveProductParams(OzonParams):
    # 每次最多 100 个
    product_id: Optional[List[int]] = None


class ArchiveProductResponse(CommonResponse):
    result: bool = False


class Products(APIGroup):
    """商品相关 API 方法"""

    def get_list_of_products(self, params: GetListOfProductsParams) -> GetListOfProductsResponse:
        """
        获取商品列表
        使用 /v3/product/list 接口

        分页使用 last_id：把上一页的 result.last_id 填入下一次请求。
        """
        return self._client.request("POST", "/v3/product/list", params, GetListOfProductsResponse)

    def list_product_information(self, params: ListProductInformationParams) -> ListProductInformationResponse:
        """
        批量获取商品详细信息（包含图片）
        使用 /v3/product/info/list 接口
        """
        return self._client.request(
            "POST", "/v3/product/info/list", params, ListProductInformationResponse
        )

    def update_prices(self, params: UpdatePricesParams) -> UpdatePricesResponse:
        """
        批量更新商品价格
        使用 /v1/product/import/prices 接口

        价格以字符串传递（如 "1000"），单个商品的失败原因在 result[].errors 中。
        """
        return self._client.request("POST", "/v1/product/import/prices", params, UpdatePricesResponse)

    def update_stocks(self, params: UpdateStocksParams) -> UpdateStocksResponse:
        """
        批量更新 FBS 仓库库存
        使用 /v2/products/stocks 接口
        """
        return self._client.request("POST", "/v2/products/stocks", params, UpdateStocksResponse)

    def archive_product(self, params: ArchiveProductParams) -> ArchiveProductResponse:
        """将商品移入归档（/v1/product/archive）"""
        return self._client.request("POST", "/v1/product/archive", params, ArchiveProductResponse)

    def unarchive_product(self, params: ArchiveProductParams) -> ArchiveProductResponse:
        """将商品移出归档（/v1/product/unarchive）"""
        return self._client.request("POST", "/v1/product/unarchive", params, ArchiveProductResponse)
