"""
Ozon API FBO（Ozon 仓发货）相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class FBOShipmentsFilter(OzonParams):
    since: OzonDateTime = None
    to: OzonDateTime = None
    # awaiting_packaging / delivering / delivered / cancelled ...
    status: Optional[str] = None


class FBOAdditionalFields(OzonParams):
    analytics_data: Optional[bool] = None
    financial_data: Optional[bool] = None


class GetFBOShipmentsListParams(OzonParams):
    # asc / desc
    dir: Optional[str] = None
    filter: Optional[FBOShipmentsFilter] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    translit: Optional[bool] = None
    with_: Optional[FBOAdditionalFields] = Field(default=None, alias="with")


class FBOPostingProduct(OzonModel):
    sku: int = 0
    name: str = ""
    quantity: int = 0
    offer_id: str = ""
    price: str = ""
    digital_codes: List[str] = []
    currency_code: str = ""


class FBOPostingAnalyticsData(OzonModel):
    city: str = ""
    delivery_type: str = ""
    is_legal: bool = False
    is_premium: bool = False
    payment_type_group_name: str = ""
    region: str = ""
    warehouse_id: int = 0
    warehouse_name: str = ""


class FinancialDataProduct(OzonModel):
    actions: List[str] = []
    client_price: str = ""
    commission_amount: float = 0
    commission_percent: float = 0
    currency_code: str = ""
    old_price: float = 0
    payout: float = 0
    price: float = 0
    product_id: int = 0
    quantity: int = 0
    total_discount_percent: float = 0
    total_discount_value: float = 0


class PostingFinancialData(OzonModel):
    cluster_from: str = ""
    cluster_to: str = ""
    products: List[FinancialDataProduct] = []


class FBOPosting(OzonModel):
    order_id: int = 0
    order_number: str = ""
    posting_number: str = ""
    status: str = ""
    cancel_reason_id: int = 0
    created_at: OzonDateTime = None
    in_process_at: OzonDateTime = None
    products: List[FBOPostingProduct] = []
    analytics_data: Optional[FBOPostingAnalyticsData] = None
    financial_data: Optional[PostingFinancialData] = None


class GetFBOShipmentsListResponse(CommonResponse):
    result: List[FBOPosting] = []


class GetShipmentDetailsParams(OzonParams):
    posting_number: Optional[str] = None
    translit: Optional[bool] = None
    with_: Optional[FBOAdditionalFields] = Field(default=None, alias="with")


class GetShipmentDetailsResponse(CommonResponse):
    result: FBOPosting = Field(default_factory=FBOPosting)


class FBO(APIGroup):
    """FBO 发货单相关 API 方法"""

    def get_shipments_list(self, params: GetFBOShipmentsListParams) -> GetFBOShipmentsListResponse:
        """
        获取 FBO 发货单列表
        使用 /v2/posting/fbo/list 接口
        """
        return self._client.request("POST", "/v2/posting/fbo/list", params, GetFBOShipmentsListResponse)

    def get_shipment_details(self, params: GetShipmentDetailsParams) -> GetShipmentDetailsResponse:
        """
        获取 FBO 发货单详情
        使用 /v2/posting/fbo/get 接口
        """
        return self._client.request("POST", "/v2/posting/fbo/get", params, GetShipmentDetailsResponse)
