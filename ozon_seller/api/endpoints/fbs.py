"""
Ozon API FBS（卖家仓发货）相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams
from .fbo import PostingFinancialData


class FBSShipmentsFilter(OzonParams):
    since: OzonDateTime = None
    to: OzonDateTime = None
    status: Optional[str] = None
    warehouse_id: Optional[List[int]] = None
    delivery_method_id: Optional[List[int]] = None
    provider_id: Optional[List[int]] = None
    order_id: Optional[int] = None


class FBSAdditionalFields(OzonParams):
    analytics_data: Optional[bool] = None
    barcodes: Optional[bool] = None
    financial_data: Optional[bool] = None
    translit: Optional[bool] = None


class ListFBSShipmentsParams(OzonParams):
    dir: Optional[str] = None
    filter: Optional[FBSShipmentsFilter] = None
    # 最大 1000
    limit: Optional[int] = None
    offset: Optional[int] = None
    with_: Optional[FBSAdditionalFields] = Field(default=None, alias="with")


class FBSDeliveryMethod(OzonModel):
    id: int = 0
    name: str = ""
    tpl_provider: str = ""
    tpl_provider_id: int = 0
    warehouse: str = ""
    warehouse_id: int = 0


class FBSCancellation(OzonModel):
    affect_cancellation_rating: bool = False
    cancel_reason: str = ""
    cancel_reason_id: int = 0
    cancellation_initiator: str = ""
    cancellation_type: str = ""
    cancelled_after_ship: bool = False


class FBSPostingProduct(OzonModel):
    sku: int = 0
    name: str = ""
    offer_id: str = ""
    price: str = ""
    quantity: int = 0
    currency_code: str = ""
    mandatory_mark: List[str] = []


class FBSBarcodes(OzonModel):
    lower_barcode: str = ""
    upper_barcode: str = ""


class FBSPosting(OzonModel):
    posting_number: str = ""
    order_id: int = 0
    order_number: str = ""
    status: str = ""
    substatus: str = ""
    tracking_number: str = ""
    tpl_integration_type: str = ""
    in_process_at: OzonDateTime = None
    shipment_date: OzonDateTime = None
    delivering_date: OzonDateTime = None
    delivery_method: FBSDeliveryMethod = Field(default_factory=FBSDeliveryMethod)
    cancellation: FBSCancellation = Field(default_factory=FBSCancellation)
    products: List[FBSPostingProduct] = []
    barcodes: Optional[FBSBarcodes] = None
    financial_data: Optional[PostingFinancialData] = None
    is_express: bool = False
    is_multibox: bool = False
    multi_box_qty: int = 0


class FBSPostingList(OzonModel):
    postings: List[FBSPosting] = []
    has_next: bool = False


class ListFBSShipmentsResponse(CommonResponse):
    result: FBSPostingList = Field(default_factory=FBSPostingList)


class GetFBSShipmentParams(OzonParams):
    posting_number: Optional[str] = None
    with_: Optional[FBSAdditionalFields] = Field(default=None, alias="with")


class GetFBSShipmentResponse(CommonResponse):
    result: FBSPosting = Field(default_factory=FBSPosting)


class PackageProduct(OzonParams):
    product_id: Optional[int] = None
    quantity: Optional[int] = None


class Package(OzonParams):
    products: Optional[List[PackageProduct]] = None


class PackOrderAdditionalFields(OzonParams):
    additional_data: Optional[bool] = None


class PackOrderParams(OzonParams):
    packages: Optional[List[Package]] = None
    posting_number: Optional[str] = None
    with_: Optional[PackOrderAdditionalFields] = Field(default=None, alias="with")


class PackedPostingProduct(OzonModel):
    product_id: int = 0
    quantity: int = 0
    name: str = ""
    offer_id: str = ""
    price: str = ""
    sku: int = 0


class PackedPosting(OzonModel):
    posting_number: str = ""
    products: List[PackedPostingProduct] = []


class PackOrderResponse(CommonResponse):
    additional_data: List[PackedPosting] = []
    # 组装后生成的发货单号
    result: List[str] = []


class CancelShipmentParams(OzonParams):
    cancel_reason_id: Optional[int] = None
    # cancel_reason_id = 402 时必填
    cancel_reason_message: Optional[str] = None
    posting_number: Optional[str] = None


class CancelShipmentResponse(CommonResponse):
    result: bool = False


class FBS(APIGroup):
    """FBS 发货单相关 API 方法"""

    def list_shipments(self, params: ListFBSShipmentsParams) -> ListFBSShipmentsResponse:
        """
        获取 FBS 发货单列表
        使用 /v3/posting/fbs/list 接口
        """
        return self._client.request("POST", "/v3/posting/fbs/list", params, ListFBSShipmentsResponse)

    def get_shipment_data_by_id(self, params: GetFBSShipmentParams) -> GetFBSShipmentResponse:
        """
        获取发货单详情
        使用 /v3/posting/fbs/get 接口

        with 中的 financial_data 会返回商品级别的佣金、配送费等明细。
        """
        return self._client.request("POST", "/v3/posting/fbs/get", params, GetFBSShipmentResponse)

    def pack_order(self, params: PackOrderParams) -> PackOrderResponse:
        """
        组装订单（备货）
        使用 /v4/posting/fbs/ship 接口

        发货单状态从 awaiting_packaging 变为 awaiting_deliver。
        一个 package 对应一个新的发货单。
        """
        return self._client.request("POST", "/v4/posting/fbs/ship", params, PackOrderResponse)

    def cancel_shipment(self, params: CancelShipmentParams) -> CancelShipmentResponse:
        """取消发货单（/v2/posting/fbs/cancel）"""
        return self._client.request("POST", "/v2/posting/fbs/cancel", params, CancelShipmentResponse)
