"""
Ozon API 退货相关方法（rFBS）
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class ReturnsCreatedAt(OzonParams):
    from_: OzonDateTime = Field(default=None, alias="from")
    to: OzonDateTime = None


class ListRFBSReturnsFilter(OzonParams):
    offer_id: Optional[str] = None
    posting_number: Optional[str] = None
    # All / New / Delivering / Checkout / Arbitration
    group_state: Optional[List[str]] = None
    created_at: Optional[ReturnsCreatedAt] = None


class ListRFBSReturnsParams(OzonParams):
    # 注意：退货接口使用 "filter"（单数）
    filter: Optional[ListRFBSReturnsFilter] = None
    last_id: Optional[int] = None
    # 最大 1000
    limit: Optional[int] = None


class ReturnProduct(OzonModel):
    name: str = ""
    offer_id: str = ""
    currency_code: str = ""
    price: str = ""
    sku: int = 0


class ReturnState(OzonModel):
    group_state: str = ""
    money_return_state_name: str = ""
    state: str = ""
    state_name: str = ""


class RFBSReturnSummary(OzonModel):
    return_id: int = 0
    return_number: str = ""
    client_name: str = ""
    created_at: OzonDateTime = None
    order_number: str = ""
    posting_number: str = ""
    product: ReturnProduct = Field(default_factory=ReturnProduct)
    state: ReturnState = Field(default_factory=ReturnState)


class ListRFBSReturnsResponse(CommonResponse):
    returns: List[RFBSReturnSummary] = []


class GetRFBSReturnParams(OzonParams):
    return_id: Optional[int] = None


class IdName(OzonModel):
    id: int = 0
    name: str = ""


class RejectionReason(OzonModel):
    id: int = 0
    name: str = ""
    hint: str = ""
    is_comment_required: bool = False


class ReturnReason(OzonModel):
    id: int = 0
    name: str = ""
    is_defect: bool = False


class RFBSReturnDetails(OzonModel):
    available_actions: List[IdName] = []
    client_name: str = ""
    client_photo: List[str] = []
    client_return_method_type: IdName = Field(default_factory=IdName)
    comment: str = ""
    created_at: OzonDateTime = None
    order_number: str = ""
    posting_number: str = ""
    product: ReturnProduct = Field(default_factory=ReturnProduct)
    rejection_comment: str = ""
    rejection_reason: List[RejectionReason] = []
    return_method_description: str = ""
    return_number: str = ""
    return_reason: ReturnReason = Field(default_factory=ReturnReason)
    ru_post_tracking_number: str = ""
    state: ReturnState = Field(default_factory=ReturnState)
    warehouse_id: int = 0


class GetRFBSReturnResponse(CommonResponse):
    returns: RFBSReturnDetails = Field(default_factory=RFBSReturnDetails)


class Returns(APIGroup):
    """退货相关 API 方法"""

    def list_rfbs_returns(self, params: ListRFBSReturnsParams) -> ListRFBSReturnsResponse:
        """
        获取退货申请列表（rFBS）
        使用 /v2/returns/rfbs/list 接口

        分页：把最后一条的 return_id 作为下一次请求的 last_id。
        """
        return self._client.request("POST", "/v2/returns/rfbs/list", params, ListRFBSReturnsResponse)

    def get_rfbs_return(self, params: GetRFBSReturnParams) -> GetRFBSReturnResponse:
        """获取退货申请详情（/v2/returns/rfbs/get）"""
        return self._client.request("POST", "/v2/returns/rfbs/get", params, GetRFBSReturnResponse)
