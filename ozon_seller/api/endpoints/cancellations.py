"""
Ozon API 取消申请（rFBS 有条件取消）相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class CancellationFilters(OzonParams):
    # CLIENT / SELLER / OZON / SYSTEM / DELIVERY
    cancellation_initiator: Optional[List[str]] = None
    posting_number: Optional[List[str]] = None
    # ALL / ON_APPROVAL / APPROVED / REJECTED
    state: Optional[str] = None


class CancellationAdditionalFields(OzonParams):
    counter: Optional[bool] = None


class ListCancellationsParams(OzonParams):
    # 不传 filters 时 Ozon 不返回数据
    filters: Optional[CancellationFilters] = None
    last_id: Optional[int] = None
    # 最大 500
    limit: Optional[int] = None
    with_: Optional[CancellationAdditionalFields] = Field(default=None, alias="with")


class CancellationReason(OzonModel):
    id: int = 0
    name: str = ""


class CancellationState(OzonModel):
    id: int = 0
    name: str = ""
    state: str = ""


class Cancellation(OzonModel):
    cancellation_id: int = 0
    posting_number: str = ""
    cancellation_reason: CancellationReason = Field(default_factory=CancellationReason)
    cancelled_at: OzonDateTime = None
    cancellation_reason_message: str = ""
    tpl_integration_type: str = ""
    state: CancellationState = Field(default_factory=CancellationState)
    cancellation_initiator: str = ""
    order_date: OzonDateTime = None
    approve_comment: str = ""
    approve_date: OzonDateTime = None
    auto_approve_date: OzonDateTime = None


class CancellationCounters(OzonModel):
    on_approval: int = 0
    approved: int = 0
    rejected: int = 0


class ListCancellationsResponse(CommonResponse):
    result: List[Cancellation] = []
    last_id: int = 0
    counters: CancellationCounters = Field(default_factory=CancellationCounters)


class CancellationDecisionParams(OzonParams):
    cancellation_id: Optional[int] = None
    # reject 时必填
    comment: Optional[str] = None


class CancellationDecisionResponse(CommonResponse):
    pass


class Cancellations(APIGroup):
    """取消申请相关 API 方法"""

    def list_conditional_cancellations(self, params: ListCancellationsParams) -> ListCancellationsResponse:
        """
        获取取消申请列表
        使用 /v2/conditional-cancellation/list 接口
        """
        return self._client.request(
            "POST", "/v2/conditional-cancellation/list", params, ListCancellationsResponse
        )

    def approve(self, params: CancellationDecisionParams) -> CancellationDecisionResponse:
        """同意取消申请（/v2/conditional-cancellation/approve），申请需处于 ON_APPROVAL 状态"""
        return self._client.request(
            "POST", "/v2/conditional-cancellation/approve", params, CancellationDecisionResponse
        )

    def reject(self, params: CancellationDecisionParams) -> CancellationDecisionResponse:
        """拒绝取消申请（/v2/conditional-cancellation/reject）"""
        return self._client.request(
            "POST", "/v2/conditional-cancellation/reject", params, CancellationDecisionResponse
        )
