"""
Ozon API 仓库相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class FirstMileType(OzonModel):
    dropoff_point_id: str = ""
    dropoff_timeslot_id: int = 0
    first_mile_is_changing: bool = False
    # DropOff / Pickup
    first_mile_type: str = ""


class Warehouse(OzonModel):
    warehouse_id: int = 0
    name: str = ""
    is_rfbs: bool = False
    # new / created / disabled / blocked / disabled_due_to_limit / error
    status: str = ""
    has_entrusted_acceptance: bool = False
    first_mile_type: FirstMileType = Field(default_factory=FirstMileType)
    is_kgt: bool = False
    is_karantin: bool = False
    can_print_act_in_advance: bool = False
    min_working_days: int = 0
    working_days: List[int] = []
    has_postings_limit: bool = False
    # -1 表示没有限制
    postings_limit: int = 0
    min_postings_limit: int = 0
    is_timetable_editable: bool = False


class GetListOfWarehousesResponse(CommonResponse):
    result: List[Warehouse] = []


class DeliveryMethodsFilter(OzonParams):
    provider_id: Optional[int] = None
    # NEW / EDITED / ACTIVE / DISABLED
    status: Optional[str] = None
    warehouse_id: Optional[int] = None


class GetListOfDeliveryMethodsParams(OzonParams):
    filter: Optional[DeliveryMethodsFilter] = None
    # 最大 50
    limit: Optional[int] = None
    offset: Optional[int] = None


class DeliveryMethod(OzonModel):
    id: int = 0
    name: str = ""
    company_id: int = 0
    provider_id: int = 0
    warehouse_id: int = 0
    template_id: int = 0
    status: str = ""
    # 截单时间，格式 HH:mm
    cutoff: str = ""
    created_at: OzonDateTime = None
    updated_at: OzonDateTime = None


class GetListOfDeliveryMethodsResponse(CommonResponse):
    result: List[DeliveryMethod] = []
    has_next: bool = False


class Warehouses(APIGroup):
    """仓库相关 API 方法"""

    def get_list_of_warehouses(self) -> GetListOfWarehousesResponse:
        """
        获取仓库列表（FBS/rFBS）
        使用 /v1/warehouse/list 接口
        """
        return self._client.request("POST", "/v1/warehouse/list", None, GetListOfWarehousesResponse)

    def get_list_of_delivery_methods(
        self, params: GetListOfDeliveryMethodsParams
    ) -> GetListOfDeliveryMethodsResponse:
        """仓库的配送方式列表（/v1/delivery-method/list）"""
        return self._client.request(
            "POST", "/v1/delivery-method/list", params, GetListOfDeliveryMethodsResponse
        )
