"""
Ozon API 分析数据相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonModel, OzonParams


class AnalyticsFilter(OzonParams):
    key: Optional[str] = None
    # EQ / GT / GTE / LT / LTE
    op: Optional[str] = None
    value: Optional[str] = None


class AnalyticsSort(OzonParams):
    key: Optional[str] = None
    # ASC / DESC
    order: Optional[str] = None


class GetAnalyticsDataParams(OzonParams):
    # 格式 YYYY-MM-DD
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    # sku / spu / day / week / month ...
    dimension: Optional[List[str]] = None
    filters: Optional[List[AnalyticsFilter]] = None
    # revenue / ordered_units / hits_view ...
    metrics: Optional[List[str]] = None
    sort: Optional[List[AnalyticsSort]] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class AnalyticsDimension(OzonModel):
    id: str = ""
    name: str = ""


class AnalyticsDataRow(OzonModel):
    dimensions: List[AnalyticsDimension] = []
    metrics: List[float] = []


class AnalyticsResult(OzonModel):
    data: List[AnalyticsDataRow] = []
    totals: List[float] = []


class GetAnalyticsDataResponse(CommonResponse):
    result: AnalyticsResult = Field(default_factory=AnalyticsResult)
    timestamp: str = ""


class GetStocksOnWarehousesParams(OzonParams):
    limit: Optional[int] = None
    offset: Optional[int] = None
    # ALL / EXPRESS_DARK_STORE / NOT_EXPRESS_DARK_STORE
    warehouse_type: Optional[str] = None


class WarehouseStockRow(OzonModel):
    sku: int = 0
    item_code: str = ""
    item_name: str = ""
    free_to_sell_amount: int = 0
    promised_amount: int = 0
    reserved_amount: int = 0
    warehouse_name: str = ""


class WarehouseStocks(OzonModel):
    rows: List[WarehouseStockRow] = []


class GetStocksOnWarehousesResponse(CommonResponse):
    result: WarehouseStocks = Field(default_factory=WarehouseStocks)


class Analytics(APIGroup):
    """分析数据相关 API 方法"""

    def get_analytics_data(self, params: GetAnalyticsDataParams) -> GetAnalyticsDataResponse:
        """
        按维度获取分析指标
        使用 /v1/analytics/data 接口

        metrics 的顺序与返回的 data[].metrics 一一对应。
        """
        return self._client.request("POST", "/v1/analytics/data", params, GetAnalyticsDataResponse)

    def get_stocks_on_warehouses(self, params: GetStocksOnWarehousesParams) -> GetStocksOnWarehousesResponse:
        """FBO/FBS 仓库库存报告（/v2/analytics/stock_on_warehouses）"""
        return self._client.request(
            "POST", "/v2/analytics/stock_on_warehouses", params, GetStocksOnWarehousesResponse
        )
