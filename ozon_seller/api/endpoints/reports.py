"""
Ozon API 报告相关方法

报告是异步生成的：先创建，拿到 code，再用 get_report_details 查询状态和文件地址。
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class GetReportsListParams(OzonParams):
    # 页码从 1 开始
    page: Optional[int] = None
    # 最大 1000
    page_size: Optional[int] = None
    # ALL / SELLER_PRODUCTS / SELLER_TRANSACTIONS / SELLER_PRODUCT_PRICES ...
    report_type: Optional[str] = None


class ReportInfo(OzonModel):
    code: str = ""
    created_at: OzonDateTime = None
    error: str = ""
    file: str = ""
    params: Dict[str, Any] = {}
    report_type: str = ""
    # waiting / processing / success / failed
    status: str = ""


class ReportsList(OzonModel):
    reports: List[ReportInfo] = []
    total: int = 0


class GetReportsListResponse(CommonResponse):
    result: ReportsList = Field(default_factory=ReportsList)


class GetReportDetailsParams(OzonParams):
    code: Optional[str] = None


class GetReportDetailsResponse(CommonResponse):
    result: ReportInfo = Field(default_factory=ReportInfo)


class GetProductsReportParams(OzonParams):
    # DEFAULT / RU / EN
    language: Optional[str] = None
    offer_id: Optional[List[str]] = None
    search: Optional[str] = None
    sku: Optional[List[int]] = None
    # ALL / VISIBLE / INVISIBLE ...
    visibility: Optional[str] = None


class ReportCode(OzonModel):
    code: str = ""


class GetProductsReportResponse(CommonResponse):
    result: ReportCode = Field(default_factory=ReportCode)


class Reports(APIGroup):
    """报告相关 API 方法"""

    def get_list(self, params: GetReportsListParams) -> GetReportsListResponse:
        """获取已生成的报告列表（/v1/report/list）"""
        return self._client.request("POST", "/v1/report/list", params, GetReportsListResponse)

    def get_report_details(self, params: GetReportDetailsParams) -> GetReportDetailsResponse:
        """
        查询报告状态
        使用 /v1/report/info 接口

        status 为 success 时 file 字段是下载地址。
        """
        return self._client.request("POST", "/v1/report/info", params, GetReportDetailsResponse)

    def get_products_report(self, params: GetProductsReportParams) -> GetProductsReportResponse:
        """创建商品报告（/v1/report/products/create），返回报告 code"""
        return self._client.request(
            "POST", "/v1/report/products/create", params, GetProductsReportResponse
        )
