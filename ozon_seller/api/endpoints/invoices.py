"""
Ozon API 海关发票相关方法（跨境发货单）
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class HSCode(OzonParams):
    code: Optional[str] = None
    sku: Optional[str] = None


class CreateUpdateInvoiceParams(OzonParams):
    date: OzonDateTime = None
    hs_codes: Optional[List[HSCode]] = None
    number: Optional[str] = None
    posting_number: Optional[str] = None
    price: Optional[float] = None
    # USD / EUR / TRY / CNY / RUB / GBP
    price_currency: Optional[str] = None
    # 发票文件地址（先用上传接口上传）
    url: Optional[str] = None


class CreateUpdateInvoiceResponse(CommonResponse):
    result: bool = False


class InvoicePostingParams(OzonParams):
    posting_number: Optional[str] = None


class InvoiceHSCode(OzonModel):
    code: str = ""
    sku: str = ""


class Invoice(OzonModel):
    date: OzonDateTime = None
    file_url: str = ""
    hs_codes: List[InvoiceHSCode] = []
    number: str = ""
    price: float = 0
    price_currency: str = ""


class GetInvoiceResponse(CommonResponse):
    result: Invoice = Field(default_factory=Invoice)


class DeleteInvoiceResponse(CommonResponse):
    result: bool = False


class Invoices(APIGroup):
    """海关发票相关 API 方法"""

    def create_update(self, params: CreateUpdateInvoiceParams) -> CreateUpdateInvoiceResponse:
        """创建或更新发票（/v2/invoice/create-or-update）"""
        return self._client.request(
            "POST", "/v2/invoice/create-or-update", params, CreateUpdateInvoiceResponse
        )

    def get(self, params: InvoicePostingParams) -> GetInvoiceResponse:
        """获取发货单的发票信息（/v2/invoice/get）"""
        return self._client.request("POST", "/v2/invoice/get", params, GetInvoiceResponse)

    def delete(self, params: InvoicePostingParams) -> DeleteInvoiceResponse:
        """删除发货单的发票（/v1/invoice/delete）"""
        return self._client.request("POST", "/v1/invoice/delete", params, DeleteInvoiceResponse)
