"""
Ozon API 财务相关方法
"""

from typing import List, Optional

from pydantic import Field, field_validator

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams
from ...utils.datetime_utils import format_period


class ReportOnSoldProductsParams(OzonParams):
    # 周期，格式 YYYY-MM；也可以传 date / datetime
    date: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_period(cls, v):
        if v is None or isinstance(v, str):
            return v
        return format_period(v)


class SoldProductsHeader(OzonModel):
    """报告抬头"""
    id: str = Field(default="", alias="num")
    doc_date: str = ""
    contract_date: str = ""
    contract_num: str = ""
    currency_code: str = ""
    doc_amount: float = 0
    vat_amount: float = 0
    payer_inn: str = ""
    payer_kpp: str = ""
    payer_name: str = ""
    recipient_inn: str = Field(default="", alias="rcv_inn")
    recipient_kpp: str = Field(default="", alias="rcv_kpp")
    recipient_name: str = Field(default="", alias="rcv_name")
    start_date: str = ""
    stop_date: str = ""


class SoldProductsRow(OzonModel):
    """报告明细行"""
    row_number: int = 0
    product_id: int = 0
    product_name: str = ""
    barcode: str = ""
    offer_id: str = ""
    commission_percent: float = 0
    price: float = 0
    price_sale: float = 0
    sale_amount: float = 0
    sale_commission: float = 0
    sale_discount: float = 0
    sale_price_seller: float = 0
    sale_quantity: int = Field(default=0, alias="sale_qty")
    return_sale: float = 0
    return_amount: float = 0
    return_commission: float = 0
    return_discount: float = 0
    return_price_seller: float = 0
    return_quantity: int = Field(default=0, alias="return_qty")


class SoldProductsReport(OzonModel):
    header: List[SoldProductsHeader] = []
    rows: List[SoldProductsRow] = []


class ReportOnSoldProductsResponse(CommonResponse):
    result: List[SoldProductsReport] = []


class TransactionDateRange(OzonParams):
    # 格式 YYYY-MM-DDTHH:mm:ss.sssZ
    from_: OzonDateTime = Field(default=None, alias="from")
    to: OzonDateTime = None


class GetTotalTransactionsSumParams(OzonParams):
    date: Optional[TransactionDateRange] = None
    posting_number: Optional[str] = None
    # all / orders / returns / services / compensation / transferDelivery / other
    transaction_type: Optional[str] = None


class TransactionTotals(OzonModel):
    accruals_for_sale: float = 0
    # Ozon 的字段名本身拼写如此
    compensation_amount: float = Field(default=0, alias="compensatino_amount")
    money_transfer: float = 0
    others_amount: float = 0
    processing_and_delivery: float = 0
    refunds_and_cancellations: float = 0
    sale_commission: float = 0
    services_amount: float = 0


class GetTotalTransactionsSumResponse(CommonResponse):
    result: TransactionTotals = Field(default_factory=TransactionTotals)


class ListTransactionsFilter(OzonParams):
    date: Optional[TransactionDateRange] = None
    operation_type: Optional[List[str]] = None
    posting_number: Optional[str] = None
    transaction_type: Optional[str] = None


class ListTransactionsParams(OzonParams):
    filter: Optional[ListTransactionsFilter] = None
    # 页码从 1 开始
    page: Optional[int] = None
    # 最大 1000
    page_size: Optional[int] = None


class TransactionPosting(OzonModel):
    delivery_schema: str = ""
    order_date: str = ""
    posting_number: str = ""
    warehouse_id: int = 0


class TransactionItem(OzonModel):
    name: str = ""
    sku: int = 0


class TransactionService(OzonModel):
    name: str = ""
    price: float = 0


class TransactionOperation(OzonModel):
    operation_id: int = 0
    operation_type: str = ""
    operation_date: str = ""
    operation_type_name: str = ""
    delivery_charge: float = 0
    return_delivery_charge: float = 0
    accruals_for_sale: float = 0
    sale_commission: float = 0
    amount: float = 0
    type: str = ""
    posting: TransactionPosting = Field(default_factory=TransactionPosting)
    items: List[TransactionItem] = []
    services: List[TransactionService] = []


class TransactionList(OzonModel):
    operations: List[TransactionOperation] = []
    page_count: int = 0
    row_count: int = 0


class ListTransactionsResponse(CommonResponse):
    result: TransactionList = Field(default_factory=TransactionList)


class Finance(APIGroup):
    """财务相关 API 方法"""

    def report_on_sold_products(self, params: ReportOnSoldProductsParams) -> ReportOnSoldProductsResponse:
        """
        月度销售与退货报告
        使用 /v1/finance/realization 接口

        不包含取消和未取件的商品；报告最晚在下月 5 日生成。
        """
        return self._client.request(
            "POST", "/v1/finance/realization", params, ReportOnSoldProductsResponse
        )

    def get_total_transactions_sum(self, params: GetTotalTransactionsSumParams) -> GetTotalTransactionsSumResponse:
        """
        获取财务清单数目（费用汇总）
        使用 /v3/finance/transaction/totals 接口

        按 posting_number 或 date 范围过滤。日期范围不做本地校验，原样发送。

        Returns:
            result 中包含：
            - accruals_for_sale: 商品总成本和退货
            - sale_commission: 销售佣金
            - processing_and_delivery: 运输处理和配送费
            - refunds_and_cancellations: 退货和取消费用
            - compensation_amount: 补贴
            - money_transfer: 交货和退货费用
            - services_amount: 附加服务成本
            - others_amount: 其他应计费用
        """
        return self._client.request(
            "POST", "/v3/finance/transaction/totals", params, GetTotalTransactionsSumResponse
        )

    def list_transactions(self, params: ListTransactionsParams) -> ListTransactionsResponse:
        """
        获取财务交易明细列表
        使用 /v3/finance/transaction/list 接口

        单次请求，分页由调用方通过 page / page_size 控制。
        """
        return self._client.request(
            "POST", "/v3/finance/transaction/list", params, ListTransactionsResponse
        )
