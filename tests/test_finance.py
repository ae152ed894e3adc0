"""
财务接口测试
"""
from datetime import datetime, timedelta, timezone

from ozon_seller.api.endpoints.finance import (
    GetTotalTransactionsSumParams,
    ListTransactionsFilter,
    ListTransactionsParams,
    ReportOnSoldProductsParams,
    TransactionDateRange,
)

REALIZATION_BODY = {
    "result": [
        {
            "header": [
                {
                    "num": "R-2023-05-001",
                    "doc_date": "2023-06-05",
                    "contract_date": "2021-01-01",
                    "contract_num": "ИР-1234/21",
                    "currency_code": "RUB",
                    "doc_amount": 125000.5,
                    "vat_amount": 20833.42,
                    "payer_inn": "7704217370",
                    "payer_kpp": "997750001",
                    "payer_name": "ООО Интернет Решения",
                    "rcv_inn": "1234567890",
                    "rcv_kpp": "123401001",
                    "rcv_name": "ИП Иванов",
                    "start_date": "2023-05-01",
                    "stop_date": "2023-05-31",
                }
            ],
            "rows": [
                {
                    "row_number": 1,
                    "product_id": 123456789,
                    "product_name": "Чехол для телефона",
                    "barcode": "4600000000017",
                    "offer_id": "CASE-01",
                    "commission_percent": 12.5,
                    "price": 990,
                    "price_sale": 890,
                    "sale_amount": 1780,
                    "sale_commission": 222.5,
                    "sale_discount": 0,
                    "sale_price_seller": 1557.5,
                    "sale_qty": 2,
                    "return_sale": 0,
                    "return_amount": 0,
                    "return_commission": 0,
                    "return_discount": 0,
                    "return_price_seller": 0,
                    "return_qty": 0,
                },
                {
                    "row_number": 2,
                    "product_id": 987654321,
                    "product_name": "Защитное стекло",
                    "offer_id": "GLASS-02",
                    "price_sale": 390,
                    "sale_qty": 0,
                    "return_sale": 390,
                    "return_amount": 390,
                    "return_qty": 1,
                },
            ],
        }
    ]
}


def test_report_on_sold_products_decodes_header_and_rows(make_client):
    client, handler = make_client(REALIZATION_BODY)

    resp = client.finance.report_on_sold_products(ReportOnSoldProductsParams(date="2023-05"))

    request = handler.last_request
    assert request.method == "POST"
    assert request.url.path == "/v1/finance/realization"
    assert handler.last_json == {"date": "2023-05"}

    report = resp.result[0]
    assert len(report.rows) == 2
    assert report.header[0].id == "R-2023-05-001"
    assert report.header[0].recipient_inn == "1234567890"
    assert report.header[0].recipient_name == "ИП Иванов"
    assert report.header[0].doc_amount == 125000.5

    first, second = report.rows
    assert first.sale_quantity == 2
    assert first.sale_price_seller == 1557.5
    assert second.return_quantity == 1
    # 缺失字段按零值处理
    assert second.barcode == ""
    assert second.commission_percent == 0


def test_report_on_sold_products_populates_envelope(make_client):
    client, _ = make_client(REALIZATION_BODY)

    resp = client.finance.report_on_sold_products(ReportOnSoldProductsParams(date="2023-05"))

    assert resp.status_code == 200
    assert resp.code == 0
    assert resp.message == ""
    assert resp.ok


def test_get_total_transactions_sum_sends_reversed_range_unchanged(make_client):
    client, handler = make_client(
        {
            "result": {
                "accruals_for_sale": 96647.58,
                "compensatino_amount": 30.5,
                "money_transfer": 0,
                "others_amount": 154.89,
                "processing_and_delivery": -15129.68,
                "refunds_and_cancellations": -2280.78,
                "sale_commission": -11990.76,
                "services_amount": -1240.15,
            }
        }
    )
    date_from = datetime(2023, 6, 30, 23, 59, 59, 510000, tzinfo=timezone.utc)
    date_to = datetime(2023, 6, 1, tzinfo=timezone.utc)

    resp = client.finance.get_total_transactions_sum(
        GetTotalTransactionsSumParams(
            date=TransactionDateRange(from_=date_from, to=date_to),
            transaction_type="all",
        )
    )

    assert handler.last_request.url.path == "/v3/finance/transaction/totals"
    assert handler.last_json == {
        "date": {"from": "2023-06-30T23:59:59.510Z", "to": "2023-06-01T00:00:00.000Z"},
        "transaction_type": "all",
    }
    assert resp.result.accruals_for_sale == 96647.58
    assert resp.result.compensation_amount == 30.5
    assert resp.result.processing_and_delivery == -15129.68


def test_get_total_transactions_sum_converts_to_utc(make_client):
    client, handler = make_client({"result": {}})
    moscow = timezone(timedelta(hours=3))

    client.finance.get_total_transactions_sum(
        GetTotalTransactionsSumParams(
            date=TransactionDateRange(
                from_=datetime(2023, 6, 1, 3, 0, tzinfo=moscow),
                to=datetime(2023, 6, 2, 2, 59, 59),
            ),
            posting_number="12345678-0001-1",
        )
    )

    assert handler.last_json == {
        "date": {"from": "2023-06-01T00:00:00.000Z", "to": "2023-06-02T02:59:59.000Z"},
        "posting_number": "12345678-0001-1",
    }


def test_list_transactions(make_client):
    client, handler = make_client(
        {
            "result": {
                "operations": [
                    {
                        "operation_id": 11401182187840,
                        "operation_type": "MarketplaceMarketingActionCostOperation",
                        "operation_date": "2021-11-01 00:00:00",
                        "operation_type_name": "Услуги продвижения товаров",
                        "amount": -6.46,
                        "type": "services",
                        "posting": {
                            "delivery_schema": "FBO",
                            "order_date": "2021-11-01 00:00:00",
                            "posting_number": "13076543-0001-1",
                            "warehouse_id": 15431806189000,
                        },
                        "items": [{"name": "Чехол", "sku": 150532123}],
                        "services": [{"name": "MarketplaceServiceItemDelivToCustomer", "price": -34.5}],
                    }
                ],
                "page_count": 1,
                "row_count": 1,
            }
        }
    )

    resp = client.finance.list_transactions(
        ListTransactionsParams(
            filter=ListTransactionsFilter(
                date=TransactionDateRange(
                    from_=datetime(2021, 11, 1, tzinfo=timezone.utc),
                    to=datetime(2021, 11, 2, tzinfo=timezone.utc),
                ),
                operation_type=["MarketplaceMarketingActionCostOperation"],
                transaction_type="all",
            ),
            page=1,
            page_size=1000,
        )
    )

    assert handler.last_request.url.path == "/v3/finance/transaction/list"
    assert handler.last_json["page"] == 1
    assert handler.last_json["page_size"] == 1000
    assert handler.last_json["filter"]["operation_type"] == ["MarketplaceMarketingActionCostOperation"]
    assert "posting_number" not in handler.last_json["filter"]

    operation = resp.result.operations[0]
    assert operation.operation_id == 11401182187840
    assert operation.posting.delivery_schema == "FBO"
    assert operation.items[0].sku == 150532123
    assert operation.services[0].price == -34.5
    assert resp.result.row_count == 1
