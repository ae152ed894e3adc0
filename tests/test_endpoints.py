"""
所有分类接口的通用约定：
- 固定的 HTTP 方法和路径
- 传输错误原样抛出
- 成功时信封字段被填充
"""
import inspect

import httpx
import pytest

from ozon_seller.api.base import APIGroup
from ozon_seller.api.models import CommonResponse

ENDPOINTS = [
    ("analytics", "get_analytics_data", "POST", "/v1/analytics/data"),
    ("analytics", "get_stocks_on_warehouses", "POST", "/v2/analytics/stock_on_warehouses"),
    ("fbo", "get_shipments_list", "POST", "/v2/posting/fbo/list"),
    ("fbo", "get_shipment_details", "POST", "/v2/posting/fbo/get"),
    ("fbs", "list_shipments", "POST", "/v3/posting/fbs/list"),
    ("fbs", "get_shipment_data_by_id", "POST", "/v3/posting/fbs/get"),
    ("fbs", "pack_order", "POST", "/v4/posting/fbs/ship"),
    ("fbs", "cancel_shipment", "POST", "/v2/posting/fbs/cancel"),
    ("finance", "report_on_sold_products", "POST", "/v1/finance/realization"),
    ("finance", "get_total_transactions_sum", "POST", "/v3/finance/transaction/totals"),
    ("finance", "list_transactions", "POST", "/v3/finance/transaction/list"),
    ("products", "get_list_of_products", "POST", "/v3/product/list"),
    ("products", "list_product_information", "POST", "/v3/product/info/list"),
    ("products", "update_prices", "POST", "/v1/product/import/prices"),
    ("products", "update_stocks", "POST", "/v2/products/stocks"),
    ("products", "archive_product", "POST", "/v1/product/archive"),
    ("products", "unarchive_product", "POST", "/v1/product/unarchive"),
    ("promotions", "get_available_promotions", "GET", "/v1/actions"),
    ("promotions", "products_available_for_promotion", "POST", "/v1/actions/candidates"),
    ("promotions", "products_in_promotion", "POST", "/v1/actions/products"),
    ("promotions", "add_products_to_promotion", "POST", "/v1/actions/products/activate"),
    ("promotions", "remove_products_from_promotion", "POST", "/v1/actions/products/deactivate"),
    ("rating", "get_current_seller_rating_info", "POST", "/v1/rating/summary"),
    ("rating", "get_seller_rating_info_for_period", "POST", "/v1/rating/history"),
    ("warehouses", "get_list_of_warehouses", "POST", "/v1/warehouse/list"),
    ("warehouses", "get_list_of_delivery_methods", "POST", "/v1/delivery-method/list"),
    ("returns", "list_rfbs_returns", "POST", "/v2/returns/rfbs/list"),
    ("returns", "get_rfbs_return", "POST", "/v2/returns/rfbs/get"),
    ("reports", "get_list", "POST", "/v1/report/list"),
    ("reports", "get_report_details", "POST", "/v1/report/info"),
    ("reports", "get_products_report", "POST", "/v1/report/products/create"),
    ("cancellations", "list_conditional_cancellations", "POST", "/v2/conditional-cancellation/list"),
    ("cancellations", "approve", "POST", "/v2/conditional-cancellation/approve"),
    ("cancellations", "reject", "POST", "/v2/conditional-cancellation/reject"),
    ("categories", "tree", "POST", "/v1/description-category/tree"),
    ("categories", "attributes", "POST", "/v1/description-category/attribute"),
    ("categories", "attribute_values", "POST", "/v1/description-category/attribute/values"),
    ("polygons", "create_delivery_polygon", "POST", "/v1/polygon/create"),
    ("polygons", "link_delivery_method_to_polygon", "POST", "/v1/polygon/bind"),
    ("invoices", "create_update", "POST", "/v2/invoice/create-or-update"),
    ("invoices", "get", "POST", "/v2/invoice/get"),
    ("invoices", "delete", "POST", "/v1/invoice/delete"),
    ("brands", "list_certified_brands", "POST", "/v1/brand/company-certification/list"),
    ("chats", "list_chats", "POST", "/v3/chat/list"),
    ("chats", "get_chat_history", "POST", "/v3/chat/history"),
    ("chats", "send_message", "POST", "/v1/chat/send/message"),
    ("chats", "mark_as_read", "POST", "/v2/chat/read"),
    ("certificates", "list_of_accordance_types", "GET", "/v2/product/certificate/accordance-types/list"),
    ("certificates", "directory_of_document_types", "GET", "/v1/product/certificate/types"),
    ("certificates", "list_certificates", "POST", "/v1/product/certificate/list"),
    ("strategies", "list_competitors", "POST", "/v1/pricing-strategy/competitors/list"),
    ("strategies", "list_strategies", "POST", "/v1/pricing-strategy/list"),
    ("strategies", "get_strategy_by_product", "POST", "/v1/pricing-strategy/product/info"),
    ("barcodes", "generate", "POST", "/v1/barcode/generate"),
    ("barcodes", "bind", "POST", "/v1/barcode/add"),
]

GROUPS = sorted({group for group, _, _, _ in ENDPOINTS})


def call_endpoint(client, group: str, method_name: str):
    """用默认参数（全部未设置）调用接口"""
    method = getattr(getattr(client, group), method_name)
    signature = inspect.signature(method)
    if "params" in signature.parameters:
        params_type = signature.parameters["params"].annotation
        return method(params_type())
    return method()


def endpoint_id(endpoint):
    return f"{endpoint[0]}.{endpoint[1]}"


@pytest.mark.parametrize("endpoint", ENDPOINTS, ids=endpoint_id)
def test_endpoint_uses_fixed_verb_and_path(client, handler, endpoint):
    group, method_name, verb, path = endpoint

    call_endpoint(client, group, method_name)

    assert handler.last_request.method == verb
    assert handler.last_request.url.path == path


@pytest.mark.parametrize("endpoint", ENDPOINTS, ids=endpoint_id)
def test_endpoint_populates_envelope(make_client, endpoint):
    group, method_name, _, _ = endpoint
    client, _ = make_client({"code": 0, "message": "ok"}, status_code=200)

    resp = call_endpoint(client, group, method_name)

    assert isinstance(resp, CommonResponse)
    assert resp.status_code == 200
    assert resp.message == "ok"


@pytest.mark.parametrize("endpoint", ENDPOINTS, ids=endpoint_id)
def test_endpoint_decodes_error_envelope(make_client, endpoint):
    group, method_name, _, _ = endpoint
    client, _ = make_client({"code": 5, "message": "Not found", "details": []}, status_code=404)

    resp = call_endpoint(client, group, method_name)

    assert resp.status_code == 404
    assert resp.code == 5
    assert resp.message == "Not found"


@pytest.mark.parametrize("endpoint", ENDPOINTS, ids=endpoint_id)
def test_endpoint_propagates_transport_error(make_client, endpoint):
    group, method_name, _, _ = endpoint
    injected = httpx.ReadTimeout("read timed out")
    client, _ = make_client(error=injected)

    with pytest.raises(httpx.ReadTimeout) as exc_info:
        call_endpoint(client, group, method_name)

    assert exc_info.value is injected


@pytest.mark.parametrize("group", GROUPS)
def test_every_public_method_is_listed(client, group):
    api_group = getattr(client, group)
    assert isinstance(api_group, APIGroup)

    public_methods = {
        name
        for name, member in inspect.getmembers(type(api_group), inspect.isfunction)
        if not name.startswith("_")
    }
    listed = {method_name for g, method_name, _, _ in ENDPOINTS if g == group}

    assert public_methods == listed


@pytest.mark.parametrize("endpoint", ENDPOINTS, ids=endpoint_id)
def test_endpoint_treats_null_as_zero_value(make_client, endpoint):
    group, method_name, _, _ = endpoint
    client, _ = make_client({"result": None, "message": None, "details": None})

    resp = call_endpoint(client, group, method_name)

    assert resp.status_code == 200
    assert resp.message == ""
    assert resp.details == []
    assert resp.ok
