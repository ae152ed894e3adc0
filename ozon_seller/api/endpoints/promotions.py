"""
Ozon API 促销活动相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class Promotion(OzonModel):
    id: int = 0
    title: str = ""
    action_type: str = ""
    description: str = ""
    date_start: OzonDateTime = None
    date_end: OzonDateTime = None
    freeze_date: OzonDateTime = None
    potential_products_count: int = 0
    participating_products_count: int = 0
    is_participating: bool = False
    is_voucher_action: bool = False
    banned_products_count: int = 0
    with_targeting: bool = False
    order_amount: float = 0
    discount_type: str = ""
    discount_value: float = 0


class GetAvailablePromotionsResponse(CommonResponse):
    result: List[Promotion] = []


class PromotionProductsParams(OzonParams):
    action_id: Optional[int] = None
    # 最大 100
    limit: Optional[int] = None
    offset: Optional[int] = None


class PromotionProduct(OzonModel):
    id: int = 0
    price: float = 0
    action_price: float = 0
    max_action_price: float = 0
    # NOT_SET / AUTO / MANUAL
    add_mode: str = ""
    min_stock: float = 0
    stock: float = 0


class PromotionProducts(OzonModel):
    products: List[PromotionProduct] = []
    total: float = 0


class PromotionProductsResponse(CommonResponse):
    result: PromotionProducts = Field(default_factory=PromotionProducts)


class ActivateProduct(OzonParams):
    product_id: Optional[int] = None
    action_price: Optional[float] = None
    # 库存限量活动必填
    stock: Optional[float] = None


class AddProductsToPromotionParams(OzonParams):
    action_id: Optional[int] = None
    products: Optional[List[ActivateProduct]] = None


class RejectedProduct(OzonModel):
    product_id: int = 0
    reason: str = ""


class PromotionUpdateResult(OzonModel):
    product_ids: List[int] = []
    rejected: List[RejectedProduct] = []


class PromotionUpdateResponse(CommonResponse):
    result: PromotionUpdateResult = Field(default_factory=PromotionUpdateResult)


class RemoveProductsFromPromotionParams(OzonParams):
    action_id: Optional[int] = None
    product_ids: Optional[List[int]] = None


class Promotions(APIGroup):
    """促销活动相关 API 方法"""

    def get_available_promotions(self) -> GetAvailablePromotionsResponse:
        """
        获取促销活动清单
        使用 GET /v1/actions 接口
        """
        return self._client.request("GET", "/v1/actions", None, GetAvailablePromotionsResponse)

    def products_available_for_promotion(self, params: PromotionProductsParams) -> PromotionProductsResponse:
        """获取可参加促销的商品（候选商品，/v1/actions/candidates）"""
        return self._client.request("POST", "/v1/actions/candidates", params, PromotionProductsResponse)

    def products_in_promotion(self, params: PromotionProductsParams) -> PromotionProductsResponse:
        """获取参与活动的商品（/v1/actions/products）"""
        return self._client.request("POST", "/v1/actions/products", params, PromotionProductsResponse)

    def add_products_to_promotion(self, params: AddProductsToPromotionParams) -> PromotionUpdateResponse:
        """
        添加商品到促销活动
        使用 /v1/actions/products/activate 接口

        未能加入的商品及原因在 result.rejected 中。
        """
        return self._client.request(
            "POST", "/v1/actions/products/activate", params, PromotionUpdateResponse
        )

    def remove_products_from_promotion(
        self, params: RemoveProductsFromPromotionParams
    ) -> PromotionUpdateResponse:
        """从促销活动中移除商品（/v1/actions/products/deactivate）"""
        return self._client.request(
            "POST", "/v1/actions/products/deactivate", params, PromotionUpdateResponse
        )
