"""
Ozon API 定价策略相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class ListCompetitorsParams(OzonParams):
    # 页码从 1 开始
    page: Optional[int] = None
    # 最大 50
    limit: Optional[int] = None


class Competitor(OzonModel):
    id: int = 0
    competitor_name: str = ""


class ListCompetitorsResponse(CommonResponse):
    competitor: List[Competitor] = []
    total: int = 0


class ListStrategiesParams(OzonParams):
    page: Optional[int] = None
    limit: Optional[int] = None


class Strategy(OzonModel):
    id: str = ""
    name: str = ""
    # MIN_EXT_PRICE / COMP_PRICE
    type: str = ""
    # strategyEnabled / strategyDisabled / strategyChanged / strategyCreated / strategyItemsListChanged
    update_type: str = ""
    updated_at: OzonDateTime = None
    products_count: int = 0
    competitors_count: int = 0
    enabled: bool = False


class ListStrategiesResponse(CommonResponse):
    strategies: List[Strategy] = []
    total: int = 0


class GetStrategyByProductParams(OzonParams):
    product_id: Optional[int] = None


class StrategyProductInfo(OzonModel):
    strategy_id: str = ""
    is_enabled: bool = False
    strategy_product_price: int = 0
    price_downloaded_at: OzonDateTime = None
    strategy_competitor_id: int = 0
    strategy_competitor_product_url: str = ""


class GetStrategyByProductResponse(CommonResponse):
    result: StrategyProductInfo = Field(default_factory=StrategyProductInfo)


class Strategies(APIGroup):
    """定价策略相关 API 方法"""

    def list_competitors(self, params: ListCompetitorsParams) -> ListCompetitorsResponse:
        """
        获取竞争对手列表（在其他平台上拥有类似商品的卖家）
        使用 /v1/pricing-strategy/competitors/list 接口
        """
        return self._client.request(
            "POST", "/v1/pricing-strategy/competitors/list", params, ListCompetitorsResponse
        )

    def list_strategies(self, params: ListStrategiesParams) -> ListStrategiesResponse:
        """定价策略列表（/v1/pricing-strategy/list）"""
        return self._client.request("POST", "/v1/pricing-strategy/list", params, ListStrategiesResponse)

    def get_strategy_by_product(self, params: GetStrategyByProductParams) -> GetStrategyByProductResponse:
        """
        获取商品的定价策略信息
        使用 /v1/pricing-strategy/product/info 接口
        """
        return self._client.request(
            "POST", "/v1/pricing-strategy/product/info", params, GetStrategyByProductResponse
        )
