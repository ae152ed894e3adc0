"""
Ozon API 卖家评级相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class RatingChange(OzonModel):
    # DIRECTION_UNKNOWN / DIRECTION_NONE / DIRECTION_RISE / DIRECTION_FALL
    direction: str = ""
    # MEANING_UNKNOWN / MEANING_NONE / MEANING_GOOD / MEANING_BAD
    meaning: str = ""


class RatingItem(OzonModel):
    change: RatingChange = Field(default_factory=RatingChange)
    current_value: float = 0
    name: str = ""
    past_value: float = 0
    rating: str = ""
    # UNKNOWN_DIRECTION / NEUTRAL / HIGHER_IS_BETTER / LOWER_IS_BETTER
    rating_direction: str = ""
    # UNKNOWN_STATUS / OK / WARNING / CRITICAL
    status: str = ""
    # UNKNOWN_VALUE / INDEX / PERCENT / TIME / RATIO / REVIEW_SCORE / COUNT
    value_type: str = ""


class RatingGroup(OzonModel):
    group_name: str = ""
    items: List[RatingItem] = []


class GetCurrentRatingResponse(CommonResponse):
    groups: List[RatingGroup] = []
    penalty_score_exceeded: bool = False
    premium: bool = False
    premium_plus: bool = False


class GetRatingHistoryParams(OzonParams):
    date_from: OzonDateTime = None
    date_to: OzonDateTime = None
    # 评级系统名称，如 rating_on_time / rating_review_avg_score_total
    ratings: Optional[List[str]] = None
    with_premium_scores: Optional[bool] = None


class PremiumScoreValue(OzonModel):
    date: OzonDateTime = None
    rating_value: float = 0
    value: float = 0


class PremiumScore(OzonModel):
    rating: str = ""
    scores: List[PremiumScoreValue] = []


class RatingValueStatus(OzonModel):
    danger: bool = False
    premium: bool = False
    warning: bool = False


class RatingValue(OzonModel):
    date_from: OzonDateTime = None
    date_to: OzonDateTime = None
    status: RatingValueStatus = Field(default_factory=RatingValueStatus)
    value: float = 0


class RatingHistory(OzonModel):
    rating: str = ""
    danger_threshold: float = 0
    premium_threshold: float = 0
    warning_threshold: float = 0
    values: List[RatingValue] = []


class GetRatingHistoryResponse(CommonResponse):
    premium_scores: List[PremiumScore] = []
    ratings: List[RatingHistory] = []


class Rating(APIGroup):
    """卖家评级相关 API 方法"""

    def get_current_seller_rating_info(self) -> GetCurrentRatingResponse:
        """当前卖家评级（/v1/rating/summary）"""
        return self._client.request("POST", "/v1/rating/summary", None, GetCurrentRatingResponse)

    def get_seller_rating_info_for_period(self, params: GetRatingHistoryParams) -> GetRatingHistoryResponse:
        """
        指定周期内的评级历史
        使用 /v1/rating/history 接口
        """
        return self._client.request("POST", "/v1/rating/history", params, GetRatingHistoryResponse)
