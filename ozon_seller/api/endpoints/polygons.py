"""
Ozon API 配送区域（多边形）相关方法
"""

from typing import List, Optional

from ..base import APIGroup
from ..models import CommonResponse, OzonParams


class CreateDeliveryPolygonParams(OzonParams):
    # GeoJSON 坐标字符串，如 [[[30.1,59.9],[30.2,59.9],[30.2,60.0],[30.1,59.9]]]
    coordinates: Optional[str] = None


class CreateDeliveryPolygonResponse(CommonResponse):
    polygon_id: int = 0


class PolygonBinding(OzonParams):
    polygon_id: Optional[int] = None
    # 配送时间（分钟）
    time: Optional[int] = None


class WarehouseLocation(OzonParams):
    lat: Optional[str] = None
    lon: Optional[str] = None


class LinkDeliveryMethodToPolygonParams(OzonParams):
    delivery_method_id: Optional[int] = None
    polygons: Optional[List[PolygonBinding]] = None
    warehouse_location: Optional[WarehouseLocation] = None


class LinkDeliveryMethodToPolygonResponse(CommonResponse):
    pass


class Polygons(APIGroup):
    """配送区域相关 API 方法"""

    def create_delivery_polygon(self, params: CreateDeliveryPolygonParams) -> CreateDeliveryPolygonResponse:
        """创建配送区域（/v1/polygon/create）"""
        return self._client.request("POST", "/v1/polygon/create", params, CreateDeliveryPolygonResponse)

    def link_delivery_method_to_polygon(
        self, params: LinkDeliveryMethodToPolygonParams
    ) -> LinkDeliveryMethodToPolygonResponse:
        """把配送方式绑定到配送区域（/v1/polygon/bind）"""
        return self._client.request(
            "POST", "/v1/polygon/bind", params, LinkDeliveryMethodToPolygonResponse
        )
