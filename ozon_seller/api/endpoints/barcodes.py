"""
Ozon API 条形码相关方法
"""

from typing import List, Optional

from ..base import APIGroup
from ..models import CommonResponse, OzonModel, OzonParams


class GenerateBarcodesParams(OzonParams):
    # 每次最多 100 个
    product_ids: Optional[List[int]] = None


class GenerateBarcodeError(OzonModel):
    code: str = ""
    error: str = ""
    barcode: str = ""
    product_id: int = 0


class GenerateBarcodesResponse(CommonResponse):
    errors: List[GenerateBarcodeError] = []


class BarcodeBinding(OzonParams):
    barcode: Optional[str] = None
    sku: Optional[int] = None


class BindBarcodesParams(OzonParams):
    # 每次最多 100 个，每个商品最多 100 个条形码
    barcodes: Optional[List[BarcodeBinding]] = None


class BindBarcodeError(OzonModel):
    code: str = ""
    error: str = ""
    barcode: str = ""
    sku: int = 0


class BindBarcodesResponse(CommonResponse):
    errors: List[BindBarcodeError] = []


class Barcodes(APIGroup):
    """条形码相关 API 方法"""

    def generate(self, params: GenerateBarcodesParams) -> GenerateBarcodesResponse:
        """为商品生成条形码（/v1/barcode/generate），失败项在 errors 中"""
        return self._client.request("POST", "/v1/barcode/generate", params, GenerateBarcodesResponse)

    def bind(self, params: BindBarcodesParams) -> BindBarcodesResponse:
        """把已有条形码绑定到商品（/v1/barcode/add）"""
        return self._client.request("POST", "/v1/barcode/add", params, BindBarcodesResponse)
