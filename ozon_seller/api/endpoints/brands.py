"""
Ozon API 品牌相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonModel, OzonParams


class ListCertifiedBrandsParams(OzonParams):
    # 页码从 1 开始
    page: Optional[int] = None
    page_size: Optional[int] = None


class CertifiedBrand(OzonModel):
    brand_id: int = 0
    brand_name: str = ""
    has_certificate: bool = False


class CertifiedBrands(OzonModel):
    brand_certification: List[CertifiedBrand] = []
    total: int = 0


class ListCertifiedBrandsResponse(CommonResponse):
    result: CertifiedBrands = Field(default_factory=CertifiedBrands)


class Brands(APIGroup):
    """品牌相关 API 方法"""

    def list_certified_brands(self, params: ListCertifiedBrandsParams) -> ListCertifiedBrandsResponse:
        """需要认证的品牌列表（/v1/brand/company-certification/list）"""
        return self._client.request(
            "POST", "/v1/brand/company-certification/list", params, ListCertifiedBrandsResponse
        )
