"""
Ozon API 商品合格证书相关方法
"""

from typing import List, Optional

from pydantic import Field

from ..base import APIGroup
from ..models import CommonResponse, OzonDateTime, OzonModel, OzonParams


class AccordanceType(OzonModel):
    code: str = ""
    title: str = ""


class AccordanceTypes(OzonModel):
    base: List[AccordanceType] = []
    hazard: List[AccordanceType] = []


class ListOfAccordanceTypesResponse(CommonResponse):
    result: AccordanceTypes = Field(default_factory=AccordanceTypes)


class DocumentType(OzonModel):
    name: str = ""
    value: str = ""


class DirectoryOfDocumentTypesResponse(CommonResponse):
    result: List[DocumentType] = []


class ListCertificatesParams(OzonParams):
    offer_id: Optional[str] = None
    # 证书状态代码，见 /v1/product/certificate/status/list
    status: Optional[str] = None
    # 证书类型代码，见 directory_of_document_types
    type: Optional[str] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class Certificate(OzonModel):
    certificate_id: int = 0
    certificate_number: str = ""
    certificate_name: str = ""
    type_code: str = ""
    status_code: str = ""
    accordance_type_code: str = ""
    rejection_reason_code: str = ""
    verification_comment: str = ""
    issue_date: OzonDateTime = None
    expire_date: OzonDateTime = None
    products_count: int = 0


class CertificatesPage(OzonModel):
    certificates: List[Certificate] = []
    page_count: int = 0


class ListCertificatesResponse(CommonResponse):
    result: CertificatesPage = Field(default_factory=CertificatesPage)


class Certificates(APIGroup):
    """商品合格证书相关 API 方法"""

    def list_of_accordance_types(self) -> ListOfAccordanceTypesResponse:
        """合格类型目录（GET /v2/product/certificate/accordance-types/list）"""
        return self._client.request(
            "GET", "/v2/product/certificate/accordance-types/list", None, ListOfAccordanceTypesResponse
        )

    def directory_of_document_types(self) -> DirectoryOfDocumentTypesResponse:
        """文件类型目录（GET /v1/product/certificate/types）"""
        return self._client.request(
            "GET", "/v1/product/certificate/types", None, DirectoryOfDocumentTypesResponse
        )

    def list_certificates(self, params: ListCertificatesParams) -> ListCertificatesResponse:
        """
        证书列表
        使用 /v1/product/certificate/list 接口
        """
        return self._client.request("POST", "/v1/product/certificate/list", params, ListCertificatesResponse)
