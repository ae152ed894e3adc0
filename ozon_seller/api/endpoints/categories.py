"""
Ozon API 类目/属性相关方法
"""

from typing import List, Optional

from ..base import APIGroup
from ..models import CommonResponse, OzonModel, OzonParams


class GetCategoryTreeParams(OzonParams):
    # DEFAULT / RU / EN / TR / ZH_HANS
    language: Optional[str] = None


class CategoryTreeNode(OzonModel):
    """
    类目树节点

    非叶子节点有 description_category_id 和 category_name；
    叶子节点（商品类型）有 type_id 和 type_name。
    """
    description_category_id: int = 0
    category_name: str = ""
    disabled: bool = False
    type_id: int = 0
    type_name: str = ""
    children: List["CategoryTreeNode"] = []


class GetCategoryTreeResponse(CommonResponse):
    result: List[CategoryTreeNode] = []


class GetCategoryAttributesParams(OzonParams):
    description_category_id: Optional[int] = None
    language: Optional[str] = None
    type_id: Optional[int] = None


class CategoryAttribute(OzonModel):
    id: int = 0
    name: str = ""
    description: str = ""
    type: str = ""
    is_collection: bool = False
    is_required: bool = False
    is_aspect: bool = False
    group_id: int = 0
    group_name: str = ""
    # 0 表示该属性没有字典
    dictionary_id: int = 0
    category_dependent: bool = False
    max_value_count: int = 0
    complex_is_collection: bool = False
    attribute_complex_id: int = 0


class GetCategoryAttributesResponse(CommonResponse):
    result: List[CategoryAttribute] = []


class GetAttributeValuesParams(OzonParams):
    attribute_id: Optional[int] = None
    description_category_id: Optional[int] = None
    language: Optional[str] = None
    # 上一页最后一个值的 id
    last_value_id: Optional[int] = None
    # 最大 2000
    limit: Optional[int] = None
    type_id: Optional[int] = None


class AttributeValue(OzonModel):
    id: int = 0
    value: str = ""
    info: str = ""
    picture: str = ""


class GetAttributeValuesResponse(CommonResponse):
    result: List[AttributeValue] = []
    has_next: bool = False


class Categories(APIGroup):
    """类目/属性相关 API 方法"""

    def tree(self, params: GetCategoryTreeParams) -> GetCategoryTreeResponse:
        """
        获取类目树
        使用 /v1/description-category/tree 接口
        """
        return self._client.request("POST", "/v1/description-category/tree", params, GetCategoryTreeResponse)

    def attributes(self, params: GetCategoryAttributesParams) -> GetCategoryAttributesResponse:
        """
        获取类目属性列表
        使用 /v1/description-category/attribute 接口

        description_category_id 是父类目 ID，type_id 是叶子节点（商品类型）ID。
        """
        return self._client.request(
            "POST", "/v1/description-category/attribute", params, GetCategoryAttributesResponse
        )

    def attribute_values(self, params: GetAttributeValuesParams) -> GetAttributeValuesResponse:
        """
        获取属性字典值列表
        使用 /v1/description-category/attribute/values 接口

        has_next 为 True 时，用最后一个值的 id 作为 last_value_id 继续请求。
        """
        return self._client.request(
            "POST", "/v1/description-category/attribute/values", params, GetAttributeValuesResponse
        )
