"""
Ozon API 通用模型

- OzonModel: 响应模型基类（所有字段都有默认值，保留未声明的字段）
- OzonParams: 请求参数基类（None 表示未设置，序列化时省略）
- CommonResponse: 所有响应共有的信封字段
"""
from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, model_validator

from ..utils.datetime_utils import empty_to_none, ensure_utc, format_ozon_datetime
from ..utils.errors import OzonAPIError

# 时间字段（可为空）：请求中序列化为 YYYY-MM-DDTHH:mm:ss.sssZ，响应中 "" 视为未设置；
# 不带时区的时间按 UTC 处理，解析结果总是 UTC aware
OzonDateTime = Annotated[
    Optional[datetime],
    BeforeValidator(empty_to_none),
    AfterValidator(ensure_utc),
    PlainSerializer(format_ozon_datetime, return_type=str, when_used="json-unless-none"),
]


class OzonModel(BaseModel):
    """响应模型基类"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def null_as_zero_value(cls, data: Any) -> Any:
        """非 Optional 字段收到 null 时按缺失处理，保留字段默认值（[] / "" / 0）"""
        if not isinstance(data, dict):
            return data

        null_keys = set()
        for name, field in cls.model_fields.items():
            if field.default is None:
                continue
            for key in (field.alias, name):
                if key and key in data and data[key] is None:
                    null_keys.add(key)

        if not null_keys:
            return data
        return {key: value for key, value in data.items() if key not in null_keys}



class OzonParams(BaseModel):
    """请求参数基类"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_payload(self) -> Dict[str, Any]:
        """序列化为请求体（使用 JSON 字段名，省略未设置的字段）"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CommonResponseDetail(OzonModel):
    """错误详情"""
    type_url: str = Field(default="", alias="typeUrl")
    value: str = ""


class CommonResponse(OzonModel):
    """
    通用响应信封

    code/message/details 与业务字段来自同一个 JSON 文档，一次解析完成；
    status_code 是本次请求的 HTTP 状态码，由传输层填入。
    """
    status_code: int = 0
    code: int = 0
    message: str = ""
    details: List[CommonResponseDetail] = []

    @property
    def ok(self) -> bool:
        """HTTP 2xx 且没有业务错误码"""
        return 200 <= self.status_code < 300 and self.code == 0

    def raise_for_error(self) -> None:
        """
        如果信封描述的是失败，抛出 OzonAPIError

        传输层从不自动调用它，由调用方决定是否把业务错误转为异常。
        """
        if self.status_code < 400 and self.code == 0:
            return

        raise OzonAPIError(
            status=self.status_code,
            code=self.code,
            title="Ozon API error",
            detail=self.message or None,
            details=[d.model_dump(by_alias=True) for d in self.details],
        )
