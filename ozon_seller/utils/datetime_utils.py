"""
时间处理工具模块
统一处理 Ozon API 的时间格式，确保所有 datetime 都是 timezone-aware (UTC)
响应中的时间由 pydantic 解析，再经 ensure_utc 统一为 UTC

Ozon 使用的格式:
- 时间戳: YYYY-MM-DDTHH:mm:ss.sssZ（毫秒精度，UTC）
- 月度周期: YYYY-MM（如 /v1/finance/realization 的 date 参数）
"""
from datetime import date, datetime, timezone
from typing import Any, Optional, Union


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    确保datetime是UTC时区

    如果datetime是其他时区，转换为UTC
    如果datetime是naive，假定为UTC并添加时区

    Args:
        dt: datetime对象

    Returns:
        datetime: UTC timezone-aware datetime
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime，假定为UTC
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def format_ozon_datetime(dt: datetime) -> str:
    """
    格式化为 Ozon 请求使用的时间格式 YYYY-MM-DDTHH:mm:ss.sssZ

    Example:
        >>> format_ozon_datetime(datetime(2019, 11, 25, 10, 43, 6, 510000))
        '2019-11-25T10:43:06.510Z'
    """
    dt = ensure_utc(dt)
    return dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{dt.microsecond // 1000:03d}Z"


def format_period(value: Union[date, datetime, str]) -> str:
    """格式化月度周期参数（YYYY-MM）"""
    if isinstance(value, str):
        # 允许直接传入 YYYY-MM 或 YYYY-MM-DD
        return value[:7]
    return f"{value.year:04d}-{value.month:02d}"


def empty_to_none(value: Any) -> Any:
    """Ozon 对未设置的时间字段有时返回空字符串"""
    if value == "":
        return None
    return value
