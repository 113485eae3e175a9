from datetime import datetime, UTC
from typing import Annotated
from pydantic import AfterValidator

def _as_utc(value: datetime) -> datetime:
    """SQLite returns naive datetimes; stored values are always UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)

# 统一以 UTC 输出的时间字段
UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]
