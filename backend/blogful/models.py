from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, field_serializer

class CustomModel(BaseModel):
    """
    프로젝트의 모든 Pydantic 스키마가 상속받는 공통 기본 모델.
    API 데이터 정책을 중앙에서 관리합니다.
    """
    model_config = ConfigDict(
        # True일 경우, 필드 별칭(alias)으로도 값을 할당할 수 있습니다.
        populate_by_name=True,

        # SQLAlchemy 모델 객체를 Pydantic 스키마로 변환 가능하게 합니다.
        from_attributes=True,

        # 정의되지 않은 필드는 거부합니다.
        extra="forbid",
    )

    @field_serializer('*', check_fields=False)
    def serialize_datetime(self, value, _info):
        """datetime 객체를 UTC 기준 ISO-8601 문자열(밀리초, Z 접미사)로 변환합니다."""
        if isinstance(value, datetime):
            return to_iso_utc(value)
        return value


def to_iso_utc(value: datetime) -> str:
    # 시간대 정보가 없는 naive datetime은 UTC로 간주합니다. (SQLite)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
