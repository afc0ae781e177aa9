from pydantic import Field
from typing import Optional
from datetime import datetime

from ..models import CustomModel

class UserBase(CustomModel):
    user_name: str = Field(..., min_length=1, max_length=50, json_schema_extra={"example": "dunder"})
    full_name: str = Field(..., min_length=1, max_length=100, json_schema_extra={"example": "Dunder Mifflin"})
    nickname: Optional[str] = Field(None, max_length=50, json_schema_extra={"example": "DM"})

class UserCreate(UserBase):
    password: str = Field(..., min_length=1, json_schema_extra={"example": "password"})

class UserPublic(UserBase):
    """다른 리소스에 임베드되는 작성자 공개 정보. 비밀번호는 포함하지 않습니다."""
    id: int = Field(..., json_schema_extra={"example": 1})
    date_created: datetime
    date_modified: Optional[datetime] = None
