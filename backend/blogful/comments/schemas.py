from datetime import datetime

from pydantic import Field

from ..database import DB_INT_MAX
from ..models import CustomModel
from ..users.schema import UserPublic

class CommentCreate(CustomModel):
    article_id: int = Field(..., ge=1, le=DB_INT_MAX, json_schema_extra={"example": 1})
    text: str = Field(..., min_length=1, json_schema_extra={"example": "Great read!"})

class CommentOut(CustomModel):
    id: int
    text: str
    article_id: int
    date_commented: datetime
    author: UserPublic
