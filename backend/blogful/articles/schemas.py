# backend/blogful/articles/schemas.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from ..models import CustomModel
from ..users.schema import UserPublic
from .models import ArticleStyle

class ArticleOut(CustomModel):
    """클라이언트로 나가는 기사. title/content는 서비스 계층에서 sanitize 된 값입니다."""
    id: int
    style: ArticleStyle
    title: str
    content: Optional[str] = None
    date_published: datetime
    number_of_comments: int = Field(0, ge=0)
    author: Optional[UserPublic] = None
