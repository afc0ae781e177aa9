# backend/blogful/articles/router.py
import logging
from typing import Annotated, List

from fastapi import APIRouter, Path

from ..auth.dependencies import CurrentUser
from ..comments import service as comment_service
from ..comments.schemas import CommentOut
from ..database import DB_INT_MAX, SessionDep
from ..users.models import User
from . import service
from .schemas import ArticleOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])

ArticleId = Annotated[int, Path(ge=1, le=DB_INT_MAX)]


@router.get("", response_model=List[ArticleOut])
async def list_articles(db: SessionDep):
    return await service.list_articles(db)


@router.get("/{article_id}", response_model=ArticleOut)
async def get_article(article_id: ArticleId, db: SessionDep, current_user: User = CurrentUser):
    logger.debug(f"Article {article_id} requested by user_id={current_user.id}")
    return await service.get_article_or_404(db, article_id)


# 댓글 목록은 인증 없이 공개됩니다. (단건 기사 조회와 다름)
@router.get("/{article_id}/comments", response_model=List[CommentOut])
async def list_article_comments(article_id: ArticleId, db: SessionDep):
    return await comment_service.list_comments_for_article(db, article_id)
