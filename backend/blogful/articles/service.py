# backend/blogful/articles/service.py
import logging
from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..comments.models import Comment
from ..errors import ArticleNotFound
from ..sanitize import clean_html
from ..users.schema import UserPublic
from .models import Article
from .schemas import ArticleOut

logger = logging.getLogger(__name__)


def _comment_count():
    return (
        select(func.count(Comment.id))
        .where(Comment.article_id == Article.id)
        .correlate(Article)
        .scalar_subquery()
    )


def _article_query():
    return (
        select(Article, _comment_count().label("number_of_comments"))
        .options(selectinload(Article.author))
    )


def serialize_article(article: Article, number_of_comments: int = 0) -> ArticleOut:
    return ArticleOut(
        id=article.id,
        style=article.style,
        title=clean_html(article.title),
        content=clean_html(article.content),
        date_published=article.date_published,
        number_of_comments=number_of_comments or 0,
        author=UserPublic.model_validate(article.author) if article.author else None,
    )


async def list_articles(db: AsyncSession) -> List[ArticleOut]:
    """모든 기사를 등록 순서(id)대로 작성자 정보와 함께 조회합니다."""
    result = await db.execute(_article_query().order_by(Article.id))
    rows: Sequence = result.all()
    return [serialize_article(article, count) for article, count in rows]


async def get_article_by_id(db: AsyncSession, article_id: int) -> Optional[ArticleOut]:
    result = await db.execute(_article_query().where(Article.id == article_id))
    row = result.one_or_none()
    if row is None:
        return None
    article, count = row
    return serialize_article(article, count)


async def article_exists(db: AsyncSession, article_id: int) -> bool:
    result = await db.execute(select(Article.id).where(Article.id == article_id))
    return result.scalar_one_or_none() is not None


async def ensure_article_exists(db: AsyncSession, article_id: int) -> None:
    if not await article_exists(db, article_id):
        logger.info(f"Article not found: id={article_id}")
        raise ArticleNotFound()


async def get_article_or_404(db: AsyncSession, article_id: int) -> ArticleOut:
    article = await get_article_by_id(db, article_id)
    if article is None:
        logger.info(f"Article not found: id={article_id}")
        raise ArticleNotFound()
    return article
