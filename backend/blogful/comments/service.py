import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..articles import service as article_service
from ..errors import CommentNotFound
from ..sanitize import clean_html
from ..users.models import User
from ..users.schema import UserPublic
from .models import Comment
from .schemas import CommentCreate, CommentOut

logger = logging.getLogger(__name__)


def serialize_comment(comment: Comment) -> CommentOut:
    return CommentOut(
        id=comment.id,
        text=clean_html(comment.text),
        article_id=comment.article_id,
        date_commented=comment.date_commented,
        author=UserPublic.model_validate(comment.author),
    )


async def list_comments_for_article(db: AsyncSession, article_id: int) -> List[CommentOut]:
    """기사에 달린 댓글을 작성 순서대로 반환합니다. 기사가 없으면 ArticleNotFound."""
    await article_service.ensure_article_exists(db, article_id)
    result = await db.execute(
        select(Comment)
        .where(Comment.article_id == article_id)
        .options(selectinload(Comment.author))
        .order_by(Comment.id)
    )
    return [serialize_comment(c) for c in result.scalars().all()]


async def get_comment_by_id(db: AsyncSession, comment_id: int) -> CommentOut | None:
    result = await db.execute(
        select(Comment).where(Comment.id == comment_id).options(selectinload(Comment.author))
    )
    comment = result.scalar_one_or_none()
    return serialize_comment(comment) if comment else None


async def create_comment(db: AsyncSession, body: CommentCreate, author: User) -> CommentOut:
    await article_service.ensure_article_exists(db, body.article_id)

    comment = Comment(text=body.text, article_id=body.article_id, author_id=author.id)
    db.add(comment)
    await db.commit()
    logger.info(f"Comment created: id={comment.id}, article_id={comment.article_id}, author_id={author.id}")

    # server_default(date_commented)와 author 관계를 다시 읽어옵니다.
    await db.refresh(comment, attribute_names=["date_commented", "author"])
    return serialize_comment(comment)


async def get_comment_or_404(db: AsyncSession, comment_id: int) -> CommentOut:
    comment = await get_comment_by_id(db, comment_id)
    if comment is None:
        logger.info(f"Comment not found: id={comment_id}")
        raise CommentNotFound()
    return comment
