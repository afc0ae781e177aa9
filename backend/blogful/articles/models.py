# backend/blogful/articles/models.py
from enum import Enum as PyEnum
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base

class ArticleStyle(str, PyEnum):
    LISTICLE = "Listicle"
    HOW_TO = "How-to"
    NEWS = "News"
    INTERVIEW = "Interview"
    STORY = "Story"

class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text)
    # DB에는 Enum 값("How-to")을 그대로 저장
    style = Column(
        SQLEnum(ArticleStyle, name="article_style", values_callable=lambda e: [m.value for m in e]),
        default=ArticleStyle.LISTICLE,
        nullable=False,
    )
    author_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)
    date_published = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    author = relationship("User", back_populates="articles")
    comments = relationship(
        "Comment",
        back_populates="article",
        cascade="all, delete-orphan",
        order_by="Comment.id",
    )

    def __repr__(self) -> str:
        return f"Article(id={self.id}, title={self.title!r}, style={self.style!r})"
    def __str__(self) -> str:
        return self.title
