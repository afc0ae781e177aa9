# backend/blogful/users/models.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    user_name = Column(String(50), unique=True, index=True, nullable=False)
    full_name = Column(String(100), nullable=False)
    nickname = Column(String(50))
    password = Column(String(255), nullable=False)  # bcrypt 해시
    date_created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    date_modified = Column(DateTime(timezone=True))

    articles = relationship("Article", back_populates="author")
    comments = relationship("Comment", back_populates="author", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"User(id={self.id}, user_name={self.user_name!r}, full_name={self.full_name!r})"
    def __str__(self) -> str:
        return f"{self.full_name} ({self.user_name})"
