from datetime import datetime, UTC
from enum import Enum as PyEnum
from sqlalchemy import DateTime, Enum, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column
from blog_api.db.database import Base

class PostState(str, PyEnum):
    """Post state"""
    PUBLISHED = "published"  # visible through the public API
    DRAFT = "draft"          # only visible to the admin service

class Post(Base):
    """Post model

    Rows are written by the admin service; this service only reads them
    and increments ``views``, which leaves ``updated_at`` untouched.
    """
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[str] = mapped_column(String(500), nullable=True)
    state: Mapped[PostState] = mapped_column(
        Enum(PostState, values_callable=lambda states: [s.value for s in states], native_enum=False),
        nullable=False,
        default=PostState.DRAFT
    )
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC), server_default=func.now()
    )

    __table_args__ = (
        Index("idx_posts_state_created_at", "state", "created_at"),
    )
