from datetime import datetime, UTC
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from blog_api.db.database import Base

class Tag(Base):
    """Tag model"""
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True)  # tag name must be unique
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(UTC))
    post_count: Mapped[int] = mapped_column(Integer, default=0)  # maintained by store triggers on post_tags
