# app/models/comment.py
from sqlalchemy import Column, String, ForeignKey, DateTime, Text
from sqlalchemy.orm import relationship

from app.db.base import Base, new_id, utc_now


class Comment(Base):
    """A reply on a discussion. Its team is the discussion's team."""
    __tablename__ = "comments"

    id = Column(String(36), primary_key=True, default=new_id)
    body = Column(Text, nullable=False)
    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    discussion_id = Column(String(36), ForeignKey("discussions.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    author = relationship("User", back_populates="comments")
    discussion = relationship("Discussion", back_populates="comments")
