# app/models/discussion.py
from sqlalchemy import Column, String, ForeignKey, DateTime, Text
from sqlalchemy.orm import relationship

from app.db.base import Base, new_id, utc_now


class Discussion(Base):
    __tablename__ = "discussions"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    body = Column(Text, nullable=False)
    # author_id and team_id are fixed at creation
    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    team_id = Column(String(36), ForeignKey("teams.id"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    author = relationship("User", back_populates="discussions")
    team = relationship("Team", back_populates="discussions")
    comments = relationship("Comment", back_populates="discussion", cascade="all, delete-orphan")
