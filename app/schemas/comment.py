# app/schemas/comment.py
from pydantic import BaseModel, Field
from typing import List
from app.schemas.base import BaseSchema, RequestSchema, TimestampMixin, PageMeta
from app.schemas.user import User


class CommentCreate(RequestSchema):
    body: str = Field(min_length=1)
    discussion_id: str = Field(min_length=1)


class Comment(TimestampMixin, BaseSchema):
    id: str
    body: str
    author_id: str
    discussion_id: str
    author: User


class CommentList(BaseModel):
    data: List[Comment]
    meta: PageMeta
