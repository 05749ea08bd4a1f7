# app/schemas/discussion.py
from pydantic import BaseModel, Field
from typing import List
from app.schemas.base import BaseSchema, RequestSchema, TimestampMixin, PageMeta
from app.schemas.user import User


class DiscussionIn(RequestSchema):
    title: str = Field(min_length=1)
    body: str = Field(min_length=1)


class Discussion(TimestampMixin, BaseSchema):
    id: str
    title: str
    body: str
    author_id: str
    team_id: str
    author: User


class DiscussionList(BaseModel):
    data: List[Discussion]
    meta: PageMeta


class DiscussionEnvelope(BaseModel):
    data: Discussion
