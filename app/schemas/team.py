# app/schemas/team.py
from pydantic import BaseModel
from typing import Optional, List
from app.schemas.base import BaseSchema, TimestampMixin


class TeamBase(BaseModel):
    name: str
    description: Optional[str] = None


class Team(TeamBase, TimestampMixin, BaseSchema):
    id: str


class TeamList(BaseModel):
    data: List[Team]
