# app/schemas/base.py
from datetime import datetime
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration: read from ORM objects, camelCase on the wire"""
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class RequestSchema(BaseModel):
    """Base for request bodies: camelCase fields, unknown fields rejected, strings kept verbatim"""
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"


class TimestampMixin(BaseModel):
    """Timestamp fields for database models"""
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str


class PageMeta(BaseSchema):
    page: int
    total: int
    total_pages: int


class OffsetMeta(BaseSchema):
    total: int
    limit: int
    offset: int
    has_more: bool
