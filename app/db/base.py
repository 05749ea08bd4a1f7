# app/db/base.py
import uuid
from datetime import datetime, timezone

from app.db.session import Base  # noqa: F401


def new_id() -> str:
    """Opaque, globally unique primary key."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
