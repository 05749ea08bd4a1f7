# app/api/endpoints/discussions.py
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, joinedload

from app.core.logging import logger
from app.core.permissions import AuthContext, ensure_can_manage_discussion, ensure_discussion_visible
from app.db.session import get_db
from app.middleware.auth import get_current_user, require_admin
from app.models.discussion import Discussion
from app.schemas.base import MessageResponse
from app.schemas.discussion import (
    Discussion as DiscussionSchema,
    DiscussionEnvelope,
    DiscussionIn,
    DiscussionList,
)
from app.services.pagination import SORT_DESC, apply_search, order_by_column, paginate_page

router = APIRouter()

SORT_COLUMNS = {
    "title": Discussion.title,
    "createdAt": Discussion.created_at,
}


def get_discussion_row(db: Session, discussion_id: str) -> Optional[Discussion]:
    return (
        db.query(Discussion)
        .options(joinedload(Discussion.author))
        .filter(Discussion.id == discussion_id)
        .first()
    )


@router.get("", response_model=DiscussionList)
def get_discussions(
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
    page: int = Query(1, ge=1),
    search: Optional[str] = None,
    sort_by: Literal["title", "createdAt"] = Query("createdAt", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(SORT_DESC, alias="sortOrder"),
):
    """
    List the discussions of the caller's team, 10 per page
    """
    query = (
        db.query(Discussion)
        .options(joinedload(Discussion.author))
        .filter(Discussion.team_id == current_user.team_id)
    )
    query = apply_search(query, search, Discussion.title, Discussion.body)
    query = query.order_by(order_by_column(SORT_COLUMNS[sort_by], sort_order))

    discussions, meta = paginate_page(query, page)
    return {"data": discussions, "meta": meta}


@router.get("/{discussion_id}", response_model=DiscussionEnvelope)
def get_discussion(
    discussion_id: str,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
):
    """
    Get a single discussion of the caller's team
    """
    discussion = ensure_discussion_visible(current_user, get_discussion_row(db, discussion_id))
    return {"data": discussion}


@router.post("", response_model=DiscussionSchema, status_code=status.HTTP_201_CREATED)
def create_discussion(
    discussion_in: DiscussionIn,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(require_admin),
):
    """
    Start a discussion in the caller's team (admin only)
    """
    discussion = Discussion(
        title=discussion_in.title,
        body=discussion_in.body,
        author_id=current_user.id,
        team_id=current_user.team_id,
    )
    db.add(discussion)
    db.commit()
    db.refresh(discussion)

    logger.info(f"Admin {current_user.id} created discussion {discussion.id}")
    return discussion


@router.patch("/{discussion_id}", response_model=DiscussionSchema)
def update_discussion(
    discussion_id: str,
    discussion_in: DiscussionIn,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(require_admin),
):
    """
    Edit a discussion of the caller's team (admin only)
    """
    discussion = ensure_can_manage_discussion(current_user, get_discussion_row(db, discussion_id))

    discussion.title = discussion_in.title
    discussion.body = discussion_in.body
    db.commit()
    db.refresh(discussion)
    return discussion


@router.delete("/{discussion_id}", response_model=MessageResponse)
def delete_discussion(
    discussion_id: str,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(require_admin),
):
    """
    Delete a discussion and its comments (admin only)
    """
    discussion = ensure_can_manage_discussion(current_user, get_discussion_row(db, discussion_id))

    db.delete(discussion)
    db.commit()

    logger.info(f"Admin {current_user.id} deleted discussion {discussion_id}")
    return {"message": "Discussion deleted successfully"}
