# app/api/endpoints/comments.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import ValidationError
from app.core.logging import logger
from app.core.permissions import AuthContext, ensure_can_delete_comment, ensure_discussion_visible
from app.db.session import get_db
from app.middleware.auth import get_current_user
from app.models.comment import Comment
from app.models.discussion import Discussion
from app.schemas.base import MessageResponse
from app.schemas.comment import Comment as CommentSchema, CommentCreate, CommentList
from app.services.pagination import paginate_page

router = APIRouter()


@router.get("", response_model=CommentList)
def get_comments(
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
    discussion_id: Optional[str] = Query(None, alias="discussionId"),
    page: int = Query(1, ge=1),
):
    """
    List the comments of a discussion, oldest first, 10 per page
    """
    if not discussion_id:
        raise ValidationError("Discussion ID is required")

    discussion = db.query(Discussion).filter(Discussion.id == discussion_id).first()
    ensure_discussion_visible(current_user, discussion)

    query = (
        db.query(Comment)
        .options(joinedload(Comment.author))
        .filter(Comment.discussion_id == discussion_id)
        .order_by(Comment.created_at.asc())
    )
    comments, meta = paginate_page(query, page)
    return {"data": comments, "meta": meta}


@router.post("", response_model=CommentSchema, status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_in: CommentCreate,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
):
    """
    Comment on a discussion of the caller's team
    """
    discussion = db.query(Discussion).filter(Discussion.id == comment_in.discussion_id).first()
    ensure_discussion_visible(current_user, discussion)

    comment = Comment(
        body=comment_in.body,
        discussion_id=discussion.id,
        author_id=current_user.id,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


@router.delete("/{comment_id}", response_model=MessageResponse)
def delete_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
):
    """
    Delete a comment. Authors can delete their own comments, admins any comment of their team.
    """
    comment = (
        db.query(Comment)
        .options(joinedload(Comment.discussion))
        .filter(Comment.id == comment_id)
        .first()
    )
    comment = ensure_can_delete_comment(current_user, comment)

    db.delete(comment)
    db.commit()

    logger.info(f"User {current_user.id} deleted comment {comment_id}")
    return {"message": "Comment deleted successfully"}
