# app/api/endpoints/teams.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.team import Team
from app.schemas.team import TeamList

router = APIRouter()


@router.get("", response_model=TeamList)
def get_teams(db: Session = Depends(get_db)):
    """
    List all teams. Public, so the registration form can offer teams to join.
    """
    return {"data": db.query(Team).order_by(Team.name.asc()).all()}
