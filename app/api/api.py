# app/api/api.py
from fastapi import APIRouter

from app.api.endpoints.auth import router as auth_router
from app.api.endpoints.teams import router as teams_router
from app.api.endpoints.users import router as users_router
from app.api.endpoints.discussions import router as discussions_router
from app.api.endpoints.comments import router as comments_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(teams_router, prefix="/teams", tags=["teams"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(discussions_router, prefix="/discussions", tags=["discussions"])
api_router.include_router(comments_router, prefix="/comments", tags=["comments"])
