from fastapi import APIRouter

from src.tracker.api.routes import auth, health, projects, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(projects.router)
