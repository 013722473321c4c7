from fastapi import APIRouter
from .routes import drivers_routes

api_router = APIRouter()

api_router.include_router(drivers_routes.router, prefix="/driver", tags=["Drivers"])
