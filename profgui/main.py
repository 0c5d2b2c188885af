# profgui/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from profgui import models  # noqa: F401 - register tables on Base.metadata
from profgui.api import admin, auth, reference, register, teachers
from profgui.config import settings
from profgui.database import Base, SessionLocal, engine
from profgui.logging_config import setup_logging
from profgui.services import auth_service

logger = logging.getLogger(__name__)

setup_logging()

# Create database tables (production schemas are managed by alembic)
Base.metadata.create_all(bind=engine)


def seed_first_admin() -> None:
    db = SessionLocal()
    try:
        auth_service.seed_admin(db)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_ADMIN_ON_STARTUP:
        seed_first_admin()
    yield


# Initialize FastAPI app
app = FastAPI(title="ProfGui API", lifespan=lifespan)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routers
app.include_router(register.router)   # /api/register/*
app.include_router(auth.router)       # /api/login, /api/logout, /api/user, ...
app.include_router(teachers.router)   # /api/teachers
app.include_router(reference.router)  # /api/reference
app.include_router(admin.router)      # /api/admin/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "ProfGui API is running",
        "version": "1.0.0",
    }
