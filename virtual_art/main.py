# virtual_art/main.py
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import uvicorn

from virtual_art.data.database import Base, engine, SessionLocal
from virtual_art.api.errors import register_error_handlers
from virtual_art.api.routers import (
    auth,
    profiles,
    artist_profiles,
    artworks,
    orders,
    reviews,
    wishlist,
    address,
    admin,
    health,
)
from virtual_art.services.user_service import UserService
from virtual_art.utils.settings import UPLOAD_DIR, DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD
from virtual_art.utils.logging import get_logger

# IMPORT WSZYSTKICH MODELI PRZED CREATE_ALL
import virtual_art.data.models  # noqa: F401

logger = get_logger(__name__)


def init_database():
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise

    db = SessionLocal()
    try:
        UserService(db).ensure_default_admin(DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_database()
    yield


def create_app(with_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        title="Virtual Art API",
        version="1.0.0",
        lifespan=lifespan if with_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    api = APIRouter(prefix="/api")
    api.include_router(health.router)
    api.include_router(auth.router)
    api.include_router(profiles.router)
    api.include_router(artist_profiles.router)
    api.include_router(artworks.router)
    api.include_router(orders.router)
    api.include_router(reviews.router)
    api.include_router(wishlist.router)
    api.include_router(address.router)
    api.include_router(admin.router)
    app.include_router(api)

    os.makedirs(UPLOAD_DIR, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=UPLOAD_DIR), name="uploads")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
