from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from liquor_cabinet.core.config import settings
from liquor_cabinet.core.database import engine, Base
from liquor_cabinet.middleware.error_handler import register_exception_handlers
from liquor_cabinet.middleware.logging import configure_logging
from liquor_cabinet.services.ai_client import CompletionClient
from liquor_cabinet.services.cocktail_image_client import CocktailImageClient
from liquor_cabinet import models  # noqa: F401  (tables enregistrées sur Base)

from liquor_cabinet.api.v1 import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Starting Liquor Cabinet API...")

    Base.metadata.create_all(bind=engine)

    app.state.completion_client = CompletionClient.from_settings(settings)
    app.state.cocktail_image_client = CocktailImageClient.from_settings(settings)

    yield

    logger.info("Shutting down...")
    await app.state.cocktail_image_client.close()


app = FastAPI(title=settings.APP_NAME, version=settings.VERSION, lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    return {"message": settings.APP_NAME, "version": settings.VERSION, "docs": "/docs"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
