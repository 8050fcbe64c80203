from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.health import router as health_router
from catalog.api.routes_admin import router as admin_router
from catalog.api.routes_catalog import router as catalog_router
from catalog.config import settings
from catalog.db import init_db
from catalog.utils.logs import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    log = configure_logging(settings.LOG_LEVEL)
    log.info("Starting with %s repository backend", settings.REPOSITORY_BACKEND)
    if settings.REPOSITORY_BACKEND == "sql":
        init_db(reset=settings.RESET_DB, seed=settings.SEED_DEMO_DATA)
    yield


app = FastAPI(title="Product Catalog - Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(catalog_router, prefix="/api/catalog", tags=["catalog"])

app.include_router(admin_router, tags=["admin"])


def run():
    uvicorn.run("catalog.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
