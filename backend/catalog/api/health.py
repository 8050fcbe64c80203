from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog.config import settings
from catalog.db import engine

router = APIRouter()


@router.get("/health", tags=["health"])
def health():
    # the in-memory backend has no database to check
    if settings.REPOSITORY_BACKEND == "memory":
        return {"status": "ok", "repository": "memory", "db": None}

    db_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except SQLAlchemyError:
        db_ok = False

    return {
        "status": "ok" if db_ok else "degraded",
        "repository": settings.REPOSITORY_BACKEND,
        "db": db_ok,
    }
