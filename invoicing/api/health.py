# invoicing/api/health.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter(prefix="/health", tags=["health"])

logger = logging.getLogger(__name__)


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


@router.get("")
def health_check(request: Request):
    return {
        "status": "ok",
        "environment": request.app.state.settings.NODE_ENV,
    }


@router.get("/db")
def database_health(engine: Engine = Depends(get_engine)):
    """
    Round-trip a trivial query through the shared engine.
    """
    try:
        with engine.connect() as conn:
            conn.execute(select(1)).scalar_one()
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        raise HTTPException(status_code=503, detail="Database unavailable")

    return {"status": "ok", "database": "reachable"}
