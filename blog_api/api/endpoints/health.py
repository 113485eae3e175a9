import logging
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from blog_api.db.database import get_session
from blog_api.schemas.response import success_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", summary="Health check")
def health(session: Session = Depends(get_session)):
    """Health check endpoint - returns service and database status"""
    try:
        session.execute(text("SELECT 1"))
        db_connected = True
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        db_connected = False

    return success_response({
        "status": "ok" if db_connected else "degraded",
        "database": "connected" if db_connected else "disconnected",
    })
