from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from datetime import datetime, timezone
import logging

from src.db.common.database_connection import get_db

logger = logging.getLogger(__name__)

router = APIRouter()

# Health check
@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint, kiểm tra luôn kết nối database"""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        raise HTTPException(status_code=503, detail="Database connection failed")
    return {
        "status": "healthy",
        "database": "connected",
        "timestamp": datetime.now(timezone.utc)
    }
