#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

import uuid
from typing import Generator, Optional

from fastapi import Header, HTTPException
from sqlalchemy.orm import Session

from database.database import get_db_manager


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.
    
    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    
    Yields:
        Session: Database session that will be automatically closed.
    """
    db = get_db_manager().get_session()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> uuid.UUID:
    """
    Identify the acting user from the X-User-Id header.

    Authentication happens upstream; this only parses the identifier.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    try:
        return uuid.UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=401,
            detail=f"Invalid X-User-Id header: {x_user_id}. Must be a valid UUID."
        )
