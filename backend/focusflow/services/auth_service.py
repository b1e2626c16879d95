import logging
import os
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from sqlalchemy.orm import Session
from ..db import models
from ..repositories.record_repository import RecordRepository, SqlAlchemyRecordRepository

logger = logging.getLogger(__name__)

SECRET_KEY = os.getenv("AUTH_SECRET_KEY", "dev-secret-change-me")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60


def create_access_token(sub: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": sub, "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_subject(token: str) -> Optional[str]:
    """User id carried by a bearer token, or None when invalid/expired."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub") or None


class AuthService:
    def __init__(self, db: Session, repo: RecordRepository | None = None):
        self.db = db
        self.repo = repo or SqlAlchemyRecordRepository(models.User, "USER", "User")

    def register(self, email: str, user_id: Optional[str] = None) -> models.User:
        """Insert a user; a duplicate email raises ConflictError."""
        user = self.repo.insert(self.db, id=user_id or str(uuid.uuid4()), email=email)
        logger.info("registered user %s", user.id)
        return user

    def register_if_absent(self, email: str) -> models.User:
        user = self.repo.find_one(self.db, email=email)
        if user:
            return user
        return self.register(email)
