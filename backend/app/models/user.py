from sqlalchemy import Column, String, DateTime, Uuid
from datetime import datetime, timezone
import uuid
from ..core.db import Base

ROLE_ADMIN = "admin"
ROLE_USER = "user"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, index=True, nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER)  # 'admin' | 'user'
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
