from sqlalchemy import Column, String, DateTime, ForeignKey, JSON, Uuid
import uuid
from ..core.db import Base
from .user import utcnow

class Project(Base):
    __tablename__ = "projects"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    asset_type = Column(String(64), nullable=False)
    brief = Column(JSON, nullable=False)  # opaque brief payload as sent by the studio
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
