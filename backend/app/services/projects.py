from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ..core.errors import ValidationFailed
from ..models.project import Project
from ..models.user import User
from ..schemas.brief import AssetType
from ..schemas.studio import ProjectCreate

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_TITLE = "Untitled"


def create_project(db: Session, owner: User, payload: ProjectCreate) -> Project:
    """
    Save a brief as a project owned by ``owner``. The brief is stored as an
    opaque JSON payload.
    """
    try:
        asset_type = AssetType.parse(payload.asset_type or "").value
    except ValueError as e:
        raise ValidationFailed(str(e), field="assetType") from None

    title = (payload.title or "").strip() or DEFAULT_PROJECT_TITLE

    project = Project(
        user_id=owner.id,
        title=title,
        asset_type=asset_type,
        brief=payload.brief or {},
    )
    db.add(project)
    db.commit()
    db.refresh(project)

    logger.info(
        "Project created",
        extra={
            "project_id": str(project.id),
            "user_id": str(owner.id),
            "asset_type": asset_type,
            "step": "create_project",
        },
    )
    return project
