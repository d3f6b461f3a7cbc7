"""
Template repository: listing, creation and partial update of system-prompt
presets. Callers are expected to have passed the authorization gate; the
functions here only apply role-based filtering and field validation.
"""
from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from ..core.errors import NotFound, ValidationFailed
from ..models.template import Template
from ..models.user import User
from ..schemas.brief import AssetType
from ..schemas.templates import TemplateCreate, TemplateUpdate

logger = logging.getLogger(__name__)

# Required text fields with their wire names, in validation order
TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "name"),
    ("asset_type", "assetType"),
    ("system_prompt", "systemPrompt"),
)


def _clean_text(value: Any, wire_name: str) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationFailed(f"Missing {wire_name}", field=wire_name)
    return text


def _clean_asset_type(value: str) -> str:
    try:
        return AssetType.parse(value).value
    except ValueError as e:
        raise ValidationFailed(str(e), field="assetType") from None


def list_templates(
    db: Session,
    user: User,
    asset_type: str | None = None,
) -> list[Template]:
    """
    Admins see every template; everyone else only active ones.
    Active rows first, then most recently updated first.
    """
    query = db.query(Template)
    if not user.is_admin:
        query = query.filter(Template.is_active.is_(True))
    if asset_type:
        query = query.filter(Template.asset_type == _clean_asset_type(asset_type))

    return query.order_by(Template.is_active.desc(), Template.updated_at.desc()).all()


def create_template(db: Session, payload: TemplateCreate) -> Template:
    values = {
        attr: _clean_text(getattr(payload, attr), wire_name)
        for attr, wire_name in TEXT_FIELDS
    }
    values["asset_type"] = _clean_asset_type(values["asset_type"])

    template = Template(
        **values,
        is_active=True if payload.is_active is None else payload.is_active,
    )
    db.add(template)
    db.commit()
    db.refresh(template)

    logger.info(
        "Template created",
        extra={
            "template_id": str(template.id),
            "asset_type": template.asset_type,
            "step": "create_template",
        },
    )
    return template


def update_template(db: Session, template_id: UUID | str, payload: TemplateUpdate) -> Template:
    """
    Partial update: only fields present in the request body are changed.
    Concurrent edits are last-write-wins.
    """
    changes = payload.model_dump(exclude_unset=True)

    updates: dict[str, Any] = {}
    for attr, wire_name in TEXT_FIELDS:
        if attr in changes:
            updates[attr] = _clean_text(changes[attr], wire_name)
    if "asset_type" in updates:
        updates["asset_type"] = _clean_asset_type(updates["asset_type"])
    if "is_active" in changes:
        if not isinstance(changes["is_active"], bool):
            raise ValidationFailed("isActive must be a boolean", field="isActive")
        updates["is_active"] = changes["is_active"]

    try:
        key = template_id if isinstance(template_id, UUID) else UUID(str(template_id))
    except ValueError:
        raise NotFound("Template not found") from None

    template = db.get(Template, key)
    if template is None:
        raise NotFound("Template not found")

    for attr, value in updates.items():
        setattr(template, attr, value)
    db.add(template)
    db.commit()
    db.refresh(template)

    logger.info(
        "Template updated",
        extra={
            "template_id": str(template.id),
            "step": "update_template",
            "fields": sorted(updates),
        },
    )
    return template
