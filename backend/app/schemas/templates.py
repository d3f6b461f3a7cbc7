# backend/app/schemas/templates.py
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class TemplateCreate(CamelModel):
    # Optional at the schema level so blank/missing fields are reported
    # by the repository as a 400 naming the field
    name: str | None = None
    asset_type: str | None = None
    system_prompt: str | None = None
    is_active: bool | None = None


class TemplateUpdate(CamelModel):
    name: str | None = None
    asset_type: str | None = None
    system_prompt: str | None = None
    is_active: bool | None = None


class TemplateOut(CamelModel):
    id: UUID
    name: str
    asset_type: str
    system_prompt: str
    is_active: bool
    updated_at: datetime


class TemplateList(CamelModel):
    templates: list[TemplateOut]
    is_admin: bool


class CreatedOut(CamelModel):
    id: UUID
