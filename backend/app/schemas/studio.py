# backend/app/schemas/studio.py
from typing import Any
from uuid import UUID

from pydantic import Field

from .templates import CamelModel


class GenerateRequest(CamelModel):
    prompt: str
    project_id: UUID | None = None
    # Carried for logging only; the prompt already embeds it
    instruction: str | None = None
    template_system_prompt: str | None = None


class GenerateOut(CamelModel):
    text: str


class ProjectCreate(CamelModel):
    title: str | None = None
    asset_type: str | None = None
    brief: dict[str, Any] | None = Field(default=None)


class DevLoginRequest(CamelModel):
    email: str
