"""
Studio orchestration: the working state behind the content studio view.

``StudioSession`` holds the brief, the selected template and the current
draft, and drives generation through a ``StudioApiClient``. Status moves
idle -> generating -> done, and "done" falls back to idle once its display
window has passed.
"""
from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable
from uuid import UUID

import httpx

from ..schemas.brief import AssetType, Brief
from .prompt_composer import compose_prompt, refinement_instruction

logger = logging.getLogger(__name__)

DONE_DISPLAY_SECONDS = 1.2


class StudioStatus(str, enum.Enum):
    IDLE = "idle"
    GENERATING = "generating"
    DONE = "done"


class StudioApiError(RuntimeError):
    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(message)


class StudioStateError(RuntimeError):
    """Action not allowed in the studio's current state."""


class StudioApiClient:
    """
    Thin client over the studio HTTP API. Accepts any ``httpx.Client``
    whose base URL points at the API prefix (e.g. ``https://host/api``).
    """

    def __init__(self, http: httpx.Client) -> None:
        self.http = http

    def _check(self, response: httpx.Response) -> Any:
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = (body.get("detail") if isinstance(body, dict) else None) or response.text
            raise StudioApiError(response.status_code, message or "Error")
        return response.json()

    def list_templates(self, asset_type: AssetType | None = None) -> dict[str, Any]:
        params = {"assetType": asset_type.value} if asset_type else None
        return self._check(self.http.get("/templates", params=params))

    def generate(
        self,
        prompt: str,
        *,
        instruction: str | None = None,
        template_system_prompt: str | None = None,
        project_id: UUID | str | None = None,
    ) -> str:
        body: dict[str, Any] = {
            "prompt": prompt,
            "instruction": instruction,
            "templateSystemPrompt": template_system_prompt,
        }
        if project_id:
            body["projectId"] = str(project_id)
        data = self._check(self.http.post("/generate", json=body))
        return data.get("text") or ""

    def create_project(self, title: str, asset_type: AssetType, brief: Brief) -> str:
        body = {"title": title, "assetType": asset_type.value, "brief": brief.model_dump()}
        return self._check(self.http.post("/projects", json=body))["id"]

    def create_template(
        self,
        name: str,
        asset_type: AssetType | str,
        system_prompt: str,
        *,
        is_active: bool = True,
    ) -> str:
        body = {
            "name": name,
            "assetType": asset_type.value if isinstance(asset_type, AssetType) else asset_type,
            "systemPrompt": system_prompt,
            "isActive": is_active,
        }
        return self._check(self.http.post("/templates", json=body))["id"]

    def update_template(self, template_id: UUID | str, **fields: Any) -> dict[str, Any]:
        """
        Partial update; keyword names are the wire names
        (``name``, ``assetType``, ``systemPrompt``, ``isActive``).
        """
        return self._check(self.http.patch(f"/templates/{template_id}", json=fields))

    def toggle_active(self, template: dict[str, Any]) -> dict[str, Any]:
        return self.update_template(template["id"], isActive=not template["isActive"])

    def edit_system_prompt(self, template: dict[str, Any], system_prompt: str) -> dict[str, Any]:
        return self.update_template(template["id"], systemPrompt=system_prompt)


@dataclass
class StudioSession:
    api: StudioApiClient
    title: str = "New Project"
    asset_type: AssetType = AssetType.WHITE_PAPER
    brief: Brief = field(default_factory=Brief)
    draft: str = ""
    templates: list[dict[str, Any]] = field(default_factory=list)
    template_id: str = ""
    template_prompt: str = ""
    project_id: str | None = None
    clock: Callable[[], float] = time.monotonic
    _status: StudioStatus = field(default=StudioStatus.IDLE, init=False)
    _done_until: float = field(default=0.0, init=False)

    @property
    def status(self) -> StudioStatus:
        if self._status == StudioStatus.DONE and self.clock() >= self._done_until:
            self._status = StudioStatus.IDLE
        return self._status

    @property
    def can_generate(self) -> bool:
        return self.brief.is_complete and self.status != StudioStatus.GENERATING

    @property
    def can_refine(self) -> bool:
        return bool(self.draft) and self.status != StudioStatus.GENERATING

    def load_templates(self) -> None:
        self.templates = self.api.list_templates().get("templates") or []

    def available_templates(self) -> list[dict[str, Any]]:
        return [
            t for t in self.templates
            if t.get("isActive") and t.get("assetType") == self.asset_type.value
        ]

    def set_asset_type(self, asset_type: AssetType | str) -> None:
        self.asset_type = AssetType.parse(asset_type)
        # template choice is per asset type
        self.template_id = ""
        self.template_prompt = ""

    def select_template(self, template_id: str) -> None:
        """Pick a template by id; an empty or unknown id means the default instruction."""
        match = next((t for t in self.available_templates() if str(t.get("id")) == template_id), None)
        self.template_id = template_id if match else ""
        self.template_prompt = (match or {}).get("systemPrompt") or ""

    def build_prompt(self, instruction: str | None = None) -> str:
        return compose_prompt(
            self.asset_type,
            self.brief,
            prior_draft=self.draft or None,
            revision_instruction=instruction,
        )

    def generate(self, instruction: str | None = None) -> str:
        if self.status == StudioStatus.GENERATING:
            raise StudioStateError("A generation is already in progress")
        if instruction is None and not self.brief.is_complete:
            missing = ", ".join(self.brief.missing_fields())
            raise StudioStateError(f"Brief is incomplete: {missing}")

        self._status = StudioStatus.GENERATING
        try:
            text = self.api.generate(
                self.build_prompt(instruction),
                instruction=instruction,
                template_system_prompt=self.template_prompt or None,
                project_id=self.project_id,
            )
        except Exception:
            # any failure, transport errors included, ends the in-flight state
            self._status = StudioStatus.IDLE
            raise

        self.draft = text
        self._status = StudioStatus.DONE
        self._done_until = self.clock() + DONE_DISPLAY_SECONDS
        return text

    def refine(self, action: str) -> str:
        """Apply one of the canned quick refinements to the current draft."""
        if not self.can_refine:
            raise StudioStateError("Generate a draft before refining it")
        return self.generate(refinement_instruction(action))

    def save_project(self) -> str:
        self.project_id = self.api.create_project(self.title, self.asset_type, self.brief)
        logger.info("Project saved", extra={"project_id": self.project_id, "step": "save_project"})
        return self.project_id
