from uuid import uuid4
import logging

from fastapi import APIRouter

from .deps import CurrentUser, GatewayDep, SessionDep
from ..schemas.studio import GenerateOut, GenerateRequest, ProjectCreate
from ..schemas.templates import CreatedOut
from ..services.projects import create_project

router = APIRouter(tags=["studio"])
logger = logging.getLogger(__name__)


@router.post("/generate", response_model=GenerateOut)
def generate_draft(
    user: CurrentUser,
    gateway: GatewayDep,
    payload: GenerateRequest,
):
    # Correlation ID so a failed call can be matched to the server log
    request_id = str(uuid4())

    logger.info(
        "Generating draft",
        extra={
            "request_id": request_id,
            "user_id": str(user.id),
            "project_id": str(payload.project_id) if payload.project_id else None,
            "step": "refine" if payload.instruction else "generate",
        },
    )

    text = gateway.generate(payload.prompt, system_prompt=payload.template_system_prompt)
    return GenerateOut(text=text)


@router.post("/projects", response_model=CreatedOut)
def create_new_project(
    user: CurrentUser,
    db: SessionDep,
    payload: ProjectCreate,
):
    project = create_project(db, user, payload)
    return CreatedOut(id=project.id)
