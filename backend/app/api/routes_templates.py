from fastapi import APIRouter, Query

from .deps import AdminUser, CurrentUser, SessionDep
from ..schemas.templates import (
    CreatedOut,
    TemplateCreate,
    TemplateList,
    TemplateOut,
    TemplateUpdate,
)
from ..services import templates as template_repo

router = APIRouter(tags=["templates"])


@router.get("/templates", response_model=TemplateList)
def list_templates(
    user: CurrentUser,
    db: SessionDep,
    asset_type: str | None = Query(default=None, alias="assetType"),
):
    """
    Templates visible to the caller, plus whether the caller may manage them.
    """
    rows = template_repo.list_templates(db, user, asset_type=asset_type)
    return TemplateList(
        templates=[TemplateOut.model_validate(row) for row in rows],
        is_admin=user.is_admin,
    )


@router.post("/templates", response_model=CreatedOut)
def create_template(
    _: AdminUser,
    db: SessionDep,
    payload: TemplateCreate,
):
    template = template_repo.create_template(db, payload)
    return CreatedOut(id=template.id)


@router.patch("/templates/{template_id}", response_model=TemplateOut)
def update_template(
    _: AdminUser,
    db: SessionDep,
    template_id: str,
    payload: TemplateUpdate,
):
    template = template_repo.update_template(db, template_id, payload)
    return TemplateOut.model_validate(template)
