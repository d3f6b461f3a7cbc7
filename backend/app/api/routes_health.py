from fastapi import APIRouter, Request

from ..core.config import env_presence

router = APIRouter(tags=["health"])


@router.get("/health-env")
def health_env(request: Request):
    """
    Report which required configuration variables are set (never their values).
    """
    return {"ok": True, **env_presence(request.app.state.settings)}
