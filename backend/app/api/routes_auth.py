from fastapi import APIRouter, Request

from .deps import SessionDep
from ..core.errors import ConfigurationError
from ..schemas.studio import DevLoginRequest
from ..services.identity import sign_in, sign_out

router = APIRouter(tags=["auth"])

# Only mounted when ENV == "local"
dev_router = APIRouter(tags=["auth"])


@router.post("/auth/signout")
def signout(request: Request):
    if "session" in request.scope:
        sign_out(request.session)
    return {"ok": True}


@dev_router.post("/auth/dev-login")
def dev_login(payload: DevLoginRequest, request: Request, db: SessionDep):
    """
    Local stand-in for the identity provider callback: trusts the given
    email, records the user on first sign-in and opens a session.
    """
    if "session" not in request.scope:
        raise ConfigurationError("Missing AUTH_SECRET")
    user = sign_in(db, request.session, payload.email)
    return {"email": user.email, "isAdmin": user.is_admin}
