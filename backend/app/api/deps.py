"""
FastAPI dependencies: store sessions, the generation gateway, and the
authorization gate shared by every protected route.
"""
from typing import Annotated, Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ..core.errors import ConfigurationError, Forbidden, Unauthorized
from ..models.user import User
from ..services.identity import session_email
from ..services.llm import GenerationGateway


def get_db(request: Request) -> Iterator[Session]:
    factory = request.app.state.session_factory
    if factory is None:
        raise ConfigurationError("Missing DATABASE_URL")
    db = factory()
    try:
        yield db
    finally:
        db.close()


def get_session_email(request: Request) -> str:
    """
    Email stored in the signed session cookie. Raises Unauthorized without
    touching the store when there is no session.
    """
    if "session" not in request.scope:
        # SessionMiddleware is only installed when AUTH_SECRET is set
        raise ConfigurationError("Missing AUTH_SECRET")
    email = session_email(request.session)
    if not email:
        raise Unauthorized()
    return email


def resolve_user(
    email: Annotated[str, Depends(get_session_email)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        raise Unauthorized("User not found")
    return user


def require_admin(user: Annotated[User, Depends(resolve_user)]) -> User:
    if not user.is_admin:
        raise Forbidden()
    return user


def get_generation_gateway(request: Request) -> GenerationGateway:
    gateway = request.app.state.generation_gateway
    if gateway is None:
        raise ConfigurationError("Missing OPENAI_API_KEY")
    return gateway


CurrentUser = Annotated[User, Depends(resolve_user)]
AdminUser = Annotated[User, Depends(require_admin)]
SessionDep = Annotated[Session, Depends(get_db)]
GatewayDep = Annotated[GenerationGateway, Depends(get_generation_gateway)]
