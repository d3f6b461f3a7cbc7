"""
Seam between the identity provider and this service.

The provider handshake itself lives outside this codebase; once it has
verified an email it calls ``sign_in`` which records the user (on first
sign-in) and stores the email in the signed session cookie.
"""
from __future__ import annotations

import logging
from typing import Any, MutableMapping

from sqlalchemy.orm import Session

from ..core.errors import ValidationFailed
from ..models.user import User, ROLE_USER

logger = logging.getLogger(__name__)

SESSION_EMAIL_KEY = "email"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_or_create_user(db: Session, email: str) -> User:
    email = normalize_email(email)
    if "@" not in email:
        raise ValidationFailed("Invalid email", field="email")

    user = db.query(User).filter(User.email == email).first()
    if user is not None:
        return user

    user = User(email=email, role=ROLE_USER)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(
        "User created on first sign-in",
        extra={"user_id": str(user.id), "step": "first_sign_in"},
    )
    return user


def sign_in(db: Session, session: MutableMapping[str, Any], email: str) -> User:
    user = get_or_create_user(db, email)
    session[SESSION_EMAIL_KEY] = user.email
    return user


def sign_out(session: MutableMapping[str, Any]) -> None:
    session.clear()


def session_email(session: MutableMapping[str, Any]) -> str | None:
    email = session.get(SESSION_EMAIL_KEY)
    return email if isinstance(email, str) and email else None
