"""
Builders shared by the API and studio tests.
"""
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from app.models.template import Template
from app.models.user import User

ADMIN_EMAIL = "admin@example.com"
MEMBER_EMAIL = "writer@example.com"

COMPLETE_BRIEF = {
    "audience": "IT Director / Infrastructure Lead",
    "industry": "Healthcare",
    "solution": "Enterprise Backup & Recovery / Ransomware Resilience",
    "differentiators": "Immutable backups, fast restores, air-gapped copies",
    "competitors": "",
    "tone": "Confident, consultative, minimal hype",
    "cta": "Book a 15-minute consult",
    "notes": "",
}


def make_user(db, email: str, role: str) -> User:
    user = User(email=email, role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_template(
    db,
    name: str,
    *,
    asset_type: str = "White Paper",
    system_prompt: str = "You write crisp B2B copy.",
    is_active: bool = True,
    age_minutes: int = 0,
) -> Template:
    stamp = datetime.now(timezone.utc) - timedelta(minutes=age_minutes)
    template = Template(
        name=name,
        asset_type=asset_type,
        system_prompt=system_prompt,
        is_active=is_active,
        created_at=stamp,
        updated_at=stamp,
    )
    db.add(template)
    db.commit()
    db.refresh(template)
    return template


def login(client: TestClient, email: str) -> None:
    response = client.post("/auth/dev-login", json={"email": email})
    assert response.status_code == 200, response.text
