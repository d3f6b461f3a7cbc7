"""
Tests for POST /projects.
"""
from uuid import UUID

from app.models.project import Project

from tests.fixtures.studio_fixtures import COMPLETE_BRIEF


class TestCreateProject:
    def test_creates_project_owned_by_caller(self, member_client, member, db):
        response = member_client.post(
            "/projects",
            json={"title": "Ransomware paper", "assetType": "White Paper", "brief": COMPLETE_BRIEF},
        )

        assert response.status_code == 200
        project = db.get(Project, UUID(response.json()["id"]))
        assert project.user_id == member.id
        assert project.title == "Ransomware paper"
        assert project.asset_type == "White Paper"
        assert project.brief == COMPLETE_BRIEF

    def test_blank_title_and_missing_brief_get_defaults(self, member_client, db):
        response = member_client.post("/projects", json={"title": "  ", "assetType": "Comparison Guide"})

        project = db.get(Project, UUID(response.json()["id"]))
        assert project.title == "Untitled"
        assert project.brief == {}

    def test_owner_taken_from_session_not_payload(self, member_client, member, admin, db):
        response = member_client.post(
            "/projects",
            json={"title": "t", "assetType": "White Paper", "brief": {}, "userId": str(admin.id)},
        )

        project = db.get(Project, UUID(response.json()["id"]))
        assert project.user_id == member.id

    def test_unknown_asset_type_rejected(self, member_client, db):
        response = member_client.post("/projects", json={"title": "t", "assetType": "Podcast"})

        assert response.status_code == 400
        assert db.query(Project).count() == 0
