"""
Tests for POST /generate - system instruction fallback, verbatim output and
error surfacing.
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.errors import UpstreamError
from app.main import create_app
from app.services.llm import DEFAULT_SYSTEM_PROMPT, GenerationGateway, resolve_system_prompt

from tests.fixtures.studio_fixtures import login


class TestGenerateEndpoint:
    def test_returns_model_text_verbatim(self, member_client, llm_client):
        response = member_client.post("/generate", json={"prompt": "Create a White Paper."})

        assert response.status_code == 200
        assert response.json() == {"text": "# Draft\n\nGenerated body."}

    def test_default_system_instruction_and_single_user_message(self, member_client, llm_client):
        member_client.post("/generate", json={"prompt": "Create a White Paper."})

        kwargs = llm_client.responses.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["input"] == [
            {"role": "system", "content": DEFAULT_SYSTEM_PROMPT},
            {"role": "user", "content": "Create a White Paper."},
        ]

    def test_template_override_is_trimmed(self, member_client, llm_client):
        member_client.post(
            "/generate",
            json={"prompt": "p", "templateSystemPrompt": "  Write for hospital CIOs.  "},
        )

        system = llm_client.responses.create.call_args.kwargs["input"][0]
        assert system == {"role": "system", "content": "Write for hospital CIOs."}

    def test_blank_override_falls_back_to_default(self, member_client, llm_client):
        member_client.post("/generate", json={"prompt": "p", "templateSystemPrompt": "   "})

        system = llm_client.responses.create.call_args.kwargs["input"][0]
        assert system["content"] == DEFAULT_SYSTEM_PROMPT

    def test_missing_output_text_returns_empty_string(self, member_client, llm_client):
        llm_client.responses.create.return_value = SimpleNamespace(output_text=None, usage=None)

        response = member_client.post("/generate", json={"prompt": "p"})

        assert response.json() == {"text": ""}

    def test_upstream_failure_message_passed_through(self, member_client, llm_client):
        llm_client.responses.create.side_effect = RuntimeError("Rate limit reached for gpt-5")

        response = member_client.post("/generate", json={"prompt": "p"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Rate limit reached for gpt-5"
        # no retry
        assert llm_client.responses.create.call_count == 1

    def test_optional_fields_accepted(self, member_client, llm_client):
        response = member_client.post(
            "/generate",
            json={
                "prompt": "p",
                "projectId": "6f1c2f0e-4f63-4bd4-9e8a-5a1d1f4f3c21",
                "instruction": "Shorten by about 35% while keeping structure and CTA.",
                "templateSystemPrompt": None,
            },
        )
        assert response.status_code == 200

    def test_missing_api_key_is_configuration_error(self, session_factory, member):
        settings = Settings(ENV="local", AUTH_SECRET="test-secret", OPENAI_API_KEY=None)
        client = TestClient(
            create_app(settings, session_factory=session_factory, llm_client=MagicMock()),
            base_url="http://testserver/api",
        )
        login(client, member.email)

        response = client.post("/generate", json={"prompt": "p"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Missing OPENAI_API_KEY"


class TestGenerationGateway:
    def test_resolve_system_prompt(self):
        assert resolve_system_prompt(None) == DEFAULT_SYSTEM_PROMPT
        assert resolve_system_prompt("") == DEFAULT_SYSTEM_PROMPT
        assert resolve_system_prompt(" custom ") == "custom"

    def test_upstream_error_wraps_exception(self):
        client = MagicMock()
        client.responses.create.side_effect = TimeoutError("Request timed out.")
        gateway = GenerationGateway(client, "gpt-test")

        with pytest.raises(UpstreamError, match="Request timed out."):
            gateway.generate("p")
