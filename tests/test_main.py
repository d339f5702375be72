"""Tests for the HTTP boundary."""

import asyncio
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import EMPTY_QUESTION_ERROR, MEMORY_ID, app, get_assistant
from app.mcp_server import mcp
from assistant.guardrail import InputGuardrailException


class TestAssistantAPI:

    @pytest.fixture
    def assistant(self):
        mock_assistant = MagicMock()
        mock_assistant.chat.return_value = "Gold Medallion needs 8,000 MQDs."
        return mock_assistant

    @pytest.fixture
    def client(self, assistant):
        app.dependency_overrides[get_assistant] = lambda: assistant
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_health_check_endpoint(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_form_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert '<form method="post" action="/">' in response.text
        assert "Conversation memory is active." in response.text

    def test_form_submission(self, client, assistant):
        response = client.post("/", data={"question": "How do I reach Gold?"})

        assert response.status_code == 200
        assert "Gold Medallion needs 8,000 MQDs." in response.text
        assistant.chat.assert_called_once_with(MEMORY_ID, "How do I reach Gold?")

    def test_blank_question_is_not_sent(self, client, assistant):
        response = client.post("/", data={"question": "   "})

        assert EMPTY_QUESTION_ERROR in response.text
        assistant.chat.assert_not_called()

    def test_answer_is_escaped(self, client, assistant):
        assistant.chat.return_value = "<script>alert(1)</script>"
        response = client.post("/", data={"question": "Delta?"})

        assert "<script>alert(1)</script>" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_guardrail_rejection_is_shown(self, client, assistant):
        assistant.chat.side_effect = InputGuardrailException("I can only help with loyalty questions.")
        response = client.post("/", data={"question": "Pizza?"})

        assert "I can only help with loyalty questions." in response.text

    def test_model_error_shows_apology(self, client, assistant):
        assistant.chat.side_effect = RuntimeError("boom")
        response = client.post("/", data={"question": "Delta?"})

        assert response.status_code == 200
        assert "Sorry, I encountered an error: boom. Please try again." in response.text

    def test_json_chat(self, client, assistant):
        response = client.post("/assistant/chat", json={"question": "Gold?", "memory_id": "alice"})

        assert response.json() == {"answer": "Gold Medallion needs 8,000 MQDs."}
        assistant.chat.assert_called_once_with("alice", "Gold?")

    def test_json_chat_defaults_memory_id(self, client, assistant):
        client.post("/assistant/chat", json={"question": "Gold?"})
        assistant.chat.assert_called_once_with(MEMORY_ID, "Gold?")

    def test_json_chat_error(self, client, assistant):
        assistant.chat.side_effect = RuntimeError("boom")
        response = client.post("/assistant/chat", json={"question": "Gold?"})

        assert response.json() == {"error": "Sorry, I encountered an error: boom. Please try again."}

    def test_clear_memory(self, client, assistant):
        assistant.memory.clear.return_value = True
        response = client.delete("/assistant/memory/alice")

        assert response.json() == {"memory_id": "alice", "cleared": True}
        assistant.memory.clear.assert_called_once_with("alice")

    def test_clear_memory_when_disabled(self, client, assistant):
        assistant.memory = None
        response = client.delete("/assistant/memory/alice")
        assert response.status_code == 404

    def test_no_cross_origin_headers(self, client):
        response = client.get("/health", headers={"Origin": "https://elsewhere.example"})

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers

    def test_not_ready_without_assistant(self):
        app.dependency_overrides.clear()
        response = TestClient(app).get("/")
        assert response.status_code == 503


class TestMCPServer:

    def test_exposes_airline_tools(self):
        tools = asyncio.run(mcp.list_tools())

        assert {tool.name for tool in tools} == {
            "get_delta_medallion_qualification",
            "get_united_premier_qualification",
            "compare_airline_programs",
        }
        assert all(tool.description for tool in tools)
