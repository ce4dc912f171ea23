import unittest
from unittest.mock import patch

from fastapi import HTTPException

from exam_assistant.api.deps import get_current_user_id
from exam_assistant.api.v1.routes.assistant import create_assistant_turn, handle_assistant_turn_request
from exam_assistant.main import assistant_turn_legacy
from exam_assistant.schemas.requests import AssistantTurnRequest

SAMPLE_RESULT = {"status": "incomplete", "message": "What date?", "missing": ["date"], "gathered": {"code": "CS101"}}


class TestAssistantRoutes(unittest.TestCase):
    def _build_request(self):
        return AssistantTurnRequest(message="Add a CS101 exam", gatheredFields={})

    def test_handle_assistant_turn_request_success(self):
        req = self._build_request()

        with patch(
            "exam_assistant.api.v1.routes.assistant.run_assistant_turn",
            return_value=SAMPLE_RESULT,
        ) as mock_service:
            result = handle_assistant_turn_request(req, "user-1", route_path="/api/v1/assistant/turns")

        self.assertEqual(result, SAMPLE_RESULT)
        mock_service.assert_called_once_with(req, "user-1", route_path="/api/v1/assistant/turns")

    def test_handle_assistant_turn_request_maps_exceptions_to_http_500(self):
        req = self._build_request()

        with patch(
            "exam_assistant.api.v1.routes.assistant.run_assistant_turn",
            side_effect=RuntimeError("NVIDIA_API_KEY is not set"),
        ):
            with self.assertRaises(HTTPException) as exc:
                handle_assistant_turn_request(req, "user-1", route_path="/api/v1/assistant/turns")

        self.assertEqual(exc.exception.status_code, 500)
        self.assertEqual(exc.exception.detail, "AI service error")

    def test_create_assistant_turn_forwards_expected_route_path(self):
        req = self._build_request()

        with patch(
            "exam_assistant.api.v1.routes.assistant.handle_assistant_turn_request",
            return_value=SAMPLE_RESULT,
        ) as mock_handler:
            result = create_assistant_turn(req, user_id="user-1")

        self.assertEqual(result, SAMPLE_RESULT)
        mock_handler.assert_called_once_with(req, "user-1", route_path="/api/v1/assistant/turns")

    def test_legacy_route_forwards_expected_route_path(self):
        req = self._build_request()

        with patch(
            "exam_assistant.main.handle_assistant_turn_request",
            return_value=SAMPLE_RESULT,
        ) as mock_handler:
            result = assistant_turn_legacy(req, user_id="user-1")

        self.assertEqual(result, SAMPLE_RESULT)
        mock_handler.assert_called_once_with(req, "user-1", route_path="/api/ai")

    def test_user_id_header_is_required(self):
        with self.assertRaises(HTTPException) as exc:
            get_current_user_id(None)
        self.assertEqual(exc.exception.status_code, 401)
        with self.assertRaises(HTTPException):
            get_current_user_id("   ")
        self.assertEqual(get_current_user_id(" user-1 "), "user-1")


if __name__ == "__main__":
    unittest.main()
