"""Tests for turning API replies into chat messages."""
import pytest

from frontend.messages import error_message, to_message


class TestToMessage:
    def test_success(self, titan_response):
        message = to_message(200, {"query": "q", "generated_response": titan_response})
        assert message["content"] == "Paris is the capital of France."
        assert message["filtered"] is False
        assert message["raw"] == titan_response

    def test_filtered(self):
        generated = {"results": [{"outputText": "", "completionReason": "CONTENT_FILTERED"}]}
        message = to_message(200, {"query": "q", "generated_response": generated})
        assert message["filtered"] is True
        assert message["content"] == ""

    def test_error_with_details(self):
        message = to_message(500, {"error": "Failed to process request", "details": "boom"})
        assert message == error_message("Failed to process request: boom")

    def test_error_without_details(self):
        message = to_message(400, {"error": "Missing 'user_query' in request."})
        assert message["error"] == "Missing 'user_query' in request."

    @pytest.mark.parametrize(
        "generated",
        [None, "text", [], {"results": None}, {"results": []}, {"results": ["x"]},
         {"results": [{"outputText": 3}]}],
    )
    def test_unexpected_generated_response(self, generated):
        message = to_message(200, {"query": "q", "generated_response": generated})
        assert message["content"] == ""
        assert message["filtered"] is False

    @pytest.mark.parametrize("payload", [None, [], "oops"])
    def test_non_object_payload(self, payload):
        message = to_message(200, payload)
        assert "error" in message
        assert "HTTP 200" in message["error"]
