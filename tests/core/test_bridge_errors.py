# tests/core/test_bridge_errors.py
"""
Unit tests for structured error types.
"""

import pytest

from genai_bridge.core import (
    APIStatusError,
    ConfigurationError,
    ErrorType,
    FrameParseError,
    LLMError,
    MissingBodyError,
    UnsupportedOperationError,
)


class TestErrors:
    def test_api_status_error_message(self):
        error = APIStatusError(401, "Unauthorized", '{"error":"bad key"}')

        assert str(error) == 'OpenRouter API Error: 401 Unauthorized - {"error":"bad key"}'
        assert error.status_code == 401
        assert error.status_text == "Unauthorized"
        assert error.body == '{"error":"bad key"}'
        assert error.error_type == ErrorType.API_ERROR.value

    def test_missing_body(self):
        error = MissingBodyError()

        assert str(error) == "No response body"
        assert error.error_type == "missing_body"

    def test_frame_parse_error_keeps_cause(self):
        cause = ValueError("Expecting value")
        error = FrameParseError("{oops", cause)

        assert error.payload == "{oops"
        assert error.cause is cause
        assert "Expecting value" in error.error_message

    @pytest.mark.parametrize(
        "error",
        [
            APIStatusError(500, "Internal Server Error", ""),
            MissingBodyError(),
            FrameParseError("", ValueError()),
            UnsupportedOperationError("nope"),
            ConfigurationError("nope"),
        ],
    )
    def test_everything_is_an_llm_error(self, error):
        assert isinstance(error, LLMError)

    def test_metadata(self):
        error = LLMError(error_type="network_error", error_message="boom", host="x")

        assert error.metadata == {"host": "x"}
        assert error.retry_after is None
        assert repr(error) == "LLMError(error_type='network_error', error_message='boom')"
