"""
Tests for core/errors and core/session
"""

import pytest
from fastapi import Response
from unittest.mock import MagicMock

from reelforge.core import (
    ParseError,
    PipelineError,
    SessionContext,
    UpstreamCallError,
    UpstreamConfigError,
    ValidationError,
    attach_session_cookie,
    new_session_id,
    resolve_session,
)


class TestErrors:

    @pytest.mark.parametrize("error_cls,status,message", [
        (UpstreamConfigError, 500, "OpenRouter API key không được cấu hình"),
        (UpstreamCallError, 500, "Lỗi khi gọi API OpenRouter"),
        (ParseError, 500, "Lỗi khi phân tích kịch bản"),
        (PipelineError, 500, "Lỗi máy chủ nội bộ"),
    ])
    def test_defaults(self, error_cls, status, message):
        error = error_cls()

        assert error.status_code == status
        assert error.public_message == message

    def test_validation_error(self):
        error = ValidationError("Chủ đề và tóm tắt nội dung là bắt buộc")

        assert error.status_code == 400
        assert error.public_message == "Chủ đề và tóm tắt nội dung là bắt buộc"

    def test_detail_stays_out_of_public_message(self):
        error = UpstreamCallError(detail="OpenRouter API error: 503")

        assert error.public_message == "Lỗi khi gọi API OpenRouter"
        assert str(error) == "OpenRouter API error: 503"

    def test_all_derive_from_pipeline_error(self):
        for error_cls in (ValidationError, UpstreamConfigError, UpstreamCallError, ParseError):
            assert issubclass(error_cls, PipelineError)


class TestSession:

    def test_new_session_ids_are_unique(self):
        assert new_session_id() != new_session_id()

    def test_resolve_existing_cookie(self):
        request = MagicMock()
        request.cookies = {"session_id": "abc"}

        session = resolve_session(request)

        assert session == SessionContext(session_id="abc", is_new=False)

    def test_resolve_mints_new_session(self):
        request = MagicMock()
        request.cookies = {}

        session = resolve_session(request)

        assert session.is_new
        assert session.session_id

    def test_cookie_only_set_for_new_session(self):
        response = Response()

        attach_session_cookie(response, SessionContext(session_id="abc", is_new=False))

        assert "set-cookie" not in response.headers

    def test_cookie_attributes(self):
        response = Response()

        attach_session_cookie(response, SessionContext(session_id="abc", is_new=True))

        cookie = response.headers["set-cookie"].lower()
        assert cookie.startswith("session_id=abc")
        assert "httponly" in cookie
        assert "samesite=strict" in cookie
        assert "path=/" in cookie
        assert "secure" not in cookie

    def test_cookie_secure_in_production(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        response = Response()

        attach_session_cookie(response, SessionContext(session_id="abc", is_new=True))

        assert "secure" in response.headers["set-cookie"].lower()
