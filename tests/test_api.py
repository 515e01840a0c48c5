"""Tests for api.py — security helpers, HTTP layer, Transport, error normalization."""

import base64
import io
import json
import urllib.error
from unittest.mock import patch

import pytest

from testrail_mcp.api import (
    Transport,
    _basic_auth,
    _encode_query,
    _http_request,
    _is_sampled_request,
    _mask_token,
    _sanitize_error,
    _sanitize_url_for_log,
    api_errors,
)
from testrail_mcp.exceptions import ApiError, HTTPError

_BASE = "https://example.testrail.io"


def _respond(mock_urlopen, body=b"{}", content_type="application/json"):
    mock_resp = mock_urlopen.return_value.__enter__.return_value
    mock_resp.headers.get.return_value = content_type
    mock_resp.read.return_value = body
    mock_resp.status = 200
    return mock_resp


def _sent_request(mock_urlopen):
    return mock_urlopen.call_args[0][0]


def _http_error(code, reason, body=b""):
    return urllib.error.HTTPError(f"{_BASE}/index.php", code, reason, {}, io.BytesIO(body))


class TestMaskToken:
    def test_long_token(self):
        assert _mask_token("abcdef1234567890") == "abcdef..."

    def test_short_token(self):
        assert _mask_token("abc") == "abc"


class TestSanitizeUrlForLog:
    def test_masks_sensitive_params(self):
        safe = _sanitize_url_for_log(f"{_BASE}/api/v2/get_cases/1?key=secret&suite_id=2")
        assert "secret" not in safe
        assert "key=%2A%2A%2A" in safe
        assert "suite_id=2" in safe

    def test_no_query_unchanged(self):
        url = f"{_BASE}/api/v2/get_case/1"
        assert _sanitize_url_for_log(url) == url


class TestSanitizeError:
    def test_strips_html(self):
        assert _sanitize_error("<h1>Error</h1><p>Details</p>") == "ErrorDetails"

    def test_truncates_long_body(self):
        assert _sanitize_error("x" * 1000).endswith("... [truncated]")

    def test_empty_body(self):
        assert _sanitize_error("") == ""
        assert _sanitize_error(None) == ""


class TestSampling:
    def test_sample_rate_zero_disables(self, monkeypatch):
        monkeypatch.setattr("testrail_mcp.api.config.HTTP_LOG_SAMPLE_RATE", 0.0)
        assert _is_sampled_request("req-1") is False

    def test_sample_rate_one_enables(self, monkeypatch):
        monkeypatch.setattr("testrail_mcp.api.config.HTTP_LOG_SAMPLE_RATE", 1.0)
        assert _is_sampled_request("req-1") is True

    def test_sampling_is_deterministic(self, monkeypatch):
        monkeypatch.setattr("testrail_mcp.api.config.HTTP_LOG_SAMPLE_RATE", 0.5)
        assert _is_sampled_request("req-stable") == _is_sampled_request("req-stable")

    def test_missing_request_id_not_sampled(self, monkeypatch):
        monkeypatch.setattr("testrail_mcp.api.config.HTTP_LOG_SAMPLE_RATE", 0.5)
        assert _is_sampled_request(None) is False


class TestBasicAuth:
    def test_encodes_username_and_key(self):
        header = _basic_auth("qa@example.com", "k3y")
        assert header.startswith("Basic ")
        assert base64.b64decode(header[6:]).decode() == "qa@example.com:k3y"


class TestEncodeQuery:
    def test_drops_absent(self):
        assert _encode_query({"suite_id": None, "refs": "", "limit": 10}) == "limit=10"

    def test_booleans_as_digits(self):
        assert _encode_query({"is_completed": True, "is_started": False}) == (
            "is_completed=1&is_started=0"
        )

    def test_lists_comma_joined(self):
        assert _encode_query({"status_id": [1, 5]}) == "status_id=1%2C5"

    def test_empty(self):
        assert _encode_query(None) == ""
        assert _encode_query({}) == ""


class TestHttpRequest:
    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_returns_parsed_json(self, mock_urlopen):
        _respond(mock_urlopen, b'{"id": 1}')
        assert _http_request(f"{_BASE}/api/v2/get_case/1") == {"id": 1}

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_empty_body_returns_none(self, mock_urlopen):
        _respond(mock_urlopen, b"")
        assert _http_request(f"{_BASE}/api/v2/delete_case/1", {}, method="POST") is None

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_sends_json_body(self, mock_urlopen):
        _respond(mock_urlopen)
        _http_request(f"{_BASE}/api/v2/add_case/1", {"title": "T"}, method="POST")
        req = _sent_request(mock_urlopen)
        assert req.get_method() == "POST"
        assert json.loads(req.data) == {"title": "T"}

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_single_attempt_on_http_error(self, mock_urlopen):
        mock_urlopen.side_effect = _http_error(429, "Too Many Requests")
        with pytest.raises(HTTPError) as exc_info:
            _http_request(f"{_BASE}/api/v2/get_case/1")
        assert exc_info.value.code == 429
        assert mock_urlopen.call_count == 1

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_http_error_keeps_body(self, mock_urlopen):
        mock_urlopen.side_effect = _http_error(400, "Bad Request", b'{"error": "Field :title"}')
        with pytest.raises(HTTPError) as exc_info:
            _http_request(f"{_BASE}/api/v2/add_case/1", {}, method="POST")
        assert exc_info.value.body == '{"error": "Field :title"}'

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_response_size_limit(self, mock_urlopen, monkeypatch):
        monkeypatch.setattr("testrail_mcp.api.config.HTTP_MAX_RESPONSE_BYTES", 4)
        _respond(mock_urlopen, b"12345")
        with pytest.raises(ApiError) as exc_info:
            _http_request(f"{_BASE}/api/v2/get_cases/1")
        assert "Response too large" in str(exc_info.value)

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_html_content_type_gives_proxy_message(self, mock_urlopen):
        _respond(mock_urlopen, b"<html>Login</html>", "text/html; charset=utf-8")
        with pytest.raises(ApiError) as exc_info:
            _http_request(f"{_BASE}/api/v2/get_case/1")
        assert "Content-Type" in str(exc_info.value)
        assert "TESTRAIL_URL" in str(exc_info.value)

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_invalid_json(self, mock_urlopen):
        _respond(mock_urlopen, b"not valid json{{")
        with pytest.raises(ApiError) as exc_info:
            _http_request(f"{_BASE}/api/v2/get_case/1")
        assert "not valid JSON" in str(exc_info.value)

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_timeout(self, mock_urlopen):
        mock_urlopen.side_effect = TimeoutError()
        with pytest.raises(ApiError) as exc_info:
            _http_request(f"{_BASE}/api/v2/get_case/1", timeout=5)
        assert "timed out after 5 seconds" in str(exc_info.value)

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_connection_failure(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.URLError("Name or service not known")
        with pytest.raises(ApiError) as exc_info:
            _http_request(f"{_BASE}/api/v2/get_case/1")
        assert "Connection failed" in str(exc_info.value)

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_uses_configured_timeout(self, mock_urlopen, monkeypatch):
        monkeypatch.setattr("testrail_mcp.api.config.HTTP_TIMEOUT_SECONDS", 12)
        _respond(mock_urlopen)
        _http_request(f"{_BASE}/api/v2/get_case/1")
        assert mock_urlopen.call_args[1]["timeout"] == 12

    def test_url_without_scheme_raises_api_error(self):
        with pytest.raises(ApiError) as exc_info:
            _http_request("example.testrail.io/api/v2/get_case/1")
        assert "Invalid TestRail URL" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestHttpLogging:
    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_logs_to_stderr_when_enabled(self, mock_urlopen, monkeypatch, capsys):
        monkeypatch.setattr("testrail_mcp.api.config.HTTP_LOG_ENABLED", True)
        _respond(mock_urlopen)
        _http_request(
            f"{_BASE}/api/v2/get_case/1?key=secret", headers={"X-Request-Id": "req-1"}
        )
        captured = capsys.readouterr()
        assert captured.out == ""
        lines = [line for line in captured.err.splitlines() if line.startswith("[HTTP] ")]
        phases = [json.loads(line[7:])["phase"] for line in lines]
        assert phases == ["request", "response"]
        assert "secret" not in captured.err

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_silent_by_default(self, mock_urlopen, capsys):
        _respond(mock_urlopen)
        _http_request(f"{_BASE}/api/v2/get_case/1", headers={"X-Request-Id": "req-1"})
        assert capsys.readouterr().err == ""


class TestTransport:
    def test_url_for(self):
        t = Transport(_BASE + "/", "u", "k")
        assert t.url_for("get_case/1") == f"{_BASE}/api/v2/get_case/1"
        assert t.url_for("get_cases/1", {"suite_id": 2, "section_id": None}) == (
            f"{_BASE}/api/v2/get_cases/1?suite_id=2"
        )

    def test_default_headers(self):
        t = Transport(_BASE, "u", "k")
        assert t.headers["Content-Type"] == "application/json"
        assert t.headers["Accept"] == "application/json"
        assert t.headers["Authorization"] == _basic_auth("u", "k")

    def test_timeout_default_and_override(self):
        assert Transport(_BASE, "u", "k").timeout == 30
        assert Transport(_BASE, "u", "k", timeout=5).timeout == 5

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_get(self, mock_urlopen):
        _respond(mock_urlopen, b'{"id": 1}')
        t = Transport(_BASE, "qa@example.com", "k3y")
        assert t.get("get_case/1") == {"id": 1}
        req = _sent_request(mock_urlopen)
        assert req.get_method() == "GET"
        assert req.full_url == f"{_BASE}/api/v2/get_case/1"
        assert req.data is None
        assert req.get_header("Authorization") == _basic_auth("qa@example.com", "k3y")
        assert req.get_header("X-request-id")

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_post_without_data_sends_empty_object(self, mock_urlopen):
        _respond(mock_urlopen, b"")
        Transport(_BASE, "u", "k").post("delete_case/1")
        req = _sent_request(mock_urlopen)
        assert req.get_method() == "POST"
        assert json.loads(req.data) == {}

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_post_with_params(self, mock_urlopen):
        _respond(mock_urlopen)
        Transport(_BASE, "u", "k").post("update_cases/1", {"case_ids": [1]}, {"suite_id": 3})
        assert _sent_request(mock_urlopen).full_url == f"{_BASE}/api/v2/update_cases/1?suite_id=3"

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_fresh_request_id_per_call(self, mock_urlopen):
        _respond(mock_urlopen)
        t = Transport(_BASE, "u", "k")
        t.get("get_case/1")
        first = _sent_request(mock_urlopen).get_header("X-request-id")
        t.get("get_case/1")
        second = _sent_request(mock_urlopen).get_header("X-request-id")
        assert first != second
        assert "X-Request-Id" not in t.headers

    @patch("testrail_mcp.api.urllib.request.urlopen")
    def test_set_header_affects_later_requests(self, mock_urlopen):
        _respond(mock_urlopen)
        t = Transport(_BASE, "u", "k")
        t.set_header("X-Trace", "abc")
        t.get("get_case/1")
        assert _sent_request(mock_urlopen).get_header("X-trace") == "abc"


class TestApiErrors:
    def test_http_error_normalized(self):
        with pytest.raises(ApiError) as exc_info:
            with api_errors("Failed to get test case 999"):
                raise HTTPError(
                    400, "Bad Request", '{"error": "Field :case_id is not a valid test case."}'
                )
        e = exc_info.value
        assert e.status == 400
        assert e.body == {"error": "Field :case_id is not a valid test case."}
        assert str(e) == (
            "Failed to get test case 999: HTTP 400 Bad Request - "
            "Field :case_id is not a valid test case."
        )
        assert isinstance(e.__cause__, HTTPError)

    def test_non_json_error_body(self):
        with pytest.raises(ApiError) as exc_info:
            with api_errors("Failed to get test case 1"):
                raise HTTPError(502, "Bad Gateway", "<html><b>upstream down</b></html>")
        assert exc_info.value.body == "upstream down"
        assert str(exc_info.value).endswith("- upstream down")

    def test_empty_error_body(self):
        with pytest.raises(ApiError) as exc_info:
            with api_errors("Failed to delete test case 1"):
                raise HTTPError(404, "Not Found", "")
        assert exc_info.value.body is None
        assert str(exc_info.value) == "Failed to delete test case 1: HTTP 404 Not Found"

    def test_api_error_rewrapped(self):
        with pytest.raises(ApiError) as exc_info:
            with api_errors("Failed to get run 3"):
                raise ApiError("Request timed out after 30 seconds.")
        assert str(exc_info.value) == "Failed to get run 3: Request timed out after 30 seconds."
        assert exc_info.value.status is None

    def test_passes_value_through(self):
        with api_errors("noop"):
            value = 42
        assert value == 42
