"""
HTTP request layer, security helpers, and error normalization for testrail-mcp.
"""

import base64
import hashlib
import http.client
import json
import re
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
import uuid
from contextlib import contextmanager

from testrail_mcp import config
from testrail_mcp._utils import is_absent
from testrail_mcp.exceptions import ApiError, HTTPError

# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def _sanitize_url_for_log(url):
    """Mask sensitive query params in URLs before logging."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = []
    for key, value in pairs:
        if key.lower() in {"key", "api_key", "password", "token"}:
            masked.append((key, "***"))
        else:
            masked.append((key, value))
    safe_query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


def _basic_auth(username, api_key):
    raw = f"{username}:{api_key}".encode()
    return "Basic " + base64.b64encode(raw).decode("ascii")


# ---------------------------------------------------------------------------
# Structured logging
# ---------------------------------------------------------------------------


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _is_sampled_request(request_id):
    """Decide if a request should be logged based on sample rate."""
    rate = config.HTTP_LOG_SAMPLE_RATE
    if rate <= 0:
        return False
    if rate >= 1:
        return True
    if not request_id:
        return False
    digest = hashlib.sha256(request_id.encode("utf-8")).digest()
    bucket = int.from_bytes(digest[:4], "big") / 4294967295.0
    return bucket < rate


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _http_request(url, data=None, headers=None, method="GET", timeout=None):
    """Make a single HTTP request. No retries.

    Returns parsed JSON on success (None for an empty body).
    Raises HTTPError for non-2xx statuses (callers normalize them).
    Raises ApiError for network, timeout, size, parse and malformed-URL failures.
    """
    body = json.dumps(data).encode("utf-8") if data is not None else None
    request_id = (headers or {}).get("X-Request-Id")
    safe_url = _sanitize_url_for_log(url)
    sampled = _is_sampled_request(request_id)
    timeout = max(1, timeout or config.HTTP_TIMEOUT_SECONDS)

    start = time.perf_counter()
    if sampled:
        _log_http_event(
            phase="request",
            method=method,
            url=safe_url,
            request_id=request_id,
            timeout_seconds=timeout,
        )
    try:
        req = urllib.request.Request(url, data=body, headers=headers or {}, method=method)
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            content_type = resp.headers.get("Content-Type", "")
            raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
            if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
                raise ApiError(
                    "Response too large from TestRail API "
                    f"(>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
                )
            if sampled:
                _log_http_event(
                    phase="response",
                    method=method,
                    url=safe_url,
                    status=getattr(resp, "status", 200),
                    content_type=content_type,
                    bytes=len(raw),
                    latency_ms=round((time.perf_counter() - start) * 1000, 2),
                    request_id=request_id,
                )
            if not raw.strip():
                return None
            try:
                return json.loads(raw.decode("utf-8"))
            except (json.JSONDecodeError, UnicodeDecodeError):
                if content_type and "json" not in content_type.lower():
                    raise ApiError(
                        f"Unexpected Content-Type from server ({content_type}). "
                        "Check TESTRAIL_URL; this may be a login page or proxy."
                    ) from None
                raise ApiError("Unexpected response from TestRail API (not valid JSON).") from None
    except urllib.error.HTTPError as e:
        error_body = (
            e.read(config.HTTP_MAX_RESPONSE_BYTES).decode("utf-8", errors="replace")
            if e.fp
            else ""
        )
        if sampled:
            _log_http_event(
                phase="response",
                method=method,
                url=safe_url,
                status=e.code,
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
                request_id=request_id,
            )
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
    except TimeoutError as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error="timeout",
                request_id=request_id,
            )
        raise ApiError(
            f"Request timed out after {timeout} seconds. Is TestRail reachable?"
        ) from e
    except urllib.error.URLError as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error=f"url_error: {e.reason}",
                request_id=request_id,
            )
        raise ApiError(f"Connection failed: {e.reason}") from e
    except (OSError, http.client.HTTPException) as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error=f"{type(e).__name__}: {e}",
                request_id=request_id,
            )
        raise ApiError(f"Connection failed: {e}") from e
    except ValueError as e:
        # urllib rejects URLs without a scheme or host (a bad TESTRAIL_URL)
        raise ApiError(f"Invalid TestRail URL: {e}. Check TESTRAIL_URL.") from e


def _encode_query(params):
    """Encode query params the way TestRail expects them."""
    pairs = []
    for key, value in (params or {}).items():
        if is_absent(value):
            continue
        if isinstance(value, bool):
            value = 1 if value else 0
        elif isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        pairs.append((key, value))
    return urllib.parse.urlencode(pairs)


class Transport:
    """Shared connection settings for every resource client.

    Holds the base URL, Basic credentials, default headers and the fixed
    timeout. Resource clients receive one instance and never copy it, so
    ``set_header`` affects every subsequent request.
    """

    def __init__(self, base_url, username, api_key, timeout=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or config.HTTP_TIMEOUT_SECONDS
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": _basic_auth(username, api_key),
        }

    def set_header(self, name, value):
        self.headers[name] = value

    def url_for(self, endpoint, params=None):
        url = f"{self.base_url}{config.API_PREFIX}{endpoint}"
        query = _encode_query(params)
        return f"{url}?{query}" if query else url

    def request(self, method, endpoint, params=None, data=None):
        headers = dict(self.headers)
        headers["X-Request-Id"] = str(uuid.uuid4())
        return _http_request(
            self.url_for(endpoint, params), data, headers, method, timeout=self.timeout
        )

    def get(self, endpoint, params=None):
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint, data=None, params=None):
        # TestRail tunnels every mutation, deletes included, through POST + JSON body.
        return self.request("POST", endpoint, params=params, data=data if data is not None else {})


# ---------------------------------------------------------------------------
# Error normalization
# ---------------------------------------------------------------------------


def _parse_error_body(body):
    """TestRail answers errors with {"error": "..."}; fall back to cleaned text."""
    if not body:
        return None
    try:
        return json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return _sanitize_error(body)


def _upstream_message(body):
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    if isinstance(body, str):
        return body
    return ""


@contextmanager
def api_errors(operation):
    """Re-raise anything the transport throws as ApiError naming *operation*."""
    try:
        yield
    except HTTPError as e:
        body = _parse_error_body(e.body)
        message = f"{operation}: HTTP {e.code} {e.reason}"
        detail = _upstream_message(body)
        if detail:
            message += f" - {detail}"
        raise ApiError(message, status=e.code, body=body) from e
    except ApiError as e:
        raise ApiError(f"{operation}: {e}", status=e.status, body=e.body) from e
