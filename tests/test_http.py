# tests/test_http.py
import requests

from statuslight import http_check
from statuslight.error_kinds import (
    PROBE_OK,
    PROBE_SSL,
    PROBE_CONN_ERROR,
    PROBE_CONN_RESET,
    PROBE_DNS_ERROR,
    PROBE_TIMEOUT,
    PROBE_OTHER,
)


class FakeResp:
    def __init__(self, status_code):
        self.status_code = status_code


def test_head_returns_status(monkeypatch):
    seen = {}

    def fake_head(url, **kwargs):
        seen["url"] = url
        seen.update(kwargs)
        return FakeResp(200)

    monkeypatch.setattr(http_check.requests, "head", fake_head)
    r = http_check.run_head("https://example.com", timeout=0.5)
    assert r["reachable"] is True
    assert r["status_code"] == 200
    assert r["error_kind"] == PROBE_OK
    assert seen["url"] == "https://example.com"
    assert seen["timeout"] == 0.5
    assert seen["allow_redirects"] is False


def test_head_error_status_is_still_reachable(monkeypatch):
    monkeypatch.setattr(http_check.requests, "head", lambda url, **k: FakeResp(404))
    r = http_check.run_head("https://example.com/missing")
    assert r["reachable"] is True
    assert r["status_code"] == 404


def test_head_through_proxy_prefix(monkeypatch):
    seen = {}

    def fake_head(url, **kwargs):
        seen["url"] = url
        return FakeResp(204)

    monkeypatch.setattr(http_check.requests, "head", fake_head)
    r = http_check.run_head("https://example.com/", proxy="https://proxy.test/")
    assert seen["url"] == "https://proxy.test/https://example.com/"
    assert r["url"] == "https://example.com/"
    assert r["status_code"] == 204


def test_head_ssl_error(monkeypatch):
    def fake_head(*a, **k):
        raise requests.exceptions.SSLError("SSL fail")

    monkeypatch.setattr(requests, "head", fake_head)
    r = http_check.run_head("https://example.com", timeout=0.1)
    assert r["reachable"] is False
    assert r["status_code"] is None
    assert r["error_kind"] == PROBE_SSL


def test_head_timeout(monkeypatch):
    def fake_head(*a, **k):
        raise requests.exceptions.Timeout("timed out")

    monkeypatch.setattr(requests, "head", fake_head)
    r = http_check.run_head("https://example.com", timeout=0.1)
    assert r["error_kind"] == PROBE_TIMEOUT
    assert r["error"] == "timed out"


def test_head_connection_errors(monkeypatch):
    messages = {
        "conn fail": PROBE_CONN_ERROR,
        "[Errno 104] Connection reset by peer": PROBE_CONN_RESET,
        "Failed to resolve 'nope.invalid'": PROBE_DNS_ERROR,
    }
    for msg, kind in messages.items():
        def fake_head(*a, _msg=msg, **k):
            raise requests.exceptions.ConnectionError(_msg)

        monkeypatch.setattr(requests, "head", fake_head)
        r = http_check.run_head("https://example.com", timeout=0.1)
        assert r["error_kind"] == kind, msg


def test_head_unexpected_exception(monkeypatch):
    def fake_head(*a, **k):
        raise RuntimeError("boom")

    monkeypatch.setattr(requests, "head", fake_head)
    r = http_check.run_head("https://example.com")
    assert r["reachable"] is False
    assert r["error_kind"] == PROBE_OTHER
