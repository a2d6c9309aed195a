# tests/test_resolver.py
"""
Resolver tests with a fake probe collaborator (no network).
"""

import pytest

from statuslight import resolver
from statuslight.error_kinds import PROBE_CONN_ERROR


class FakeProbe:
    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.calls = []

    def __call__(self, url, timeout=None, proxy=None):
        self.calls.append({"url": url, "timeout": timeout, "proxy": proxy})
        if self.exc is not None:
            raise self.exc
        return self.result


def ok_probe(status):
    return FakeProbe({"url": "x", "reachable": True, "status_code": status, "error": None, "error_kind": "ok"})


def failing_probe():
    return FakeProbe({"url": "x", "reachable": False, "status_code": None, "error": "conn fail", "error_kind": PROBE_CONN_ERROR})


def test_numeric_input_never_probes():
    probe = ok_probe(500)
    res = resolver.resolve("200", probe=probe)
    assert res["code"] == 200
    assert res["source"] == "numeric"
    assert res["was_url"] is False
    assert probe.calls == []


def test_numeric_input_is_trimmed_and_unbounded():
    assert resolver.resolve("  404 ")["code"] == 404
    assert resolver.resolve("9999")["code"] == 9999
    assert resolver.resolve("007")["code"] == 7


@pytest.mark.parametrize("text", ["Not Found", " not found ", "NOT FOUND"])
def test_phrase_lookup(text):
    res = resolver.resolve(text, probe=ok_probe(200))
    assert res["code"] == 404
    assert res["source"] == "phrase"
    assert res["probe"] is None


def test_url_probe_success():
    probe = ok_probe(200)
    res = resolver.resolve("https://example.com", probe=probe, timeout=1.0, proxy="")
    assert res["code"] == 200
    assert res["source"] == "url"
    assert res["was_url"] is True
    assert len(probe.calls) == 1
    assert probe.calls[0]["url"] == "https://example.com"
    assert probe.calls[0]["timeout"] == 1.0


def test_url_probe_failure_gives_no_code():
    probe = failing_probe()
    res = resolver.resolve("https://example.com", probe=probe)
    assert res["code"] is None
    assert res["was_url"] is False
    assert res["probe"]["error_kind"] == PROBE_CONN_ERROR
    assert len(probe.calls) == 1


def test_url_probe_exception_is_contained():
    probe = FakeProbe(exc=RuntimeError("transport exploded"))
    res = resolver.resolve("https://example.com", probe=probe)
    assert res["code"] is None
    assert res["was_url"] is False
    assert "transport exploded" in res["probe"]["error"]


def test_url_probe_non_int_status_is_failure():
    probe = FakeProbe({"reachable": True, "status_code": "200"})
    res = resolver.resolve("http://example.com", probe=probe)
    assert res["code"] is None
    assert res["was_url"] is False


def test_probe_uses_config_defaults(monkeypatch):
    monkeypatch.setenv("STATUSLIGHT_TIMEOUT", "2.5")
    monkeypatch.setenv("STATUSLIGHT_PROXY", "https://proxy.test/")
    probe = ok_probe(301)
    resolver.resolve("https://example.com/a", probe=probe)
    assert probe.calls[0]["timeout"] == 2.5
    assert probe.calls[0]["proxy"] == "https://proxy.test/"


def test_default_probe_is_http_check(monkeypatch):
    calls = []

    def fake_run_head(url, timeout=None, proxy=None):
        calls.append(url)
        return {"url": url, "reachable": True, "status_code": 503, "error": None, "error_kind": "ok"}

    monkeypatch.setattr(resolver.http_check, "run_head", fake_run_head)
    res = resolver.resolve("https://down.example")
    assert res["code"] == 503
    assert calls == ["https://down.example"]


@pytest.mark.parametrize("text", ["", "   ", "gibberish", "example.com", "ftp://example.com", "http://", "https://exa mple.com"])
def test_unresolvable_inputs_do_not_probe(text):
    probe = ok_probe(200)
    res = resolver.resolve(text, probe=probe)
    assert res["code"] is None
    assert res["source"] is None
    assert probe.calls == []


def test_parse_url():
    assert resolver.parse_url(" https://example.com/path?q=1 ") == "https://example.com/path?q=1"
    assert resolver.parse_url("HTTP://example.com") is not None
    assert resolver.parse_url("http://example.com:abc/") is None
    assert resolver.parse_url("200") is None
    assert resolver.parse_url("not found") is None


def test_looks_numeric():
    assert resolver.looks_numeric(" 200 ")
    assert not resolver.looks_numeric("2oo")
    assert not resolver.looks_numeric("-1")
    assert not resolver.looks_numeric("²")
    assert not resolver.looks_numeric("")


def test_url_probe_non_dict_result_is_failure():
    probe = FakeProbe("garbage")
    res = resolver.resolve("https://example.com", probe=probe)
    assert res["code"] is None
    assert res["was_url"] is False
    assert res["probe"]["error_kind"] == "probe_other_error"
    assert len(probe.calls) == 1


def test_url_probe_none_result_is_failure():
    res = resolver.resolve("https://example.com", probe=FakeProbe(None))
    assert res["code"] is None
    assert res["was_url"] is False


def test_overlong_digit_string_resolves_to_no_code():
    probe = ok_probe(200)
    res = resolver.resolve("1" * 5000, probe=probe)
    assert res["code"] is None
    assert res["source"] is None
    assert probe.calls == []


def test_long_digit_string_within_limit_still_parses():
    digits = "9" * resolver.MAX_NUMERIC_DIGITS
    assert resolver.resolve(digits)["code"] == int(digits)
    # leading zeros don't count towards the limit
    assert resolver.resolve("0" * 5000 + "404")["code"] == 404
