"""
Input resolver for StatusLight.

resolve(...) turns whatever the user typed into an optional status code.
Strategies run in order and the first one that produces a code wins:

  1. numeric   - digits only, parsed base 10, no upper bound
  2. url       - absolute http(s) URL, probed once with HEAD
  3. phrase    - lookup in status_codes.STATUS_CODE_MAP

Probe failures are logged and turned into "no code"; they never raise.
"""

import logging
import re
from urllib.parse import urlsplit

from . import http_check
from . import probe_config
from .error_kinds import PROBE_BAD_URL, PROBE_OTHER
from .status_codes import lookup_phrase

logger = logging.getLogger(__name__)

SOURCE_NUMERIC = "numeric"
SOURCE_URL = "url"
SOURCE_PHRASE = "phrase"

_DIGITS_RE = re.compile(r"[0-9]+")
# Stays under the interpreter's int<->str conversion limit (4300 digits on 3.11+),
# so a parsed code can always be printed again.
MAX_NUMERIC_DIGITS = 4000


def looks_numeric(text):
    return bool(_DIGITS_RE.fullmatch((text or "").strip()))


def _parse_digits(text):
    """int(text), or None when the digit string is too long to convert."""
    if len(text.lstrip("0")) > MAX_NUMERIC_DIGITS:
        return None
    try:
        return int(text, 10)
    except ValueError:
        return None


def parse_url(text):
    """
    Return the normalized absolute URL for text, or None if it isn't one.

    Only http/https URLs with a host are accepted; "200", "not found" or
    "example.com" are not URLs.
    """
    candidate = (text or "").strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        return None
    try:
        parts = urlsplit(candidate)
        # touching .port validates it ("http://host:abc" raises here)
        parts.port
    except ValueError:
        return None
    if parts.scheme.lower() not in ("http", "https") or not parts.hostname:
        return None
    return parts.geturl()


def _probe_status(url, probe, timeout, proxy):
    """
    Run the probe once and return (status_code or None, probe result dict).
    """
    try:
        res = probe(url, timeout=timeout, proxy=proxy)
    except Exception as e:
        logger.warning("URL probe for %s raised %s: %s", url, type(e).__name__, e)
        return None, {"url": url, "reachable": False, "status_code": None, "error": str(e), "error_kind": PROBE_OTHER}

    if res is None:
        res = {}
    if not isinstance(res, dict):
        logger.warning("URL probe for %s returned %s, expected a dict", url, type(res).__name__)
        return None, {"url": url, "reachable": False, "status_code": None, "error": f"unexpected probe result {res!r}", "error_kind": PROBE_OTHER}

    status = res.get("status_code")
    if not res.get("reachable") or not isinstance(status, int) or isinstance(status, bool):
        logger.warning(
            "URL probe for %s gave no status (error_kind=%s): %s",
            url,
            res.get("error_kind"),
            res.get("error"),
        )
        return None, res
    return status, res


def resolve(raw, probe=None, timeout=None, proxy=None):
    """
    Resolve raw user input.

    Returns a dict:
      input, code (int or None), source ("numeric" | "url" | "phrase" | None),
      was_url (True only when the code came from a URL probe),
      probe (probe result dict, or None when no probe ran)
    """
    text = (raw or "").strip()
    result = {
        "input": raw,
        "code": None,
        "source": None,
        "was_url": False,
        "probe": None,
    }

    if not text:
        return result

    # 1) numeric
    if looks_numeric(text):
        code = _parse_digits(text)
        if code is None:
            logger.warning("Numeric input with %d digits is too long to use as a code", len(text))
            return result
        result["code"] = code
        result["source"] = SOURCE_NUMERIC
        logger.debug("Resolved %r as numeric code %s", text, result["code"])
        return result

    # 2) url
    url = parse_url(text)
    if url is None:
        logger.debug("%r is not an absolute URL (%s)", text, PROBE_BAD_URL)
    else:
        if probe is None:
            probe = http_check.run_head
        if timeout is None:
            timeout = probe_config.get_timeout()
        if proxy is None:
            proxy = probe_config.get_proxy()

        status, probe_res = _probe_status(url, probe, timeout, proxy)
        result["probe"] = probe_res
        if status is not None:
            result["code"] = status
            result["source"] = SOURCE_URL
            result["was_url"] = True
            logger.debug("Resolved %s via HEAD probe: %s", url, status)
            return result

    # 3) phrase
    code = lookup_phrase(text)
    if code is not None:
        result["code"] = code
        result["source"] = SOURCE_PHRASE
        logger.debug("Resolved %r via phrase table: %s", text, code)
        return result

    logger.debug("Could not resolve %r", text)
    return result
