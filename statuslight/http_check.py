# statuslight/http_check.py
"""
HEAD probe for StatusLight.

Any HTTP response counts as reachable, whatever its status: the status code
itself is the result. Only transport failures make the probe unreachable.
"""

import time
import logging
import requests
from requests import exceptions as req_exc

from .error_kinds import (
    PROBE_OK,
    PROBE_TIMEOUT,
    PROBE_SSL,
    PROBE_CONN_RESET,
    PROBE_DNS_ERROR,
    PROBE_CONN_ERROR,
    PROBE_OTHER,
)

logger = logging.getLogger(__name__)

USER_AGENT = "statuslight/0.1 (+requests)"


def _target_url(url, proxy):
    if not proxy:
        return url
    return proxy + url


def run_head(url, timeout=5.0, proxy=""):
    start = time.monotonic()
    status_code = None
    http_ms = None
    reachable = False
    error = None
    error_kind = PROBE_OK

    target = _target_url(url, proxy)

    try:
        resp = requests.head(
            target,
            timeout=timeout,
            allow_redirects=False,
            headers={"User-Agent": USER_AGENT},
        )
        http_ms = (time.monotonic() - start) * 1000.0
        status_code = resp.status_code
        reachable = isinstance(status_code, int)
        if not reachable:
            error = f"unexpected status value {status_code!r}"
            error_kind = PROBE_OTHER

    except req_exc.Timeout as e:
        http_ms = (time.monotonic() - start) * 1000.0
        error = str(e)
        error_kind = PROBE_TIMEOUT
    except req_exc.SSLError as e:
        http_ms = (time.monotonic() - start) * 1000.0
        error = str(e)
        error_kind = PROBE_SSL
    except req_exc.ConnectionError as e:
        http_ms = (time.monotonic() - start) * 1000.0
        error = str(e)
        msg = (error or "").lower()
        if "connection reset by peer" in msg:
            error_kind = PROBE_CONN_RESET
        elif "failed to resolve" in msg or "name or service not known" in msg or "temporary failure in name resolution" in msg:
            error_kind = PROBE_DNS_ERROR
        else:
            error_kind = PROBE_CONN_ERROR
    except req_exc.RequestException as e:
        http_ms = (time.monotonic() - start) * 1000.0
        error = str(e)
        error_kind = PROBE_OTHER
    except Exception as e:
        http_ms = (time.monotonic() - start) * 1000.0
        error = str(e)
        error_kind = PROBE_OTHER

    if not reachable:
        logger.debug("HEAD %s failed: %s (%s)", target, error_kind, error)

    return {
        "url": url,
        "reachable": reachable,
        "status_code": status_code if reachable else None,
        "http_ms": http_ms,
        "error": error,
        "error_kind": error_kind,
    }
