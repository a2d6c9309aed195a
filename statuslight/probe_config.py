"""
Probe configuration for StatusLight.

Keep it simple:
 - module-level defaults
 - STATUSLIGHT_* environment variables override them at call time
   (no import-time freezing, so tests can monkeypatch the environment)
"""

import logging
import os

LOG = logging.getLogger("statuslight.probe_config")

DEFAULT_TIMEOUT = 5.0
# Empty means direct requests. Otherwise the target URL is appended to this
# prefix, e.g. "https://cors-anywhere.herokuapp.com/".
DEFAULT_PROXY = ""
DEFAULT_BATCH_LOG = os.path.join("data", "statuslight_batch.csv")


def get_timeout():
    raw = os.environ.get("STATUSLIGHT_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw.strip())
    except ValueError:
        LOG.warning("Ignoring STATUSLIGHT_TIMEOUT=%r (not a number)", raw)
        return DEFAULT_TIMEOUT
    if value <= 0:
        LOG.warning("Ignoring STATUSLIGHT_TIMEOUT=%r (must be positive)", raw)
        return DEFAULT_TIMEOUT
    return value


def get_proxy():
    return os.environ.get("STATUSLIGHT_PROXY", DEFAULT_PROXY).strip()


def get_batch_log():
    return os.environ.get("STATUSLIGHT_BATCH_LOG", DEFAULT_BATCH_LOG)
