"""
Checker session.

A CheckerSession holds everything one user session displays: the current
light and category, the last confirmed input, whether it came from a URL,
and the bounded history. The caller owns it; there is no module-level state.
Resolution and classification stay in resolver/classify, the session only
wires their results together.
"""

import logging

from . import history as history_mod
from . import resolver
from .classify import classify, CATEGORY_INVALID, LIGHT_GREEN, LIGHT_OFF
from .error_kinds import INPUT_UNRECOGNIZED, PROBE_OK

logger = logging.getLogger(__name__)


class CheckerSession:
    def __init__(self, probe=None, timeout=None, proxy=None):
        self.probe = probe
        self.timeout = timeout
        self.proxy = proxy

        self.history = ()
        self.light = LIGHT_OFF
        self.category = CATEGORY_INVALID
        self.code = None
        self.source = None
        self.was_url = False
        self.confirmed_input = ""

    @property
    def can_open_url(self):
        """True when the last check resolved a URL to a green status."""
        return self.light == LIGHT_GREEN and self.was_url

    def reset(self):
        self.light = LIGHT_OFF
        self.category = CATEGORY_INVALID
        self.code = None
        self.source = None
        self.was_url = False

    def check(self, raw):
        """
        Resolve and classify raw input, update the displayed state and
        append to history when a numeric code was found.

        Empty input only resets the light; history is left alone.
        """
        if not (raw or "").strip():
            self.reset()
            return self._result(raw)

        self.confirmed_input = raw
        res = resolver.resolve(raw, probe=self.probe, timeout=self.timeout, proxy=self.proxy)

        category, light = classify(res["code"])
        self.code = res["code"]
        self.source = res["source"]
        self.was_url = res["was_url"]
        self.category = category
        self.light = light

        if res["code"] is not None:
            entry = history_mod.make_entry(res["code"], category)
            self.history = history_mod.append(self.history, entry)

        logger.info("%r -> code=%s category=%s light=%s", raw, self.code, category, light)
        return self._result(raw, probe=res["probe"])

    def _result(self, raw, probe=None):
        probe = probe or {}
        error_kind = probe.get("error_kind")
        if self.code is None and (raw or "").strip() and (not error_kind or error_kind == PROBE_OK):
            error_kind = INPUT_UNRECOGNIZED
        return {
            "input": raw,
            "code": self.code,
            "source": self.source,
            "category": self.category,
            "light": self.light,
            "was_url": self.was_url,
            "error_kind": error_kind,
            "error": probe.get("error"),
        }
