"""
Phrase -> status code table for StatusLight.

STATUS_CODE_MAP is the fixed lookup table used when the input is neither a
number nor a reachable URL. Keys are lowercase. The table is kept as-is:
'internal error' and 'internal server error' both map to 500, and phrases
such as 'too many requests' are intentionally absent.
"""

STATUS_CODE_MAP = {
    # 1xx - Information
    "continue": 100,
    "switching protocols": 101,
    "processing": 102,
    "early hints": 103,

    # 2xx - Success
    "ok": 200,
    "created": 201,
    "accepted": 202,
    "non-authoritative information": 203,
    "no content": 204,
    "reset content": 205,
    "partial content": 206,

    # 3xx - Redirection
    "multiple choices": 300,
    "moved permanently": 301,
    "found": 302,
    "see other": 303,
    "not modified": 304,
    "temporary redirect": 307,
    "permanent redirect": 308,

    # 4xx - Client errors
    "bad request": 400,
    "unauthorized": 401,
    "payment required": 402,
    "forbidden": 403,
    "not found": 404,
    "method not allowed": 405,
    "not acceptable": 406,
    "request timeout": 408,
    "conflict": 409,
    "gone": 410,
    "internal error": 500,

    # 5xx - Server errors
    "internal server error": 500,
    "not implemented": 501,
    "bad gateway": 502,
    "service unavailable": 503,
    "gateway timeout": 504,
    "http version not supported": 505,
}


def normalize_phrase(text):
    return (text or "").strip().lower()


def lookup_phrase(text):
    """Return the code for a status phrase, or None if it isn't in the table."""
    return STATUS_CODE_MAP.get(normalize_phrase(text))


def phrase_for_code(code):
    """First phrase (in table order) that maps to code, or None."""
    for phrase, value in STATUS_CODE_MAP.items():
        if value == code:
            return phrase
    return None
