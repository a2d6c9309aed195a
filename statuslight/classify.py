"""
Status code classification.

classify(...) is a pure function: every integer (and None) maps to exactly
one (category, light) pair. 1xx and 3xx are shown green on purpose:
informational and redirect responses are not failures here.
"""

CATEGORY_1XX = "1xx"
CATEGORY_2XX = "2xx"
CATEGORY_3XX = "3xx"
CATEGORY_4XX = "4xx"
CATEGORY_5XX = "5xx"
CATEGORY_INVALID = "invalid"

CATEGORIES = [
    CATEGORY_1XX,
    CATEGORY_2XX,
    CATEGORY_3XX,
    CATEGORY_4XX,
    CATEGORY_5XX,
    CATEGORY_INVALID,
]

LIGHT_GREEN = "green"
LIGHT_ORANGE = "orange"
LIGHT_RED = "red"
LIGHT_OFF = "off"

CATEGORY_MESSAGES = {
    CATEGORY_1XX: "Informational",
    CATEGORY_2XX: "Success!",
    CATEGORY_3XX: "Redirection",
    CATEGORY_4XX: "Client Error!",
    CATEGORY_5XX: "Server Error!",
    CATEGORY_INVALID: "Invalid status code",
}

CATEGORY_DESCRIPTIONS = {
    CATEGORY_1XX: "The request was received and the process is continuing.",
    CATEGORY_2XX: "The request was successfully received, understood, and accepted.",
    CATEGORY_3XX: "Further action needs to be taken to complete the request.",
    CATEGORY_4XX: "The request contains bad syntax or cannot be fulfilled.",
    CATEGORY_5XX: "The server failed to fulfil an apparently valid request.",
    CATEGORY_INVALID: "Enter a code between 100 and 599, a status phrase, or a URL.",
}


def classify(code):
    """
    Pure function: given a status code (or None), return (category, light).
    """
    if code is None:
        return CATEGORY_INVALID, LIGHT_ORANGE

    if 100 <= code < 200:
        return CATEGORY_1XX, LIGHT_GREEN
    if 200 <= code < 300:
        return CATEGORY_2XX, LIGHT_GREEN
    if 300 <= code < 400:
        return CATEGORY_3XX, LIGHT_GREEN
    if 400 <= code < 500:
        return CATEGORY_4XX, LIGHT_RED
    if 500 <= code < 600:
        return CATEGORY_5XX, LIGHT_RED

    return CATEGORY_INVALID, LIGHT_ORANGE
