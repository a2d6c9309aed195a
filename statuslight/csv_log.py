import csv
import os
from datetime import datetime, timezone

CSV_HEADERS = [
    "timestamp",
    "input",
    "source",
    "was_url",
    "status_code",
    "category",
    "light",
    "error_kind",
    "error_message",
]


CSV_SCHEMA_DOC = {
    "timestamp": "ISO8601 UTC timestamp for the row",
    "input": "Raw input as read from the batch file (stripped)",
    "source": "How the code was found: numeric, url, phrase (empty if unresolved)",
    "was_url": "String 'True' or 'False': code came from a URL probe",
    "status_code": "Resolved status code, or empty",
    "category": "One of 1xx, 2xx, 3xx, 4xx, 5xx, invalid",
    "light": "Traffic light colour: green, orange, red",
    "error_kind": "Canonical error kind string (e.g., probe_timeout, input_unrecognized)",
    "error_message": "Human-oriented error message where available",
}


def utc_now_iso():
    return datetime.now(timezone.utc).isoformat()


def make_row(
    input_text,
    source="",
    was_url=False,
    status_code=None,
    category="",
    light="",
    error_kind="",
    error_message="",
):
    row = {k: "" for k in CSV_HEADERS}
    row["timestamp"] = utc_now_iso()
    row["input"] = (input_text or "").strip()
    row["source"] = source or ""
    row["was_url"] = str(bool(was_url))
    row["status_code"] = status_code if status_code is not None else ""
    row["category"] = category or ""
    row["light"] = light or ""
    row["error_kind"] = error_kind or ""
    row["error_message"] = error_message or ""
    return row


def row_from_result(result):
    """Build a CSV row from a CheckerSession.check(...) result dict."""
    return make_row(
        result.get("input"),
        source=result.get("source"),
        was_url=result.get("was_url"),
        status_code=result.get("code"),
        category=result.get("category"),
        light=result.get("light"),
        error_kind=result.get("error_kind"),
        error_message=result.get("error"),
    )


def read_header(csv_path):
    """First row of csv_path, or None if the file is missing or empty."""
    if not os.path.exists(csv_path):
        return None
    with open(csv_path, newline="", encoding="utf-8") as f:
        return next(csv.reader(f), None)


def rotated_name(csv_path, stamp=None):
    """data/batch.csv -> data/batch.20240101T120000Z.csv"""
    if stamp is None:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    root, ext = os.path.splitext(csv_path)
    return f"{root}.{stamp}{ext or '.csv'}"


def append_rows(csv_path, rows):
    """
    Append batch rows to csv_path, writing the header for a new file.

    An existing file written with another column layout is left untouched
    and ValueError is raised, naming a rotated path the old file can be
    moved to.
    """
    if not rows:
        return

    header = read_header(csv_path)
    if header and header != CSV_HEADERS:
        raise ValueError(
            f"{csv_path} has columns {header}, batch rows use {CSV_HEADERS}. "
            f"Move it aside (e.g. to {rotated_name(csv_path)}) or pass another --out."
        )

    parent = os.path.dirname(csv_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(csv_path, "a", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_HEADERS)
        if not header:
            writer.writeheader()
        writer.writerows(rows)
