"""
StatusLight - batch CSV summary

Reads a batch CSV written by `statuslight batch` and reports:
  - total rows
  - rows per category and per light
  - share of inputs resolved through a URL probe
  - most frequent error kinds
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import pandas as pd

from .classify import CATEGORIES
from .csv_log import CSV_HEADERS


def load_batch(csv_path) -> pd.DataFrame:
    p = Path(csv_path)
    if not p.exists():
        raise FileNotFoundError(f"No batch CSV at {p}. Run `statuslight batch FILE` first.")
    try:
        df = pd.read_csv(p, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        # zero-byte file: batch was interrupted before the header was written
        df = pd.DataFrame(columns=CSV_HEADERS, dtype=str)
    for col in ("category", "light", "was_url", "error_kind"):
        if col not in df.columns:
            df[col] = ""
    return df


def summarize(csv_path) -> Dict[str, object]:
    df = load_batch(csv_path)
    total = int(len(df))

    by_category = df["category"].value_counts()
    categories = {c: int(by_category.get(c, 0)) for c in CATEGORIES}

    lights = {str(k): int(v) for k, v in df["light"].value_counts().items() if k}

    url_rows = int((df["was_url"].str.lower() == "true").sum())
    url_share = (url_rows / total) if total else 0.0

    errors = df.loc[df["error_kind"].ne("") & df["error_kind"].ne("ok"), "error_kind"]
    top_errors = {str(k): int(v) for k, v in errors.value_counts().head(5).items()}

    return {
        "total": total,
        "categories": categories,
        "lights": lights,
        "url_rows": url_rows,
        "url_share": url_share,
        "top_errors": top_errors,
    }


def format_summary(summary: Dict[str, object]) -> str:
    lines = [f"Rows: {summary['total']}"]
    lines.append("By category:")
    for cat, n in summary["categories"].items():
        lines.append(f"  {cat:<8} {n}")
    lines.append("By light:")
    for light, n in sorted(summary["lights"].items()):
        lines.append(f"  {light:<8} {n}")
    lines.append(f"Resolved via URL probe: {summary['url_rows']} ({summary['url_share'] * 100:.1f}%)")
    if summary["top_errors"]:
        lines.append("Top error kinds:")
        for kind, n in summary["top_errors"].items():
            lines.append(f"  {kind:<24} {n}")
    return "\n".join(lines)


def run(csv_path) -> None:
    print(format_summary(summarize(csv_path)))
