from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .classify import (
    CATEGORY_DESCRIPTIONS,
    CATEGORY_INVALID,
    CATEGORY_MESSAGES,
    LIGHT_GREEN,
    LIGHT_OFF,
    LIGHT_ORANGE,
    LIGHT_RED,
)
from .history import StatusEntry
from .status_codes import STATUS_CODE_MAP, phrase_for_code

CHART_MAX_CODE = 600
CHART_WIDTH = 40

# Same palette as the web chart; shown as names in the terminal.
CATEGORY_COLORS: Dict[str, str] = {
    "1xx": "#7FDBFF",
    "2xx": "#2ECC40",
    "3xx": "#FF851B",
    "4xx": "#FF4136",
    "5xx": "#B10DC9",
    "invalid": "#AAAAAA",
}

_LAMPS = [LIGHT_RED, LIGHT_ORANGE, LIGHT_GREEN]


def _section(title: str) -> str:
    line = "=" * 60
    return f"{line}\n{title}\n{line}"


def render_light(light: str) -> str:
    """
    One lamp per colour, the active one filled:
      (R) ( ) ( )   -> red
      ( ) ( ) ( )   -> off
    """
    lamps = []
    for lamp in _LAMPS:
        if lamp == light and light != LIGHT_OFF:
            lamps.append(f"({lamp[0].upper()})")
        else:
            lamps.append("( )")
    return " ".join(lamps) + f"  [{light}]"


def render_info(session, compact: bool = False) -> str:
    """
    Info panel for the last check.

    compact=True is the small-screen layout: only the headline and a hint,
    the full panel stays behind the `:info` command.
    """
    if session.light == LIGHT_OFF:
        return "Enter a status code, a status phrase, or a URL."

    category = session.category
    headline = CATEGORY_MESSAGES.get(category, CATEGORY_MESSAGES[CATEGORY_INVALID])

    if compact:
        return f"{headline} (type :info for details)"

    lines: List[str] = [headline]
    lines.append(f"  input      : {str(session.confirmed_input).strip()}")
    if session.code is not None:
        phrase = phrase_for_code(session.code)
        code_txt = f"{session.code}" + (f" ({phrase})" if phrase else "")
        lines.append(f"  code       : {code_txt}")
    lines.append(f"  category   : {category}")
    lines.append(f"  meaning    : {CATEGORY_DESCRIPTIONS.get(category, '')}")
    if session.can_open_url:
        lines.append("  url        : reachable (type :open to open it in a browser)")
    return "\n".join(lines)


def _bar_length(code: int) -> int:
    clipped = max(0, min(code, CHART_MAX_CODE))
    return int(round(clipped / CHART_MAX_CODE * CHART_WIDTH))


def render_history(history: Sequence[StatusEntry]) -> str:
    """
    Horizontal bar chart, one bar per history entry (#1 is the oldest).
    Bar length is proportional to the code on a 0..600 scale.
    """
    out = [_section("History")]
    if not history:
        out.append("No checks yet.")
        return "\n".join(out)

    for i, entry in enumerate(history, start=1):
        bar = "#" * _bar_length(entry.code)
        color = CATEGORY_COLORS.get(entry.category, CATEGORY_COLORS[CATEGORY_INVALID])
        out.append(f"#{i:<3} {entry.code:>5} {entry.category:<7} {color} |{bar}")
    return "\n".join(out)


def render_codes(table: Optional[Dict[str, int]] = None) -> str:
    table = STATUS_CODE_MAP if table is None else table
    out = [_section("Known status phrases")]
    for phrase, code in sorted(table.items(), key=lambda kv: (kv[1], kv[0])):
        out.append(f"  {code}  {phrase}")
    return "\n".join(out)
