# statuslight/cli.py
"""
Simple command-line interface for StatusLight.

Examples:
  statuslight                       # interactive session
  statuslight check 200 "not found" https://example.com
  statuslight check --compact 503
  statuslight batch inputs.txt --out data/statuslight_batch.csv
  statuslight summary data/statuslight_batch.csv
  statuslight codes
"""

import argparse
import sys
import logging
import webbrowser
from pathlib import Path

from .logging_setup import setup_logging
from . import analyze as analyze_mod
from . import csv_log
from . import probe_config
from . import report
from .session import CheckerSession

LOG = logging.getLogger("statuslight.cli")

PROMPT = "status> "
HELP_TEXT = (
    "Type a status code (404), a phrase (not found) or a URL (https://example.com).\n"
    "Commands: :history  :info  :open  :codes  :help  :quit"
)


def build_parser():
    p = argparse.ArgumentParser(prog="statuslight")
    # (len(argv) == 0 will run the interactive session).
    sub = p.add_subparsers(dest="cmd")

    def add_probe_args(sp):
        sp.add_argument("--timeout", type=float, default=None, help="URL probe timeout in seconds")
        sp.add_argument("--proxy", default=None, help="URL prefix to send probes through")

    # interactive
    i = sub.add_parser("interactive", help="Interactive session (default)")
    i.add_argument("--compact", action="store_true", help="Small-screen info panel")
    add_probe_args(i)

    # check
    c = sub.add_parser("check", help="Check one or more inputs and print the result")
    c.add_argument("inputs", nargs="+")
    c.add_argument("--compact", action="store_true", help="Small-screen info panel")
    c.add_argument("--no-history", action="store_true", help="Don't print the history chart")
    add_probe_args(c)

    # batch
    b = sub.add_parser("batch", help="Check every line of a file and append CSV rows")
    b.add_argument("file")
    b.add_argument("--out", default=None, help="CSV output path (default: STATUSLIGHT_BATCH_LOG or data/statuslight_batch.csv)")
    add_probe_args(b)

    # summary
    s = sub.add_parser("summary", help="Summarize a batch CSV")
    s.add_argument("csv", nargs="?", default=None)

    # codes
    sub.add_parser("codes", help="List known status phrases")

    return p


def _make_session(args):
    return CheckerSession(timeout=args.timeout, proxy=args.proxy)


def _print_result(session, compact=False):
    print(report.render_light(session.light))
    print(report.render_info(session, compact=compact))


def run_interactive(session, compact=False, input_fn=input):
    """
    Read inputs until :quit or EOF. Returns the session so callers can
    inspect the final state.
    """
    print(HELP_TEXT)
    while True:
        try:
            line = input_fn(PROMPT)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            break

        cmd = line.strip().lower()
        if cmd in (":quit", ":q", ":exit"):
            break
        if cmd == ":help":
            print(HELP_TEXT)
            continue
        if cmd == ":history":
            print(report.render_history(session.history))
            continue
        if cmd == ":info":
            print(report.render_info(session, compact=False))
            continue
        if cmd == ":codes":
            print(report.render_codes())
            continue
        if cmd == ":open":
            if session.can_open_url:
                url = str(session.confirmed_input).strip()
                LOG.info("Opening %s", url)
                webbrowser.open_new_tab(url)
            else:
                print("Nothing to open: the last check was not a reachable URL.")
            continue

        session.check(line)
        _print_result(session, compact=compact)

    return session


def run_check(session, inputs, compact=False, show_history=True):
    results = []
    for raw in inputs:
        res = session.check(raw)
        results.append(res)
        print(f"> {raw}")
        _print_result(session, compact=compact)
    if show_history:
        print(report.render_history(session.history))
    return results


def run_batch(session, file_path, out_path):
    """
    Check every non-empty line of file_path and append one CSV row per line.

    Returns the number of rows written.
    """
    p = Path(file_path).expanduser()
    if not p.exists():
        print(f"No input file found at {p}")
        return 0

    lines = [ln.strip() for ln in p.read_text(encoding="utf-8-sig").splitlines()]
    lines = [ln for ln in lines if ln and not ln.startswith("#")]
    if not lines:
        print(f"No inputs in {p}")
        return 0

    rows = []
    for raw in lines:
        res = session.check(raw)
        rows.append(csv_log.row_from_result(res))
        code = res["code"] if res["code"] is not None else "-"
        print(f"{raw:<40} {code:>5} {res['category']:<8} {res['light']}")

    csv_log.append_rows(out_path, rows)
    print(f"Wrote {len(rows)} row(s) to {out_path}")
    return len(rows)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    setup_logging()

    parser = build_parser()

    # No args: default behavior -> interactive session
    if len(argv) == 0:
        run_interactive(CheckerSession())
        return 0

    args = parser.parse_args(argv)

    if args.cmd == "interactive":
        run_interactive(_make_session(args), compact=args.compact)

    elif args.cmd == "check":
        run_check(
            _make_session(args),
            args.inputs,
            compact=args.compact,
            show_history=not args.no_history,
        )

    elif args.cmd == "batch":
        out = args.out or probe_config.get_batch_log()
        try:
            run_batch(_make_session(args), args.file, out)
        except ValueError as e:
            LOG.error("%s", e)
            return 1

    elif args.cmd == "summary":
        path = args.csv or probe_config.get_batch_log()
        try:
            analyze_mod.run(path)
        except FileNotFoundError as e:
            print(str(e))
            return 1

    elif args.cmd == "codes":
        print(report.render_codes())

    else:
        parser.print_help()

    return 0


if __name__ == "__main__":
    sys.exit(main())
