from __future__ import annotations

import argparse
import os
import time
from typing import Iterable, Optional

from logfile.logger import Logger
from logfile.logging import get_logger
from logfile.schemas import LoggerConfig, default_log_dir

logger = get_logger(__name__)

PREFIX_ENV = "LOGFILE_PREFIX"
FOOTER_RULE = "_" * 99
OK_FOOTER = "🟢"
ERROR_FOOTER = "🟥"


# ----------------------- Message subcommands -----------------------
def _add_message_parser(sub: argparse._SubParsersAction, severity: str) -> None:
    p = sub.add_parser(
        severity,
        help=f"Emit one {severity} message",
        description=f"Print a styled {severity} message, optionally appending it to the daily log file.",
    )
    p.add_argument("message", nargs="+", help="Values to log, joined by spaces")
    p.add_argument("--prefix", default=os.getenv(PREFIX_ENV, ""), help="Bracketed label")
    p.add_argument(
        "--log-file",
        action="store_true",
        help="Also append the message to <log-dir>/<prefix>_<YYYY-MM-DD>.log",
    )
    p.add_argument("--log-dir", default=None, help="Directory for log files")
    p.add_argument("--no-timestamp", action="store_true", help="Omit the HH:MM:SS timestamp")
    p.add_argument("--emoji", default=None, help="Marker for plain log messages")
    p.add_argument("--color", default="", help="Style of the message body")
    p.add_argument("--prefix-color", default="blue")
    p.add_argument("--time-color", default="green")
    p.set_defaults(command=severity)


def _config_from_args(args: argparse.Namespace) -> LoggerConfig:
    cfg = {
        "use_timestamp": not args.no_timestamp,
        "log_file": bool(args.log_file),
        "log_dir": args.log_dir or default_log_dir(),
        "prefix_color": args.prefix_color,
        "color": args.color,
        "time_color": args.time_color,
    }
    if args.emoji is not None:
        cfg["emoji"] = args.emoji
    return LoggerConfig(**cfg)


def _run_message(args: argparse.Namespace) -> int:
    log = Logger(args.prefix, _config_from_args(args))
    getattr(log, args.command)(*args.message)
    if log.log_path:
        logger.debug(f"appended to {log.log_path}")
    return 0


# ----------------------- Elapsed subcommand -----------------------
def _add_elapsed_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser(
        "elapsed",
        help="Print the elapsed-time report of a fresh logger",
    )
    p.set_defaults(command="elapsed")


def _run_elapsed(args: argparse.Namespace) -> int:
    print(Logger().elapsed_time())
    return 0


# ----------------------- Demo subcommand -----------------------
def _add_demo_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser(
        "demo",
        help="Walk through the logger features",
        description=(
            "Log at every severity, toggle console and file output, share one log file "
            "between two differently styled loggers, then print the elapsed time."
        ),
    )
    p.add_argument("--log-dir", default=None, help="Directory for the demo log file")
    p.add_argument("--name", default="demo", help="Prefix and log file name of the main logger")
    p.add_argument("--wait", type=float, default=1.0, help="Seconds to wait before finishing")
    p.set_defaults(command="demo")


def _demo_steps(main_log: Logger, name: str, log_dir: str, wait: float) -> None:
    main_log.log("Hello World Log")
    main_log.warn("Hello World Warning")
    main_log.error("Hello World Error")

    main_log.enabled = False
    main_log.log("Log Not Enabled")
    main_log.enabled = True
    main_log.log("Log Enabled again")
    main_log.log_file = False
    main_log.log("Not logged to file")
    main_log.log_file = True

    styled = Logger(
        "Prefix",
        {
            "color": "yellow",
            "prefix_color": "magenta",
            "time_color": "cyan",
            "emoji": "📘",
            "log_dir": log_dir,
        },
    )
    # Save to the same log file.
    styled.enable_log_file(name)

    styled.log("Different module message.")
    styled.use_timestamp = False
    styled.log("Without Timestamp")
    styled.emoji = ""
    styled.log("Without Emoji")
    styled.prefix = ""
    styled.log("Without prefix")
    main_log.warn(f"Waiting {wait:g} second(s).")
    if wait > 0:
        time.sleep(wait)


def _log_footer(main_log: Logger, emoji: str) -> None:
    main_log.emoji = emoji
    main_log.set_log_color("green")
    main_log.log(main_log.elapsed_time(), f"\r\n{FOOTER_RULE}")


def _run_demo(args: argparse.Namespace) -> int:
    log_dir = args.log_dir or default_log_dir()
    main_log = Logger(args.name, {"log_file": True, "log_dir": log_dir})
    try:
        _demo_steps(main_log, args.name, log_dir, args.wait)
    except Exception as e:
        try:
            main_log.error(e)
        except OSError as io_err:
            logger.warning(f"log file unavailable, console only: {io_err}")
            main_log.log_file = False
            main_log.error(e)
        _log_footer(main_log, ERROR_FOOTER)
        return 1
    _log_footer(main_log, OK_FOOTER)
    logger.info(f"demo log written to {main_log.log_path}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="logfile")
    sub = p.add_subparsers(dest="command")

    for severity in ("log", "warn", "error"):
        _add_message_parser(sub, severity)
    _add_elapsed_parser(sub)
    _add_demo_parser(sub)
    return p


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(list(argv) if argv is not None else None)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    cmd = getattr(args, "command", None)
    if cmd is None:
        _build_parser().print_usage()
        return 2

    if cmd in ("log", "warn", "error"):
        return _run_message(args)
    if cmd == "elapsed":
        return _run_elapsed(args)
    if cmd == "demo":
        return _run_demo(args)
    logger.error(f"unknown command: {cmd}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
