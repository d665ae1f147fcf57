"""Centralized logging configuration using Loguru.

Usage:
    from oval_updater.logging import logger, SUMMARY, VERBOSE
    logger.info("3 tests")
    logger.log(SUMMARY, "CVE-2020-0001")   # shown with --debug 2
    logger.log(VERBOSE, "  oval:tst:42")   # shown with --debug 3

Debug levels:
    0     errors only
    1     counts and failures (default)
    2     complete definitions and their criteria
    3     everything, including partially resolved criteria
"""

import logging
import os
import sys
from logging.handlers import SysLogHandler

from loguru import logger

# Remove default handler
logger.remove()

# Verbosity tiers used when rendering definitions
SUMMARY = "DEBUG"
VERBOSE = "TRACE"

DEBUG_LEVELS = {
    0: "ERROR",
    1: "INFO",
    2: SUMMARY,
    3: VERBOSE,
}

SYSLOG_SOCKET = "/dev/log"

_human_format = "<level>{message}</level>"

_handler_ids = []
_syslog_handlers = []


def level_for_debug(debug_level):
    """Map a numeric --debug level onto a loguru level name."""
    if debug_level <= 0:
        return DEBUG_LEVELS[0]
    return DEBUG_LEVELS[min(debug_level, 3)]


class _InfoSysLogHandler(SysLogHandler):
    """Sends everything at info priority; loguru's TRACE has no syslog mapping."""

    def mapPriority(self, levelName):
        return "info"


def _syslog_handler(ident):
    if not os.path.exists(SYSLOG_SOCKET):
        return None
    try:
        handler = _InfoSysLogHandler(address=SYSLOG_SOCKET)
    except OSError:
        return None
    handler.ident = f"{ident}: "
    return handler


def _syslog_sink(handler):
    def sink(message):
        # one syslog record per line
        for line in message.record["message"].splitlines():
            handler.handle(logging.makeLogRecord({"msg": line}))
    return sink


def setup_logging(debug_level=1, quiet=False, syslog=False, ident="oval-updater"):
    """(Re)configure the process-wide sinks.

    stderr gets every message at or above the selected level unless quiet
    is set. With syslog enabled the same messages are mirrored to the local
    syslog daemon, one record per line.
    """
    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()
    for handler in _syslog_handlers:
        handler.close()
    _syslog_handlers.clear()

    level = level_for_debug(debug_level)

    if not quiet:
        _handler_ids.append(
            logger.add(sys.stderr, level=level, format=_human_format, colorize=None)
        )

    if syslog:
        handler = _syslog_handler(ident)
        if handler is None:
            logger.warning(f"syslog socket {SYSLOG_SOCKET} not available, not mirroring")
        else:
            _syslog_handlers.append(handler)
            _handler_ids.append(logger.add(_syslog_sink(handler), level=level, format="{message}"))

    return level


__all__ = ["logger", "setup_logging", "level_for_debug", "SUMMARY", "VERBOSE"]
