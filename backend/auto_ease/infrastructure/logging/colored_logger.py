"""Colored dispatch logger — ANSI-colored console logging for service entry dispatch.

Provides a DispatchLogger with color-coded output per dispatch stage,
making it easy to follow a request from actor resolution to the store write.

Color scheme:
    🔵 Blue    — Actor resolution
    🟡 Yellow  — Strategy selection
    🟢 Green   — Entry creation
    🟣 Magenta — Entry claim
    🔴 Red     — Errors
    ⚪ Gray    — Details / timing
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


# ── Dispatch Stage Definitions ───────────────────────────────────────

class DispatchStage:
    """Predefined dispatch stages with colors and icons."""

    RESOLVE = ("RESOLVE", _Colors.BLUE, "🔎")
    DISPATCH = ("DISPATCH", _Colors.YELLOW, "🔀")
    CREATE = ("CREATE", _Colors.GREEN, "📝")
    CLAIM = ("CLAIM", _Colors.MAGENTA, "🔧")


def _format_details(kwargs: dict[str, Any]) -> str:
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {_Colors.GRAY}({details}){_Colors.RESET}"


# ── DispatchLogger ───────────────────────────────────────────────────

class DispatchLogger:
    """Color-coded logger for the service entry dispatcher.

    Usage:
        log = DispatchLogger("ServiceEntryDispatcher")
        log.step_start(DispatchStage.RESOLVE, "Resolving actor c1")
        log.step_complete(DispatchStage.RESOLVE, "Actor is a client")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.debug(formatted)

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.info(formatted)

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a failed dispatch stage in red.

        Dispatch failures are expected client-facing outcomes, so they are
        logged at WARNING; the exception itself still propagates.
        """
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            formatted += _format_details(kwargs)
        self._logger.debug(formatted)

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_step(DispatchStage.CLAIM, "Claiming entry 7"):
                entry = await strategy.process(request)
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.3f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.3f}s", **kwargs)
