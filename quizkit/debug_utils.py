"""Debugging aids: stack traces, crash handlers, assertions, logging and tracing.

Assertions, logging and function tracing are active only when the
``QUIZKIT_DEBUG`` environment variable is set to a true value.
"""

from __future__ import annotations

import functools
import itertools
import os
import signal
import sys
from collections.abc import Callable, Iterator
from types import FrameType, TracebackType
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_DEBUG_ENV = "QUIZKIT_DEBUG"
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})

_CRASH_SIGNALS = {
    "SIGSEGV": "SIGSEGV - Segmentation fault",
    "SIGABRT": "SIGABRT - Abort",
    "SIGFPE": "SIGFPE - Floating point exception",
    "SIGILL": "SIGILL - Illegal instruction",
}


class DebugAssertionError(AssertionError):
    """Raised when a debug assertion fails."""


def _enabled() -> bool:
    return os.environ.get(_DEBUG_ENV, "").strip().lower() not in _FALSE_VALUES


def _err(text: str) -> None:
    print(text, file=sys.stderr)


def _walk(frame: FrameType | None) -> Iterator[FrameType]:
    while frame is not None:
        yield frame
        frame = frame.f_back


def _trace_from(frame: FrameType | None, max_frames: int) -> list[str]:
    if max_frames <= 0:
        return []
    return [
        f"#{index:2d} {f.f_code.co_name} ({f.f_code.co_filename}:{f.f_lineno})"
        for index, f in enumerate(itertools.islice(_walk(frame), max_frames))
    ]


def get_stack_trace(max_frames: int = 64) -> list[str]:
    """Return the caller's stack, innermost frame first, at most max_frames lines."""
    return _trace_from(sys._getframe(1), max_frames)


def print_stack_trace(max_frames: int = 64) -> None:
    """Write the caller's stack to stderr between banner lines."""
    _err("\n=== STACK TRACE ===")
    for line in _trace_from(sys._getframe(1), max_frames):
        _err(line)
    _err("===================")


def _describe_signal(signum: int) -> str:
    for name, description in _CRASH_SIGNALS.items():
        number = getattr(signal, name, None)
        if number is not None and int(number) == int(signum):
            return description
    return "Unknown signal"


def crash_handler(signum: int, frame: FrameType | None = None) -> None:
    """Report a fatal signal with a stack trace, then re-raise it with the default action."""
    _err("\n=== CRASH DETECTED ===")
    _err(f"Signal: {int(signum)} ({_describe_signal(signum)})")
    _err("\n=== STACK TRACE ===")
    start = frame if frame is not None else sys._getframe(0)
    for line in _trace_from(start, 64):
        _err(line)
    _err("===================")
    signal.signal(signum, signal.SIG_DFL)
    signal.raise_signal(signum)


def install_crash_handlers() -> None:
    """Install crash_handler for the fatal signals available on this platform."""
    for name in _CRASH_SIGNALS:
        number = getattr(signal, name, None)
        if number is not None:
            signal.signal(number, crash_handler)
    _err("[DEBUG] Crash handlers installed")


def debug_assert(condition: object, message: str) -> None:
    """In debug mode, report a false condition with its location and raise."""
    if not _enabled() or condition:
        return
    caller = sys._getframe(1)
    _err(f"DEBUG ASSERTION FAILED: {message}")
    _err(f"File: {caller.f_code.co_filename}, Line: {caller.f_lineno}")
    _err("\n=== STACK TRACE ===")
    for line in _trace_from(caller, 64):
        _err(line)
    _err("===================")
    raise DebugAssertionError(message)


def debug_log(message: object) -> None:
    """In debug mode, write message to stderr tagged with the caller's location."""
    if not _enabled():
        return
    caller = sys._getframe(1)
    _err(f"[DEBUG] {caller.f_code.co_filename}:{caller.f_lineno} - {message}")


class FunctionTracer:
    """Context manager that reports entering and leaving a named function."""

    def __init__(self, func_name: str) -> None:
        self.func_name = func_name

    def __enter__(self) -> FunctionTracer:
        _err(f"[TRACE] Entering {self.func_name}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        _err(f"[TRACE] Exiting {self.func_name}")
        return False


def trace_function(func: F) -> F:
    """Decorate func so that, in debug mode, its entry and exit are traced."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not _enabled():
            return func(*args, **kwargs)
        with FunctionTracer(func.__name__):
            return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]