import signal
from unittest import mock

import pytest

from quizkit.debug_utils import (
    DebugAssertionError,
    FunctionTracer,
    crash_handler,
    debug_assert,
    debug_log,
    get_stack_trace,
    install_crash_handlers,
    print_stack_trace,
    trace_function,
)


@pytest.fixture
def debug_on(monkeypatch):
    monkeypatch.setenv("QUIZKIT_DEBUG", "1")


@pytest.fixture
def debug_off(monkeypatch):
    monkeypatch.delenv("QUIZKIT_DEBUG", raising=False)


def function_c():
    return get_stack_trace()


def function_b():
    return function_c()


def function_a():
    return function_b()


def _double(x):
    return x * 2


def _increment(x):
    return x + 1


def test_stack_trace_frames_are_numbered():
    trace = get_stack_trace()
    assert trace[0].startswith("# 0 ")
    assert all(line.startswith(f"#{i:2d} ") for i, line in enumerate(trace))


def test_stack_trace_respects_max_frames():
    assert len(get_stack_trace(2)) == 2
    assert get_stack_trace(0) == []


def test_print_stack_trace_writes_banners(capsys):
    print_stack_trace(3)
    err = capsys.readouterr().err
    lines = err.strip("\n").splitlines()
    assert lines[0] == "=== STACK TRACE ==="
    assert lines[-1] == "==================="
    assert len(lines) == 5
    assert "test_print_stack_trace_writes_banners" in lines[1]


def test_debug_assert_passes_on_true_condition(debug_on, capsys):
    value = 10
    debug_assert(value > 0, "Value should be positive")
    assert capsys.readouterr().err == ""


def test_debug_assert_fails_on_false_condition(debug_on, capsys):
    value = 10
    with pytest.raises(DebugAssertionError, match="This assertion should fail!"):
        debug_assert(value < 5, "This assertion should fail!")
    err = capsys.readouterr().err
    assert "DEBUG ASSERTION FAILED: This assertion should fail!" in err
    assert "test_debug_utils.py" in err
    assert "=== STACK TRACE ===" in err


def test_debug_assert_is_inactive_without_debug(debug_off, capsys):
    debug_assert(False, "ignored")
    assert capsys.readouterr().err == ""


def test_debug_log_tags_messages(debug_on, capsys):
    for i in range(10):
        debug_log(f"Added element: {i}")
    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 10
    assert lines[5].startswith("[DEBUG] ")
    assert lines[5].endswith(" - Added element: 5")
    assert "test_debug_utils.py:" in lines[0]


def test_debug_log_is_silent_without_debug(debug_off, capsys):
    debug_log("Testing memory operations...")
    assert capsys.readouterr().err == ""


def test_function_tracer_reports_entry_and_exit(capsys):
    with FunctionTracer("memory_test") as tracer:
        print("inside")
    captured = capsys.readouterr()
    assert tracer.func_name == "memory_test"
    assert captured.err.splitlines() == [
        "[TRACE] Entering memory_test",
        "[TRACE] Exiting memory_test",
    ]
    assert captured.out == "inside\n"


def test_function_tracer_does_not_swallow_exceptions(capsys):
    with pytest.raises(RuntimeError):
        with FunctionTracer("boom"):
            raise RuntimeError("x")
    assert "[TRACE] Exiting boom" in capsys.readouterr().err


def test_trace_function_traces_in_debug_mode(debug_on, capsys):
    traced = trace_function(_double)
    result = traced(21)
    assert result == 42
    assert traced.__name__ == "_double"
    assert capsys.readouterr().err.splitlines() == [
        "[TRACE] Entering _double",
        "[TRACE] Exiting _double",
    ]


def test_trace_function_is_silent_without_debug(debug_off, capsys):
    traced = trace_function(_increment)
    result = traced(1)
    assert result == 2
    assert capsys.readouterr().err == ""


@mock.patch("signal.raise_signal")
@mock.patch("signal.signal")
def test_crash_handler_reports_and_reraises(mock_signal, mock_raise, capsys):
    crash_handler(signal.SIGSEGV, None)
    err = capsys.readouterr().err
    assert "=== CRASH DETECTED ===" in err
    assert f"Signal: {int(signal.SIGSEGV)} (SIGSEGV - Segmentation fault)" in err
    assert "=== STACK TRACE ===" in err
    mock_signal.assert_called_once_with(signal.SIGSEGV, signal.SIG_DFL)
    mock_raise.assert_called_once_with(signal.SIGSEGV)


@mock.patch("signal.raise_signal")
@mock.patch("signal.signal")
def test_crash_handler_names_abort_and_unknown(mock_signal, mock_raise, capsys):
    crash_handler(signal.SIGABRT, None)
    crash_handler(signal.SIGTERM, None)
    err = capsys.readouterr().err
    assert "(SIGABRT - Abort)" in err
    assert f"Signal: {int(signal.SIGTERM)} (Unknown signal)" in err
    assert mock_raise.call_count == 2


@mock.patch("signal.signal")
def test_install_crash_handlers_registers_fatal_signals(mock_signal, capsys):
    install_crash_handlers()
    registered = {call.args[0] for call in mock_signal.call_args_list}
    assert {signal.SIGSEGV, signal.SIGABRT, signal.SIGFPE, signal.SIGILL} <= registered
    assert all(call.args[1] is crash_handler for call in mock_signal.call_args_list)
    assert "[DEBUG] Crash handlers installed" in capsys.readouterr().err