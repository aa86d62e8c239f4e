"""Self-checking demonstration of the calculator, string helpers and stack."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from quizkit import string_utils
from quizkit.calculator import Calculator
from quizkit.debug_utils import (
    debug_assert,
    debug_log,
    install_crash_handlers,
    print_stack_trace,
    trace_function,
)
from quizkit.simple_stack import SimpleStack


class CheckFailed(AssertionError):
    """Raised when a demonstration check does not hold."""


def _check(condition: bool, message: str) -> None:
    debug_assert(condition, message)
    if not condition:
        raise CheckFailed(message)


@trace_function
def run_calculator_checks() -> None:
    debug_log("Starting calculator tests")
    print("Testing Calculator...")

    calc = Calculator()

    debug_log("Testing basic arithmetic operations")
    _check(calc.add(2.0, 3.0) == 5.0, "Addition test failed")
    _check(calc.subtract(5.0, 3.0) == 2.0, "Subtraction test failed")
    _check(calc.multiply(4.0, 3.0) == 12.0, "Multiplication test failed")
    _check(calc.divide(10.0, 2.0) == 5.0, "Division test failed")

    debug_log("Testing memory operations")
    calc.store_in_memory(42.0)
    _check(calc.recall_from_memory() == 42.0, "Memory recall test failed")

    print("Calculator tests passed!")
    debug_log("Calculator tests completed successfully")


@trace_function
def run_string_utils_checks() -> None:
    debug_log("Starting string utils tests")
    print("Testing StringUtils...")

    debug_log("Testing case conversion")
    _check(string_utils.to_upper("hello") == "HELLO", "to_upper test failed")
    _check(string_utils.to_lower("WORLD") == "world", "to_lower test failed")

    debug_log("Testing palindrome detection")
    _check(string_utils.is_palindrome("racecar"), "Palindrome test failed")
    _check(not string_utils.is_palindrome("hello"), "Non-palindrome test failed")

    debug_log("Testing word count")
    _check(string_utils.count_words("hello world") == 2, "Word count test failed")

    print("StringUtils tests passed!")
    debug_log("String utils tests completed successfully")


@trace_function
def run_simple_stack_checks() -> None:
    debug_log("Starting simple stack tests")
    print("Testing SimpleStack...")

    stack: SimpleStack[int] = SimpleStack()

    debug_log("Testing empty stack")
    _check(stack.empty(), "Empty stack test failed")
    _check(stack.size() == 0, "Stack size test failed")

    debug_log("Testing push and pop operations")
    stack.push(42)
    _check(not stack.empty(), "Non-empty stack test failed")
    _check(stack.size() == 1, "Stack size after push test failed")
    _check(stack.top() == 42, "Stack top test failed")

    value = stack.pop()
    _check(value == 42, "Stack pop value test failed")
    _check(stack.empty(), "Stack empty after pop test failed")

    print("SimpleStack tests passed!")
    debug_log("Simple stack tests completed successfully")


@trace_function
def demonstrate_debugging_features() -> None:
    debug_log("Demonstrating debugging features")
    print("\n=== Debugging Features Demo ===")

    print("Current stack trace:")
    sys.stdout.flush()
    print_stack_trace(10)

    debug_log("This is a debug log message")

    test_value = 100
    debug_assert(test_value > 0, "Test value should be positive")

    print("Debugging features demonstrated!")


@trace_function
def main(argv: Sequence[str] | None = None) -> int:
    """Run all checks; with --debug-demo also show the debugging aids. Returns an exit code."""
    args = list(sys.argv[1:] if argv is None else argv)

    install_crash_handlers()

    print("Running Quiz Component Tests (Debug Version)")
    print("=================================================")

    debug_log(f"Starting main function with {len(args) + 1} arguments")

    try:
        run_calculator_checks()
        run_string_utils_checks()
        run_simple_stack_checks()

        if args and args[0] == "--debug-demo":
            demonstrate_debugging_features()

        print()
        print("All tests passed successfully!")
        debug_log("All tests completed successfully")
        return 0
    except Exception as exc:
        print(f"Test failed with exception: {exc}", file=sys.stderr)
        debug_log(f"Exception caught: {exc}")
        print_stack_trace()
        return 1


if __name__ == "__main__":
    sys.exit(main())