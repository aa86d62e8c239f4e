# quizkit

quizkit is a small set of teaching components with no dependencies beyond
the standard library:

- `quizkit.calculator.Calculator`: float arithmetic with a single memory slot.
- `quizkit.string_utils`: case conversion, palindromes, anagrams, counting,
  trimming, splitting, joining and searching, all with ASCII semantics.
- `quizkit.simple_stack.SimpleStack`: a last-in, first-out stack.
- `quizkit.debug_utils`: stack traces, crash handlers, debug assertions,
  debug logging and function tracing.
- `quizkit.demo`: a self-check of the components above, run as a command.

## Installation

```
pip install .
```

To run the tests, install the test extra first:

```
pip install ".[test]"
pytest
```

## Calculator

```python
from quizkit.calculator import Calculator

calc = Calculator()
calc.add(2.0, 3.0)          # 5.0
calc.subtract(5.0, 3.0)     # 2.0
calc.multiply(4.0, 3.0)     # 12.0
calc.divide(10.0, 2.0)      # 5.0
calc.power(9.0, 0.5)        # 3.0
calc.sqrt(16.0)             # 4.0
calc.is_valid_number(float("inf"))  # False

calc.store_in_memory(42.0)
calc.recall_from_memory()   # 42.0
calc.reset_memory()
calc.recall_from_memory()   # 0.0
```

- `divide` raises `ValueError("Division by zero")` when the divisor's magnitude
  is below machine epsilon.
- `sqrt` raises `ValueError` for negative input.
- `power` does not raise: where the result has no finite value it returns
  `inf`, `-inf` or `nan`.
- `store_in_memory` ignores infinite and NaN values, leaving memory unchanged.

## String utilities

```python
from quizkit import string_utils

string_utils.to_upper("MiXeD cAsE")                        # "MIXED CASE"
string_utils.reverse("hello")                               # "olleh"
string_utils.is_palindrome("A man a plan a canal Panama")   # True
string_utils.is_anagram("The Eyes", "They See")             # True
string_utils.count_words("   spaced   out   ")              # 2
string_utils.count_vowels("hello")                          # 2
string_utils.trim("  hello  ")                              # "hello"
string_utils.split("a,b,c", ",")                            # ["a", "b", "c"]
string_utils.join(["hello", "world"], " ")                  # "hello world"
string_utils.contains("hello world", "world")               # True
string_utils.find_nth_occurrence("abcabc", "bc", 2)         # 4
```

- Case conversion and the alphanumeric filtering used by `is_palindrome` and
  `is_anagram` touch ASCII characters only; trimming and word counting treat
  space, tab, newline, vertical tab, form feed and carriage return as whitespace.
- `split` takes a single-character delimiter (anything else raises
  `ValueError`) and drops a trailing empty field, so `split("a,b,", ",")` is
  `["a", "b"]`.
- `find_nth_occurrence` counts non-overlapping matches and returns `-1` when
  there are fewer than `n`; for `n == 0` it returns `0`, and a negative `n`
  raises `ValueError`.

## SimpleStack

```python
from quizkit.simple_stack import SimpleStack

stack = SimpleStack()
stack.push(1)
stack.push(2)
stack.top()                 # 2
stack.pop()                 # 2
stack.size()                # 1
len(stack)                  # 1
stack.empty()               # False

stack.reserve(100)
stack.capacity()            # 100
stack.clear()               # empties the stack, keeps the capacity
stack.shrink_to_fit()       # capacity becomes the current size
```

Popping from an empty stack, or reading its top, raises
`quizkit.simple_stack.EmptyStackError`, a subclass of `IndexError`.
`reserve` with a negative value raises `ValueError`.

## Debugging helpers

```python
from quizkit import debug_utils

debug_utils.install_crash_handlers()
lines = debug_utils.get_stack_trace(10)   # innermost frame first
debug_utils.print_stack_trace(10)         # same, to standard error

with debug_utils.FunctionTracer("work"):
    ...

@debug_utils.trace_function
def work():
    ...
```

- `get_stack_trace` and `print_stack_trace` list the caller's Python frames
  as `#NN name (file:line)`, at most `max_frames` of them (64 by default).
- `install_crash_handlers` installs `crash_handler` for SIGSEGV, SIGABRT,
  SIGFPE and SIGILL where the platform has them. On such a signal the handler
  reports it with a stack trace on standard error, restores the default action
  and raises the signal again.
- `FunctionTracer` always writes `[TRACE] Entering ...` and
  `[TRACE] Exiting ...` to standard error.
- `debug_assert`, `debug_log` and `trace_function` act only when the
  environment variable `QUIZKIT_DEBUG` is set to a true value (anything other
  than empty, `0`, `false`, `no` or `off`); otherwise they do nothing.
  A failed `debug_assert` prints the message, the caller's file and line and a
  stack trace, then raises `debug_utils.DebugAssertionError`.

## Demo

The demo runs a self-check of the calculator, the string utilities and the
stack:

```
quizkit-demo
```

Add `--debug-demo` to also show the debugging features:

```
quizkit-demo --debug-demo
```

It can also be started with `python -m quizkit.demo`. It installs the crash
handlers, exits with status 0 when all checks pass and 1 otherwise, printing
the failure and a stack trace to standard error. Set `QUIZKIT_DEBUG=1` to see
the debug log and function tracing as it runs.