"""Teaching components: a calculator, ASCII string utilities, a simple stack, debugging helpers and a demo."""

__version__ = "0.1.0"
__all__ = ["calculator", "string_utils", "simple_stack", "debug_utils", "demo"]