# Shell Module
"""
User-facing surfaces over the core arithmetic:
- Operation dispatch table and request/response evaluate() - calculator.py
- Interactive read-evaluate-print loop - calculator.py
- Demonstration of sample computations - demo.py
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import calculator, demo
    for module in (calculator, demo):
        if hasattr(module, name):
            return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    'Calculator',
    'Operation',
    'OPERATIONS',
    'evaluate',
    'get_operation',
    'available_operations',
    'demonstrate',
]
