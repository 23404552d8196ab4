from .bindings import BindingInvoker, BindingRegistry, InvocationTiming
from .results import TestRunResultCollector

# Top-level exports cover the three entry points; details live in the sub-packages.
__all__ = [
    "BindingInvoker",
    "BindingRegistry",
    "InvocationTiming",
    "TestRunResultCollector",
]
