from .records import BindingTimingRecord
from .sinks import JsonlTimingSink, StdoutTimingSink
from .tracer import NullTestTracer, SinkTestTracer, build_test_tracer

__all__ = [
    "BindingTimingRecord",
    "JsonlTimingSink",
    "NullTestTracer",
    "SinkTestTracer",
    "StdoutTimingSink",
    "build_test_tracer",
]
