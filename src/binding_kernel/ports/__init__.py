from .timing_sink import TimingSink
from .tracer import TestTracer

__all__ = ["TestTracer", "TimingSink"]
