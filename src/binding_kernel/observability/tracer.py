from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta
from pathlib import Path

from binding_kernel.bindings.method import MethodDescriptor
from binding_kernel.config.models import TracingSettings
from binding_kernel.observability.records import BindingTimingRecord
from binding_kernel.observability.sinks import JsonlTimingSink, StdoutTimingSink
from binding_kernel.ports.timing_sink import TimingSink
from binding_kernel.ports.tracer import TestTracer


class SinkTestTracer(TestTracer):
    # Turns each traced invocation into a BindingTimingRecord for the sink.
    def __init__(self, sink: TimingSink, *, max_argument_len: int = 64) -> None:
        self._sink = sink
        self._max_argument_len = max_argument_len

    def trace_duration(
        self, duration: timedelta, method: MethodDescriptor, arguments: Sequence[object] | None
    ) -> None:
        self._sink.emit(
            BindingTimingRecord(
                owner=method.owner_name,
                name=method.name,
                signature=method.text,
                duration=duration,
                arguments=tuple(self._render(arg) for arg in arguments or ()),
                source_location=method.source_location,
            )
        )

    def close(self) -> None:
        self._sink.close()

    def _render(self, value: object) -> str:
        text = repr(value)
        if len(text) > self._max_argument_len:
            return text[: self._max_argument_len] + "...(truncated)"
        return text


class NullTestTracer(TestTracer):
    def trace_duration(
        self, duration: timedelta, method: MethodDescriptor, arguments: Sequence[object] | None
    ) -> None:
        return None

    def close(self) -> None:
        return None


def build_test_tracer(settings: TracingSettings) -> SinkTestTracer | NullTestTracer:
    if settings.sink == "stdout":
        return SinkTestTracer(StdoutTimingSink())
    if settings.sink == "jsonl":
        # Validated by TracingSettings: jsonl always carries a path.
        assert settings.path is not None
        return SinkTestTracer(JsonlTimingSink(Path(settings.path)))
    return NullTestTracer()
