from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from binding_kernel.bindings.method import MethodDescriptor


@runtime_checkable
class TestTracer(Protocol):
    def trace_duration(
        self, duration: timedelta, method: MethodDescriptor, arguments: Sequence[object] | None
    ) -> None:
        """Record how long one binding invocation took. Fire-and-forget."""
        raise NotImplementedError("TestTracer is a port; use a concrete adapter.")
