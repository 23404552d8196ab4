from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from binding_kernel.observability.records import BindingTimingRecord


@runtime_checkable
class TimingSink(Protocol):
    def emit(self, record: BindingTimingRecord) -> None:
        """Consume one BindingTimingRecord."""
        raise NotImplementedError("TimingSink is a port; use a concrete adapter.")

    def flush(self) -> None:
        """Flush buffered output if supported."""
        raise NotImplementedError("TimingSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Close the sink and release resources."""
        raise NotImplementedError("TimingSink is a port; use a concrete adapter.")
