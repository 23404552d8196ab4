from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class BindingTimingRecord:
    """One traced binding invocation: which method ran, for how long, with which arguments."""

    owner: str
    name: str
    signature: str
    duration: timedelta
    arguments: tuple[str, ...] = ()
    source_location: str | None = None
    recorded_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("BindingTimingRecord.name must be non-empty")
        if self.duration < timedelta(0):
            raise ValueError("BindingTimingRecord.duration must not be negative")

    @property
    def summary(self) -> str:
        # Human-readable line: "done: Owner.name(args) (1.2s)".
        qualified = f"{self.owner}.{self.name}" if self.owner else self.name
        return f"done: {qualified}({', '.join(self.arguments)}) ({self.duration.total_seconds():.1f}s)"

    def to_dict(self) -> dict[str, object]:
        return {
            "method": self.signature,
            "duration_ms": self.duration / timedelta(milliseconds=1),
            "arguments": list(self.arguments),
            "source_location": self.source_location,
            "recorded_at": self.recorded_at.isoformat().replace("+00:00", "Z"),
            "summary": self.summary,
        }
