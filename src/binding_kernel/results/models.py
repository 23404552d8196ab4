from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class TestStatus(str, Enum):
    __test__ = False

    PASSED = "PASSED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"
    AMBIGUOUS = "AMBIGUOUS"
    UNDEFINED = "UNDEFINED"
    # Reported by the wider framework but never tallied individually.
    PENDING = "PENDING"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class ScenarioInfo:
    # Identity of one executed scenario (one example row for outlines).
    feature_title: str
    scenario_title: str
    example_row: int | None = None
    tags: tuple[str, ...] = field(default=(), compare=False)


@dataclass(frozen=True, slots=True)
class TestResult:
    __test__ = False

    status: TestStatus
    message: str | None = None
    duration: timedelta | None = None


@dataclass(frozen=True, slots=True)
class TestRunResult:
    __test__ = False

    total: int
    passed: int
    failed: int
    skipped: int
    ambiguous: int
    undefined: int

    @property
    def succeeded(self) -> bool:
        # Skipped scenarios do not fail the run.
        return self.failed == 0 and self.ambiguous == 0 and self.undefined == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.succeeded else 1


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    # Success/failure value for queries where absence of state is expected.
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> Result[T]:
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None
