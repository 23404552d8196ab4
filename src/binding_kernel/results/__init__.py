from .collector import (
    NOT_STARTED_MESSAGE,
    DuplicateScenarioResultError,
    ResultCollectionNotStartedError,
    TestRunResultCollector,
)
from .models import Result, ScenarioInfo, TestResult, TestRunResult, TestStatus

__all__ = [
    "NOT_STARTED_MESSAGE",
    "DuplicateScenarioResultError",
    "Result",
    "ResultCollectionNotStartedError",
    "ScenarioInfo",
    "TestResult",
    "TestRunResult",
    "TestRunResultCollector",
    "TestStatus",
]
