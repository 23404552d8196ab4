from __future__ import annotations

from threading import Lock

from binding_kernel.results.models import Result, ScenarioInfo, TestResult, TestRunResult, TestStatus

NOT_STARTED_MESSAGE = "Result collection has not been started"


class ResultCollectionNotStartedError(RuntimeError):
    # Writing before start_collecting is a caller bug.
    pass


class DuplicateScenarioResultError(KeyError):
    # Each scenario identity may be recorded once per run.
    def __init__(self, scenario: ScenarioInfo) -> None:
        self.scenario = scenario
        super().__init__(f"A result for scenario {scenario!r} has already been collected")


class TestRunResultCollector:
    __test__ = False

    # Thread-safe scenario -> status ledger; one coarse lock guards writes and the aggregate read.
    def __init__(self) -> None:
        self._is_started = False
        self._collected: dict[ScenarioInfo, TestResult] = {}
        self._lock = Lock()

    @property
    def is_started(self) -> bool:
        return self._is_started

    def start_collecting(self) -> None:
        # Idempotent.
        self._is_started = True

    def collect_test_result_for_scenario(self, scenario: ScenarioInfo, result: TestResult) -> None:
        if not self._is_started:
            raise ResultCollectionNotStartedError(f"{NOT_STARTED_MESSAGE}.")
        with self._lock:
            if scenario in self._collected:
                raise DuplicateScenarioResultError(scenario)
            self._collected[scenario] = result

    def get_current_result(self) -> Result[TestRunResult]:
        # Polling before start is expected, so it is a failure value rather than an exception.
        if not self._is_started:
            return Result.failure(NOT_STARTED_MESSAGE)

        counts = {
            TestStatus.PASSED: 0,
            TestStatus.FAILED: 0,
            TestStatus.SKIPPED: 0,
            TestStatus.AMBIGUOUS: 0,
            TestStatus.UNDEFINED: 0,
        }
        with self._lock:
            total = len(self._collected)
            for result in self._collected.values():
                if result.status in counts:
                    counts[result.status] += 1

        return Result.success(
            TestRunResult(
                total=total,
                passed=counts[TestStatus.PASSED],
                failed=counts[TestStatus.FAILED],
                skipped=counts[TestStatus.SKIPPED],
                ambiguous=counts[TestStatus.AMBIGUOUS],
                undefined=counts[TestStatus.UNDEFINED],
            )
        )
