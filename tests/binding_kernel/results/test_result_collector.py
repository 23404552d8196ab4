from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from binding_kernel.results.collector import (
    DuplicateScenarioResultError,
    ResultCollectionNotStartedError,
    TestRunResultCollector,
)
from binding_kernel.results.models import ScenarioInfo, TestResult, TestRunResult, TestStatus


def _scenario(title: str, row: int | None = None) -> ScenarioInfo:
    return ScenarioInfo(feature_title="Checkout", scenario_title=title, example_row=row)


def test_collect_before_start_raises() -> None:
    collector = TestRunResultCollector()
    with pytest.raises(ResultCollectionNotStartedError, match="has not been started"):
        collector.collect_test_result_for_scenario(_scenario("A"), TestResult(TestStatus.PASSED))


def test_query_before_start_returns_failure_value() -> None:
    collector = TestRunResultCollector()
    result = collector.get_current_result()
    assert not result.is_success
    assert result.error == "Result collection has not been started"
    assert result.value is None


def test_start_collecting_is_idempotent() -> None:
    collector = TestRunResultCollector()
    collector.start_collecting()
    collector.collect_test_result_for_scenario(_scenario("A"), TestResult(TestStatus.PASSED))
    collector.start_collecting()
    assert collector.is_started
    # Restarting does not clear the ledger.
    assert collector.get_current_result().value == TestRunResult(
        total=1, passed=1, failed=0, skipped=0, ambiguous=0, undefined=0
    )


def test_each_status_is_tallied() -> None:
    collector = TestRunResultCollector()
    collector.start_collecting()
    for title, status in [
        ("A", TestStatus.PASSED),
        ("B", TestStatus.FAILED),
        ("C", TestStatus.SKIPPED),
        ("D", TestStatus.AMBIGUOUS),
        ("E", TestStatus.UNDEFINED),
    ]:
        collector.collect_test_result_for_scenario(_scenario(title), TestResult(status))

    result = collector.get_current_result()
    assert result.is_success
    assert result.value == TestRunResult(total=5, passed=1, failed=1, skipped=1, ambiguous=1, undefined=1)


def test_out_of_set_statuses_count_only_in_total() -> None:
    collector = TestRunResultCollector()
    collector.start_collecting()
    collector.collect_test_result_for_scenario(_scenario("A"), TestResult(TestStatus.PENDING))
    collector.collect_test_result_for_scenario(_scenario("B"), TestResult(TestStatus.UNKNOWN))
    collector.collect_test_result_for_scenario(_scenario("C"), TestResult(TestStatus.PASSED))

    summary = collector.get_current_result().value
    assert summary is not None
    assert summary.total == 3
    assert summary.passed + summary.failed + summary.skipped + summary.ambiguous + summary.undefined == 1


def test_duplicate_scenario_is_rejected() -> None:
    collector = TestRunResultCollector()
    collector.start_collecting()
    collector.collect_test_result_for_scenario(_scenario("A"), TestResult(TestStatus.PASSED))
    with pytest.raises(DuplicateScenarioResultError):
        collector.collect_test_result_for_scenario(_scenario("A"), TestResult(TestStatus.FAILED))
    # The first submission is kept.
    summary = collector.get_current_result().value
    assert summary is not None and summary.passed == 1 and summary.failed == 0


def test_example_rows_are_distinct_scenarios() -> None:
    collector = TestRunResultCollector()
    collector.start_collecting()
    collector.collect_test_result_for_scenario(_scenario("Outline", 0), TestResult(TestStatus.PASSED))
    collector.collect_test_result_for_scenario(_scenario("Outline", 1), TestResult(TestStatus.PASSED))
    summary = collector.get_current_result().value
    assert summary is not None and summary.total == 2


def test_tags_do_not_affect_identity() -> None:
    tagged = ScenarioInfo(feature_title="Checkout", scenario_title="A", tags=("@smoke",))
    assert tagged == _scenario("A")
    assert hash(tagged) == hash(_scenario("A"))


def test_concurrent_collection_loses_no_writes() -> None:
    collector = TestRunResultCollector()
    collector.start_collecting()
    statuses = [TestStatus.PASSED, TestStatus.FAILED, TestStatus.SKIPPED]

    def record(index: int) -> None:
        collector.collect_test_result_for_scenario(_scenario(f"S{index}"), TestResult(statuses[index % 3]))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(record, range(300)))

    summary = collector.get_current_result().value
    assert summary is not None
    assert summary.total == 300
    assert (summary.passed, summary.failed, summary.skipped) == (100, 100, 100)


def test_concurrent_duplicate_is_rejected_exactly_once() -> None:
    collector = TestRunResultCollector()
    collector.start_collecting()

    def record(_: int) -> bool:
        try:
            collector.collect_test_result_for_scenario(_scenario("Shared"), TestResult(TestStatus.PASSED))
        except DuplicateScenarioResultError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=4) as pool:
        accepted = list(pool.map(record, range(8)))

    assert accepted.count(True) == 1
    summary = collector.get_current_result().value
    assert summary is not None and summary.total == 1
