from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from binding_kernel.bindings.method import MethodDescriptor

if TYPE_CHECKING:
    from binding_kernel.bindings.handle import CallableHandle


class StepDefinitionType(str, Enum):
    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"


class HookType(str, Enum):
    BEFORE_TEST_RUN = "BeforeTestRun"
    AFTER_TEST_RUN = "AfterTestRun"
    BEFORE_FEATURE = "BeforeFeature"
    AFTER_FEATURE = "AfterFeature"
    BEFORE_SCENARIO = "BeforeScenario"
    AFTER_SCENARIO = "AfterScenario"
    BEFORE_SCENARIO_BLOCK = "BeforeScenarioBlock"
    AFTER_SCENARIO_BLOCK = "AfterScenarioBlock"
    BEFORE_STEP = "BeforeStep"
    AFTER_STEP = "AfterStep"


DEFAULT_HOOK_ORDER = 10000


class HandleCell:
    # Memo slot for a binding's callable handle. Racing writers store equivalent handles.
    __slots__ = ("handle",)

    def __init__(self) -> None:
        self.handle: CallableHandle | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class MethodBinding:
    # Common base: a binding backed by a reflected method.
    method: MethodDescriptor
    handle_cell: HandleCell = field(default_factory=HandleCell, compare=False, repr=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class StepDefinitionBinding(MethodBinding):
    step_definition_type: StepDefinitionType
    # Matching expression is opaque here; the external matcher interprets it.
    expression: str


@dataclass(frozen=True, slots=True, kw_only=True)
class HookBinding(MethodBinding):
    hook_type: HookType
    order: int = DEFAULT_HOOK_ORDER


@dataclass(frozen=True, slots=True, kw_only=True)
class StepArgumentTransformationBinding(MethodBinding):
    expression: str | None = None
