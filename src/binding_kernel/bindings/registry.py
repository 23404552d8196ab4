from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import chain

from binding_kernel.bindings.types import (
    HookBinding,
    HookType,
    StepArgumentTransformationBinding,
    StepDefinitionBinding,
    StepDefinitionType,
)


@dataclass
class BindingRegistry:
    # Process-wide binding catalog. Written during single-threaded discovery, read-only after ready.
    ready: bool = False
    _step_definitions: list[StepDefinitionBinding] = field(default_factory=list)
    _hooks: dict[HookType, list[HookBinding]] = field(default_factory=dict)
    _step_transformations: list[StepArgumentTransformationBinding] = field(default_factory=list)

    def register_step_definition_binding(self, binding: StepDefinitionBinding) -> None:
        # No de-duplication; discovery must not register the same method twice.
        self._step_definitions.append(binding)

    def register_hook_binding(self, binding: HookBinding) -> None:
        hooks = self._hooks.setdefault(binding.hook_type, [])
        if binding not in hooks:
            hooks.append(binding)

    def register_step_argument_transformation_binding(self, binding: StepArgumentTransformationBinding) -> None:
        self._step_transformations.append(binding)

    def get_step_definitions(self) -> Sequence[StepDefinitionBinding]:
        return tuple(self._step_definitions)

    def get_considered_step_definitions(
        self, step_type: StepDefinitionType, step_text: str | None = None
    ) -> Sequence[StepDefinitionBinding]:
        """Return the candidates a matcher should consider for a step.

        ``step_text`` is an extension point for pre-filtering by text; it is
        accepted but currently ignored, and the matcher does all text matching.
        """
        return tuple(item for item in self._step_definitions if item.step_definition_type == step_type)

    def get_hooks(self, hook_type: HookType | None = None) -> Sequence[HookBinding]:
        if hook_type is None:
            return tuple(chain.from_iterable(self._hooks.values()))
        return tuple(self._hooks.get(hook_type, ()))

    def get_step_transformations(self) -> Sequence[StepArgumentTransformationBinding]:
        return tuple(self._step_transformations)
