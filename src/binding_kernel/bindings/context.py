from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from binding_kernel.config.models import BindingKernelConfig, LanguageSettings

DEFAULT_FEATURE_LANGUAGE = LanguageSettings().feature


@dataclass(frozen=True, slots=True)
class FeatureContext:
    # Feature-level facts the invoker needs; only culture is consumed here.
    title: str
    language: str = DEFAULT_FEATURE_LANGUAGE
    binding_culture: str | None = None

    @classmethod
    def from_settings(cls, title: str, settings: LanguageSettings) -> FeatureContext:
        return cls(title=title, language=settings.feature, binding_culture=settings.binding_culture)

    @property
    def effective_binding_culture(self) -> str:
        # Explicit binding culture wins over the feature file language.
        return self.binding_culture or self.language


@runtime_checkable
class ContextAccessor(Protocol):
    # The two capabilities the invoker asks of the execution engine.
    @property
    def feature_context(self) -> FeatureContext | None:
        raise NotImplementedError("ContextAccessor is a port; use a concrete context.")

    def get_binding_instance(self, declaring_type: type) -> object:
        raise NotImplementedError("ContextAccessor is a port; use a concrete context.")


@dataclass(slots=True)
class ScenarioBindingContext:
    # Scenario-scoped context: one lazily built instance per binding class, shared by all its steps.
    feature: FeatureContext | None = None
    _instances: dict[type, object] = field(default_factory=dict)

    @classmethod
    def from_config(cls, feature_title: str, config: BindingKernelConfig) -> ScenarioBindingContext:
        # Culture for every binding in the scenario comes from the language section.
        return cls(feature=FeatureContext.from_settings(feature_title, config.language))

    @property
    def feature_context(self) -> FeatureContext | None:
        return self.feature

    def get_binding_instance(self, declaring_type: type) -> object:
        instance = self._instances.get(declaring_type)
        if instance is None:
            instance = declaring_type()
            self._instances[declaring_type] = instance
        return instance

    def register_instance(self, declaring_type: type, instance: object) -> None:
        # Lets the engine pre-seed instances that need constructor arguments.
        self._instances[declaring_type] = instance
