from __future__ import annotations

from datetime import timedelta

from binding_kernel.bindings.clock import Clock, MonotonicClock, process_clock
from binding_kernel.bindings.context import ContextAccessor, FeatureContext, ScenarioBindingContext
from binding_kernel.bindings.invoker import BindingInvoker
from binding_kernel.config.models import BindingKernelConfig, LanguageSettings


class _Steps:
    pass


class _NeedsArgs:
    def __init__(self, name: str) -> None:
        self.name = name


def test_monotonic_clock_never_goes_backwards() -> None:
    clock = MonotonicClock()
    first = clock.elapsed()
    second = clock.elapsed()
    assert timedelta(0) <= first <= second
    assert isinstance(clock, Clock)


def test_process_clock_is_shared() -> None:
    assert process_clock() is process_clock()


def test_invoker_uses_process_clock_by_default() -> None:
    assert BindingInvoker().clock is process_clock()


def test_scenario_context_builds_one_instance_per_type() -> None:
    context = ScenarioBindingContext(feature=FeatureContext(title="Basket"))
    first = context.get_binding_instance(_Steps)
    assert context.get_binding_instance(_Steps) is first
    assert isinstance(context, ContextAccessor)
    assert context.feature_context is not None and context.feature_context.title == "Basket"


def test_scenario_context_accepts_preseeded_instances() -> None:
    context = ScenarioBindingContext()
    seeded = _NeedsArgs("seeded")
    context.register_instance(_NeedsArgs, seeded)
    assert context.get_binding_instance(_NeedsArgs) is seeded


def test_feature_context_prefers_binding_culture() -> None:
    assert FeatureContext(title="f").effective_binding_culture == "en-US"
    assert FeatureContext(title="f", language="de-DE").effective_binding_culture == "de-DE"
    assert FeatureContext(title="f", language="de-DE", binding_culture="en-GB").effective_binding_culture == "en-GB"


def test_feature_context_from_language_settings() -> None:
    settings = LanguageSettings(feature="nl-NL", binding_culture="nl-BE")
    feature = FeatureContext.from_settings("Returns", settings)
    assert feature == FeatureContext(title="Returns", language="nl-NL", binding_culture="nl-BE")
    assert feature.effective_binding_culture == "nl-BE"


def test_scenario_context_from_config_uses_language_section() -> None:
    # Without a binding culture the feature language is what bindings see.
    config = BindingKernelConfig(language=LanguageSettings(feature="sv-SE"))
    context = ScenarioBindingContext.from_config("Returns", config)
    assert context.feature_context is not None
    assert context.feature_context.title == "Returns"
    assert context.feature_context.effective_binding_culture == "sv-SE"
