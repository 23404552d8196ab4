from .clock import Clock, MonotonicClock, process_clock
from .context import ContextAccessor, FeatureContext, ScenarioBindingContext
from .culture import CultureScope, current_culture
from .delegate_invoker import SynchronousDelegateInvoker
from .errors import (
    MAX_BINDING_PARAMETERS,
    BindingCallError,
    BindingConfigurationError,
    BindingError,
    BindingExecutionError,
    ErrorProvider,
    TooManyBindingParametersError,
    unwrap_binding_failure,
)
from .handle import CallableHandle
from .invoker import BindingInvoker, InvocationTiming
from .method import MethodDescriptor
from .registry import BindingRegistry
from .types import (
    HookBinding,
    HookType,
    MethodBinding,
    StepArgumentTransformationBinding,
    StepDefinitionBinding,
    StepDefinitionType,
)

# Binding exports: model, registry and invoker.
__all__ = [
    "MAX_BINDING_PARAMETERS",
    "BindingCallError",
    "BindingConfigurationError",
    "BindingError",
    "BindingExecutionError",
    "BindingInvoker",
    "BindingRegistry",
    "CallableHandle",
    "Clock",
    "ContextAccessor",
    "CultureScope",
    "ErrorProvider",
    "FeatureContext",
    "HookBinding",
    "HookType",
    "InvocationTiming",
    "MethodBinding",
    "MethodDescriptor",
    "MonotonicClock",
    "ScenarioBindingContext",
    "StepArgumentTransformationBinding",
    "StepDefinitionBinding",
    "StepDefinitionType",
    "SynchronousDelegateInvoker",
    "TooManyBindingParametersError",
    "current_culture",
    "process_clock",
    "unwrap_binding_failure",
]
