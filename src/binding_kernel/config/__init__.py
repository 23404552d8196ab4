from .loader import ConfigError, load_runtime_config, load_yaml_config
from .models import BindingKernelConfig, LanguageSettings, RuntimeSettings, TracingSettings

__all__ = [
    "BindingKernelConfig",
    "ConfigError",
    "LanguageSettings",
    "RuntimeSettings",
    "TracingSettings",
    "load_runtime_config",
    "load_yaml_config",
]
