from __future__ import annotations

from datetime import timedelta
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures; loading lives in config.loader.


class RuntimeSettings(BaseModel):
    # Invoker inputs: timing traces and the threshold below which nothing is traced.
    model_config = ConfigDict(extra="forbid", frozen=True)
    trace_timings: bool = False
    min_traced_duration: timedelta = timedelta(milliseconds=100)

    @model_validator(mode="after")
    def _check_threshold(self) -> RuntimeSettings:
        if self.min_traced_duration < timedelta(0):
            raise ValueError("runtime.min_traced_duration must not be negative")
        return self


class LanguageSettings(BaseModel):
    # Feature language and the culture bindings run under.
    model_config = ConfigDict(extra="forbid", frozen=True)
    feature: str = "en-US"
    binding_culture: str | None = None


class TracingSettings(BaseModel):
    # Selects where timing traces are written.
    model_config = ConfigDict(extra="forbid", frozen=True)
    sink: Literal["stdout", "jsonl", "none"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _check_path(self) -> TracingSettings:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("tracing.path is required when tracing.sink is 'jsonl'")
        return self


class BindingKernelConfig(BaseModel):
    # Root config document.
    model_config = ConfigDict(extra="forbid", frozen=True)
    # Only schema version 1 exists; anything else is rejected.
    version: Literal[1] = 1
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)
    language: LanguageSettings = Field(default_factory=LanguageSettings)
    tracing: TracingSettings = Field(default_factory=TracingSettings)
