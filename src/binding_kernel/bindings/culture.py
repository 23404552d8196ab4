from __future__ import annotations

from contextvars import ContextVar, Token
from types import TracebackType

from binding_kernel.bindings.context import FeatureContext

# Per-thread (per-context) culture; step code reads it through current_culture().
_current_culture: ContextVar[str | None] = ContextVar("binding_culture", default=None)


def current_culture() -> str | None:
    return _current_culture.get()


class CultureScope:
    # Applies the feature's binding culture for one invocation and restores the previous one on exit.
    def __init__(self, feature_context: FeatureContext | None) -> None:
        self.culture = feature_context.effective_binding_culture if feature_context is not None else None
        self._token: Token[str | None] | None = None

    def __enter__(self) -> CultureScope:
        if self.culture is not None:
            self._token = _current_culture.set(self.culture)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _current_culture.reset(self._token)
            self._token = None
