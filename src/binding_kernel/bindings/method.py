from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from binding_kernel.bindings.errors import BindingConfigurationError

_SUPPORTED_KINDS = {
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
}


@dataclass(frozen=True, slots=True)
class MethodDescriptor:
    # Reflected shape of a step/hook implementation; the receiver is never part of parameter_types.
    name: str
    target: Callable[..., object]
    declaring_type: type | None = None
    is_static: bool = True
    parameter_types: tuple[object, ...] = ()
    return_type: object | None = None

    @classmethod
    def from_function(cls, fn: Callable[..., object], *, declaring_type: type | None = None) -> MethodDescriptor:
        """Describe a module function or a member of ``declaring_type``.

        ``staticmethod`` and ``classmethod`` members are static (a classmethod is
        bound to its class up front); plain functions defined on the class are
        instance methods and receive the bound instance as their first argument.
        """
        name = getattr(fn, "__name__", None)
        if not isinstance(name, str) or not callable(fn):
            raise BindingConfigurationError(f"Binding target is not a named callable: {fn!r}")

        target: Callable[..., object] = fn
        is_static = True
        if declaring_type is not None:
            member = inspect.getattr_static(declaring_type, name, None)
            if isinstance(member, staticmethod):
                target = member.__func__
            elif isinstance(member, classmethod):
                target = getattr(declaring_type, name)
            else:
                is_static = False

        params = list(inspect.signature(target).parameters.values())
        if not is_static:
            # Drop the receiver; it is supplied by the context accessor at dispatch time.
            params = params[1:]
        for param in params:
            if param.kind not in _SUPPORTED_KINDS:
                raise BindingConfigurationError(
                    f"Binding method {name} declares unsupported parameter '{param.name}' ({param.kind.description})"
                )

        hints = _type_hints(target)
        return_type = hints.get("return", object)
        return cls(
            name=name,
            target=target,
            declaring_type=declaring_type,
            is_static=is_static,
            parameter_types=tuple(hints.get(param.name, object) for param in params),
            return_type=None if return_type is type(None) else return_type,
        )

    @property
    def owner_name(self) -> str:
        if self.declaring_type is not None:
            return self.declaring_type.__name__
        return getattr(self.target, "__module__", None) or "<unknown>"

    @property
    def text(self) -> str:
        # Human-readable signature used in error headers and traces.
        params = ", ".join(type_name(item) for item in self.parameter_types)
        return f"{self.owner_name}.{self.name}({params})"

    @property
    def source_location(self) -> str | None:
        func = getattr(self.target, "__func__", self.target)
        code = getattr(inspect.unwrap(func), "__code__", None)
        if code is None:
            return None
        return f"{Path(code.co_filename).name}:{code.co_firstlineno}"


def type_name(value: object) -> str:
    if isinstance(value, type):
        return value.__name__
    return str(value).replace("typing.", "")


def _type_hints(target: Callable[..., object]) -> dict[str, object]:
    func = getattr(target, "__func__", target)
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError):
        # Unresolvable forward references degrade to untyped parameters.
        return {}
