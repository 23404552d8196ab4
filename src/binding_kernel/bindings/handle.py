from __future__ import annotations

import types
import typing
from collections.abc import Sequence
from dataclasses import dataclass

from binding_kernel.bindings.errors import (
    MAX_BINDING_PARAMETERS,
    BindingArgumentError,
    ErrorProvider,
    TargetInvocationError,
)
from binding_kernel.bindings.method import MethodDescriptor, type_name

# int is acceptable where float is declared, int and float where complex is.
_NUMERIC_TOWER: dict[type, tuple[type, ...]] = {
    float: (int, float),
    complex: (int, float, complex),
}


@dataclass(frozen=True, slots=True)
class CallableHandle:
    # Type-erased dispatch target: one homogeneous argument sequence in, one call out.
    method: MethodDescriptor
    slot_types: tuple[object, ...]

    @classmethod
    def for_method(cls, method: MethodDescriptor, *, error_provider: ErrorProvider | None = None) -> CallableHandle:
        # Ceiling counts declared parameters; an instance receiver adds one slot on top.
        if len(method.parameter_types) > MAX_BINDING_PARAMETERS:
            raise (error_provider or ErrorProvider()).get_too_many_binding_param_error(MAX_BINDING_PARAMETERS)
        if method.is_static:
            slot_types = method.parameter_types
        else:
            receiver = method.declaring_type if method.declaring_type is not None else object
            slot_types = (receiver, *method.parameter_types)
        return cls(method=method, slot_types=slot_types)

    @property
    def arity(self) -> int:
        return len(self.slot_types)

    def __call__(self, args: Sequence[object]) -> object:
        if len(args) != len(self.slot_types):
            raise BindingArgumentError(f"expected {len(self.slot_types)} argument(s), got {len(args)}")
        for index, (expected, value) in enumerate(zip(self.slot_types, args)):
            if not _accepts(expected, value):
                raise BindingArgumentError(
                    f"argument {index} expects {type_name(expected)}, got {type(value).__name__}"
                )
        try:
            return self.method.target(*args)
        except Exception as exc:
            raise TargetInvocationError(exc) from exc


def _accepts(expected: object, value: object) -> bool:
    if expected is object or expected is typing.Any:
        return True
    if expected is None or expected is type(None):
        return value is None
    origin = typing.get_origin(expected)
    if origin is typing.Union or origin is types.UnionType:
        return any(_accepts(arg, value) for arg in typing.get_args(expected))
    if origin is typing.Literal:
        return value in typing.get_args(expected)
    if origin is not None:
        # Parametrized generics are checked by their container type only.
        expected = origin
    if isinstance(expected, type):
        if typing.is_typeddict(expected):
            # TypedDicts are plain dicts at runtime.
            return isinstance(value, dict)
        try:
            return isinstance(value, _NUMERIC_TOWER.get(expected, expected))
        except TypeError:
            # Protocols without @runtime_checkable cannot be checked.
            return True
    # TypeVars, NewTypes and unresolved string annotations are not checked.
    return True
