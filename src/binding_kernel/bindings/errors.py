from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from binding_kernel.bindings.method import MethodDescriptor

MAX_BINDING_PARAMETERS = 20


class BindingError(RuntimeError):
    # Base for every failure raised by the binding layer.
    pass


class BindingConfigurationError(BindingError):
    # Setup bug: the binding cannot be reflected or dispatched at all.
    pass


class TooManyBindingParametersError(BindingConfigurationError):
    def __init__(self, max_parameters: int) -> None:
        self.max_parameters = max_parameters
        super().__init__(f"Binding methods with more than {max_parameters} parameters are not supported")


class BindingCallError(BindingError):
    # Supplied arguments do not fit the declared parameters of the method.
    def __init__(self, method: MethodDescriptor, reason: str) -> None:
        self.method = method
        self.reason = reason
        super().__init__(f"Parameter count or type mismatch when calling {method.text}: {reason}")


class BindingExecutionError(BindingError):
    """Failure raised by a step or hook implementation, enriched with its location.

    The original exception is kept untouched in ``cause`` (and ``__cause__`` when
    raised with ``from``), so its traceback still points at the implementation.
    """

    def __init__(self, cause: BaseException, *, method: MethodDescriptor, location: str) -> None:
        self.cause = cause
        self.method = method
        self.location = location
        super().__init__(f"{location}\n{type(cause).__name__}: {cause}")

    @property
    def kind(self) -> type[BaseException]:
        return type(self.cause)

    def unwrap(self) -> BaseException:
        return self.cause


class BindingArgumentError(TypeError):
    # Raised by a callable handle before dispatch; never leaves the invoker.
    pass


class TargetInvocationError(Exception):
    # Raised by a callable handle around any exception the target itself raised.
    def __init__(self, inner: BaseException) -> None:
        self.inner = inner
        super().__init__(f"Binding target raised {type(inner).__name__}")


def unwrap_binding_failure(exc: BaseException) -> BaseException:
    if isinstance(exc, BindingExecutionError):
        return exc.unwrap()
    return exc


class ErrorProvider:
    # Builds the caller-facing errors; subclass to change wording.
    def get_method_text(self, method: MethodDescriptor) -> str:
        location = method.source_location
        if location is None:
            return method.text
        return f"{method.text} in {location}"

    def get_call_error(self, method: MethodDescriptor, exc: BindingArgumentError) -> BindingCallError:
        error = BindingCallError(method, str(exc))
        error.__cause__ = exc
        return error

    def get_too_many_binding_param_error(self, max_parameters: int) -> TooManyBindingParametersError:
        return TooManyBindingParametersError(max_parameters)

    def get_non_reflectable_binding_error(self, binding: object) -> BindingConfigurationError:
        return BindingConfigurationError(f"The binding method cannot be used for reflection: {binding!r}")

    def get_execution_error(self, method: MethodDescriptor, cause: BaseException) -> BindingExecutionError:
        return BindingExecutionError(cause, method=method, location=self.get_method_text(method))
