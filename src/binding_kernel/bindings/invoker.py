from __future__ import annotations

import warnings
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta

from binding_kernel.bindings.clock import Clock, process_clock
from binding_kernel.bindings.context import ContextAccessor
from binding_kernel.bindings.culture import CultureScope
from binding_kernel.bindings.delegate_invoker import SynchronousDelegateInvoker
from binding_kernel.bindings.errors import (
    BindingArgumentError,
    BindingExecutionError,
    ErrorProvider,
    TargetInvocationError,
)
from binding_kernel.bindings.handle import CallableHandle
from binding_kernel.bindings.method import MethodDescriptor
from binding_kernel.bindings.types import MethodBinding
from binding_kernel.config.models import RuntimeSettings
from binding_kernel.ports.tracer import TestTracer


@dataclass(slots=True)
class InvocationTiming:
    # Out-cell: holds the duration even when invoke_binding raises.
    duration: timedelta | None = None


class BindingInvoker:
    """Executes one binding synchronously and reports how long it took.

    Failures are normalized before they reach the caller:

    * an argument list that does not fit the handle becomes ``BindingCallError``;
    * an exception raised by the implementation becomes ``BindingExecutionError``
      chained to the untouched original (see ``unwrap()``);
    * for an exception group only the first member is kept, the rest are dropped;
    * anything else propagates as is.
    """

    def __init__(
        self,
        settings: RuntimeSettings | None = None,
        *,
        error_provider: ErrorProvider | None = None,
        clock: Clock | None = None,
        delegate_invoker: SynchronousDelegateInvoker | None = None,
    ) -> None:
        self._settings = settings or RuntimeSettings()
        self._errors = error_provider or ErrorProvider()
        self._clock = clock
        self._delegate_invoker = delegate_invoker or SynchronousDelegateInvoker()

    @property
    def clock(self) -> Clock:
        # The shared process clock starts on first use, not at import.
        if self._clock is None:
            self._clock = process_clock()
        return self._clock

    def invoke_binding(
        self,
        binding: object,
        context_accessor: ContextAccessor | None,
        arguments: Sequence[object] | None,
        tracer: TestTracer | None,
        *,
        timing: InvocationTiming | None = None,
    ) -> tuple[object, timedelta]:
        try:
            method, handle = self.ensure_reflection_info(binding)
        except Exception:
            _record(timing, timedelta(0))
            raise

        clock = self.clock
        start = clock.elapsed()
        try:
            with self.create_culture_scope(context_accessor):
                result = self._dispatch(method, handle, context_accessor, arguments)
        except BindingArgumentError as exc:
            _record(timing, clock.elapsed() - start)
            raise self._errors.get_call_error(method, exc) from exc
        except TargetInvocationError as exc:
            _record(timing, clock.elapsed() - start)
            error = self._enrich(method, exc.inner)
            raise error from error.cause
        except BaseExceptionGroup as group:
            _record(timing, clock.elapsed() - start)
            error = self._enrich(method, group.exceptions[0])
            raise error from error.cause
        except Exception:
            _record(timing, clock.elapsed() - start)
            raise

        duration = clock.elapsed() - start
        _record(timing, duration)
        if self._settings.trace_timings and duration >= self._settings.min_traced_duration:
            self._trace(tracer, duration, method, arguments)
        return result, duration

    def ensure_reflection_info(self, binding: object) -> tuple[MethodDescriptor, CallableHandle]:
        if not isinstance(binding, MethodBinding):
            raise self._errors.get_non_reflectable_binding_error(binding)
        method = binding.method
        if (
            not isinstance(method, MethodDescriptor)
            or not callable(method.target)
            or (not method.is_static and method.declaring_type is None)
        ):
            raise self._errors.get_non_reflectable_binding_error(binding)

        handle = binding.handle_cell.handle
        if handle is None:
            # Unlocked: a concurrent first call may build an equivalent handle, last write wins.
            handle = self.create_handle(method)
            binding.handle_cell.handle = handle
        return method, handle

    def create_handle(self, method: MethodDescriptor) -> CallableHandle:
        return CallableHandle.for_method(method, error_provider=self._errors)

    def create_culture_scope(self, context_accessor: ContextAccessor | None) -> CultureScope:
        feature = context_accessor.feature_context if context_accessor is not None else None
        return CultureScope(feature)

    def _dispatch(
        self,
        method: MethodDescriptor,
        handle: CallableHandle,
        context_accessor: ContextAccessor | None,
        arguments: Sequence[object] | None,
    ) -> object:
        if method.is_static:
            return self._delegate_invoker.invoke(handle, tuple(arguments or ()))
        if context_accessor is None:
            raise ValueError(f"Instance binding {method.text} requires a context accessor")
        instance = context_accessor.get_binding_instance(method.declaring_type)
        return self._delegate_invoker.invoke(handle, (instance, *(arguments or ())))

    def _enrich(self, method: MethodDescriptor, cause: BaseException) -> BindingExecutionError:
        return self._errors.get_execution_error(method, cause)

    def _trace(
        self,
        tracer: TestTracer | None,
        duration: timedelta,
        method: MethodDescriptor,
        arguments: Sequence[object] | None,
    ) -> None:
        if tracer is None:
            return
        try:
            tracer.trace_duration(duration, method, arguments)
        except Exception as exc:  # noqa: BLE001 - tracing must not change the invocation outcome
            warnings.warn(f"Timing trace for {method.text} failed: {exc!r}", RuntimeWarning, stacklevel=3)


def _record(timing: InvocationTiming | None, duration: timedelta) -> None:
    if timing is not None:
        timing.duration = duration
