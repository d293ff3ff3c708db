"""Explicit success/failure result for callers that prefer values to exceptions."""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

from isspass.exceptions import IssPassError

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationResult(Generic[T]):
    """Holds either a success value or the error that prevented it, never both.

    A result is a failure exactly when ``error`` is set. A result without
    an error is a success, so ``success(None)`` (or an empty
    ``OperationResult()``) is a success carrying ``None``. Build results
    through :meth:`success`, :meth:`failure` or :meth:`capture`.

    Usage::

        result = await OperationResult.capture(client.next_pass_times())
        if result.ok:
            ...
    """

    value: T | None = None
    error: IssPassError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("OperationResult cannot hold both a value and an error")

    @classmethod
    def success(cls, value: T) -> OperationResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: IssPassError) -> OperationResult[T]:
        return cls(error=error)

    @classmethod
    async def capture(cls, awaitable: Awaitable[T]) -> OperationResult[T]:
        """Await *awaitable* and wrap its outcome.

        Only library errors are captured; anything else is a bug and
        propagates.
        """
        try:
            value = await awaitable
        except IssPassError as exc:
            return cls.failure(exc)
        return cls.success(value)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or re-raise the stored error unchanged."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
