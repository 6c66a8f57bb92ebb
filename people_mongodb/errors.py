from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StoreError(Exception):
    """Raised or reported when a call against the document store fails."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None, message: Optional[str] = None):
        self.operation = operation
        self.cause = cause
        detail = message or (str(cause) if cause is not None else "store operation failed")
        super().__init__(f"{operation}: {detail}")


class Result(Generic[T]):
    """Outcome of a repository operation.

    An ok result with ``value is None`` means the record was not found, which
    is distinct from an error result.
    """

    __slots__ = ("value", "error")

    def __init__(self, value: Optional[T] = None, error: Optional[StoreError] = None):
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def found(self) -> bool:
        return self.ok and self.value is not None

    def unwrap(self) -> Optional[T]:
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Result(error={self.error!r})"
        return f"Result(value={self.value!r})"
