from typing import Any, ContextManager, MutableSequence, Protocol


class RealArithmetic(Protocol):
    """Capabilities the barycentric algorithms need from a real-number type.

    Values produced by an implementation support ``+``, ``-``, ``*``, ``/``,
    negation and ordered comparison with each other and with Python floats.
    """

    name: str

    @property
    def zero(self) -> Any: ...

    @property
    def one(self) -> Any: ...

    def convert(self, value: Any) -> Any: ...

    def fma(self, a: Any, b: Any, c: Any) -> Any: ...

    def twice(self, value: Any) -> Any: ...

    def isfinite(self, value: Any) -> bool: ...

    def vector(self, size: int) -> MutableSequence[Any]: ...

    def scope(self) -> ContextManager[None]: ...
