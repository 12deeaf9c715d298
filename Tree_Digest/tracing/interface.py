"""Tracing capability the digest engine is handed. No internal deps."""

from abc import ABC, abstractmethod
from typing import Any, Union


TagValue = Union[str, int, float, bool]


class Span(ABC):
    """
    One traced unit of work.

    Usable as a context manager: leaving the block finishes the span, so
    a child's tags are final before its parent's block exits.
    """

    @abstractmethod
    def set_tag(self, key: str, value: TagValue) -> None: ...

    @abstractmethod
    def context(self) -> Any:
        """Opaque handle a new span can use as its parent."""

    @abstractmethod
    def finish(self) -> None: ...

    def set_error(self, message: str) -> None:
        self.set_tag("error", message)

    def __enter__(self) -> "Span":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()


class Tracer(ABC):

    @abstractmethod
    def start_span(self, operation_name: str, parent: Any = None) -> Span: ...

    def shutdown(self) -> None:
        """Flush and release exporter resources. Default: nothing to do."""
