from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[T]):
    """Half-open range ``[begin, end)``.

    An interval whose begin is not below its end is degenerate and
    covers nothing. It is accepted everywhere and treated as empty.
    """

    begin: T
    end: T

    @property
    def is_empty(self) -> bool:
        """Degenerate under natural ``<``; sets with a custom ``cmp`` judge this themselves."""
        return not self.begin < self.end  # pyright: ignore[reportOperatorIssue]

    def __str__(self) -> str:
        return f"[{self.begin} {self.end}]"
