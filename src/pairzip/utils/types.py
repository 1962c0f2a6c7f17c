from collections.abc import Iterator
from typing import Protocol, runtime_checkable

type Pair[T, U] = tuple[T, U]


@runtime_checkable
class Producer[T](Protocol):
    """
    The minimal interface pulled from by a zip: yield the next element, or
    raise StopIteration once exhausted. Any Python iterator qualifies.
    """

    def __next__(self) -> T: ...
    def __iter__(self) -> Iterator[T]: ...
