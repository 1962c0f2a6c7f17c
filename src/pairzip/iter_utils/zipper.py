import operator
from collections.abc import Iterable, Iterator
from logging import warning
from typing import Any, Never, cast, final

from typing_extensions import override

from pairzip.utils.types import Pair

_END = object()


@final
class ZipIterator[T, U](Iterator[Pair[T, U]]):
    """
    Pulls one element from each producer per step and pairs them:
    [...T], [...U] -> [... (T,U) ], stopping at the shorter side.

    Once either producer runs dry the iterator stays ended and never pulls
    from either producer again. The producers must not be advanced elsewhere
    while this iterator holds them.

    Instances are exclusively owned: copying one raises TypeError. Ask the
    parent Zipper for a fresh, independent pass instead.
    """

    def __init__(self, producer1: Iterator[T], producer2: Iterator[U]):
        self._producer1: Iterator[T] = producer1
        self._producer2: Iterator[U] = producer2
        self._ended: bool = False

    @property
    def exhausted(self) -> bool:
        return self._ended

    def next(self) -> Pair[T, U] | None:
        """
        Produce the next pair, or None once either side is exhausted.

        producer2 is only pulled after producer1 yielded. If producer2 then
        turns out to be empty, the element taken from producer1 is dropped.
        """
        if self._ended:
            return None

        item1 = next(self._producer1, _END)

        if item1 is _END:
            self._ended = True
            return None

        item2 = next(self._producer2, _END)

        if item2 is _END:
            self._ended = True
            return None

        return cast(T, item1), cast(U, item2)

    @override
    def __next__(self) -> Pair[T, U]:
        pair = self.next()

        if pair is None:
            raise StopIteration
        return pair

    def __length_hint__(self) -> int:
        if self._ended:
            return 0

        return min(
            operator.length_hint(self._producer1),
            operator.length_hint(self._producer2),
        )

    def __copy__(self) -> Never:
        raise TypeError(
            f"{type(self).__name__} cannot be copied; iterate the Zipper again "
            "for an independent pass"
        )

    def __deepcopy__(self, memo: dict[int, Any]) -> Never:
        self.__copy__()


@final
class Zipper[T, U](Iterable[Pair[T, U]]):
    """
    streaming [...T], [...U] -> [... (T,U) ]

    Lazy: nothing is pulled from either source until a ZipIterator obtained
    from `iterate()` (or `iter()`) is advanced. Every call starts a fresh
    pass from the beginning of each source.
    """

    def __init__(self, source1: Iterable[T], source2: Iterable[U]):
        self._source1: Iterable[T] = source1
        self._source2: Iterable[U] = source2
        self._passes: int = 0

    @property
    def source1(self) -> Iterable[T]:
        return self._source1

    @property
    def source2(self) -> Iterable[U]:
        return self._source2

    def iterate(self) -> ZipIterator[T, U]:
        producer1 = iter(self._source1)
        producer2 = iter(self._source2)

        if self._passes > 0:
            # one-shot sources (generators, file handles, ...) only
            # yield their elements to the first pass
            for side, source, producer in (
                ("source1", self._source1, producer1),
                ("source2", self._source2, producer2),
            ):
                if producer is source:
                    warning(
                        f"Zipper pass {self._passes + 1}: {side} is a one-shot "
                        f"iterator ({type(source).__name__}) and will not restart"
                    )

        self._passes += 1
        return ZipIterator(producer1, producer2)

    @override
    def __iter__(self) -> ZipIterator[T, U]:
        return self.iterate()

    def __length_hint__(self) -> int:
        """An underestimate of the pair count; sized sources give it exactly."""
        return min(
            operator.length_hint(self._source1),
            operator.length_hint(self._source2),
        )

    @override
    def __repr__(self) -> str:
        return f"Zipper({self._source1!r}, {self._source2!r})"


def zipper[T, U](source1: Iterable[T], source2: Iterable[U]) -> Zipper[T, U]:
    """Lazily pair up two iterables; see Zipper."""
    return Zipper(source1, source2)
