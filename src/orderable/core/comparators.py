"""
Callable objects that order values by their `compare` method.
"""
import functools
import logging
import typing

import numpy

from orderable.core import ordered


logger = logging.getLogger(__name__)


T = typing.TypeVar('T', bound=ordered.Comparable)


class Comparator:
    """A stateless two-argument ordering function.

    Calling an instance with ``(a, b)`` returns ``-1``, ``0``, or ``1``
    according to the sign of ``a.compare(b)``. Instances are suitable for
    `functools.cmp_to_key` and provide a `key` property that does exactly
    that.

    This class intentionally does not define `__eq__`: distinct instances are
    never equal, even though they order values identically.
    """

    __slots__ = ()

    def compare(self, this: T, other: T) -> int:
        """Compare `this` to `other` via ``this.compare(other)``."""
        return int(ordered.three_way(this, other))

    def __call__(self, this: T, other: T) -> int:
        """Called for self(this, other)."""
        return self.compare(this, other)

    @property
    def key(self):
        """A key function for `sorted`, `min`, `max`, and similar."""
        return functools.cmp_to_key(self)

    def sorted(
        self,
        values: typing.Iterable[T],
        reverse: bool=False,
    ) -> typing.List[T]:
        """Sort `values` with this comparator.

        The sort is stable: values that compare equal keep their relative
        order.
        """
        return sorted(values, key=self.key, reverse=reverse)

    def argsort(self, values: typing.Sequence[T]) -> numpy.ndarray:
        """Compute the indices that would sort `values`.

        Parameters
        ----------
        values : sequence
            The objects to order. Each must support ``compare`` with the
            others.

        Returns
        -------
        `numpy.ndarray`
            A one-dimensional integer array such that ``[values[i] for i in
            result]`` equals ``self.sorted(values)``. Ties keep their input
            order.
        """
        key = self.key
        indices = sorted(range(len(values)), key=lambda i: key(values[i]))
        return numpy.array(indices, dtype=int)

    def reversed(self) -> 'Comparator':
        """Create a new comparator with the opposite order."""
        return Reversed(self)

    def min(self, *values: T) -> T:
        """The first of `values` that no other value orders before."""
        if not values:
            raise ValueError("min() requires at least one value")
        return min(values, key=self.key)

    def max(self, *values: T) -> T:
        """The first of `values` that no other value orders after."""
        if not values:
            raise ValueError("max() requires at least one value")
        return max(values, key=self.key)

    def __repr__(self) -> str:
        """An unambiguous representation of this object."""
        return f"{self.__class__.__qualname__}()"


class Reversed(Comparator):
    """A comparator that inverts another comparator."""

    __slots__ = ('_base',)

    def __init__(self, base: Comparator) -> None:
        self._base = base

    def compare(self, this: T, other: T) -> int:
        return -self._base.compare(this, other)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._base!r})"


def generate() -> Comparator:
    """Create a new comparator for objects with a `compare` method.

    Each call returns a distinct instance. See `~comparators.Comparator`.
    """
    comparator = Comparator()
    logger.debug("Generated %r at %#x", comparator, id(comparator))
    return comparator
