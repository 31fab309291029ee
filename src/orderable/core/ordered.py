"""
Support for objects that define a three-way comparison.

The central class is `~ordered.OrderedValue`. A concrete subclass implements
one method, `compare`, and inherits every other ordering predicate::

    class Version(ordered.OrderedValue):

        def __init__(self, major: int, minor: int) -> None:
            self.major = major
            self.minor = minor

        def compare(self, other: 'Version') -> int:
            return (
                (self.major - other.major) or (self.minor - other.minor)
            )

    >>> Version(1, 2).is_between(Version(1, 0), Version(2, 0))
    True
"""
import abc
import enum
import typing


class IncomparableError(TypeError):
    """The objects do not support comparison with each other."""

    def __init__(self, this=None, other=None) -> None:
        super().__init__(this, other)
        self._types = (
            None if this is None and other is None
            else (type(this), type(other))
        )

    def __str__(self) -> str:
        if self._types is None:
            return "Comparison is not implemented"
        this, other = (t.__qualname__ for t in self._types)
        return f"Can't compare {this!r} to {other!r}"


class ComparisonResultError(TypeError):
    """A comparison produced a value with no sign."""

    def __init__(self, value) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return (
            f"Comparison result {self.value!r} is neither negative,"
            " zero, nor positive"
        )


class Sign(enum.IntEnum):
    """The outcome of a three-way comparison."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


def sign(value) -> Sign:
    """Reduce the result of a three-way comparison to its sign.

    Parameters
    ----------
    value : object
        The value returned by a `compare` method. Any object that supports
        ``<``, ``>``, and ``==`` against ``0`` is valid (e.g., `int`,
        `float`, `decimal.Decimal`, `fractions.Fraction`, numpy scalars).

    Returns
    -------
    `~ordered.Sign`

    Raises
    ------
    `~ordered.IncomparableError`
        `value` is ``NotImplemented``.
    `~ordered.ComparisonResultError`
        `value` is neither less than, greater than, nor equal to ``0`` (e.g.,
        NaN).

    Any exception raised while comparing `value` to ``0`` propagates
    unchanged.
    """
    if value is NotImplemented:
        raise IncomparableError
    if value < 0:
        return Sign.NEGATIVE
    if value > 0:
        return Sign.POSITIVE
    if value == 0:
        return Sign.ZERO
    raise ComparisonResultError(value)


def three_way(this, other) -> Sign:
    """The sign of ``this.compare(other)``."""
    result = this.compare(other)
    if result is NotImplemented:
        raise IncomparableError(this, other)
    return sign(result)


@typing.runtime_checkable
class Comparable(typing.Protocol):
    """Protocol for objects that support three-way comparison.

    Instance checks against this protocol will return `True` iff the instance
    implements a `compare` method. It exists to support type-checking
    comparable objects outside the `~ordered.OrderedValue` hierarchy.
    """

    __slots__ = ()

    @abc.abstractmethod
    def compare(self, other):
        pass


Self = typing.TypeVar('Self', bound='OrderedValue')


class OrderedValue(abc.ABC):
    """Abstract base class for objects with a three-way comparison.

    Concrete implementations of this class must define `compare`, which
    returns a negative number, zero, or a positive number when this object is
    respectively less than, equal to, or greater than `other`. It must define
    a total order on the implementing type.

    All other methods are defined in terms of the sign of `compare`:

    - `is_less_than`, `is_greater_than`, `is_less_than_or_equal_to`,
      `is_greater_than_or_equal_to`, `is_equal_to`, and `is_not_equal_to`
    - `is_` and `is_not`, which also consider identity and ``==``
    - `is_between`, `is_not_between`, and `clamp`
    - the operators `<`, `<=`, `>`, and `>=`

    Notes
    -----
    This class does not define `__eq__`, `__ne__`, or `__hash__`. Ordering
    equality (`is_equal_to`), identity (``is``), and structural equality
    (``==``) are three separate relations, and a subclass may define each as
    it sees fit.

    No method catches exceptions raised by `compare`.
    """

    __slots__ = ()

    @abc.abstractmethod
    def compare(self: Self, other: Self):
        """Compare this object to `other`.

        Returns
        -------
        number-like
            Negative if ``self`` orders before `other`, zero if they order
            equally, and positive if ``self`` orders after `other`.
        """
        pass

    def _sign(self: Self, other: Self) -> Sign:
        """Internal helper for the sign of ``self.compare(other)``."""
        return three_way(self, other)

    def is_less_than(self: Self, other: Self) -> bool:
        """True if this object orders before `other`."""
        return self._sign(other) is Sign.NEGATIVE

    def is_greater_than(self: Self, other: Self) -> bool:
        """True if this object orders after `other`."""
        return self._sign(other) is Sign.POSITIVE

    def is_less_than_or_equal_to(self: Self, other: Self) -> bool:
        """True if this object does not order after `other`."""
        return self._sign(other) is not Sign.POSITIVE

    def is_greater_than_or_equal_to(self: Self, other: Self) -> bool:
        """True if this object does not order before `other`."""
        return self._sign(other) is not Sign.NEGATIVE

    def is_equal_to(self: Self, other: Self) -> bool:
        """True if this object orders equally with `other`.

        This only consults `compare`. It does not check identity (``is``) or
        structural equality (``==``), either of which may disagree with it.
        See `is_` for a method that uses all three.
        """
        return self._sign(other) is Sign.ZERO

    def is_not_equal_to(self: Self, other: Self) -> bool:
        """True if this object does not order equally with `other`.

        This only consults `compare`. See `is_not` for a method that also
        checks identity and structural equality.
        """
        return self._sign(other) is not Sign.ZERO

    def is_(self: Self, other: Self) -> bool:
        """True if this object is, equals, or orders equally with `other`.

        The checks run in the following order and stop at the first that
        succeeds:

        1. ``self is other``
        2. ``self == other``
        3. ``self.is_equal_to(other)``
        """
        return (
            self is other
            or bool(self == other)
            or self.is_equal_to(other)
        )

    def is_not(self: Self, other: Self) -> bool:
        """True if this object neither is, equals, nor orders with `other`.

        The checks run in the following order and stop at the first that
        fails:

        1. ``self is not other``
        2. ``self != other``
        3. ``self.is_not_equal_to(other)``
        """
        return (
            self is not other
            and bool(self != other)
            and self.is_not_equal_to(other)
        )

    def is_between(self: Self, min: Self, max: Self) -> bool:
        """True if `min` <= this object <= `max`.

        The bounds are inclusive and are not checked against each other. If
        `min` orders after `max`, the result is always false.
        """
        return (
            self.is_greater_than_or_equal_to(min)
            and self.is_less_than_or_equal_to(max)
        )

    def is_not_between(self: Self, min: Self, max: Self) -> bool:
        """True if this object orders before `min` or after `max`."""
        return self.is_less_than(min) or self.is_greater_than(max)

    def clamp(self: Self, min: Self, max: Self) -> Self:
        """Restrict this object to the inclusive range [`min`, `max`].

        Returns
        -------
        `min` if this object orders before `min`, else `max` if this object
        orders after `max`, else this object. The result is always one of the
        three given objects, not a copy.
        """
        if self.is_less_than(min):
            return min
        if self.is_greater_than(max):
            return max
        return self

    @staticmethod
    def generate_comparator():
        """Create a new comparator that calls `compare` on its first argument.

        Every call creates a distinct `~comparators.Comparator`. Two
        comparators from separate calls behave identically but are neither
        identical (``is``) nor equal (``==``) to each other.
        """
        from orderable.core import comparators
        return comparators.generate()

    is_less = is_less_than
    is_greater = is_greater_than
    is_less_equal = is_less_than_or_equal_to
    is_greater_equal = is_greater_than_or_equal_to
    is_equal = is_equal_to
    is_not_equal = is_not_equal_to
    default_comparator = generate_comparator

    def __lt__(self, other) -> bool:
        """Called for self < other."""
        if not isinstance(other, OrderedValue):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other) -> bool:
        """Called for self <= other."""
        if not isinstance(other, OrderedValue):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other) -> bool:
        """Called for self > other."""
        if not isinstance(other, OrderedValue):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other) -> bool:
        """Called for self >= other."""
        if not isinstance(other, OrderedValue):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)
