import logging

import numpy
import pytest

from orderable.core import comparators
from orderable.core import ordered


class Version(ordered.OrderedValue):
    """Test class that orders by (major, minor)."""

    def __init__(self, major: int, minor: int, tag: str='') -> None:
        self.major = major
        self.minor = minor
        self.tag = tag

    def compare(self, other: 'Version') -> int:
        return (self.major - other.major) or (self.minor - other.minor)

    def __repr__(self) -> str:
        return f"Version({self.major}, {self.minor}, {self.tag!r})"


class Plain:
    """Test class that only satisfies the comparison protocol."""

    def __init__(self, __value) -> None:
        self.value = __value

    def compare(self, other: 'Plain'):
        return self.value - other.value


@pytest.fixture
def versions():
    """Unsorted versions, two of which order equally."""
    return [
        Version(1, 4),
        Version(0, 9),
        Version(1, 0, 'a'),
        Version(2, 1),
        Version(1, 0, 'b'),
    ]


def test_compare():
    """Test the basic comparison of a new comparator."""
    a, b, c = Version(1, 0), Version(1, 2), Version(1, 2)
    comparator = comparators.generate()
    assert comparator.compare(a, b) == -1
    assert comparator.compare(b, c) == 0
    assert comparator.compare(b, a) == 1
    assert comparator(a, b) == -1
    assert comparator(b, a) == 1


def test_protocol_objects():
    """Comparators accept any object with a `compare` method."""
    comparator = comparators.generate()
    assert comparator(Plain(1), Plain(2)) == -1
    assert comparator(Plain(2.5), Plain(2.5)) == 0
    values = [Plain(v) for v in (3, 1, 2)]
    assert [p.value for p in comparator.sorted(values)] == [1, 2, 3]


def test_distinct_instances():
    """Separately generated comparators are never equal."""
    first = comparators.generate()
    second = comparators.generate()
    assert first is not second
    assert first != second
    assert not first == second
    assert len({first, second}) == 2
    a, b = Version(0, 1), Version(0, 2)
    assert first(a, b) == second(a, b)


def test_sorted(versions):
    """Sorting is stable and honors `reverse`."""
    comparator = comparators.generate()
    result = comparator.sorted(versions)
    assert [(v.major, v.minor, v.tag) for v in result] == [
        (0, 9, ''),
        (1, 0, 'a'),
        (1, 0, 'b'),
        (1, 4, ''),
        (2, 1, ''),
    ]
    result = comparator.sorted(versions, reverse=True)
    assert [(v.major, v.minor, v.tag) for v in result] == [
        (2, 1, ''),
        (1, 4, ''),
        (1, 0, 'a'),
        (1, 0, 'b'),
        (0, 9, ''),
    ]
    assert comparator.sorted([]) == []


def test_key(versions):
    """The key function works with built-in functions."""
    comparator = comparators.generate()
    assert sorted(versions, key=comparator.key) == comparator.sorted(versions)
    assert max(versions, key=comparator.key) is versions[3]


def test_argsort(versions):
    """The sorting indices agree with `sorted` and keep ties in order."""
    comparator = comparators.generate()
    indices = comparator.argsort(versions)
    assert isinstance(indices, numpy.ndarray)
    assert indices.tolist() == [1, 2, 4, 0, 3]
    assert [versions[i] for i in indices] == comparator.sorted(versions)
    assert comparator.reversed().argsort(versions).tolist() == [3, 0, 2, 4, 1]
    assert comparator.argsort([]).size == 0


def test_reversed(versions):
    """A reversed comparator flips the sign."""
    comparator = comparators.generate()
    backward = comparator.reversed()
    assert isinstance(backward, comparators.Comparator)
    assert backward is not comparator
    a, b = Version(1, 0), Version(2, 0)
    assert backward(a, b) == 1
    assert backward(b, a) == -1
    assert backward(a, Version(1, 0)) == 0
    assert backward.sorted(versions)[0] is versions[3]
    forward = backward.reversed()
    assert forward(a, b) == -1
    assert 'Reversed' in repr(backward)


def test_min_max(versions):
    """The first least and first greatest values."""
    comparator = comparators.generate()
    assert comparator.min(*versions) is versions[1]
    assert comparator.max(*versions) is versions[3]
    tied = [Version(3, 0, 'x'), Version(3, 0, 'y')]
    assert comparator.min(*tied) is tied[0]
    assert comparator.max(*tied) is tied[0]
    with pytest.raises(ValueError):
        comparator.min()
    with pytest.raises(ValueError):
        comparator.max()


def test_incomparable():
    """Objects that refuse to compare raise a `TypeError`."""
    class Refuses:
        def compare(self, other):
            return NotImplemented
    comparator = comparators.generate()
    with pytest.raises(TypeError):
        comparator(Refuses(), Refuses())
    with pytest.raises(ordered.IncomparableError):
        comparator.sorted([Refuses(), Refuses()])


def test_generate_logs(caplog):
    """Generating a comparator emits a debug record."""
    with caplog.at_level(logging.DEBUG, logger='orderable.core.comparators'):
        comparators.generate()
    assert any(
        record.name == 'orderable.core.comparators'
        and 'Comparator()' in record.getMessage()
        for record in caplog.records
    )
