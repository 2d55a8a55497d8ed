"""
comparator - Three-way comparison dispatch for ordered containers

A skip list only ever asks one question of its elements: how do two of them
order? This module answers it through a Comparator, which supports natural
ordering, reversed ordering, key functions and custom Python callables.
"""

from enum import Enum
from typing import Any, Callable, Optional, Union


class ComparatorType(Enum):
    """Comparator implementation type."""
    NATURAL = "natural"
    REVERSE = "reverse"
    KEY_FUNC = "key_func"
    PYTHON = "python"


def _compare_natural(a: Any, b: Any) -> int:
    """Three-way comparison using natural ordering.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if a < b:
        return -1
    elif a > b:
        return 1
    return 0


def _compare_reverse(a: Any, b: Any) -> int:
    """Reverse natural ordering."""
    return -_compare_natural(a, b)


class Comparator:
    """Element comparison dispatcher for ordered containers.

    Examples:
        # Natural ordering (default)
        s = SkipList()

        # Reverse ordering
        s = SkipList(cmp=Comparator.reverse())

        # Key function
        s = SkipList(key=str.lower)

        # Custom Python callable
        def by_length(a, b):
            return len(a) - len(b)
        s = SkipList(cmp=by_length)
    """

    __slots__ = ('_type', '_compare_func', '_key_func')

    def __init__(
        self,
        cmp_type: ComparatorType,
        compare_func: Callable[[Any, Any], int],
        key_func: Optional[Callable[[Any], Any]] = None,
    ):
        """Initialize comparator (internal use - use static methods)."""
        self._type = cmp_type
        self._compare_func = compare_func
        self._key_func = key_func

    @staticmethod
    def natural() -> 'Comparator':
        """Create a comparator using Python's natural ordering.

        Uses __lt__ and __gt__ operators for comparison.
        This is the default comparator for ordered containers.
        """
        return Comparator(ComparatorType.NATURAL, _compare_natural)

    @staticmethod
    def reverse() -> 'Comparator':
        """Create a comparator that reverses natural ordering."""
        return Comparator(ComparatorType.REVERSE, _compare_reverse)

    @staticmethod
    def from_callable(func: Callable[[Any, Any], int]) -> 'Comparator':
        """Create a comparator from a Python callable.

        The callable must accept two arguments and return:
        - Negative integer if first < second
        - Zero if first == second
        - Positive integer if first > second

        Raises:
            TypeError: If func is not callable
        """
        if not callable(func):
            raise TypeError("func must be callable")
        return Comparator(ComparatorType.PYTHON, func)

    @staticmethod
    def from_key(key_func: Callable[[Any], Any]) -> 'Comparator':
        """Create a comparator from a key function.

        The key function extracts a comparison key from each element,
        similar to the key parameter in sorted(). Keys are extracted
        once at insertion time and compared using natural ordering.

        Raises:
            TypeError: If key_func is not callable
        """
        if not callable(key_func):
            raise TypeError("key_func must be callable")
        return Comparator(ComparatorType.KEY_FUNC, _compare_natural, key_func)

    def compare(self, a: Any, b: Any) -> int:
        """Compare two sort keys.

        Returns:
            Negative if a < b, zero if a == b, positive if a > b
        """
        return self._compare_func(a, b)

    def extract_key(self, value: Any) -> Any:
        """Extract the sort key of an element.

        For key function comparators this calls the key function;
        otherwise the element is its own sort key.
        """
        if self._key_func is not None:
            return self._key_func(value)
        return value

    @property
    def type(self) -> str:
        """Comparator type as string ('natural', 'reverse', 'key_func', 'python')."""
        return self._type.value

    def __repr__(self) -> str:
        return f"Comparator(type='{self.type}')"


def resolve_comparator(
    cmp: Optional[Union[Comparator, Callable[[Any, Any], int]]] = None,
    key: Optional[Callable[[Any], Any]] = None,
) -> Comparator:
    """Resolve comparator from cmp/key parameters.

    This helper function is used by container constructors to create
    the appropriate comparator from user-provided parameters.

    Args:
        cmp: Comparator instance or comparison callable
        key: Key extraction function

    Returns:
        Resolved Comparator

    Raises:
        TypeError: If both cmp and key are provided
        TypeError: If cmp is not Comparator or callable
        TypeError: If key is not callable
    """
    if cmp is not None and key is not None:
        raise TypeError("Cannot specify both 'cmp' and 'key'")

    if cmp is not None:
        if isinstance(cmp, Comparator):
            return cmp
        if callable(cmp):
            return Comparator.from_callable(cmp)
        raise TypeError("cmp must be a Comparator or callable")

    if key is not None:
        if not callable(key):
            raise TypeError("key must be callable")
        return Comparator.from_key(key)

    return Comparator.natural()
