import functools
from collections.abc import Mapping
from typing import Any, Callable, Optional, Set, Tuple

from .helpers import (
    SCALARS, UNDEFINED, get_property, is_arguments, object_is, own_keys, type_of
)


def deep_equal_cyclic(actual: Any, expectation: Any, match: Optional[Any] = None) -> bool:
    """Recursive deep equality check that survives cyclic structures.

    When ``match`` (the matcher namespace) is given, a matcher found anywhere
    in ``expectation`` is applied to the value at the same place in
    ``actual`` instead of being compared to it.

    A pair of containers met again while still being compared is taken as
    equal; both graphs then have the same cycle at that point.
    """
    comparing: Set[Tuple[int, int]] = set()

    def equal(actual: Any, expectation: Any) -> bool:
        if match is not None and match.is_matcher(expectation):
            if match.is_matcher(actual):
                return actual is expectation
            return bool(expectation.test(actual))

        if actual is expectation:
            return True

        for value in (actual, expectation):
            if value is UNDEFINED or isinstance(value, SCALARS):
                return object_is(actual, expectation)

        if is_arguments(actual) or is_arguments(expectation):
            return equal_arguments(actual, expectation)

        if type(actual) is not type(expectation):
            return False

        pair = (id(actual), id(expectation))
        if pair in comparing:
            return True

        comparing.add(pair)
        try:
            return equal_structure(actual, expectation)
        finally:
            comparing.discard(pair)

    def equal_arguments(actual: Any, expectation: Any) -> bool:
        actual = list(actual.args) if is_arguments(actual) else actual
        expectation = list(expectation.args) if is_arguments(expectation) else expectation
        if type_of(actual) != 'array' or type_of(expectation) != 'array':
            return False
        return equal_sequence(actual, expectation)

    def equal_sequence(actual, expectation) -> bool:
        if len(actual) != len(expectation):
            return False
        return all(equal(a, e) for a, e in zip(actual, expectation))

    def equal_set(actual, expectation) -> bool:
        if len(actual) != len(expectation):
            return False
        return (all(any(equal(a, e) for e in expectation) for a in actual) and
                all(any(equal(a, e) for a in actual) for e in expectation))

    def equal_mapping(actual, expectation) -> bool:
        if len(actual) != len(expectation):
            return False
        for key in expectation:
            if key not in actual or not equal(actual[key], expectation[key]):
                return False
        return True

    def equal_structure(actual: Any, expectation: Any) -> bool:
        kind = type_of(expectation)

        if kind == 'date':
            return actual == expectation
        if kind == 'regexp':
            return actual.pattern == expectation.pattern and actual.flags == expectation.flags
        if kind == 'function':
            return False
        if kind == 'array':
            return equal_sequence(actual, expectation)
        if kind == 'set':
            return actual == expectation or equal_set(actual, expectation)
        if isinstance(expectation, Mapping):
            return equal_mapping(actual, expectation)

        if isinstance(expectation, BaseException):
            if actual.args != expectation.args:
                return False
        elif type(expectation).__eq__ is not object.__eq__:
            try:
                return bool(actual == expectation)
            except Exception:
                return False

        keys = own_keys(expectation)
        if sorted(map(repr, own_keys(actual))) != sorted(map(repr, keys)):
            return False
        return all(equal(get_property(actual, key), get_property(expectation, key)) for key in keys)

    return equal(actual, expectation)


def deep_equal(actual: Any, expectation: Any) -> bool:
    return deep_equal_cyclic(actual, expectation)


def use(match: Any) -> Callable[[Any, Any], bool]:
    """Bind the matcher namespace so nested matchers take part in comparisons"""
    return functools.partial(deep_equal_cyclic, match=match)


__all__ = ['deep_equal', 'deep_equal_cyclic', 'use']
