"""Array, map and set matchers.

Each family root matches values of its kind and carries extension
matchers. Leaf values are compared with strict equality, only nested arrays
in ``array.deep_equals`` are compared structurally.
"""

from collections.abc import Mapping
from typing import Any

from .errors import assert_type, fail
from .helpers import UNDEFINED, iterable_to_string, strict_equal, type_of
from .matcher import Matcher, create_matcher, deep_equal


def _type_test(tag: str):
    def test(actual):
        return type_of(actual) == tag

    return test


def _item_at(actual: Any, index: int) -> Any:
    # negative positions are outside the array, not counted from its end
    return actual[index] if 0 <= index < len(actual) else UNDEFINED


class ArrayMatcher(Matcher):
    __slots__ = ()

    def deep_equals(self, expectation: Any) -> Matcher:
        assert_type(expectation, 'array', 'expectation')

        def same_element(element, expected):
            if type_of(expected) == 'array' and type_of(element) == 'array':
                return self.deep_equals(expected).test(element)
            return deep_equal(element, expected)

        def test(actual):
            return (type_of(actual) == 'array' and
                    len(actual) == len(expectation) and
                    all(same_element(a, e) for a, e in zip(actual, expectation)))

        return create_matcher(test, f'deepEquals([{iterable_to_string(expectation)}])')

    def starts_with(self, expectation: Any) -> Matcher:
        assert_type(expectation, 'array', 'expectation')

        def test(actual):
            return (type_of(actual) == 'array' and
                    all(strict_equal(_item_at(actual, i), e) for i, e in enumerate(expectation)))

        return create_matcher(test, f'startsWith([{iterable_to_string(expectation)}])')

    def ends_with(self, expectation: Any) -> Matcher:
        assert_type(expectation, 'array', 'expectation')

        def test(actual):
            if type_of(actual) != 'array':
                return False
            offset = len(actual) - len(expectation)
            return all(strict_equal(_item_at(actual, offset + i), e) for i, e in enumerate(expectation))

        return create_matcher(test, f'endsWith([{iterable_to_string(expectation)}])')

    def contains(self, expectation: Any) -> Matcher:
        assert_type(expectation, 'array', 'expectation')

        def test(actual):
            return (type_of(actual) == 'array' and
                    all(any(strict_equal(a, e) for a in actual) for e in expectation))

        return create_matcher(test, f'contains([{iterable_to_string(expectation)}])')

    deepEquals = deep_equals
    startsWith = starts_with
    endsWith = ends_with


def _strict_key(mapping: Any, key: Any) -> Any:
    """The key of ``mapping`` strictly equal to ``key``, UNDEFINED when absent"""
    # hashing alone would take True for 1
    if key not in mapping:
        return UNDEFINED
    return next((k for k in mapping if strict_equal(k, key)), UNDEFINED)


def _strict_member(collection: Any, element: Any) -> bool:
    return element in collection and any(strict_equal(e, element) for e in collection)


def _matches_entry(mapping: Any, key: Any, value: Any) -> bool:
    found = _strict_key(mapping, key)
    return found is not UNDEFINED and strict_equal(mapping[found], value)


def _assert_mapping(expectation: Any) -> None:
    if not isinstance(expectation, Mapping):
        fail(f'Expected type of expectation to be map, but was {type_of(expectation)}', 'expectation')


class MapMatcher(Matcher):
    __slots__ = ()

    def deep_equals(self, expectation: Any) -> Matcher:
        _assert_mapping(expectation)

        def test(actual):
            return (type_of(actual) == 'map' and
                    len(actual) == len(expectation) and
                    all(_matches_entry(expectation, key, value)
                        for key, value in actual.items()))

        return create_matcher(test, f'deepEquals(Map[{iterable_to_string(expectation)}])')

    def contains(self, expectation: Any) -> Matcher:
        _assert_mapping(expectation)

        def test(actual):
            return (type_of(actual) == 'map' and
                    all(_matches_entry(actual, key, value)
                        for key, value in expectation.items()))

        return create_matcher(test, f'contains(Map[{iterable_to_string(expectation)}])')

    deepEquals = deep_equals


class SetMatcher(Matcher):
    __slots__ = ()

    def deep_equals(self, expectation: Any) -> Matcher:
        assert_type(expectation, 'set', 'expectation')

        def test(actual):
            return (type_of(actual) == 'set' and
                    len(actual) == len(expectation) and
                    all(_strict_member(expectation, element) for element in actual))

        return create_matcher(test, f'deepEquals(Set[{iterable_to_string(expectation)}])')

    def contains(self, expectation: Any) -> Matcher:
        assert_type(expectation, 'set', 'expectation')

        def test(actual):
            return type_of(actual) == 'set' and all(_strict_member(actual, element) for element in expectation)

        return create_matcher(test, f'contains(Set[{iterable_to_string(expectation)}])')

    deepEquals = deep_equals


array = ArrayMatcher(_type_test('array'), 'typeOf("array")')
map_ = MapMatcher(_type_test('map'), 'typeOf("map")')
set_ = SetMatcher(_type_test('set'), 'typeOf("set")')


__all__ = ['ArrayMatcher', 'MapMatcher', 'SetMatcher', 'array', 'map_', 'set_']
