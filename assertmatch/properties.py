"""Matchers keyed by a property name or path, and the every/some quantifiers."""

from typing import Any, Callable

from .errors import assert_arity, assert_matcher, assert_type, fail
from .helpers import (
    UNDEFINED, get, get_property, has_own as _has_own, is_iterable, is_undefined,
    iterate, own_keys, type_of, value_to_string
)
from .matcher import Matcher, create_matcher, deep_equal

PropertyTest = Callable[[Any, str], bool]


def _describe(prefix: str, property: str, value: Any) -> str:
    message = f'{prefix}("{property}"'
    if value is not UNDEFINED:
        message += f', {value_to_string(value)}'
    return message + ')'


def create_property_matcher(property_test: PropertyTest, prefix: str) -> Callable[..., Matcher]:
    """Builds ``(property, value=<omitted>) -> Matcher`` around ``property_test``.

    Without a value the matcher only checks that the property is there, with
    one it also requires the property's value to be deeply equal to it.
    """

    def property_matcher(property: Any, value: Any = UNDEFINED) -> Matcher:
        assert_type(property, 'string', 'property')
        only_property = value is UNDEFINED

        def test(actual):
            if is_undefined(actual) or not property_test(actual, property):
                return False
            return only_property or deep_equal(get_property(actual, property), value)

        return create_matcher(test, _describe(prefix, property, value))

    property_matcher.__name__ = prefix
    return property_matcher


def _has(actual: Any, property: str) -> bool:
    # class attributes count, a None value does not
    return not is_undefined(get_property(actual, property))


has = create_property_matcher(_has, 'has')

has_own = create_property_matcher(_has_own, 'hasOwn')


def has_nested(property: Any, value: Any = UNDEFINED) -> Matcher:
    """Match when the dotted/bracketed ``property`` path resolves on actual"""
    assert_type(property, 'string', 'property')
    only_property = value is UNDEFINED

    def test(actual):
        if is_undefined(actual):
            return False
        resolved = get(actual, property)
        if is_undefined(resolved):
            return False
        return only_property or deep_equal(resolved, value)

    return create_matcher(test, _describe('hasNested', property, value))


def _predicate(args: tuple) -> Matcher:
    if not args:
        fail('Matcher expected')
    assert_arity(args, 1, 1)
    assert_matcher(args[0])
    return args[0]


def every(*args: Any) -> Matcher:
    """Match when ``predicate`` holds for every value of an object or collection"""
    predicate = _predicate(args)

    def test(actual):
        if type_of(actual) == 'object':
            return all(predicate.test(get_property(actual, key)) for key in own_keys(actual))
        return is_iterable(actual) and all(predicate.test(item) for item in iterate(actual))

    return create_matcher(test, f'every({predicate.message})')


def some(*args: Any) -> Matcher:
    """Match when ``predicate`` holds for at least one value"""
    predicate = _predicate(args)

    def test(actual):
        if type_of(actual) == 'object':
            return not all(not predicate.test(get_property(actual, key)) for key in own_keys(actual))
        return is_iterable(actual) and not all(not predicate.test(item) for item in iterate(actual))

    return create_matcher(test, f'some({predicate.message})')


__all__ = ['create_property_matcher', 'has', 'has_own', 'has_nested', 'every', 'some']
