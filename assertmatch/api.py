from typing import Any

from . import families, helpers, properties
from .errors import assert_arity, assert_method_exists, assert_type, fail
from .helpers import function_name, strict_equal, value_to_string
from .matcher import Matcher, create_matcher, is_matcher

any_ = create_matcher(lambda actual: True, 'any')

defined = create_matcher(lambda actual: not helpers.is_undefined(actual), 'defined')

truthy = create_matcher(lambda actual: bool(actual), 'truthy')

falsy = create_matcher(lambda actual: not actual, 'falsy')


def same(*args: Any) -> Matcher:
    """Match the very same object, or an equal scalar"""
    assert_arity(args, 1, 1)
    expectation = args[0]
    return create_matcher(lambda actual: strict_equal(expectation, actual),
                          f'same({value_to_string(expectation)})')


def in_(*args: Any) -> Matcher:
    """Match when actual is strictly equal to one of the listed values"""
    if not args or helpers.type_of(args[0]) != 'array':
        fail('array expected')
    assert_arity(args, 1, 1)
    expectations = args[0]
    return create_matcher(lambda actual: any(strict_equal(e, actual) for e in expectations),
                          f'in({value_to_string(expectations)})')


def type_of(*args: Any) -> Matcher:
    assert_arity(args, 1, 1)
    tag = args[0]
    assert_type(tag, 'string', 'type')
    return create_matcher(lambda actual: helpers.type_of(actual) == tag, f'typeOf("{tag}")')


def _is_class_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and bool(value) and all(isinstance(v, type) for v in value)


def instance_of(*args: Any) -> Matcher:
    """Match instances of a class, a tuple of classes, or anything whose
    ``__instancecheck__`` accepts actual."""
    assert_arity(args, 1, 1)
    klass = args[0]
    if not (isinstance(klass, type) or _is_class_tuple(klass)):
        assert_method_exists(klass, '__instancecheck__', 'type', '__instancecheck__')

    def test(actual):
        if isinstance(klass, type) or _is_class_tuple(klass):
            return isinstance(actual, klass)
        return bool(klass.__instancecheck__(actual))

    if isinstance(klass, tuple):
        name = ', '.join(k.__name__ for k in klass)
    else:
        name = function_name(klass) or repr(klass)
    return create_matcher(test, f'instanceOf({name})')


bool_ = type_of('boolean')
number = type_of('number')
string = type_of('string')
object_ = type_of('object')
func = type_of('function')
regexp = type_of('regexp')
date = type_of('date')
symbol = type_of('symbol')


class Match:
    """Matcher namespace; calling it is ``create_matcher``.

    Names come in the Python spelling and the JavaScript one. ``in`` is a
    keyword, use ``match.in_``.
    """

    Matcher = Matcher

    def __call__(self, *args: Any) -> Matcher:
        return create_matcher(*args)

    create_matcher = staticmethod(create_matcher)
    createMatcher = create_matcher
    is_matcher = staticmethod(is_matcher)
    isMatcher = is_matcher

    any = any_
    defined = defined
    truthy = truthy
    falsy = falsy
    same = staticmethod(same)
    in_ = staticmethod(in_)
    type_of = staticmethod(type_of)
    typeOf = type_of
    instance_of = staticmethod(instance_of)
    instanceOf = instance_of

    has = staticmethod(properties.has)
    has_own = staticmethod(properties.has_own)
    hasOwn = has_own
    has_nested = staticmethod(properties.has_nested)
    hasNested = has_nested
    every = staticmethod(properties.every)
    some = staticmethod(properties.some)

    array = families.array
    map = families.map_
    set = families.set_

    bool = bool_
    number = number
    string = string
    object = object_
    func = func
    regexp = regexp
    date = date
    symbol = symbol


# ``in`` is a keyword, reachable as getattr(match, 'in')
setattr(Match, 'in', staticmethod(in_))

match = Match()


__all__ = [
    'Match', 'match', 'any_', 'defined', 'truthy', 'falsy', 'same', 'in_',
    'type_of', 'instance_of', 'bool_', 'number', 'string', 'object_', 'func',
    'regexp', 'date', 'symbol'
]
