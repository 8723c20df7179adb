from typing import Any, Callable, Dict, Optional, Tuple

from .deep_equal import use
from .errors import assert_arity, fail
from .helpers import (
    UNDEFINED, function_name, get_property, is_undefined, loose_equal,
    own_keys, type_of, value_to_string
)

Test = Callable[[Any], Any]


class Matcher:
    """A predicate over one ``actual`` value plus a message describing it.

    Matchers are immutable; ``or_`` and ``and_`` build new ones.
    """

    __slots__ = ('test', 'message')

    def __init__(self, test: Test, message: str):
        object.__setattr__(self, 'test', test)
        object.__setattr__(self, 'message', message)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.message}>'

    @staticmethod
    def is_matcher(value: Any) -> bool:
        return isinstance(value, Matcher)

    def _coerce(self, args: tuple) -> 'Matcher':
        if not args:
            fail('Matcher expected')
        assert_arity(args, 1, 1)
        other = args[0]
        return other if is_matcher(other) else create_matcher(other)

    def or_(self, *args: Any) -> 'Matcher':
        """Match when this matcher or the other one does, this one first"""
        left, right = self, self._coerce(args)

        def test(actual):
            return left.test(actual) or right.test(actual)

        return Matcher(test, f'{left.message}.or({right.message})')

    def and_(self, *args: Any) -> 'Matcher':
        """Match when both matchers do, this one first"""
        left, right = self, self._coerce(args)

        def test(actual):
            return left.test(actual) and right.test(actual)

        return Matcher(test, f'{left.message}.and({right.message})')

    def __or__(self, other: Any) -> 'Matcher':
        return self.or_(other)

    def __and__(self, other: Any) -> 'Matcher':
        return self.and_(other)

    # JavaScript spelling
    isMatcher = is_matcher


def is_matcher(value: Any) -> bool:
    """Returns True only for matchers built by this engine"""
    return isinstance(value, Matcher)


deep_equal = use(Matcher)


def match_object(actual: Any, expectation: Any) -> bool:
    """Subset match: every own key of ``expectation`` must match in ``actual``.

    Nested matchers are applied, nested plain objects are matched the same
    way, anything else is compared with ``deep_equal``. Keys only present in
    ``actual`` are ignored.
    """
    if is_undefined(actual):
        return False

    for key in own_keys(expectation):
        exp = get_property(expectation, key)
        act = get_property(actual, key)

        if is_matcher(exp):
            if not exp.test(None if act is UNDEFINED else act):
                return False
        elif type_of(exp) == 'object':
            if not match_object(act, exp):
                return False
        elif not deep_equal(act, exp):
            return False

    return True


Built = Tuple[Test, Optional[str]]


def _match_function(expectation: Callable, message: Optional[str]) -> Built:
    return expectation, message or f'match({function_name(expectation) or ""})'


def _match_number(expectation: Any, message: Optional[str]) -> Built:
    def test(actual):
        # coercion is wanted here: match(1) accepts 1.0, True and '1'
        return loose_equal(expectation, actual)

    return test, message


def _match_object(expectation: Any, message: Optional[str]) -> Built:
    predicate = get_property(expectation, 'test')
    if callable(predicate):
        def test(actual):
            return predicate(actual) is True

        return test, message or f'match({function_name(predicate) or ""})'

    pairs = [f'{key}: {value_to_string(get_property(expectation, key))}' for key in own_keys(expectation)]

    def test(actual):
        return match_object(actual, expectation)

    return test, message or f'match({", ".join(pairs)})'


def _match_regexp(expectation: Any, message: Optional[str]) -> Built:
    # str patterns only search str, bytes patterns only bytes
    subject = type(expectation.pattern)

    def test(actual):
        return isinstance(actual, subject) and expectation.search(actual) is not None

    return test, message


def _match_string(expectation: str, message: Optional[str]) -> Built:
    def test(actual):
        return isinstance(actual, str) and expectation in actual

    return test, message or f'match("{expectation}")'


TYPE_MAP: Dict[str, Callable[[Any, Optional[str]], Built]] = {
    'function': _match_function,
    'number': _match_number,
    'object': _match_object,
    'regexp': _match_regexp,
    'string': _match_string,
}


def create_matcher(*args: Any) -> Matcher:
    """Creates a matcher for ``expectation``.

    ``create_matcher(expectation, message=None)``; the message replaces the
    generated description. Expectations without an entry in ``TYPE_MAP``
    match values deeply equal to them.
    """
    assert_arity(args, 1, 2)
    expectation = args[0]
    message = args[1] if len(args) == 2 else None

    if len(args) == 2 and not isinstance(message, str):
        fail('Message should be a string', 'message')

    builder = TYPE_MAP.get(type_of(expectation))
    if builder is not None:
        test, message = builder(expectation, message)
    else:
        def test(actual):
            return deep_equal(actual, expectation)

    return Matcher(test, message or f'match({value_to_string(expectation)})')


__all__ = ['Matcher', 'TYPE_MAP', 'create_matcher', 'deep_equal', 'is_matcher', 'match_object']
