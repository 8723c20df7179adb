import logging
from typing import Any, Optional

from .helpers import type_of

logger = logging.getLogger(__name__)


class ArgumentError(TypeError):
    """Raised when a matcher is built or combined with invalid arguments.

    Only ever raised while constructing matchers, never from ``Matcher.test``.
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)

        self.code = 'ERR_INVALID_ARG_TYPE'
        self.name = 'ArgumentError'
        self.argument = argument

    def __str__(self) -> str:
        return f'{self.name} [{self.code}]: {super().__str__()}'


def fail(message: str, argument: Optional[str] = None) -> None:
    logger.debug('argument error: %s', message)
    raise ArgumentError(message, argument)


def assert_type(value: Any, type_name: str, name: str) -> None:
    actual = type_of(value)
    if actual != type_name:
        fail(f'Expected type of {name} to be {type_name}, but was {actual}', name)


def assert_method_exists(value: Any, method: str, name: str, method_path: str) -> None:
    if getattr(value, method, None) is None:
        fail(f'Expected {name} to have method {method_path}', name)


def assert_matcher(value: Any) -> None:
    # matcher imports this module
    from .matcher import is_matcher

    if not is_matcher(value):
        fail('Matcher expected')


def assert_arity(args: tuple, minimum: int, maximum: int) -> None:
    count = len(args)
    if count < minimum or count > maximum:
        if minimum == maximum:
            fail(f'Expected {minimum} argument, received {count}')
        fail(f'Expected {minimum} or {maximum} arguments, received {count}')


__all__ = ['ArgumentError', 'fail', 'assert_type', 'assert_method_exists', 'assert_matcher', 'assert_arity']
