import re
import enum
import math
import types
import inspect
import datetime
import functools
from numbers import Number
from collections.abc import Iterable, Iterator, Mapping, Sequence, Set as AbstractSet
from typing import Any, List, Optional

from .config.settings import get_settings


class _Undefined:
    """Marks a missing property, an out-of-range index or an omitted argument."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'undefined'

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

SCALARS = (type(None), bool, Number, str, bytes)
ROUTINES = (types.FunctionType, types.BuiltinFunctionType, types.MethodType, functools.partial)


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED or value is None


def is_arguments(value: Any) -> bool:
    """Return True for captured call arguments"""
    return isinstance(value, inspect.BoundArguments)


def type_of(value: Any) -> str:
    """Classify a value into the tag used to pick a comparison strategy"""
    if value is None or value is UNDEFINED:
        return 'null' if value is None else 'undefined'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, Number):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, (bytes, bytearray, memoryview)):
        return 'bytes'
    if isinstance(value, re.Pattern):
        return 'regexp'
    if isinstance(value, datetime.date):
        return 'date'
    if isinstance(value, enum.Enum):
        return 'symbol'
    if isinstance(value, (type, ROUTINES)) or inspect.isroutine(value):
        return 'function'
    if isinstance(value, Sequence):
        return 'array'
    if isinstance(value, AbstractSet):
        return 'set'
    if type(value) is dict:
        return 'object'
    if isinstance(value, Mapping):
        return 'map'
    if is_arguments(value):
        return 'arguments'
    if isinstance(value, Iterator):
        return 'iterator'
    return 'object'


def object_is(a: Any, b: Any) -> bool:
    """Mimic JavaScript's Object.is() behavior"""
    if a is b:
        return True

    if isinstance(a, bool) != isinstance(b, bool):
        return False

    if not (isinstance(a, SCALARS) and isinstance(b, SCALARS)):
        return False

    # Handle NaN
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True

    # Handle signed zeros
    if isinstance(a, float) and isinstance(b, float) and a == 0 and b == 0:
        return math.copysign(1, a) == math.copysign(1, b)

    return type_of(a) == type_of(b) and a == b


def strict_equal(a: Any, b: Any) -> bool:
    """JavaScript ``===``: scalars by value, everything else by identity"""
    if a is b:
        return not (isinstance(a, float) and math.isnan(a))

    if isinstance(a, SCALARS) and isinstance(b, SCALARS):
        return type_of(a) == type_of(b) and a == b

    return False


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, Number):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return float(text)
        except ValueError:
            return None
    return None


def loose_equal(a: Any, b: Any) -> bool:
    """JavaScript ``==`` for numbers: numeric strings and booleans coerce"""
    if strict_equal(a, b):
        return True

    if isinstance(a, (Number, str)) and isinstance(b, (Number, str)):
        x, y = _to_number(a), _to_number(b)
        if x is None or y is None:
            return False
        return x == y

    try:
        return bool(a == b)
    except Exception:
        return False


def function_name(func: Any) -> Optional[str]:
    """Best effort name of a callable, None when it has none"""
    if isinstance(func, functools.partial):
        return function_name(func.func)
    name = getattr(func, '__name__', None)
    if name is None:
        name = getattr(type(func), '__name__', None) if callable(func) else None
    return name


def value_to_string(value: Any) -> str:
    """Convert value to descriptive string"""
    limit = get_settings().string_limit

    if value is UNDEFINED:
        return 'undefined'
    if isinstance(value, str):
        text = value
    elif isinstance(value, (bool, Number)) or value is None:
        text = str(value)
    elif isinstance(value, re.Pattern):
        text = f'/{value.pattern}/'
    elif isinstance(value, enum.Enum):
        text = str(value)
    elif type_of(value) == 'function':
        text = function_name(value) or repr(value)
    else:
        # matchers render as their message
        text = str(value) if type(value).__str__ is not object.__str__ else repr(value)

    if len(text) > limit:
        return text[:limit] + '...'
    return text


def _stringify(item: Any) -> str:
    return f"'{item}'" if isinstance(item, str) else value_to_string(item)


def iterable_to_string(value: Any) -> str:
    """Render items of a collection for matcher messages, e.g. ``1,'a'``"""
    if isinstance(value, Mapping):
        return ','.join(f'[{_stringify(k)},{_stringify(v)}]' for k, v in value.items())
    return ','.join(_stringify(item) for item in value)


def is_iterable(value: Any) -> bool:
    """Returns True for values that can be walked more than once.

    Strings and bytes are not collections here and iterators are refused
    because walking them consumes them.
    """
    if value is None or isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Iterable) and not isinstance(value, Iterator)


def iterate(value: Any) -> Iterable:
    """Elements of a collection, values for mappings"""
    if isinstance(value, Mapping):
        return value.values()
    return value


def own_keys(value: Any) -> List[Any]:
    if isinstance(value, Mapping):
        return list(value.keys())
    keys = list(getattr(value, '__dict__', {}).keys())
    for klass in type(value).__mro__:
        for slot in getattr(klass, '__slots__', ()):
            if slot not in keys and slot not in ('__dict__', '__weakref__') and hasattr(value, slot):
                keys.append(slot)
    return keys


def _index(key: Any) -> Optional[int]:
    """Sequence position named by ``key``, None when it names no position"""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isascii() and key.isdecimal():
        return int(key)
    return None


def has_own(value: Any, key: Any) -> bool:
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, Sequence):
        index = _index(key)
        if index is not None:
            return 0 <= index < len(value)
    return key in own_keys(value)


def get_property(value: Any, key: Any) -> Any:
    """``value[key]`` with JavaScript lookup rules, UNDEFINED when missing"""
    if value is None or value is UNDEFINED:
        return UNDEFINED
    if isinstance(value, Mapping):
        # membership first, a defaultdict must not grow while being matched
        try:
            return value[key] if key in value else UNDEFINED
        except (KeyError, TypeError):
            return UNDEFINED
    if isinstance(value, Sequence):
        index = _index(key)
        if index is not None:
            return value[index] if 0 <= index < len(value) else UNDEFINED
    if isinstance(key, str):
        try:
            return getattr(value, key, UNDEFINED)
        except Exception:
            return UNDEFINED
    return UNDEFINED


_PATH_TOKEN = re.compile(r'''[^.[\]]+|\[(?:(-?\d+)|(["'])((?:(?!\2)[^\\]|\\.)*?)\2)\]''')


def to_path(path: str) -> List[Any]:
    """Split ``a.b[0]['c.d']`` into ``['a', 'b', 0, 'c.d']``"""
    parts = []
    for match in _PATH_TOKEN.finditer(path):
        number, quote, quoted = match.groups()
        if number is not None:
            parts.append(int(number))
        elif quote:
            parts.append(re.sub(r'\\(.)', r'\1', quoted))
        else:
            parts.append(match.group(0))
    return parts


def get(value: Any, path: str, default: Any = UNDEFINED) -> Any:
    """Resolve a dotted/bracketed property path, ``default`` when unresolvable"""
    if value is None or value is UNDEFINED:
        return default
    if isinstance(value, Mapping) and path in value:
        return value[path]
    for key in to_path(path):
        value = get_property(value, key)
        if value is UNDEFINED:
            return default
    return value


__all__ = [
    'UNDEFINED', 'is_undefined', 'is_arguments', 'type_of', 'object_is',
    'strict_equal', 'loose_equal', 'function_name', 'value_to_string',
    'iterable_to_string', 'is_iterable', 'iterate', 'own_keys', 'has_own',
    'get_property', 'to_path', 'get'
]
