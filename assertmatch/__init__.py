"""Composable argument matchers for test assertions.

    >>> from assertmatch import match
    >>> match({'id': 1, 'tags': match.array.contains(['a'])}).test({'id': 1, 'tags': ['a', 'b']})
    True
"""

import logging

from .api import Match, match
from .config import MatchSettings, configure_logging, get_settings, reset_settings
from .deep_equal import deep_equal, deep_equal_cyclic
from .errors import ArgumentError
from .helpers import UNDEFINED, type_of, value_to_string
from .matcher import Matcher, create_matcher, is_matcher

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    'ArgumentError', 'Match', 'MatchSettings', 'Matcher', 'UNDEFINED',
    'configure_logging', 'create_matcher', 'deep_equal', 'deep_equal_cyclic',
    'get_settings', 'is_matcher', 'match', 'reset_settings', 'type_of',
    'value_to_string'
]
