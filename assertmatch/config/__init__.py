from .logging import configure_logging
from .settings import MatchSettings, get_settings, reset_settings

__all__ = ['MatchSettings', 'configure_logging', 'get_settings', 'reset_settings']
