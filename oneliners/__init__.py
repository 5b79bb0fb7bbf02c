"""
oneliners - small, pure helper functions.

Every helper is importable from its topical module under
``oneliners.domain`` or directly from this package.
"""

from oneliners.domain import *  # noqa: F403
from oneliners.domain import __all__ as _domain_all
from oneliners.rules import Rules, RulesValidationError, load_rules

__version__ = "0.1.0"

__all__ = [*_domain_all, "Rules", "RulesValidationError", "load_rules"]
