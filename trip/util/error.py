"""Errors raised while wiring the engine together.

These are programming or deployment mistakes, not outcomes of an engine
operation, so they are never converted into a use case response.
"""


class UtilError(Exception):
    """Base wiring error."""


class ConfigurationError(UtilError):
    """Settings cannot be used as given, e.g. a database URL without an async driver."""


class DependencyInjectionError(UtilError):
    """A provider component is missing or an unmock request names an unknown component."""
