"""Exceptions raised by pyconformal."""


class ConformalError(Exception):
    """Base class for all pyconformal errors."""


class InvalidConfiguration(ConformalError, ValueError):
    """A grid length, viewport size or other setting is unusable."""


class DrawFailure(ConformalError, RuntimeError):
    """A drawing surface call failed mid-frame."""
