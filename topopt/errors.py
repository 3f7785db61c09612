class TopOptError(Exception):
    """Base class for errors raised by the topopt package."""


class InvalidConstraint(TopOptError, ValueError):
    """A constraint has a missing endpoint or a zero rest length."""


class DegenerateStrainRange(TopOptError, ArithmeticError):
    """No active constraints, or all active constraints share one strain value."""


class ConfigError(TopOptError, ValueError):
    """An unknown or out-of-range simulation option."""
