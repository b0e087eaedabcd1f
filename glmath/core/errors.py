"""Exception types raised by glmath containers and configuration."""


class GLMathError(Exception):
    """Base class for all glmath errors."""


class ValidationError(GLMathError, ValueError):
    """A container or scalar holds a non-finite value or has the wrong length."""


class UnknownOptionError(GLMathError, KeyError):
    """A configuration update named a key that is not part of the configuration."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message instead
        return str(self.args[0]) if self.args else ""


class ConstructionError(GLMathError, TypeError):
    """A container type cannot be default-constructed."""
