"""Internal errors raised while handling requests."""

from __future__ import annotations


class MissingContextParamError(LookupError):
    """A value expected in the request context is absent."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"context parameter {param_name} was not found.")


class InvalidContextParamTypeError(TypeError):
    """A value in the request context has the wrong type."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"context parameter {param_name} has invalid type.")


class InvalidModelResourceError(ValueError):
    """A resource failed model validation."""

    def __init__(self, model_name: str, validation_error: Exception) -> None:
        self.model_name = model_name
        self.validation_error = validation_error
        super().__init__(f"Invalid {model_name} resource: {validation_error}")
        self.__cause__ = validation_error


class _WrappingError(ValueError):
    def __init__(self, orig: Exception) -> None:
        self.orig = orig
        super().__init__(str(orig))
        self.__cause__ = orig


class InvalidQueryParamsError(_WrappingError):
    """Query parameters could not be bound; wraps the original error."""


class InvalidJsonBodyError(_WrappingError):
    """A JSON body could not be bound; wraps the original error."""