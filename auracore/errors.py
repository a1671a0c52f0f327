"""Error types raised by the core framework."""

from __future__ import annotations


class AuraError(Exception):
    """Base class for every error raised by the framework."""

    prefix = "AuraOS Error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class InitializationError(AuraError):
    """Core components failed to initialise."""

    prefix = "AuraOS Initialization Failed"


class CommunicationError(AuraError):
    """Publishing, subscribing or receiving failed."""

    prefix = "AuraOS Communication Error"


class ParameterNotFoundError(AuraError):
    """A requested parameter does not exist."""

    prefix = "AuraOS Parameter Not Found"


class ParameterConfigurationError(AuraError):
    """A parameter has the wrong type or could not be configured."""

    prefix = "AuraOS Parameter Configuration Error"


class NodeError(AuraError):
    """A node could not be created or operated."""

    prefix = "AuraOS Node Error"


class ConfigurationError(AuraError):
    """General configuration is invalid."""

    prefix = "AuraOS Configuration Error"


class SerializationError(AuraError):
    """Data could not be serialised or deserialised."""

    prefix = "AuraOS Serialization Error"


class OperationTimeoutError(AuraError):
    """An operation did not finish in time."""

    prefix = "AuraOS Operation Timed Out"


class FeatureNotImplementedError(AuraError):
    """The requested feature is not available."""

    prefix = "AuraOS Feature Not Implemented"


class AuraIOError(AuraError):
    """Wraps an underlying operating-system I/O error."""

    prefix = "AuraOS I/O Error"

    def __init__(self, cause: OSError) -> None:
        super().__init__(str(cause))
        self.cause = cause
        self.__cause__ = cause