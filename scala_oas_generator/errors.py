"""Exceptions raised by the Scala OAS generator."""


class CodegenError(Exception):
    """Base class for errors that abort a generation run."""


class InvalidOperationNameError(CodegenError, ValueError):
    """An operation id cannot be turned into a client method name."""


class ConfigurationError(CodegenError, ValueError):
    """Generator options are unknown or inconsistent."""
