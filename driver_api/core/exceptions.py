"""
Exceptions raised by the data access and service layers.

Absence of a record is not an error: repositories return None for it.
"""


class DriverApiError(Exception):
    """Base class for all application errors."""


class StorageError(DriverApiError):
    """
    A statement or connection failed in the data access layer.

    The original exception is kept as ``__cause__``.
    """

    @property
    def details(self) -> str:
        return str(self.__cause__) if self.__cause__ is not None else str(self)
