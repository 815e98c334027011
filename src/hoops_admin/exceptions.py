"""Exceptions raised by hoops_admin.

Invalid form values are never reported through exceptions; the validators
return them as data. These exceptions cover input that cannot be turned into
a form record at all.
"""

from __future__ import annotations


class HoopsAdminError(Exception):
    """Base exception for all hoops_admin errors."""

    pass


class FormDataError(HoopsAdminError):
    """Raised when form input cannot be read or is not a record/mapping.

    Attributes:
        source: Where the input came from (file path, argument name)
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
