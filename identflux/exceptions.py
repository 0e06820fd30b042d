"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/exceptions.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Exception types. Invalid identifiers are never exceptions;
                only contract violations by the calling code are raised.
------------------------------------------------------------------------------
"""

from typing import Optional


class ProgrammingError(Exception):
    """
    Raised when the calling code violates a contract of the library,
    e.g. requesting an unknown identification kind or asking a scheme
    without padding for its padding character.
    """

    DEFAULT_MESSAGE = "Could not continue due to an unspecified programming error."
    DEFAULT_CAUSE_MESSAGE = "An exception occured, which appears to be of a programming nature."

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None) -> None:
        """
        Args:
            message: Human readable description of the violation.
            cause: The underlying exception, if the error wraps one.
        """
        if message is None:
            message = self.DEFAULT_CAUSE_MESSAGE if cause is not None else self.DEFAULT_MESSAGE
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause
