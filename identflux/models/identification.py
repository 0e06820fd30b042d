"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/models/identification.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Abstract identification contract shared by every scheme.
                Handles normalization, padding, validation, paper rendering,
                value equality and pydantic field integration.
------------------------------------------------------------------------------
"""

from abc import ABC, abstractmethod
from datetime import date
from functools import cached_property
from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from identflux.exceptions import ProgrammingError
from identflux.logger import get_logger
from identflux.models.types import Sex

logger = get_logger("models.identification")


class AbstractIdentification(ABC):
    """
    Immutable value wrapping a raw identifier string.

    The raw input is kept verbatim. The cleaned version is derived by
    upper-casing, dropping every character the scheme does not accept and
    padding to the standard length. Validity, electronic and paper versions
    are computed lazily from the cleaned version and memoized.

    Subclasses define STANDARD_MIN_LENGTH, optionally STANDARD_MAX_LENGTH and
    PADDING_CHARACTER, and implement _on_validate.
    """

    STANDARD_MIN_LENGTH: int = 0
    STANDARD_MAX_LENGTH: Optional[int] = None
    PADDING_CHARACTER: Optional[str] = None

    def __init__(self, raw_version: Optional[str]) -> None:
        """
        Args:
            raw_version: The identifier as supplied by the user, may be None.
        """
        object.__setattr__(self, "_raw_version", raw_version)

    @classmethod
    def from_string(cls, raw_version: Optional[str]) -> "AbstractIdentification":
        """Named constructor, equivalent to calling the class."""
        return cls(raw_version)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Scheme constants ---

    @property
    def raw_version(self) -> Optional[str]:
        return self._raw_version

    @property
    def standard_min_length(self) -> int:
        return self.STANDARD_MIN_LENGTH

    @property
    def standard_max_length(self) -> int:
        if self.STANDARD_MAX_LENGTH is None:
            return self.STANDARD_MIN_LENGTH
        return self.STANDARD_MAX_LENGTH

    @property
    def has_padding(self) -> bool:
        return self.PADDING_CHARACTER is not None

    @property
    def padding_character(self) -> str:
        """
        Returns the character used to left-pad the cleaned version.

        Raises:
            ProgrammingError: If the scheme never pads.
        """
        if self.PADDING_CHARACTER is None:
            raise ProgrammingError(f"{type(self).__name__} does not use a padding character.")
        return self.PADDING_CHARACTER

    # --- Normalization ---

    def _is_valid_char(self, ch: str) -> bool:
        """Character predicate of the scheme. ASCII digits by default."""
        return ch.isascii() and ch.isdigit()

    def _pad(self, value: str) -> str:
        if not self.has_padding:
            return value
        return value.rjust(self.standard_max_length, self.padding_character)

    @cached_property
    def cleaned_version_without_padding(self) -> str:
        if self.raw_version is None:
            return ""
        kept = []
        for ch in self.raw_version:
            # Only ASCII is upper-cased, other characters are rejected anyway
            if ch.isascii():
                ch = ch.upper()
            if self._is_valid_char(ch):
                kept.append(ch)
        return "".join(kept)

    @cached_property
    def cleaned_version(self) -> str:
        return self._pad(self.cleaned_version_without_padding)

    # --- Validation ---

    def _validate(self, value: Optional[str]) -> bool:
        """
        Runs the generic checks and the scheme predicate on a candidate.

        Args:
            value: Either the cleaned version or, for strict checks, the raw one.

        Returns:
            True if the candidate is a well-formed identifier of the scheme.
        """
        if value is None:
            return False
        if not self.standard_min_length <= len(value) <= self.standard_max_length:
            return False
        if not all(self._is_valid_char(ch) for ch in value):
            return False
        if self.has_padding and all(ch == self.padding_character for ch in value):
            return False
        return self._on_validate(value)

    @abstractmethod
    def _on_validate(self, identification: str) -> bool:
        """
        Scheme specific structure and checksum predicate.

        Receives a string of admissible length made of admissible characters
        that is not only padding. Must return False instead of raising.
        """
        pass

    @cached_property
    def is_valid(self) -> bool:
        return self._validate(self.cleaned_version)

    @cached_property
    def is_strict_valid(self) -> bool:
        """True if the raw input is already in canonical form."""
        return self._validate(self.raw_version)

    # --- Renderings ---

    def _format_paper_version(self, cleaned: str) -> str:
        """Human readable rendering of a valid cleaned version."""
        return cleaned

    @cached_property
    def electronic_version(self) -> Optional[str]:
        return self.cleaned_version if self.is_valid else None

    @cached_property
    def paper_version(self) -> Optional[str]:
        if not self.is_valid:
            return None
        return self._format_paper_version(self.cleaned_version)

    # --- Value semantics ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractIdentification):
            return NotImplemented
        return type(self) is type(other) and self.cleaned_version == other.cleaned_version

    def __hash__(self) -> int:
        return hash((type(self), self.cleaned_version))

    def __str__(self) -> str:
        if self.is_valid:
            return self.paper_version
        return self.raw_version or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw_version!r})"

    def __reduce__(self):
        return (type(self), (self.raw_version,))

    # --- Pydantic integration ---

    @classmethod
    def _hydrate(cls, value: str) -> "AbstractIdentification":
        identification = cls(value)
        if not identification.is_valid:
            logger.warning(f"Invalid {cls.__name__} hydrated: {value!r}")
        return identification

    @classmethod
    def _exact_type(cls, identification: "AbstractIdentification") -> "AbstractIdentification":
        # A subclass would be rebuilt as cls from its cleaned version and change meaning
        if type(identification) is not cls:
            raise ValueError(f"expected {cls.__name__}, got {type(identification).__name__}")
        return identification

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        """
        Lets every scheme be used as a pydantic field type.
        Accepts strings (and instances of exactly this class in python mode)
        and serializes to the cleaned version, which round-trips through
        the constructor.
        """
        from_str = core_schema.no_info_after_validator_function(cls._hydrate, core_schema.str_schema())
        from_instance = core_schema.no_info_after_validator_function(
            cls._exact_type, core_schema.is_instance_schema(cls)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([from_instance, from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda identification: identification.cleaned_version
            ),
        )


@runtime_checkable
class NationalNumberIdentification(Protocol):
    """Identification of a natural person carrying birth date and sex."""

    @property
    def birth_date(self) -> Optional[date]:
        pass

    @property
    def sex(self) -> Optional[Sex]:
        pass
