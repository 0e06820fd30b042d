import logging

import pytest

from identflux import (
    IdentificationKind, ProgrammingError, IBAN, INSS, CompanyLocalUnitNumber,
    create_identification, identification_class, kind_of,
)
from identflux.registry import IDENTIFICATION_CLASSES


def test_every_kind_is_registered():
    for kind in IdentificationKind:
        assert kind in IDENTIFICATION_CLASSES, kind


def test_create_by_enum_and_by_name():
    by_enum = create_identification(IdentificationKind.IBAN, "BE62 5100 0754 7061")
    by_name = create_identification("IBAN", "BE62 5100 0754 7061")
    assert isinstance(by_enum, IBAN)
    assert by_enum == by_name
    assert by_enum.is_valid

    assert identification_class("COMPANY_LOCAL_UNIT_NUMBER") is CompanyLocalUnitNumber


def test_invalid_values_are_created():
    """The registry never validates, it only picks the scheme."""
    inss = create_identification(IdentificationKind.INSS, "garbage")
    assert isinstance(inss, INSS)
    assert not inss.is_valid


def test_unknown_kind_is_a_programming_error(caplog):
    with caplog.at_level(logging.ERROR, logger="identflux.registry"):
        with pytest.raises(ProgrammingError) as excinfo:
            create_identification("SSN", "078-05-1120")

    assert "SSN" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert excinfo.value.__cause__ is excinfo.value.__context__
    assert "Unknown identification kind requested" in caplog.text


def test_kind_of():
    for kind, cls in IDENTIFICATION_CLASSES.items():
        assert kind_of(cls(None)) is kind


def test_kind_of_unregistered_class():
    class LocalIBAN(IBAN):
        pass

    with pytest.raises(ProgrammingError):
        kind_of(LocalIBAN("BE62510007547061"))


def test_programming_error_default_messages():
    assert str(ProgrammingError()) == ProgrammingError.DEFAULT_MESSAGE
    cause = KeyError("x")
    wrapped = ProgrammingError(cause=cause)
    assert str(wrapped) == ProgrammingError.DEFAULT_CAUSE_MESSAGE
    assert wrapped.__cause__ is cause
