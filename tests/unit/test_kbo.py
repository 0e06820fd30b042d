"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           tests/unit/test_kbo.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for enterprise, VAT and establishment unit numbers.
------------------------------------------------------------------------------
"""

import pytest

from identflux import KBO, VAT, CompanyLocalUnitNumber, ProgrammingError

INVALID_KBOS = [None, "", "1", "12341234", "2069315153", "0000000000"]
STRICT_VALID_KBOS = ["0453834195"]
LOOSE_VALID_KBOS = ["453834195", "0453.834.195", "BE 0453.834.195", "BE 0453.834.195 Antwerp"]

INVALID_LOCAL_UNITS = [None, "", "1", "12341234", "0453834195"]
FICTIVE_NUMBERS = [
    "8999999993",
    "8999999104",
    "8999999203",
    "8999999302",
    "8999999401",
    "8999999005",
    "8999999894",
]


def test_kbo_and_vat_are_not_valid():
    for cls in (KBO, VAT):
        for raw in INVALID_KBOS:
            number = cls(raw)
            assert not number.is_valid, (cls.__name__, raw)
            assert not number.is_strict_valid, (cls.__name__, raw)
            assert number.electronic_version is None
            assert number.paper_version is None


def test_kbo_and_vat_are_strict_valid():
    for cls in (KBO, VAT):
        for raw in STRICT_VALID_KBOS:
            number = cls(raw)
            assert number.is_valid
            assert number.is_strict_valid
            assert number.electronic_version == raw


def test_kbo_and_vat_are_valid():
    for cls in (KBO, VAT):
        for raw in LOOSE_VALID_KBOS:
            number = cls(raw)
            assert number.is_valid, (cls.__name__, raw)
            assert not number.is_strict_valid, (cls.__name__, raw)
            assert number.electronic_version == "0453834195"


def test_paper_versions():
    assert KBO("0420936943").paper_version == "0420.936.943"
    assert KBO("BE 0420936943").paper_version == "0420.936.943"
    assert VAT("0420936943").paper_version == "BE 0420.936.943"
    assert VAT("BE 0420936943").paper_version == "BE 0420.936.943"


def test_kbo_is_not_a_vat():
    """Same digits, different scheme: values are not equal."""
    assert KBO("0453834195") != VAT("0453834195")
    assert KBO("0453834195") == KBO("0453.834.195")


def test_local_unit_number():
    number = CompanyLocalUnitNumber("2.069.315.153")
    assert number.is_valid
    assert not number.is_strict_valid
    assert number.electronic_version == "2069315153"
    assert CompanyLocalUnitNumber("2069315153").is_strict_valid
    assert CompanyLocalUnitNumber("2069315153").paper_version == "2.069.315.153"


def test_local_unit_number_is_not_valid():
    for raw in INVALID_LOCAL_UNITS:
        number = CompanyLocalUnitNumber(raw)
        assert not number.is_valid, raw
        assert number.paper_version is None


def test_local_unit_number_is_not_padded():
    number = CompanyLocalUnitNumber("69315153")
    assert number.cleaned_version == "69315153"
    assert not number.is_valid
    with pytest.raises(ProgrammingError):
        number.padding_character


def test_fictive_numbers():
    assert CompanyLocalUnitNumber.valid_fictive_numbers() == frozenset(FICTIVE_NUMBERS)
    for raw in FICTIVE_NUMBERS:
        number = CompanyLocalUnitNumber(raw)
        assert number.is_strict_valid, raw
        assert CompanyLocalUnitNumber.is_fictive_number(raw)
        assert CompanyLocalUnitNumber.is_fictive_number(number)

    assert not CompanyLocalUnitNumber.is_fictive_number("2069315153")
    assert not CompanyLocalUnitNumber.is_fictive_number(None)
