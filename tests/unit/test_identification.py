"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           tests/unit/test_identification.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Properties shared by every identification scheme: empty
                input, padding, immutability, value equality and the
                cleaned version round trip.
------------------------------------------------------------------------------
"""

import copy
import pickle

import pytest

from identflux import (
    IBAN, BIC, BBAN, INSS, KBO, VAT, CompanyLocalUnitNumber, RSZ, TemporaryRSZ,
    OGM, DMFA, NIR, BSN, ProgrammingError, AbstractIdentification,
)

ALL_SCHEMES = [IBAN, BIC, BBAN, INSS, KBO, VAT, CompanyLocalUnitNumber, RSZ, TemporaryRSZ, OGM, DMFA, NIR, BSN]
PADDED_SCHEMES = [BBAN, INSS, KBO, VAT, RSZ, TemporaryRSZ, OGM, NIR, BSN]
UNPADDED_SCHEMES = [IBAN, BIC, CompanyLocalUnitNumber, DMFA]

# One loosely written valid value per scheme
VALID_SAMPLES = {
    IBAN: "be62 5100 0754 7061",
    BIC: "DEU TDeFF",
    BBAN: "850-8956769-78",
    INSS: "BE 55.25.02 008-01",
    KBO: "BE 0453.834.195",
    VAT: "BE 0453.834.195",
    CompanyLocalUnitNumber: "2.069.315.153",
    RSZ: "RSZ 133296720",
    TemporaryRSZ: "51050091.19",
    OGM: "+++022/0182/02879+++",
    DMFA: "dmfap123456789a",
    NIR: "1.51.02.46102.043-72",
    BSN: "5871.12.189",
}


def test_empty_input_is_never_valid():
    for cls in ALL_SCHEMES:
        for raw in (None, ""):
            identification = cls(raw)
            assert not identification.is_valid, cls.__name__
            assert not identification.is_strict_valid, cls.__name__
            assert identification.electronic_version is None
            assert identification.paper_version is None
            assert identification.cleaned_version_without_padding == ""


def test_all_padding_is_rejected():
    for cls in PADDED_SCHEMES:
        identification = cls(None)
        padding_only = identification.padding_character * identification.standard_max_length
        assert not cls(padding_only).is_valid, cls.__name__
        assert not cls(padding_only).is_strict_valid, cls.__name__


def test_unpadded_schemes_have_no_padding_character():
    for cls in UNPADDED_SCHEMES:
        with pytest.raises(ProgrammingError):
            cls("x").padding_character


def test_length_bounds():
    for cls in ALL_SCHEMES:
        identification = cls(None)
        assert 0 < identification.standard_min_length <= identification.standard_max_length, cls.__name__


def test_cleaned_version_round_trip():
    """Re-creating from the cleaned version yields the same value."""
    for cls, raw in VALID_SAMPLES.items():
        original = cls(raw)
        assert original.is_valid, cls.__name__

        restored = cls(original.cleaned_version)
        assert restored == original
        assert restored.is_valid
        assert restored.is_strict_valid, cls.__name__
        assert restored.cleaned_version == original.cleaned_version
        assert restored.paper_version == original.paper_version


def test_strict_implies_valid_and_paper_requires_valid():
    samples = list(VALID_SAMPLES.values()) + [None, "", "1", "12341234", "ABc"]
    for cls in ALL_SCHEMES:
        for raw in samples:
            identification = cls(raw)
            if identification.is_strict_valid:
                assert identification.is_valid, (cls.__name__, raw)
            if not identification.is_valid:
                assert identification.paper_version is None, (cls.__name__, raw)
                assert identification.electronic_version is None, (cls.__name__, raw)


def test_raw_version_is_kept_verbatim():
    raw = " be62 5100-0754 7061 "
    iban = IBAN(raw)
    assert iban.raw_version == raw
    assert iban.cleaned_version == "BE62510007547061"


def test_immutable():
    iban = IBAN("BE62510007547061")
    with pytest.raises(AttributeError):
        iban.raw_version = "NL39RABO0300065264"
    with pytest.raises(AttributeError):
        iban.anything = 1
    with pytest.raises(AttributeError):
        del iban.cleaned_version


def test_memoized_values():
    iban = IBAN("BE62 5100 0754 7061")
    assert iban.cleaned_version is iban.cleaned_version
    assert iban.paper_version is iban.paper_version


def test_equality_and_hash():
    assert IBAN("BE62 5100 0754 7061") == IBAN("BE62510007547061")
    assert hash(IBAN("BE62 5100 0754 7061")) == hash(IBAN("BE62510007547061"))
    assert IBAN("BE62510007547061") != IBAN("NL39RABO0300065264")
    assert KBO("0453834195") != VAT("0453834195")
    assert IBAN("BE62510007547061") != "BE62510007547061"

    # Invalid values still compare by cleaned version
    assert BSN("1") == BSN("00000000 1")
    assert len({INSS("55250200801"), INSS("BE 55.25.02 008-01"), INSS("01410191175")}) == 2


def test_string_conversion():
    assert str(IBAN("BE62510007547061")) == "BE62 5100 0754 7061"
    assert str(IBAN("not an iban")) == "not an iban"
    assert str(IBAN(None)) == ""
    assert repr(BSN("587112189")) == "BSN('587112189')"


def test_copy_and_pickle():
    for cls, raw in VALID_SAMPLES.items():
        original = cls(raw)
        assert original.is_valid
        for clone in (copy.copy(original), copy.deepcopy(original), pickle.loads(pickle.dumps(original))):
            assert clone == original, cls.__name__
            assert clone.raw_version == raw


def test_country_codes():
    expected = {BBAN: "BE", INSS: "BE", KBO: "BE", VAT: "BE", CompanyLocalUnitNumber: "BE",
                RSZ: "BE", TemporaryRSZ: "BE", OGM: "BE", DMFA: "BE", NIR: "FR", BSN: "NL"}
    for cls, country in expected.items():
        assert cls(None).two_iso_letter_country_code == country, cls.__name__


def test_abstract_contract():
    with pytest.raises(TypeError):
        AbstractIdentification("123")
