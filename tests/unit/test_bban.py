from identflux import BBAN, IBAN

INVALID_BBANS = [None, "", "1", "12341234", "000000000000"]
STRICT_VALID_BBANS = ["850895676978"]
LOOSE_VALID_BBANS = ["850895676978 ", "850-8956769-78", "BE 850895676978", "BE 850-89.56.76-978"]


def test_bban_is_not_valid():
    for raw in INVALID_BBANS:
        bban = BBAN(raw)
        assert not bban.is_valid, raw
        assert not bban.is_strict_valid, raw
        assert bban.electronic_version is None
        assert bban.paper_version is None
        assert bban.as_iban is None


def test_bban_is_strict_valid():
    for raw in STRICT_VALID_BBANS:
        bban = BBAN(raw)
        assert bban.is_valid
        assert bban.is_strict_valid
        assert bban.electronic_version == bban.raw_version


def test_bban_is_valid():
    for raw in LOOSE_VALID_BBANS:
        bban = BBAN(raw)
        assert bban.is_valid, raw
        assert not bban.is_strict_valid, raw
        assert bban.electronic_version == "850895676978"


def test_paper_version():
    assert BBAN("850895676978").paper_version == "850-8956769-78"
    assert BBAN("BE 850-89.56.76-978").paper_version == "850-8956769-78"


def test_short_numbers_are_padded():
    bban = BBAN("1")
    assert bban.cleaned_version_without_padding == "1"
    assert bban.cleaned_version == "000000000001"
    assert bban.padding_character == "0"
    assert bban.two_iso_letter_country_code == "BE"


def test_as_iban():
    """A valid BBAN converts to a strictly valid Belgian IBAN and back."""
    # Arrange
    bban = BBAN("850-8956769-78")

    # Act
    iban = bban.as_iban

    # Assert
    assert isinstance(iban, IBAN)
    assert iban.is_valid
    assert iban.is_strict_valid
    assert iban.country == "BE"
    assert iban.as_bban == bban
