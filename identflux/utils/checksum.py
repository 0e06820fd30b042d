"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/utils/checksum.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Modulo 97 arithmetic used by IBAN and most Belgian schemes.
------------------------------------------------------------------------------
"""


def mod97(digits: str) -> int:
    """Returns the remainder of a digit string divided by 97."""
    return int(digits) % 97


def mod97_or_97(digits: str) -> int:
    """
    Remainder modulo 97 where a zero remainder is written as 97.
    Used by BBAN and OGM check digits.
    """
    remainder = mod97(digits)
    return 97 if remainder == 0 else remainder


def letters_to_digits(value: str) -> str:
    """
    Replaces letters by their ISO 7064 value (A=10, B=11, ..., Z=35).

    Args:
        value: Upper case alphanumeric string.

    Returns:
        A string made of digits only.
    """
    numeric = ""
    for char in value:
        if char.isdigit():
            numeric += char
        else:
            numeric += str(ord(char) - 55)
    return numeric


def iban_remainder(iban: str) -> int:
    """
    Computes the ISO 13616 remainder: the first four characters are moved
    to the end, letters are converted and the number is taken modulo 97.
    A correct IBAN yields 1.
    """
    rearranged = iban[4:] + iban[:4]
    return mod97(letters_to_digits(rearranged))


def iban_check_digits(country_code: str, bban: str) -> str:
    """Computes the two check digits of an IBAN for a country and BBAN."""
    remainder = mod97(letters_to_digits(bban + country_code) + "00")
    return f"{98 - remainder:02d}"
