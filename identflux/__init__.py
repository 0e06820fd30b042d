"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validation package for national and financial identifiers.
                Exports the identification types, the scheme registry and
                the programming error raised on contract violations.
------------------------------------------------------------------------------
"""

from identflux.exceptions import ProgrammingError
from identflux.models.types import IdentificationKind, Sex
from identflux.models.identification import AbstractIdentification, NationalNumberIdentification
from identflux.iban import IBAN
from identflux.bic import BIC
from identflux.european.base import (
    AbstractEuropeanIdentification,
    AbstractBeIdentification,
    AbstractFrIdentification,
    AbstractNlIdentification,
)
from identflux.european.belgium.bban import BBAN
from identflux.european.belgium.inss import INSS
from identflux.european.belgium.kbo import KBO
from identflux.european.belgium.vat import VAT
from identflux.european.belgium.company_local_unit_number import CompanyLocalUnitNumber
from identflux.european.belgium.rsz import RSZ
from identflux.european.belgium.temporary_rsz import TemporaryRSZ
from identflux.european.belgium.ogm import OGM
from identflux.european.belgium.dmfa import DMFA
from identflux.european.france.nir import NIR
from identflux.european.netherlands.bsn import BSN
from identflux.registry import create_identification, identification_class, kind_of

__version__ = "1.0.0"

__all__ = [
    "ProgrammingError",
    "IdentificationKind",
    "Sex",
    "AbstractIdentification",
    "NationalNumberIdentification",
    "AbstractEuropeanIdentification",
    "AbstractBeIdentification",
    "AbstractFrIdentification",
    "AbstractNlIdentification",
    "IBAN",
    "BIC",
    "BBAN",
    "INSS",
    "KBO",
    "VAT",
    "CompanyLocalUnitNumber",
    "RSZ",
    "TemporaryRSZ",
    "OGM",
    "DMFA",
    "NIR",
    "BSN",
    "create_identification",
    "identification_class",
    "kind_of",
]
