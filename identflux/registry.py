"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/registry.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Maps identification kinds to their scheme classes so that
                callers can create identifications from a kind name, e.g.
                when the kind is stored next to the value.
------------------------------------------------------------------------------
"""

from typing import Dict, Optional, Type, Union

from identflux.bic import BIC
from identflux.european.belgium.bban import BBAN
from identflux.european.belgium.company_local_unit_number import CompanyLocalUnitNumber
from identflux.european.belgium.dmfa import DMFA
from identflux.european.belgium.inss import INSS
from identflux.european.belgium.kbo import KBO
from identflux.european.belgium.ogm import OGM
from identflux.european.belgium.rsz import RSZ
from identflux.european.belgium.temporary_rsz import TemporaryRSZ
from identflux.european.belgium.vat import VAT
from identflux.european.france.nir import NIR
from identflux.european.netherlands.bsn import BSN
from identflux.exceptions import ProgrammingError
from identflux.iban import IBAN
from identflux.logger import get_logger
from identflux.models.identification import AbstractIdentification
from identflux.models.types import IdentificationKind

logger = get_logger("registry")

IDENTIFICATION_CLASSES: Dict[IdentificationKind, Type[AbstractIdentification]] = {
    IdentificationKind.IBAN: IBAN,
    IdentificationKind.BIC: BIC,
    IdentificationKind.BBAN: BBAN,
    IdentificationKind.INSS: INSS,
    IdentificationKind.KBO: KBO,
    IdentificationKind.VAT: VAT,
    IdentificationKind.COMPANY_LOCAL_UNIT_NUMBER: CompanyLocalUnitNumber,
    IdentificationKind.RSZ: RSZ,
    IdentificationKind.TEMPORARY_RSZ: TemporaryRSZ,
    IdentificationKind.OGM: OGM,
    IdentificationKind.DMFA: DMFA,
    IdentificationKind.NIR: NIR,
    IdentificationKind.BSN: BSN,
}


def identification_class(kind: Union[IdentificationKind, str]) -> Type[AbstractIdentification]:
    """
    Resolves the scheme class for a kind.

    Args:
        kind: An IdentificationKind or its string value (e.g. 'IBAN').

    Returns:
        The identification class.

    Raises:
        ProgrammingError: If the kind is not a known scheme.
    """
    try:
        resolved = IdentificationKind(kind)
    except ValueError as e:
        logger.error(f"Unknown identification kind requested: {kind!r}")
        raise ProgrammingError(f"Unknown identification kind: {kind!r}", cause=e)

    cls = IDENTIFICATION_CLASSES.get(resolved)
    if cls is None:
        logger.error(f"No identification class registered for {resolved.value}")
        raise ProgrammingError(f"No identification class registered for {resolved.value}")
    return cls


def create_identification(kind: Union[IdentificationKind, str], raw_version: Optional[str]) -> AbstractIdentification:
    """
    Creates an identification of the given kind.

    Args:
        kind: An IdentificationKind or its string value.
        raw_version: The raw identifier, may be invalid or None.

    Returns:
        The identification instance; check is_valid for the outcome.
    """
    return identification_class(kind)(raw_version)


def kind_of(identification: AbstractIdentification) -> IdentificationKind:
    """
    Returns the kind of an identification instance.

    Raises:
        ProgrammingError: If the class is not a registered scheme.
    """
    for kind, cls in IDENTIFICATION_CLASSES.items():
        if type(identification) is cls:
            return kind
    logger.error(f"Unregistered identification class: {type(identification).__name__}")
    raise ProgrammingError(f"Unregistered identification class: {type(identification).__name__}")
