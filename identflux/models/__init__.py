"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/models/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Package initializer for the identification models. Exports
                the abstract identification contract and shared enums.
------------------------------------------------------------------------------
"""

from identflux.models.types import IdentificationKind, Sex
from identflux.models.identification import AbstractIdentification, NationalNumberIdentification
