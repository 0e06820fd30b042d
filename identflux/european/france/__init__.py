"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/france/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    French identification schemes.
------------------------------------------------------------------------------
"""
