"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/netherlands/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Dutch identification schemes.
------------------------------------------------------------------------------
"""
