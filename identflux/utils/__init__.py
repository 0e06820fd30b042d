"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/utils/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Helper functions shared by the identification schemes.
------------------------------------------------------------------------------
"""
