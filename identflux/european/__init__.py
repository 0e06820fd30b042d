"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Country specific identification schemes of Belgium, France
                and the Netherlands.
------------------------------------------------------------------------------
"""
