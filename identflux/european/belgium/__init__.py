"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Belgian identification schemes: bank account, social
                security, enterprise and payment reference numbers.
------------------------------------------------------------------------------
"""
