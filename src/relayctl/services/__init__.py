"""Service layer — operations returning ServiceResult.

Services may import from domain, events, authorization and infrastructure.
They must never import from commands or output.
"""
