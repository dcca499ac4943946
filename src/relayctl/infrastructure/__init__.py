"""Infrastructure layer — database engine and the user/connection directory.

This layer depends on stdlib and SQLAlchemy Core.
It must never import from services, commands, or output.
"""
