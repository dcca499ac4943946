"""SQLAlchemy Core table definitions for the relayctl directory database."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, MetaData, Table, Text, UniqueConstraint

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text),
    Column("created", Text, nullable=False),
)

connections = Table(
    "connections",
    metadata,
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("connection_id", Text, nullable=False),
    Column("created", Text, nullable=False),
    UniqueConstraint("user_id", "connection_id"),
)

Index("ix_connections_user_id", connections.c.user_id)
