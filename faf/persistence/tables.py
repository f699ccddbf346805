"""SQLAlchemy table definitions for FAF accounts.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# LOGIN TABLE (user accounts)
# ============================================================================
users_table = Table(
    "login",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("login", String(20), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(64), nullable=False),  # SHA-256 hex digest
    Column("steam_id", String(20), nullable=True, unique=True),
    Column("recent_ip_address", String(45), nullable=True),  # Fits IPv6
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# NAME HISTORY TABLE (append-only)
# ============================================================================
name_history_table = Table(
    "name_history",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("login.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(20), nullable=False),  # Login given up
    Column(
        "change_time", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_name_history_name_change_time",
    name_history_table.c.name,
    name_history_table.c.change_time.desc(),
)
Index(
    "idx_name_history_user_id_change_time",
    name_history_table.c.user_id,
    name_history_table.c.change_time.desc(),
)

# ============================================================================
# RATING TABLES (one row per user, written by the rating system after creation)
# ============================================================================
global_rating_table = Table(
    "global_rating",
    metadata,
    Column(
        "id", UUID, ForeignKey("login.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("mean", Float, nullable=False),
    Column("deviation", Float, nullable=False),
    Column("num_games", Integer, nullable=False, server_default="0"),
)

ladder1v1_rating_table = Table(
    "ladder1v1_rating",
    metadata,
    Column(
        "id", UUID, ForeignKey("login.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("mean", Float, nullable=False),
    Column("deviation", Float, nullable=False),
    Column("num_games", Integer, nullable=False, server_default="0"),
)

# ============================================================================
# ANOPE NICK CORE TABLE (IRC services credentials, legacy)
# ============================================================================
anope_nick_core_table = Table(
    "anope_nick_core",
    metadata,
    Column("display", String(20), primary_key=True),
    Column("pass", String(255), nullable=False),  # "md5:<hex digest>"
)
