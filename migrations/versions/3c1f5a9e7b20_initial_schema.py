"""initial_schema

Create the account schema:
- Login (user accounts with unique login, email and Steam id)
- Name history (append-only record of given up logins)
- Global and ladder 1v1 ratings (one row per user)
- Anope nick core (IRC services credential mirror)

Revision ID: 3c1f5a9e7b20
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f5a9e7b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _rating_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("mean", sa.Float(), nullable=False),
        sa.Column("deviation", sa.Float(), nullable=False),
        sa.Column("num_games", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["id"], ["login.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # LOGIN table (user accounts)
    # ========================================================================
    op.create_table(
        "login",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("login", sa.String(20), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(64), nullable=False),  # SHA-256 hex
        sa.Column("steam_id", sa.String(20), nullable=True),
        sa.Column("recent_ip_address", sa.String(45), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        # Final guard against concurrent registrations and renames
        sa.UniqueConstraint("login", name="uq_login_login"),
        sa.UniqueConstraint("email", name="uq_login_email"),
        sa.UniqueConstraint("steam_id", name="uq_login_steam_id"),
    )

    # ========================================================================
    # NAME_HISTORY table (append-only)
    # ========================================================================
    op.create_table(
        "name_history",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column(
            "change_time",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["login.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_name_history_name_change_time",
        "name_history",
        ["name", sa.text("change_time DESC")],
    )
    op.create_index(
        "idx_name_history_user_id_change_time",
        "name_history",
        ["user_id", sa.text("change_time DESC")],
    )

    # ========================================================================
    # RATING tables
    # ========================================================================
    _rating_table("global_rating")
    _rating_table("ladder1v1_rating")

    # ========================================================================
    # ANOPE_NICK_CORE table (owned by IRC services, created here for dev)
    # ========================================================================
    op.create_table(
        "anope_nick_core",
        sa.Column("display", sa.String(20), nullable=False),
        sa.Column("pass", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("display"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("anope_nick_core")
    op.drop_table("ladder1v1_rating")
    op.drop_table("global_rating")
    op.drop_index("idx_name_history_user_id_change_time", table_name="name_history")
    op.drop_index("idx_name_history_name_change_time", table_name="name_history")
    op.drop_table("name_history")
    op.drop_table("login")
