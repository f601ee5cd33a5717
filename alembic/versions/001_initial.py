"""Initial schema: users, boats, crew, components, documents, safety gear, logs, notification prefs.

Revision ID: 001
Revises: 
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "boats",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("make", sa.String(255), nullable=True),
        sa.Column("model", sa.String(255), nullable=True),
        sa.Column("home_port", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_boats_owner_id", "boats", ["owner_id"])

    op.create_table(
        "boat_users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("boat_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("permission_level", sa.String(20), nullable=False, server_default="edit"),
        sa.Column("granted_at", sa.DateTime(), nullable=False),
        sa.Column("revoked_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["boat_id"], ["boats.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("boat_id", "user_id", name="uq_boat_users_boat_user"),
    )
    op.create_index("ix_boat_users_boat_id", "boat_users", ["boat_id"])
    op.create_index("ix_boat_users_user_id", "boat_users", ["user_id"])

    op.create_table(
        "boat_components",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("boat_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("type", sa.String(50), nullable=True),
        sa.Column("position", sa.String(50), nullable=True),
        sa.Column("brand", sa.String(255), nullable=True),
        sa.Column("model", sa.String(255), nullable=True),
        sa.Column("current_hours", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("scheduled_service_name", sa.String(255), nullable=True),
        sa.Column("service_interval_days", sa.Integer(), nullable=True),
        sa.Column("service_interval_hours", sa.Integer(), nullable=True),
        sa.Column("last_service_date", sa.Date(), nullable=True),
        sa.Column("last_service_hours", sa.Integer(), nullable=True),
        sa.Column("next_service_date", sa.Date(), nullable=True),
        sa.Column("next_service_hours", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["boat_id"], ["boats.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_boat_components_boat_id", "boat_components", ["boat_id"])
    # Alert scans filter on the due columns
    op.create_index(
        "ix_boat_components_next_service_date", "boat_components", ["next_service_date"]
    )

    op.create_table(
        "documents",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("boat_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(50), nullable=False, server_default="other"),
        sa.Column("file_url", sa.Text(), nullable=True),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("reminder_days", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("uploaded_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["boat_id"], ["boats.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_documents_boat_id", "documents", ["boat_id"])
    op.create_index("ix_documents_expiry_date", "documents", ["expiry_date"])

    op.create_table(
        "safety_equipment",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("boat_id", sa.Uuid(), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("type_other", sa.String(255), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("last_service_date", sa.Date(), nullable=True),
        sa.Column("service_interval_months", sa.Integer(), nullable=True),
        sa.Column("next_service_date", sa.Date(), nullable=True),
        sa.Column("certification_number", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["boat_id"], ["boats.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_safety_equipment_boat_id", "safety_equipment", ["boat_id"])

    op.create_table(
        "log_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("boat_id", sa.Uuid(), nullable=False),
        sa.Column("component_id", sa.Uuid(), nullable=True),
        sa.Column("maintenance_item", sa.String(255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("cost", sa.Numeric(12, 2), nullable=True),
        sa.Column("currency", sa.String(3), nullable=False, server_default="AED"),
        sa.Column("hours_at_service", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_by", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["boat_id"], ["boats.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["component_id"], ["boat_components.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_log_entries_boat_id", "log_entries", ["boat_id"])
    op.create_index("ix_log_entries_component_id", "log_entries", ["component_id"])

    op.create_table(
        "notification_preferences",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("email_enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("email_address", sa.String(320), nullable=True),
        sa.Column(
            "notify_document_expiry", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column(
            "notify_maintenance_due", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column(
            "notify_hours_threshold", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column("advance_notice_days", sa.Integer(), nullable=False, server_default="14"),
        sa.Column("digest_mode", sa.String(20), nullable=False, server_default="immediate"),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )


def downgrade() -> None:
    op.drop_table("notification_preferences")
    op.drop_index("ix_log_entries_component_id", table_name="log_entries")
    op.drop_index("ix_log_entries_boat_id", table_name="log_entries")
    op.drop_table("log_entries")
    op.drop_index("ix_safety_equipment_boat_id", table_name="safety_equipment")
    op.drop_table("safety_equipment")
    op.drop_index("ix_documents_expiry_date", table_name="documents")
    op.drop_index("ix_documents_boat_id", table_name="documents")
    op.drop_table("documents")
    op.drop_index("ix_boat_components_next_service_date", table_name="boat_components")
    op.drop_index("ix_boat_components_boat_id", table_name="boat_components")
    op.drop_table("boat_components")
    op.drop_index("ix_boat_users_user_id", table_name="boat_users")
    op.drop_index("ix_boat_users_boat_id", table_name="boat_users")
    op.drop_table("boat_users")
    op.drop_index("ix_boats_owner_id", table_name="boats")
    op.drop_table("boats")
    op.drop_table("users")
