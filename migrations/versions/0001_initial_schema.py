"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("role IN ('public', 'staff', 'admin')", name="ck_user_role"),
    )

    op.create_table(
        "assets",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("condition", sa.String(50), nullable=False),
        sa.Column("owner", sa.String(255), nullable=False),
        sa.Column("photo_url", sa.String(1000), nullable=True),
        sa.Column("qr_code", sa.String(100), nullable=False, unique=True),
        sa.Column("is_archived", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "category IN ('monitor', 'cpu', 'ac', 'chair', 'desk', 'dispenser', "
            "'cctv', 'router', 'lan-cable')",
            name="ck_asset_category",
        ),
        sa.CheckConstraint(
            "condition IN ('new', 'good', 'under-repair', 'broken')",
            name="ck_asset_condition",
        ),
    )
    op.create_index("idx_assets_archived_created", "assets", ["is_archived", "created_at"])

    op.create_table(
        "complaints",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("asset_id", sa.Uuid(), sa.ForeignKey("assets.id"), nullable=False),
        sa.Column("sender_name", sa.String(255), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("resolved_by", sa.Uuid(), sa.ForeignKey("users.id"), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('needs-repair', 'urgent', 'in-repair', 'repaired')",
            name="ck_complaint_status",
        ),
    )
    op.create_index("idx_complaints_asset", "complaints", ["asset_id"])

    op.create_table(
        "maintenance_schedules",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("asset_id", sa.Uuid(), sa.ForeignKey("assets.id"), nullable=False),
        sa.Column("scheduled_by", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("scheduled_date", sa.DateTime(), nullable=False),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        *_timestamps(),
    )
    op.create_index(
        "idx_maintenance_asset_date", "maintenance_schedules", ["asset_id", "scheduled_date"]
    )

    op.create_table(
        "asset_history",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("asset_id", sa.Uuid(), sa.ForeignKey("assets.id"), nullable=False),
        sa.Column("changed_by", sa.Uuid(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("change_type", sa.String(100), nullable=False),
        sa.Column("old_value", sa.Text(), nullable=True),
        sa.Column("new_value", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("idx_asset_history_asset_created", "asset_history", ["asset_id", "created_at"])

    op.create_table(
        "user_activity_logs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("resource_type", sa.String(100), nullable=False),
        sa.Column("resource_id", sa.Uuid(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("idx_activity_resource", "user_activity_logs", ["resource_type", "resource_id"])


def downgrade() -> None:
    op.drop_table("user_activity_logs")
    op.drop_table("asset_history")
    op.drop_table("maintenance_schedules")
    op.drop_table("complaints")
    op.drop_table("assets")
    op.drop_table("users")
