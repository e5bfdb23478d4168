"""Initial schema - staff, students, interactions, settings, integrations.

Revision ID: 001
Revises:
Create Date: 2025-06-02

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(100), nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column(
            "permissions",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{read,write}",
        ),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_app_user_email", "app_user", ["email"], unique=True)

    op.create_table(
        "student",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("program", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("cohort", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_student_cohort", "student", ["cohort"])

    op.create_table(
        "interaction",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("student_id", sa.String(50), sa.ForeignKey("student.id", ondelete="CASCADE"), nullable=False),
        sa.Column("student_first_name", sa.String(100), nullable=False),
        sa.Column("student_last_name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("staff_member", sa.String(200), nullable=False),
        sa.Column("staff_member_id", sa.Integer(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("program", sa.String(50), nullable=False, server_default="default"),
        sa.Column("notes", sa.Text(), nullable=False, server_default=""),
        sa.Column("date", sa.String(32), nullable=False),
        sa.Column("time", sa.String(32), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="completed"),
        sa.Column("ai_summary", sa.Text(), nullable=True),
        sa.Column("follow_up_required", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("follow_up_date", sa.String(32), nullable=True),
        sa.Column("follow_up_overdue", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("follow_up_sent", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("follow_up_student_email", sa.String(255), nullable=True),
        sa.Column("follow_up_staff_email", sa.String(255), nullable=True),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_interaction_student_id", "interaction", ["student_id"])
    op.create_index("ix_interaction_created_at", "interaction", ["created_at"])

    op.create_table(
        "system_settings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("cohort_phase_map", postgresql.JSONB(), nullable=False, server_default="{}"),
        sa.Column("foundations_interaction_days", sa.Integer(), nullable=True),
        sa.Column("liftoff_interaction_days", sa.Integer(), nullable=True),
        sa.Column("lightspeed_interaction_days", sa.Integer(), nullable=True),
        sa.Column("program101_interaction_days", sa.Integer(), nullable=True),
        sa.Column("default_interaction_days", sa.Integer(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "integration_status",
        sa.Column("name", sa.String(100), primary_key=True),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("last_sync", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.execute("""
        INSERT INTO system_settings (
            cohort_phase_map, foundations_interaction_days, liftoff_interaction_days,
            lightspeed_interaction_days, program101_interaction_days, default_interaction_days
        ) VALUES ('{}'::jsonb, 14, 21, 7, 30, 30)
    """)


def downgrade() -> None:
    op.drop_table("integration_status")
    op.drop_table("system_settings")
    op.drop_table("interaction")
    op.drop_table("student")
    op.drop_table("app_user")
