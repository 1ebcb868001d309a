"""initial_codelists_schema

Revision ID: a3c9e1f27b40
Revises:
Create Date: 2026-10-19

Audit log (append-only change history), building classifications (KSO
tree, self-referencing with ON DELETE RESTRICT) and voltage levels.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a3c9e1f27b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create audit_log, building_classifications and voltage_levels."""
    op.create_table(
        "audit_log",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            autoincrement=True,
            nullable=False,
        ),
        sa.Column("entity_type", sa.String(length=100), nullable=False),
        sa.Column("entity_id", sa.BigInteger(), nullable=False),
        sa.Column("entity_code", sa.String(length=50), nullable=True),
        sa.Column("change_type", sa.String(length=20), nullable=False),
        sa.Column("changed_by", sa.String(length=100), nullable=False),
        sa.Column("changed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("old_values", sa.Text(), nullable=True),
        sa.Column("new_values", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_audit_log_entity_type", "audit_log", ["entity_type"])
    op.create_index("idx_audit_log_entity_code", "audit_log", ["entity_code"])
    op.create_index("idx_audit_log_changed_at", "audit_log", ["changed_at"])
    op.create_index("idx_audit_log_changed_by", "audit_log", ["changed_by"])
    op.create_index("idx_audit_log_change_type", "audit_log", ["change_type"])

    op.create_table(
        "building_classifications",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=15), nullable=False),
        sa.Column("name_cs", sa.String(length=200), nullable=False),
        sa.Column("name_en", sa.String(length=200), nullable=False),
        sa.Column("description_cs", sa.Text(), nullable=True),
        sa.Column("description_en", sa.Text(), nullable=True),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("valid_from", sa.Date(), nullable=True),
        sa.Column("valid_to", sa.Date(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
        sa.ForeignKeyConstraint(
            ["parent_id"], ["building_classifications.id"], ondelete="RESTRICT"
        ),
        sa.CheckConstraint("level BETWEEN 1 AND 4", name="ck_building_classifications_level"),
    )
    op.create_index(
        "idx_building_classifications_parent_id", "building_classifications", ["parent_id"]
    )
    op.create_index(
        "idx_building_classifications_level", "building_classifications", ["level"]
    )

    op.create_table(
        "voltage_levels",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=10), nullable=False),
        sa.Column("name_cs", sa.String(length=200), nullable=False),
        sa.Column("name_en", sa.String(length=200), nullable=False),
        sa.Column("voltage_range_cs", sa.String(length=100), nullable=False),
        sa.Column("voltage_range_en", sa.String(length=100), nullable=False),
        sa.Column("valid_from", sa.Date(), nullable=True),
        sa.Column("valid_to", sa.Date(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )


def downgrade() -> None:
    """Drop voltage_levels, building_classifications and audit_log."""
    op.drop_table("voltage_levels")
    op.drop_index("idx_building_classifications_level", table_name="building_classifications")
    op.drop_index("idx_building_classifications_parent_id", table_name="building_classifications")
    op.drop_table("building_classifications")
    op.drop_index("idx_audit_log_change_type", table_name="audit_log")
    op.drop_index("idx_audit_log_changed_by", table_name="audit_log")
    op.drop_index("idx_audit_log_changed_at", table_name="audit_log")
    op.drop_index("idx_audit_log_entity_code", table_name="audit_log")
    op.drop_index("idx_audit_log_entity_type", table_name="audit_log")
    op.drop_table("audit_log")
