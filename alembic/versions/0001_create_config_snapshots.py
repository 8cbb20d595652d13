"""create config_snapshots table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

vendor_type = sa.Enum("CISCO_ASA", "PALO_ALTO", "PALO_ALTO_XML", "IPTABLES", name="vendortype")


def upgrade() -> None:
    op.create_table(
        "config_snapshots",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("hostname", sa.String(length=255), nullable=False),
        sa.Column("device_ip", sa.String(length=255), nullable=True),
        sa.Column("vendor", vendor_type, nullable=False),
        sa.Column("filename", sa.String(length=255), nullable=True),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("raw_config", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_config_snapshots_id"), "config_snapshots", ["id"], unique=False)
    op.create_index(op.f("ix_config_snapshots_hostname"), "config_snapshots", ["hostname"], unique=False)
    op.create_index(op.f("ix_config_snapshots_vendor"), "config_snapshots", ["vendor"], unique=False)
    op.create_index(op.f("ix_config_snapshots_created_at"), "config_snapshots", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_config_snapshots_created_at"), table_name="config_snapshots")
    op.drop_index(op.f("ix_config_snapshots_vendor"), table_name="config_snapshots")
    op.drop_index(op.f("ix_config_snapshots_hostname"), table_name="config_snapshots")
    op.drop_index(op.f("ix_config_snapshots_id"), table_name="config_snapshots")
    op.drop_table("config_snapshots")
    vendor_type.drop(op.get_bind(), checkfirst=True)
