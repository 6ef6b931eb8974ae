"""family members table

Revision ID: 0001_family_members
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_family_members"
down_revision = None
branch_labels = None
depends_on = None


age_group_enum = sa.Enum("ADULT", "CHILD", "INFANT", name="agegroupenum")


def upgrade() -> None:
    op.create_table(
        "family_members",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("age_group", age_group_enum, nullable=False),
        sa.Column(
            "parent_id",
            sa.Integer(),
            sa.ForeignKey("family_members.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("generation", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_founder", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.CheckConstraint("generation >= 0", name="ck_generation_non_negative"),
    )
    op.create_index("ix_family_members_parent", "family_members", ["parent_id"], unique=False)
    op.create_index("ix_family_members_founder", "family_members", ["is_founder"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_family_members_founder", table_name="family_members")
    op.drop_index("ix_family_members_parent", table_name="family_members")
    op.drop_table("family_members")
    age_group_enum.drop(op.get_bind(), checkfirst=True)
