"""add exercise_details to activity_logs

Revision ID: 9b3e6d0c21a4
Revises: 4f1c2a9b7d10
Create Date: 2025-11-20 09:41:27.503118

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '9b3e6d0c21a4'
down_revision = '4f1c2a9b7d10'
branch_labels = None
depends_on = None


def upgrade():
    # Nullable: rows written before this revision keep their data in notes
    with op.batch_alter_table('activity_logs', schema=None) as batch_op:
        batch_op.add_column(sa.Column(
            'exercise_details',
            sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql'),
            nullable=True,
        ))


def downgrade():
    with op.batch_alter_table('activity_logs', schema=None) as batch_op:
        batch_op.drop_column('exercise_details')
