"""create responses and photos

Revision ID: 3b1f0c9a7d21
Revises:
Create Date: 2026-10-17 10:02:11.481203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f0c9a7d21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'responses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('answer', sa.String(), nullable=True),
        sa.Column('device', sa.String(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_table(
        'photos',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('filename', sa.String(), nullable=False),
        sa.Column('original_name', sa.String(), nullable=True),
        sa.Column('path', sa.String(), nullable=False),
        sa.Column('size', sa.Integer(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.UniqueConstraint('filename'),
    )

    # 최신순 조회용 인덱스
    op.create_index('ix_responses_timestamp', 'responses', ['timestamp'])
    op.create_index('ix_photos_timestamp', 'photos', ['timestamp'])


def downgrade() -> None:
    # 역순 삭제
    op.drop_index('ix_photos_timestamp', table_name='photos')
    op.drop_index('ix_responses_timestamp', table_name='responses')
    op.drop_table('photos')
    op.drop_table('responses')
