"""initial legal case schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _check_in(name: str, column: str, values) -> sa.CheckConstraint:
    allowed = ", ".join(f"'{v}'" for v in values)
    return sa.CheckConstraint(f"{column} IN ({allowed})", name=name)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'clients',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('idx_clients_last_name', 'clients', ['last_name'], unique=False)

    op.create_table(
        'cases',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('case_number', sa.String(length=50), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('case_number'),
        _check_in('ck_cases_type', 'type', ['CIVIL', 'CRIMINAL', 'FAMILY', 'CORPORATE', 'OTHER']),
        _check_in('ck_cases_status', 'status', ['NEW', 'ACTIVE', 'PENDING', 'CLOSED', 'ARCHIVED']),
    )
    op.create_index('idx_cases_status', 'cases', ['status'], unique=False)
    op.create_index('idx_cases_title', 'cases', ['title'], unique=False)

    op.create_table(
        'case_clients',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('case_id', sa.Integer(), sa.ForeignKey('cases.id', ondelete='CASCADE'), nullable=False),
        sa.Column('client_id', sa.Integer(), sa.ForeignKey('clients.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('case_id', 'client_id', name='uq_case_clients_case_client'),
    )
    op.create_index('idx_case_clients_client_id', 'case_clients', ['client_id'], unique=False)

    op.create_table(
        'hearings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('case_id', sa.Integer(), sa.ForeignKey('cases.id', ondelete='CASCADE'), nullable=False),
        sa.Column('hearing_date', sa.DateTime(timezone=False), nullable=False),
        sa.Column('judge', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        _check_in('ck_hearings_status', 'status', ['SCHEDULED', 'COMPLETED', 'POSTPONED', 'CANCELLED']),
    )
    op.create_index('idx_hearings_case_id', 'hearings', ['case_id'], unique=False)
    op.create_index('idx_hearings_hearing_date', 'hearings', ['hearing_date'], unique=False)

    op.create_table(
        'documents',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('case_id', sa.Integer(), sa.ForeignKey('cases.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        _check_in('ck_documents_type', 'type', ['CONTRACT', 'EVIDENCE', 'PETITION', 'COURT_ORDER', 'OTHER']),
    )
    op.create_index('idx_documents_case_id', 'documents', ['case_id'], unique=False)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('enabled', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email'),
        _check_in('ck_users_role', 'role', ['ADMIN', 'LAWYER', 'ASSISTANT', 'VIEWER']),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('users')
    op.drop_index('idx_documents_case_id', table_name='documents')
    op.drop_table('documents')
    op.drop_index('idx_hearings_hearing_date', table_name='hearings')
    op.drop_index('idx_hearings_case_id', table_name='hearings')
    op.drop_table('hearings')
    op.drop_index('idx_case_clients_client_id', table_name='case_clients')
    op.drop_table('case_clients')
    op.drop_index('idx_cases_title', table_name='cases')
    op.drop_index('idx_cases_status', table_name='cases')
    op.drop_table('cases')
    op.drop_index('idx_clients_last_name', table_name='clients')
    op.drop_table('clients')
