"""Create profile, chat, journal and insight tables

Revision ID: b7c1d2e3f4a5
Revises:
Create Date: 2025-09-02 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = 'b7c1d2e3f4a5'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CONVERSATION_MODES = ('friend', 'therapist', 'vent', 'journal', 'avatar-therapy')


def _timestamps():
    return [
        sa.Column('created_at', postgresql.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('updated_at', postgresql.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.text('false')),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    conversation_mode = postgresql.ENUM(*CONVERSATION_MODES, name='conversation_mode', create_type=False)
    theme = postgresql.ENUM('light', 'dark', name='theme', create_type=False)
    message_role = postgresql.ENUM('user', 'assistant', name='message_role', create_type=False)
    conversation_mode.create(op.get_bind(), checkfirst=True)
    theme.create(op.get_bind(), checkfirst=True)
    message_role.create(op.get_bind(), checkfirst=True)

    op.create_table('user_profiles',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('mood', sa.String(length=50), nullable=True),
        sa.Column('gender', sa.String(length=50), nullable=True),
        sa.Column('theme', theme, nullable=True),
        sa.Column('persona', conversation_mode, nullable=True),
        sa.Column('onboarding_completed', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_profiles_id'), 'user_profiles', ['id'], unique=False)
    op.create_index(op.f('ix_user_profiles_user_id'), 'user_profiles', ['user_id'], unique=True)

    op.create_table('chat_sessions',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('mode', conversation_mode, nullable=False, server_default='friend'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_chat_sessions_id'), 'chat_sessions', ['id'], unique=False)
    op.create_index(op.f('ix_chat_sessions_user_id'), 'chat_sessions', ['user_id'], unique=False)

    op.create_table('chat_messages',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('session_id', sa.UUID(), nullable=False),
        sa.Column('role', message_role, nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('attachments', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('is_safety_response', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        *_timestamps(),
        sa.ForeignKeyConstraint(['session_id'], ['chat_sessions.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_chat_messages_id'), 'chat_messages', ['id'], unique=False)
    op.create_index(op.f('ix_chat_messages_session_id'), 'chat_messages', ['session_id'], unique=False)

    op.create_table('journal_entries',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('entry_date', sa.Date(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('mood', sa.String(length=50), nullable=True),
        sa.Column('emojis', postgresql.JSONB(), nullable=False, server_default='[]'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'entry_date', name='uq_journal_entries_user_date')
    )
    op.create_index(op.f('ix_journal_entries_id'), 'journal_entries', ['id'], unique=False)
    op.create_index(op.f('ix_journal_entries_user_id'), 'journal_entries', ['user_id'], unique=False)
    op.create_index(op.f('ix_journal_entries_entry_date'), 'journal_entries', ['entry_date'], unique=False)

    op.create_table('therapy_insights',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('session_id', sa.UUID(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('mood_analysis', postgresql.JSONB(), nullable=False),
        sa.Column('key_themes', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('progress_indicators', postgresql.JSONB(), nullable=False),
        sa.Column('recommendations', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('risk_assessment', sa.String(length=20), nullable=False, server_default='low'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['session_id'], ['chat_sessions.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_therapy_insights_id'), 'therapy_insights', ['id'], unique=False)
    op.create_index(op.f('ix_therapy_insights_session_id'), 'therapy_insights', ['session_id'], unique=False)
    op.create_index(op.f('ix_therapy_insights_user_id'), 'therapy_insights', ['user_id'], unique=False)

    # Note: RLS policies tying user_id to auth.users are handled in Supabase


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('therapy_insights')
    op.drop_table('journal_entries')
    op.drop_table('chat_messages')
    op.drop_table('chat_sessions')
    op.drop_table('user_profiles')

    postgresql.ENUM(name='message_role').drop(op.get_bind(), checkfirst=True)
    postgresql.ENUM(name='theme').drop(op.get_bind(), checkfirst=True)
    postgresql.ENUM(name='conversation_mode').drop(op.get_bind(), checkfirst=True)
