"""create inbox schema

Revision ID: 4c1e9a7d2b36
Revises:
Create Date: 2026-10-19 10:12:41.305118

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '4c1e9a7d2b36'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Step 1: Create the functions (required before triggers)
    # Fallback short code: first 12 hex digits of the primary key
    op.execute('''
        CREATE OR REPLACE FUNCTION set_default_short_id()
        RETURNS TRIGGER AS $$
        BEGIN
            IF NEW.short_id IS NULL OR NEW.short_id = '' THEN
                NEW.short_id = left(replace(lower(NEW.id::text), '-', ''), 12);
            END IF;
            RETURN NEW;
        END;
        $$ language 'plpgsql'
    ''')

    op.execute('''
        CREATE OR REPLACE FUNCTION touch_conversation_on_message()
        RETURNS TRIGGER AS $$
        BEGIN
            UPDATE conversations
               SET updated_at = GREATEST(updated_at, NEW.created_at)
             WHERE id = NEW.conversation_id;
            RETURN NEW;
        END;
        $$ language 'plpgsql'
    ''')

    # read_at goes from NULL to a timestamp once and is never unset or moved
    op.execute('''
        CREATE OR REPLACE FUNCTION keep_first_read_at()
        RETURNS TRIGGER AS $$
        BEGIN
            IF OLD.read_at IS NOT NULL THEN
                NEW.read_at = OLD.read_at;
            END IF;
            RETURN NEW;
        END;
        $$ language 'plpgsql'
    ''')

    # Step 2: Create tables
    op.execute("""
        CREATE TABLE IF NOT EXISTS profiles (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            short_id VARCHAR(32),
            full_name VARCHAR(255),
            company_name VARCHAR(255),
            user_type VARCHAR(30) NOT NULL,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        )
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS listings (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            short_id VARCHAR(32),
            author_id UUID NOT NULL REFERENCES profiles(id),
            title VARCHAR(255) NOT NULL,
            listing_type VARCHAR(30) NOT NULL,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        )
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS conversations (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            short_id VARCHAR(32),
            listing_id UUID NOT NULL REFERENCES listings(id),
            participant_1 UUID NOT NULL REFERENCES profiles(id),
            participant_2 UUID NOT NULL REFERENCES profiles(id),
            activated BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            CONSTRAINT ck_conversations_two_parties CHECK (participant_1 <> participant_2)
        )
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS messages (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            conversation_id UUID NOT NULL REFERENCES conversations(id),
            sender_id UUID NOT NULL REFERENCES profiles(id),
            content TEXT NOT NULL,
            message_type VARCHAR(10) NOT NULL DEFAULT 'user' CHECK (message_type IN ('user', 'system', 'heart')),
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            read_at TIMESTAMP WITH TIME ZONE
        )
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS notifications (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id UUID NOT NULL REFERENCES profiles(id),
            type VARCHAR(30) NOT NULL DEFAULT 'system',
            title VARCHAR(255) NOT NULL DEFAULT '',
            message TEXT NOT NULL DEFAULT '',
            data JSONB,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            read_at TIMESTAMP WITH TIME ZONE
        )
    """)

    # Step 3: Create indexes (short codes are intentionally not unique)
    op.execute('CREATE INDEX IF NOT EXISTS idx_profiles_short_id ON profiles(short_id)')
    op.execute('CREATE INDEX IF NOT EXISTS idx_listings_short_id ON listings(short_id)')
    op.execute('CREATE INDEX IF NOT EXISTS idx_conversations_short_id ON conversations(short_id)')
    op.execute('CREATE INDEX IF NOT EXISTS idx_conversations_participant_1 ON conversations(participant_1)')
    op.execute('CREATE INDEX IF NOT EXISTS idx_conversations_participant_2 ON conversations(participant_2)')
    op.execute('CREATE INDEX IF NOT EXISTS idx_conversations_updated_at ON conversations(updated_at DESC)')
    op.execute('CREATE INDEX IF NOT EXISTS idx_messages_conversation_id ON messages(conversation_id)')
    op.execute('CREATE INDEX IF NOT EXISTS idx_messages_unread ON messages(conversation_id, sender_id) WHERE read_at IS NULL')
    op.execute('CREATE INDEX IF NOT EXISTS idx_notifications_unread ON notifications(user_id) WHERE read_at IS NULL')

    # Step 4: Create triggers (only after tables exist)
    for table in ('profiles', 'listings', 'conversations'):
        op.execute(f'''
            CREATE TRIGGER set_{table}_short_id
                BEFORE INSERT ON {table}
                FOR EACH ROW EXECUTE FUNCTION set_default_short_id()
        ''')

    op.execute('''
        CREATE TRIGGER touch_conversation_after_message
            AFTER INSERT ON messages
            FOR EACH ROW EXECUTE FUNCTION touch_conversation_on_message()
    ''')

    for table in ('messages', 'notifications'):
        op.execute(f'''
            CREATE TRIGGER keep_{table}_read_at
                BEFORE UPDATE OF read_at ON {table}
                FOR EACH ROW EXECUTE FUNCTION keep_first_read_at()
        ''')


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('DROP TABLE IF EXISTS notifications')
    op.execute('DROP TABLE IF EXISTS messages')
    op.execute('DROP TABLE IF EXISTS conversations')
    op.execute('DROP TABLE IF EXISTS listings')
    op.execute('DROP TABLE IF EXISTS profiles')
    op.execute('DROP FUNCTION IF EXISTS keep_first_read_at()')
    op.execute('DROP FUNCTION IF EXISTS touch_conversation_on_message()')
    op.execute('DROP FUNCTION IF EXISTS set_default_short_id()')
