from psycopg import sql

from app.config.settings import Settings
from app.database.connection import get_connection

_SCHEMA = """
CREATE TABLE IF NOT EXISTS {documents} (
    id uuid PRIMARY KEY DEFAULT gen_random_uuid(),
    name text NOT NULL,
    description text NOT NULL DEFAULT '',
    filename text NOT NULL,
    file_data bytea,
    size bigint NOT NULL,
    type text NOT NULL,
    required boolean NOT NULL DEFAULT false,
    products text[] NOT NULL DEFAULT '{{}}',
    product_type text NOT NULL,
    created_at timestamptz NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS {documents_product_type_idx}
    ON {documents} (product_type);

CREATE TABLE IF NOT EXISTS {app_state} (
    id uuid PRIMARY KEY DEFAULT gen_random_uuid(),
    user_id text NOT NULL UNIQUE,
    current_step integer NOT NULL DEFAULT 0,
    form_data jsonb NOT NULL DEFAULT '{{}}',
    selected_documents text[] NOT NULL DEFAULT '{{}}',
    dark_mode boolean NOT NULL DEFAULT false,
    created_at timestamptz NOT NULL DEFAULT now(),
    updated_at timestamptz NOT NULL DEFAULT now()
);
"""


def schema_sql(settings: Settings) -> sql.Composed:
    """Render the DDL for the configured table names."""
    return sql.SQL(_SCHEMA).format(
        documents=sql.Identifier(settings.documents_table),
        documents_product_type_idx=sql.Identifier(
            f"{settings.documents_table}_product_type_idx"
        ),
        app_state=sql.Identifier(settings.app_state_table),
    )


def apply_schema(settings: Settings) -> None:
    """Create the documents and app_state tables if they do not exist."""
    with get_connection() as conn:
        conn.execute(schema_sql(settings))
        conn.commit()
