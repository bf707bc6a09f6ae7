"""
SQL templates for collection-level operations.

Collections are tables named after the collection, so the table name is
interpolated with str.format after validation against KNOWN_COLLECTIONS.
These use positional parameters ($1, $2, etc.) required by asyncpg executemany.
Kept separate from aiosql .sql files which use named parameters.
"""

CREATE_COLLECTION = """
CREATE TABLE IF NOT EXISTS "{collection}" (
    _key TEXT PRIMARY KEY,
    doc JSONB NOT NULL
)
"""

COLLECTION_EXISTS = """
SELECT EXISTS (
    SELECT 1 FROM information_schema.tables
    WHERE table_schema = current_schema() AND table_name = $1
)
"""

TRUNCATE_COLLECTION = 'TRUNCATE TABLE "{collection}"'

# Params: (_key, doc)
INSERT_DOCUMENT = 'INSERT INTO "{collection}" (_key, doc) VALUES ($1, $2)'

# Params: (keys text[])
GET_DOCUMENTS_BY_KEYS = 'SELECT _key, doc FROM "{collection}" WHERE _key = ANY($1::text[])'

CREATE_FULLTEXT_INDEX = """
CREATE INDEX IF NOT EXISTS "{index}"
ON "{collection}" USING GIN (to_tsvector('simple', doc->>'{field}'))
"""
