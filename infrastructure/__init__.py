# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Infrastructure - Database connectivity
# PURPOSE: PostgreSQL connection handling for catalog reads
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for the schema generator.

Provides:
- PostgreSQLClient: One async psycopg connection per run, always closed

Usage:
    from infrastructure import PostgreSQLClient

    client = PostgreSQLClient(config.connection)
    rows = await client.fetch_all("SELECT 1 AS one")
"""

from infrastructure.postgresql import PostgreSQLClient

__all__ = [
    "PostgreSQLClient",
]
