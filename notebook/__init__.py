"""
Notebook Tree Engine.

- core/: Configuration, logging, exceptions, database sessions, path helpers
- models/: SQLAlchemy models for the folder and note tables
- repositories/: Row-level data access
- services/: Path resolution plus the folder and note engines
- migrations/: Alembic environment and revisions
"""
