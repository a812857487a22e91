"""
Database migrations and seeding.

The site itself never writes to the database. This package is for repo-level DB operations:
- Alembic migrations config
- One-shot skills seed
"""
