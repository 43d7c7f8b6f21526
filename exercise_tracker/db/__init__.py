"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Single async engine per process (initialized via init_db)
    - Tables are created from Base.metadata at startup; there are no migrations
"""
