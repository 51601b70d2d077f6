"""Infrastructure Layer - persistence, credential hashing and cross-cutting concerns.

Invariants:
    - Implements the Protocols in core/repository_protocols.py
    - Stores return frozen core records, never ORM instances
    - All SQLAlchemy failures surface as DatabaseError
"""
