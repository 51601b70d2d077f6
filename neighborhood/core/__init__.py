"""Core Layer - pure domain logic: scoping, filtering, redaction, provisioning rules.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic; no IO, no async bodies

Design Decisions:
    - Functional core separated from imperative shell
"""
