"""Community Core - authorization and data-visibility core for a two-level community platform.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
