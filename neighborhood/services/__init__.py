"""Services Layer - async orchestration of repositories around the pure core.

Invariants:
    - One service per aggregate (users, groups)
    - Services receive repositories by injection; they never build sessions
"""
