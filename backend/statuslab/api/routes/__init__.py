"""Route Modules — one file per controller surface.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain predicates (delegate to core/decide_*)

Design Decisions:
    - Explicit registration in main.py over auto-discovery (ADR: ExMA anti-pattern)
"""
