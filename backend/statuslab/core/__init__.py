"""Core Layer — pure status decisions, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Every decide_* function is deterministic: same inputs, equal StatusOutcome

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
