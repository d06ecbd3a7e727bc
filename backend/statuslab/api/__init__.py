"""API Layer — FastAPI routes, response emitter, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes parse parameters, call one core decide_* function, and emit its outcome

Design Decisions:
    - Thin routes delegate to core/ (ADR: ExMA impureim sandwich)
"""
