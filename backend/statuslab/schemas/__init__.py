"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; decision functions receive plain values
"""
