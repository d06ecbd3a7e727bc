"""Infrastructure Layer — process-level concerns (logging).

Invariants:
    - Nothing here decides a status code
"""
