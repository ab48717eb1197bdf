"""Core Layer — pure domain rules, no HTTP, no file I/O.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - DataStore protocol lives here; implementations live in infrastructure/
"""
