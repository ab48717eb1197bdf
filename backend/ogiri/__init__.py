"""Ogiri Application Package — themes and answers REST service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
