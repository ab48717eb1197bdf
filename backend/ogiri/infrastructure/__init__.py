"""Infrastructure Layer — store implementations and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - File I/O failures are mapped to StorageError before leaving this layer
"""
