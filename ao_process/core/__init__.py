"""Core Layer — pure domain logic, no IO, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - The state store is the only stateful object in this layer

Design Decisions:
    - Functional core separated from imperative shell (handlers and runtime live in services/)
"""
