"""Services Layer — action handlers, dispatch and the process entry points.

Invariants:
    - Handlers receive the state store through their constructor, never a global
    - Only the dispatcher converts handler failures into Error responses
"""
