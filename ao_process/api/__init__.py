"""API Layer — FastAPI routes and error handlers for hosting the process over HTTP.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Process routes delegate to ProcessRuntime (no business logic in routes)
"""
