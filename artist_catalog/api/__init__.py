"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON envelopes: {data}, {data, pagination}, {message, data}, {error}

Design Decisions:
    - Thin routes delegate to services/artist_catalog.py
"""
