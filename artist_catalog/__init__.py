"""Artist Catalog — CRUD service for music artist records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
