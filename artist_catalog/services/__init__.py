"""Services Layer — orchestrates core logic over injected infrastructure.

Invariants:
    - Services never build their own DB sessions (injected by api/dependencies.py)
    - Services raise CatalogError subclasses, never HTTPException
"""
