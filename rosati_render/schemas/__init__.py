"""Pydantic Schemas - request structs, response structs, and the pure validator.

Invariants:
    - Schemas validate at the system boundary, before any vendor call
    - Domain constants from core/ define every bound
"""
