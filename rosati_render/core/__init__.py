"""Core Layer - pure relay rules, no IO, no FastAPI, no vendor SDKs.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Vendor access is expressed only through the Protocols in relay_protocols
"""
