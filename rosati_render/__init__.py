"""Rosati Render Relay Package.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
