"""Services Layer - the two relay handlers.

Invariants:
    - Each handler: validate -> call vendor through RelayBackend -> map result
    - No retries, no timeouts beyond the vendor client's own defaults
"""
