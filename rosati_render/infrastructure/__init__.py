"""Infrastructure Layer - vendor SDK adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - All vendor failures mapped to ExternalServiceError
"""
