"""
Domain Layer

This package contains the core business domain logic, separated from
persistence concerns and infrastructure.

Structure:
- entities/: Business entities with identity and lifecycle
- value_objects/: Immutable value types without identity
"""
