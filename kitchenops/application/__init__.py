"""
Application layer - use cases and DTOs.

API handlers call use cases only; use cases wire stores, domain services
and the event publisher together.
"""
