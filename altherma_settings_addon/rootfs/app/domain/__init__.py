"""Domain layer for the Altherma settings engine.

This package contains the core business logic for settings validation
and optimization, following Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no external dependencies on
Flask, the device API, or any infrastructure concerns.
"""
