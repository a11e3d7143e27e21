"""Infrastructure layer for the Altherma settings engine.

This package contains implementations of domain interfaces
that interact with external systems (file storage, HTTP API).
"""
