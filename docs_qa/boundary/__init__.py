"""
Boundary layer for external system integrations.

Handles all interactions with external systems (snapshot files, model
providers). Provides adapters and clients for infrastructure dependencies.
"""
