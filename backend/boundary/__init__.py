"""
Boundary layer for external system integrations.

Handles all interactions with external systems (the relational database).
Provides the ORM models, CRUD modules and session plumbing.
"""
