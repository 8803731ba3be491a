"""
Router utility functions.

Contains helpers shared by router endpoints to keep them clean.
"""

from backend.api.routers.router_utils.error_handling import handle_service_errors
from backend.api.routers.router_utils.ownership import ensure_owner

__all__ = ["ensure_owner", "handle_service_errors"]
