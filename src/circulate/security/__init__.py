"""Security helpers shared by the routing table and middleware."""

from circulate.security.urls import is_safe_url

__all__ = ["is_safe_url"]
