"""Route handlers for the API."""

from devfolio.api.routes import auth, contact, health, messages, profile, tables

__all__ = ["auth", "contact", "health", "messages", "profile", "tables"]
