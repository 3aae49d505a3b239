# admin_dashboard/models/__init__.py
"""
Database models module initialization.
Exports the Tortoise ORM models and the enums shared with the API layer.
"""
from .user import Role, Status, User
