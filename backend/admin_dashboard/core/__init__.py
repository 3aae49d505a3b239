# admin_dashboard/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Application initialization and default admin creation
- db: Database configuration and the connection handle
- errors: Store exceptions and their HTTP mapping
- security: Password hashing and session tokens
"""
