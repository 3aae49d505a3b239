# admin_dashboard/services/__init__.py
"""
Services module.
- user_store: repository over the users table (the credential store)
- authenticator: email/password verification producing session claims
"""
from .authenticator import authenticate
from .user_store import UserStore
