"""User admin dashboard: sign-in, role-gated pages and a user directory API."""
