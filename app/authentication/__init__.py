"""
Authentication application.

Provides the custom email-based User model. Login flows themselves are
handled by Django's auth framework; this app only owns the account record
and the flags the lifecycle jobs filter on (ban status, e-mail verification,
marketing consent).

Usage:
    from authentication.models import User
"""
