"""
Memberships app.

This app handles:
- Membership tiers and each user's current membership period
- Expiration reminder e-mails 7 days and 1 day before a period ends
- The monthly premium offer campaign for active free-tier users

Related apps:
    - authentication: User model for the member
    - marketplace: Listings and orders that make a user "active"
    - notifications: E-mail dispatch

Usage:
    from memberships.tasks import send_expiration_reminders

    send_expiration_reminders.delay()
"""
