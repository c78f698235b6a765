"""
Marketing e-mails: the weekly newsletter and the monthly promotions.

Both go only to users who opted in (accepts_marketing_emails) and can be
reached (active, verified, not banned).
"""
