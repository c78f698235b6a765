"""
Marketplace application.

Holds the listing (Product) and purchase (Order) records. The lifecycle jobs
only read them: a user who listed or bought something recently counts as an
active member of the marketplace.

Usage:
    from marketplace.models import Order, Product
"""
