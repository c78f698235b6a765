"""
URL configuration for membership admin endpoints.

Mounted under /api/v1/admin/memberships/ by config/urls.py.
"""

from django.urls import path

from memberships.views import PremiumOfferTriggerView

app_name = "memberships"

urlpatterns = [
    path(
        "premium-offers/send/",
        PremiumOfferTriggerView.as_view(),
        name="premium-offers-send",
    ),
]
