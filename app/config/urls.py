"""
URL configuration for the Tarodan backend.

URL Structure:
    /admin/                                        - Django admin interface
    /health/                                       - Health check (database, cache, scheduler)
    /api/v1/admin/memberships/premium-offers/send/ - Manually run the premium offer campaign (POST)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path

from core.views import health_check

# =============================================================================
# API v1 Routes
# =============================================================================
api_v1_patterns = [
    path("admin/memberships/", include("memberships.urls")),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    path("api/v1/", include(api_v1_patterns)),
]

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "Tarodan Admin"
admin.site.site_title = "Tarodan Admin Portal"
admin.site.index_title = "Payments, memberships and campaigns"
