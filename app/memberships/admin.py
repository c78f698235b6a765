"""
Django admin configuration for membership models.
"""

from django.contrib import admin

from memberships.models import MembershipTier, UserMembership


@admin.register(MembershipTier)
class MembershipTierAdmin(admin.ModelAdmin):
    list_display = ["name", "type", "monthly_price", "is_active"]
    list_filter = ["type", "is_active"]
    readonly_fields = ["id", "created_at", "updated_at"]


@admin.register(UserMembership)
class UserMembershipAdmin(admin.ModelAdmin):
    """
    Admin configuration for UserMembership.

    Filtering by status and period end shows who will be reminded next.
    """

    list_display = [
        "user",
        "tier",
        "status",
        "current_period_start",
        "current_period_end",
    ]
    list_filter = ["status", "tier"]
    search_fields = ["user__email", "user__display_name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    raw_id_fields = ["user"]
    date_hierarchy = "current_period_end"
    ordering = ["current_period_end"]
