"""
Payment admin configuration.
"""

from django.contrib import admin, messages

from django_fsm import can_proceed

from payments.models import Payment

__all__ = ["PaymentAdmin"]


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """
    Admin configuration for Payment.

    Status is read-only here; it changes only through FSM transitions.
    """

    list_display = [
        "id",
        "payer",
        "amount",
        "currency",
        "provider",
        "status",
        "created_at",
    ]
    list_filter = ["status", "provider", "currency"]
    search_fields = ["id", "provider_reference", "payer__email"]
    readonly_fields = [
        "id",
        "status",
        "created_at",
        "updated_at",
        "completed_at",
        "failed_at",
        "cancelled_at",
        "refunded_at",
    ]
    raw_id_fields = ["payer", "order"]
    ordering = ["-created_at"]
    date_hierarchy = "created_at"
    actions = ["cancel_selected"]

    @admin.action(description="Cancel selected pending payments")
    def cancel_selected(self, request, queryset):
        cancelled = 0
        for payment in queryset:
            if not can_proceed(payment.cancel):
                continue
            payment.cancel(reason=f"Cancelled by {request.user}")
            payment.save()
            cancelled += 1

        self.message_user(
            request,
            f"Cancelled {cancelled} payment(s).",
            messages.SUCCESS,
        )
