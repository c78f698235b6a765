"""
Django admin configuration for marketplace models.
"""

from django.contrib import admin

from marketplace.models import Order, Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "seller", "price", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["id", "title", "seller__email"]
    readonly_fields = ["id", "created_at", "updated_at"]
    ordering = ["-created_at"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["id", "buyer", "seller", "total_amount", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["id", "buyer__email", "seller__email"]
    readonly_fields = ["id", "created_at", "updated_at"]
    raw_id_fields = ["product"]
    ordering = ["-created_at"]
