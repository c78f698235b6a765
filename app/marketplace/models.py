"""
Product and Order models.

Usage:
    from marketplace.models import Order, Product

    product = Product.objects.create(seller=seller, title="Hot Wheels '67 Camaro", price="450.00")
    order = Order.objects.create(buyer=buyer, seller=seller, product=product, total_amount="450.00")

    # Users active in the last 30 days
    Product.objects.created_since(cutoff).values("seller")
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from core.managers import BaseQuerySet
from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel


class ProductStatus(models.TextChoices):
    """Listing lifecycle states."""

    DRAFT = "draft", "Draft"
    PENDING_REVIEW = "pending_review", "Pending Review"
    ACTIVE = "active", "Active"
    SOLD = "sold", "Sold"
    INACTIVE = "inactive", "Inactive"


class OrderStatus(models.TextChoices):
    """Order lifecycle states."""

    PENDING_PAYMENT = "pending_payment", "Pending Payment"
    PAID = "paid", "Paid"
    SHIPPED = "shipped", "Shipped"
    DELIVERED = "delivered", "Delivered"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"


class Product(UUIDPrimaryKeyMixin, BaseModel):
    """
    A listing published by a seller.

    Fields:
        seller: User who listed the product
        title: Listing title
        price: Asking price
        status: Listing state
    """

    seller = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="products",
        help_text="User who listed the product",
    )
    title = models.CharField(max_length=200)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices,
        default=ProductStatus.ACTIVE,
        db_index=True,
    )

    objects = BaseQuerySet.as_manager()

    class Meta(BaseModel.Meta):
        verbose_name = "product"
        verbose_name_plural = "products"

    def __str__(self) -> str:
        return self.title


class Order(UUIDPrimaryKeyMixin, BaseModel):
    """
    A purchase of one product.

    Fields:
        buyer: Purchasing user
        seller: Selling user
        product: Purchased listing
        total_amount: Amount charged to the buyer
        status: Order state
    """

    buyer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="buyer_orders",
        help_text="Purchasing user",
    )
    seller = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="seller_orders",
        help_text="Selling user",
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="orders",
    )
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING_PAYMENT,
        db_index=True,
    )

    objects = BaseQuerySet.as_manager()

    class Meta(BaseModel.Meta):
        verbose_name = "order"
        verbose_name_plural = "orders"

    def __str__(self) -> str:
        return f"Order {self.pk} ({self.status})"
