"""
Tests for notification Celery tasks.

Tests cover:
- Rendering and sending of each lifecycle template
- Permanent failure on unknown templates
- Task retry configuration

Usage:
    pytest app/notifications/tests/test_tasks.py -v
"""

import pytest

from notifications.tasks import DeliveryError, send_template_email

REMINDER_DATA = {
    "user_name": "Ayse",
    "tier_name": "Premium",
    "expiration_date": "08.01.2024",
    "days_remaining": 7,
    "renew_url": "https://tarodan.com/membership/renew",
}


class TestSendTemplateEmail:
    """Tests for send_template_email."""

    def test_sends_rendered_membership_reminder(self, mailoutbox):
        """
        Given a known template and its data
        When the task runs
        Then one message with text and HTML parts is sent to the recipient
        """
        result = send_template_email.apply(
            kwargs={
                "recipient": "ayse@example.com",
                "template": "membership-expiring",
                "data": REMINDER_DATA,
                "subject": "Your Premium membership expires in 7 days",
            }
        ).get()

        assert result == {"sent": True, "template": "membership-expiring"}
        assert len(mailoutbox) == 1
        message = mailoutbox[0]
        assert message.to == ["ayse@example.com"]
        assert message.subject == "Your Premium membership expires in 7 days"
        assert "Premium membership expires in 7 days" in message.body
        assert "08.01.2024" in message.body
        assert "https://tarodan.com/membership/renew" in message.body
        html, mimetype = message.alternatives[0]
        assert mimetype == "text/html"
        assert "Renew membership" in html

    def test_sends_urgent_reminder(self, mailoutbox):
        send_template_email.apply(
            kwargs={
                "recipient": "ayse@example.com",
                "template": "membership-expiring-urgent",
                "data": {**REMINDER_DATA, "days_remaining": 1},
                "subject": "Your Premium membership expires tomorrow!",
            }
        ).get()

        assert len(mailoutbox) == 1
        assert "expires tomorrow" in mailoutbox[0].body

    def test_sends_premium_offer_with_benefits(self, mailoutbox):
        send_template_email.apply(
            kwargs={
                "recipient": "mert@example.com",
                "template": "premium-offer",
                "data": {
                    "user_name": "Mert",
                    "product_count": 3,
                    "order_count": 1,
                    "benefits": ["Unlimited listings", "Featured placement"],
                    "cta_url": "https://tarodan.com/membership/upgrade",
                    "cta_text": "Upgrade to Premium",
                },
                "subject": "Go Premium",
            }
        ).get()

        body = mailoutbox[0].body
        assert "3 products" in body
        assert "1 order " in body
        assert "- Unlimited listings" in body
        assert "Upgrade to Premium: https://tarodan.com/membership/upgrade" in body

    def test_unknown_template_is_permanent_failure(self, mailoutbox):
        """
        Given a template identifier with no template files
        When the task runs
        Then nothing is sent and the result carries the error code
        """
        result = send_template_email.apply(
            kwargs={
                "recipient": "ayse@example.com",
                "template": "does-not-exist",
                "data": {},
                "subject": "Hello",
            }
        ).get()

        assert result == {
            "sent": False,
            "template": "does-not-exist",
            "error": "unknown_template",
        }
        assert mailoutbox == []


class TestTaskConfiguration:
    """Tests for Celery task configuration."""

    def test_task_is_registered(self):
        assert hasattr(send_template_email, "delay")
        assert send_template_email.name == "notifications.tasks.send_template_email"

    def test_task_retries_with_backoff(self):
        assert send_template_email.max_retries == 3
        assert send_template_email.retry_backoff is True


class TestDeliveryError:
    def test_defaults_to_transient(self):
        error = DeliveryError("timeout", code="timeout")

        assert error.is_permanent is False
        assert error.code == "timeout"
        assert str(error) == "timeout"
