"""
Tests for rendering the marketing templates through send_template_email.
"""

from notifications.tasks import send_template_email

DATA = {
    "user_name": "Elif",
    "products": [
        {
            "title": "Tomica Skyline GT-R",
            "price": "320.00",
            "url": "https://tarodan.com/products/42",
        }
    ],
    "preferences_url": "https://tarodan.com/profile/settings",
}


def _send(template, data):
    return send_template_email.apply(
        kwargs={
            "recipient": "elif@example.com",
            "template": template,
            "data": data,
            "subject": "Tarodan",
        }
    ).get()


class TestMarketingTemplates:
    def test_newsletter_lists_products(self, mailoutbox):
        result = _send("newsletter-weekly", DATA)

        assert result == {"sent": True, "template": "newsletter-weekly"}
        body = mailoutbox[0].body
        assert "Hi Elif," in body
        assert "- Tomica Skyline GT-R (320.00 TL): https://tarodan.com/products/42" in body
        assert "Manage e-mail preferences: https://tarodan.com/profile/settings" in body
        html, _ = mailoutbox[0].alternatives[0]
        assert 'href="https://tarodan.com/products/42"' in html

    def test_promotions_without_products(self, mailoutbox):
        _send("promotions-monthly", {**DATA, "products": []})

        assert "No featured listings this month." in mailoutbox[0].body
