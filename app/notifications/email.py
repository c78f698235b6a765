"""
Template rendering for outgoing e-mail.

Each template identifier maps to a pair of Django templates:

    notifications/email/<template>.html
    notifications/email/<template>.txt

The plain-text part is the message body and the HTML part is attached as an
alternative. The job's data is passed as the template context together with
the subject.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

TEMPLATE_DIR = "notifications/email"


def build_template_email(
    recipient: str,
    template: str,
    data: dict[str, Any],
    subject: str,
) -> EmailMultiAlternatives:
    """
    Render a template pair into a ready-to-send message.

    Raises:
        TemplateDoesNotExist: If either part of the template is missing
    """
    context = {**data, "subject": subject}
    text_body = render_to_string(f"{TEMPLATE_DIR}/{template}.txt", context)
    html_body = render_to_string(f"{TEMPLATE_DIR}/{template}.html", context)

    message = EmailMultiAlternatives(
        subject=subject,
        body=text_body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[recipient],
    )
    message.attach_alternative(html_body, "text/html")
    return message
