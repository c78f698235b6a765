"""
Notifications application.

Hands e-mail jobs to a Celery worker which renders Django templates and sends
them through the configured mail backend.

Modules:
    protocols: NotificationDispatcher contract used by the schedulers
    dispatch: EmailJob and the Celery-backed dispatcher
    email: Template rendering into EmailMultiAlternatives messages
    tasks: send_template_email delivery worker

Usage:
    from notifications.dispatch import CeleryEmailDispatcher, EmailJob

    job_id = CeleryEmailDispatcher().enqueue(
        EmailJob(
            recipient="collector@example.com",
            template="membership-expiring",
            data={"user_name": "Ayse", "days_remaining": 7},
            subject="Your membership expires soon",
        )
    )
"""
