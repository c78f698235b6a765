"""
Tests for payments app.

This package contains test modules for:
- test_models.py: Payment model and QuerySet tests
- test_state_transitions.py: django-fsm transition tests
- test_expiration_sweeper.py: Expiration sweeper and its Celery task

Usage:
    pytest payments/tests/
    pytest payments/tests/test_expiration_sweeper.py
"""
