"""
Tests for authentication app.

This package contains test modules for:
- test_managers.py: UserManager and User helper tests
- factories.py: UserFactory shared by the other apps' tests

Usage:
    pytest authentication/tests/
"""
