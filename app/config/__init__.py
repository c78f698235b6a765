# Loading the Celery app with Django binds @shared_task functions to it.
from config.celery import app as celery_app

__all__ = ("celery_app",)
