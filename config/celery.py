"""
Celery application for background jobs.

Reminder emails for the weekly checkin are fanned out here; everything else
in the project runs inside the request/response cycle.
"""
import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('launchpad')

# All CELERY_* settings in config/settings.py configure this app
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
