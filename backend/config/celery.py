"""
Celery application for the configurator project.

Workers deliver catalog events to WebSocket subscribers; beat runs the
hourly stock consistency check.
"""

import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('configurator')
app.config_from_object('django.conf:settings', namespace='CELERY')

# tasks live in the application layer, not in a Django app
app.autodiscover_tasks(['application'])

app.conf.beat_schedule = {
    'check-part-availability': {
        'task': 'application.tasks.notification_tasks.check_part_availability',
        'schedule': 60.0 * 60,
    },
}
