"""
Celery tasks.

Imported here so ``autodiscover_tasks`` registers them with the worker.
"""

from .notification_tasks import broadcast_event, check_part_availability

__all__ = ['broadcast_event', 'check_part_availability']
