# events/tasks.py
import logging

from celery import shared_task

from .services import reconcile_participant_counts

logger = logging.getLogger("hackhub.events")


@shared_task
def reconcile_participant_counts_task():
    """
    Periodic repair of cached participant counts against the
    registration rows. Scheduled hourly by CELERY_BEAT_SCHEDULE.
    """
    fixed = reconcile_participant_counts()
    if fixed:
        logger.info(f"Reconciled participant counts for {fixed} event(s)")
    return fixed
