"""
Scheduler for the daily expiring-items sweep.

Runs NotificationService.check_expiring_items on a crontab schedule in a
background thread.
"""

import logging
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from adapters.document_store import DocumentStore
from repositories import utcnow
from services.notification_service import NotificationService

logger = logging.getLogger("pantrykeeper.scheduler")

EXPIRY_JOB_ID = "daily_expiry_check"


class ExpiryCheckScheduler:
    """Manages the scheduled expiring-items job"""

    def __init__(self, store_provider: Callable[[], DocumentStore], settings):
        self.store_provider = store_provider
        self.cron = settings.expiry_check_cron
        self.timezone = settings.expiry_check_timezone
        self.window_days = settings.expiry_window_days
        self.scheduler = BackgroundScheduler(timezone=self.timezone)

    def start(self) -> None:
        self.scheduler.add_job(
            func=self.run_now,
            trigger=CronTrigger.from_crontab(self.cron, timezone=self.timezone),
            id=EXPIRY_JOB_ID,
            name="Daily expiring pantry items check",
            replace_existing=True,
        )
        self.scheduler.start()
        logger.info(f"Scheduled expiry check '{self.cron}' ({self.timezone})")

    def run_now(self) -> Optional[int]:
        """
        Run the sweep immediately.

        Returns:
            Number of notifications written, or None when the run failed
        """
        started = utcnow()
        logger.info(f"Expiry check started at {started.isoformat()}")
        try:
            count = NotificationService.check_expiring_items(
                self.store_provider(), now=started, window_days=self.window_days
            )
        except Exception:
            # the next scheduled run retries
            logger.exception("Expiry check failed")
            return None
        logger.info(f"Expiry check completed: {count} notifications")
        return count

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Scheduler stopped")

