import logging
import time
from datetime import datetime, timezone

from fastapi import BackgroundTasks

from app.core.config import settings

logger = logging.getLogger(__name__)
email_logger = logging.getLogger("app.notification.email")
sms_logger = logging.getLogger("app.notification.sms")


class NotificationService:
    """
    Fire-and-forget notification dispatcher.

    Every ``send_*`` call only queues work on the request's ``BackgroundTasks``;
    FastAPI runs it after the response has been sent. Delivery is attempted
    once; failures are logged here and never reach the caller.
    """

    def __init__(self, background_tasks: BackgroundTasks):
        self.background_tasks = background_tasks

    def _dispatch(self, fn, *args) -> None:
        self.background_tasks.add_task(self._run_safely, fn, *args)

    @staticmethod
    def _run_safely(fn, *args) -> None:
        try:
            fn(*args)
        except Exception as e:
            logger.error(f"❌ Notification {fn.__name__} failed: {e}", exc_info=True)

    def _deliver_email(self, to: str, subject: str, body: str) -> None:
        logger.info(f"📧 Sending email notification to: {to}")
        if settings.NOTIFICATION_DELAY_SECONDS > 0:
            time.sleep(settings.NOTIFICATION_DELAY_SECONDS)

        email_logger.info("=== EMAIL SENT ===")
        email_logger.info(f"To: {to}")
        email_logger.info(f"Subject: {subject}")
        email_logger.info(f"Body: {body}")
        email_logger.info(f"Timestamp: {datetime.now(timezone.utc).isoformat()}")
        logger.info(f"✅ Email notification sent to: {to}")

    def _deliver_sms(self, phone_number: str, message: str) -> None:
        logger.info(f"📱 Sending SMS notification to: {phone_number}")
        if settings.NOTIFICATION_DELAY_SECONDS > 0:
            time.sleep(settings.NOTIFICATION_DELAY_SECONDS)

        sms_logger.info("=== SMS SENT ===")
        sms_logger.info(f"Phone: {phone_number}")
        sms_logger.info(f"Message: {message}")
        sms_logger.info(f"Timestamp: {datetime.now(timezone.utc).isoformat()}")
        logger.info(f"✅ SMS notification sent to: {phone_number}")

    def send_email_notification(self, to: str, subject: str, body: str) -> None:
        self._dispatch(self._deliver_email, to, subject, body)

    def send_sms_notification(self, phone_number: str, message: str) -> None:
        self._dispatch(self._deliver_sms, phone_number, message)

    def send_quiz_attempt_notification(
        self, username: str, quiz_title: str, score: float
    ) -> None:
        """Notify a user about a graded attempt by e-mail and SMS"""
        subject = f"Quiz Attempt Result - {quiz_title}"
        body = (
            f"Hello {username},\n\n"
            f"You have completed the quiz: {quiz_title}\n"
            f"Your score: {score:.2f}%\n\n"
            "Thank you!"
        )
        self.send_email_notification(
            f"{username}@{settings.NOTIFICATION_EMAIL_DOMAIN}", subject, body
        )

        message = f"Quiz '{quiz_title}' completed! Score: {score:.2f}%"
        self.send_sms_notification(settings.NOTIFICATION_SMS_NUMBER, message)


def get_notification_service(background_tasks: BackgroundTasks) -> NotificationService:
    """FastAPI dependency binding the dispatcher to the current request's background tasks"""
    return NotificationService(background_tasks)
