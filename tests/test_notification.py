"""
Pytest tests for the fire-and-forget notification dispatcher
"""

import logging
from unittest.mock import Mock

from fastapi import BackgroundTasks

from app.services.notification import NotificationService, get_notification_service


def run_background_tasks(background_tasks):
    """Run queued tasks in order, the way Starlette does after the response"""
    for task in background_tasks.tasks:
        task.func(*task.args, **task.kwargs)


class TestNotificationDispatch:
    """Test that notifications are only queued, never run inline"""

    def setup_method(self):
        """Set up test fixtures"""
        self.background_tasks = Mock(spec=BackgroundTasks)
        self.service = NotificationService(self.background_tasks)

    def test_quiz_attempt_notification_queues_email_and_sms(self):
        """Test that one attempt notification queues two deliveries"""
        self.service.send_quiz_attempt_notification("testuser", "Test Quiz", 50.0)

        assert self.background_tasks.add_task.call_count == 2
        email_call, sms_call = self.background_tasks.add_task.call_args_list

        runner, fn, to, subject, body = email_call[0]
        assert runner == NotificationService._run_safely
        assert fn == self.service._deliver_email
        assert to == "testuser@example.com"
        assert subject == "Quiz Attempt Result - Test Quiz"
        assert "Your score: 50.00%" in body
        assert "Hello testuser" in body

        runner, fn, phone, message = sms_call[0]
        assert runner == NotificationService._run_safely
        assert fn == self.service._deliver_sms
        assert phone == "+1234567890"
        assert message == "Quiz 'Test Quiz' completed! Score: 50.00%"

    def test_send_does_not_deliver_inline(self):
        """Test that nothing is delivered until the queued tasks run"""
        self.service._deliver_email = Mock(__name__="_deliver_email")

        self.service.send_email_notification("a@example.com", "s", "b")

        self.service._deliver_email.assert_not_called()

    def test_delivery_failure_is_swallowed(self, caplog):
        """Test that an exception inside a delivery is logged, not raised"""
        failing = Mock(side_effect=ConnectionError("SMTP down"), __name__="failing")

        with caplog.at_level(logging.ERROR):
            NotificationService._run_safely(failing, "a", "b")

        failing.assert_called_once_with("a", "b")
        assert "Notification failing failed: SMTP down" in caplog.text


class TestNotificationDelivery:
    """Test delivery through real background tasks"""

    def setup_method(self):
        """Set up test fixtures"""
        self.background_tasks = BackgroundTasks()
        self.service = NotificationService(self.background_tasks)

    def test_messages_are_written_to_channel_loggers(self, caplog):
        """Test that e-mail and SMS are delivered to their channel loggers"""
        self.service.send_quiz_attempt_notification("alice", "Python Basics", 75.0)

        with caplog.at_level(logging.INFO):
            run_background_tasks(self.background_tasks)

        email_messages = [
            r.getMessage() for r in caplog.records if r.name == "app.notification.email"
        ]
        sms_messages = [
            r.getMessage() for r in caplog.records if r.name == "app.notification.sms"
        ]
        assert "To: alice@example.com" in email_messages
        assert "Subject: Quiz Attempt Result - Python Basics" in email_messages
        assert "Message: Quiz 'Python Basics' completed! Score: 75.00%" in sms_messages

    def test_failed_delivery_does_not_stop_later_tasks(self):
        """Test that one failing delivery leaves later deliveries working"""
        self.service._deliver_email = Mock(
            side_effect=RuntimeError("boom"), __name__="_deliver_email"
        )
        self.service._deliver_sms = Mock(__name__="_deliver_sms")

        self.service.send_email_notification("a@example.com", "s", "b")
        self.service.send_sms_notification("+1", "hello")
        run_background_tasks(self.background_tasks)

        self.service._deliver_email.assert_called_once_with("a@example.com", "s", "b")
        self.service._deliver_sms.assert_called_once_with("+1", "hello")


def test_get_notification_service_binds_request_background_tasks():
    """Test that the dependency queues on the background tasks it is given"""
    background_tasks = BackgroundTasks()

    service = get_notification_service(background_tasks)
    service.send_sms_notification("+1", "hello")

    assert service.background_tasks is background_tasks
    assert len(background_tasks.tasks) == 1
