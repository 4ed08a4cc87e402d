import logging

import pytest

from solidprinciples.ocp import (
    EmailNotification,
    NotificationSender,
    NotificationService,
    SmsNotification,
)


def test_sender_switches_services(capsys):
    sender = NotificationSender(notification_service=EmailNotification())
    sender.send_notification("Hello World.")

    sender.notification_service = SmsNotification()
    sender.send_notification("Hello World.")

    assert capsys.readouterr().out == (
        "Email Notification: Hello World.\n"
        "SMS Notification: Hello World.\n"
    )


def test_sender_logs_before_sending(caplog, capsys):
    sender = NotificationSender(EmailNotification())
    with caplog.at_level(logging.INFO, logger="solidprinciples.ocp"):
        sender.send_notification("hi")
    assert "Sending Notification..." in caplog.messages
    assert capsys.readouterr().out == "Email Notification: hi\n"


def test_sender_propagates_service_error():
    class FailingService(NotificationService):
        def send_notification(self, message):
            raise ConnectionError(message)

    sender = NotificationSender(FailingService())
    with pytest.raises(ConnectionError, match="boom"):
        sender.send_notification("boom")


def test_notification_service_is_abstract():
    with pytest.raises(TypeError):
        NotificationService()