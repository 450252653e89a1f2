# portfolio_contact/lib/dispatch.py
import asyncio
import logging
from typing import List

from portfolio_contact.core.mailer import send_email
from portfolio_contact.core.settings import Settings
from portfolio_contact.core.telegram import send_telegram_message
from portfolio_contact.lib.payload import ContactPayload, DispatchResult
from portfolio_contact.lib.templates import format_notification_text

log = logging.getLogger("uvicorn.error")

MSG_ALL_SENT = "✅ Message and email sent successfully!"
MSG_BOTH_FAILED = "❌ Both Telegram and Email failed."
MSG_CHAT_FAILED = "⚠️ Email sent, but failed to send Telegram message."
MSG_EMAIL_FAILED = "⚠️ Telegram sent, but failed to send Email."
MSG_CONFIG_MISSING = "❌ One or more environment variables are missing."
MSG_SERVER_ERROR = "❌ Server error occurred."


class ContactError(Exception):
    pass


class ConfigurationMissing(ContactError):
    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"missing configuration: {', '.join(missing)}")


class MalformedRequest(ContactError):
    pass


def ensure_configured(settings: Settings) -> None:
    missing = settings.missing_secrets()
    if missing:
        raise ConfigurationMissing(missing)


def aggregate(chat_success: bool, email_success: bool) -> DispatchResult:
    if chat_success and email_success:
        return DispatchResult(True, MSG_ALL_SENT, 200)
    if not chat_success and not email_success:
        return DispatchResult(False, MSG_BOTH_FAILED, 500)
    if not chat_success:
        return DispatchResult(False, MSG_CHAT_FAILED, 500)
    return DispatchResult(False, MSG_EMAIL_FAILED, 500)


def configuration_missing_result() -> DispatchResult:
    return DispatchResult(False, MSG_CONFIG_MISSING, 500)


def server_error_result() -> DispatchResult:
    return DispatchResult(False, MSG_SERVER_ERROR, 500)


def _delivered(channel: str, outcome) -> bool:
    if isinstance(outcome, BaseException):
        log.error(f"[dispatch] {channel} raised: {type(outcome).__name__}: {outcome}")
        return False
    return bool(outcome)


async def dispatch_contact(payload: ContactPayload, settings: Settings) -> DispatchResult:
    """
    Delivers one contact message over chat and email at the same time.

    Raises ConfigurationMissing before any network call when a secret is
    absent. Channel failures never raise; each channel reports a bool and
    the pair is mapped through `aggregate`.
    """
    ensure_configured(settings)

    text = format_notification_text(payload)

    # Both start before either is awaited; one failing does not cancel the other
    chat_outcome, email_outcome = await asyncio.gather(
        send_telegram_message(settings, text),
        send_email(settings, payload),
        return_exceptions=True,
    )
    chat_success = _delivered("telegram", chat_outcome)
    email_success = _delivered("email", email_outcome)
    log.info(f"[dispatch] telegram={chat_success} email={email_success}")
    return aggregate(chat_success, email_success)
