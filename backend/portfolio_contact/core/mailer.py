import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional

from portfolio_contact.core.settings import Settings
from portfolio_contact.lib.payload import ContactPayload
from portfolio_contact.lib.templates import (
    email_subject,
    format_plain_text,
    header_value,
    render_email_html,
)

log = logging.getLogger("uvicorn.error")


class SmtpMailer:
    """
    SMTP submission client (STARTTLS). Holds only the connection
    parameters; credentials come from the settings passed to `send`.
    """

    def __init__(self, host: str, port: int, timeout: float):
        self.host = host
        self.port = port
        self.timeout = timeout

    def matches(self, settings: Settings) -> bool:
        return (
            self.host == settings.smtp_host
            and self.port == settings.smtp_port
            and self.timeout == settings.notify_timeout_seconds
        )

    def send(self, settings: Settings, msg: EmailMessage) -> None:
        context = ssl.create_default_context()
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            smtp.starttls(context=context)
            smtp.login(settings.email_address, settings.gmail_passkey)
            smtp.send_message(msg)


_mailer: Optional[SmtpMailer] = None


def get_mailer(settings: Settings) -> SmtpMailer:
    global _mailer
    if _mailer is None or not _mailer.matches(settings):
        _mailer = SmtpMailer(settings.smtp_host, settings.smtp_port, settings.notify_timeout_seconds)
        log.info(f"[mailer] using {settings.smtp_host}:{settings.smtp_port}")
    return _mailer


def reset_mailer():
    global _mailer
    _mailer = None


def build_contact_email(settings: Settings, payload: ContactPayload) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = formataddr((settings.mail_from_name, settings.email_address))
    msg["To"] = settings.email_address
    msg["Reply-To"] = header_value(payload.email)
    msg["Subject"] = email_subject(payload)
    msg.set_content(format_plain_text(payload))
    msg.add_alternative(render_email_html(payload), subtype="html")
    return msg


async def send_email(settings: Settings, payload: ContactPayload) -> bool:
    """
    Sends the contact notification to the site owner's own mailbox with
    Reply-To pointing at the submitter. Returns False on any failure.
    """
    try:
        msg = build_contact_email(settings, payload)
        mailer = get_mailer(settings)
        # smtplib blocks; run it off the event loop so the chat call overlaps
        await asyncio.to_thread(mailer.send, settings, msg)
        return True
    except Exception as e:
        log.error(f"[mailer] send failed: {type(e).__name__}: {e}")
        return False
