# portfolio_contact/lib/templates.py
import html
import re

from portfolio_contact.lib.payload import ContactPayload

# Characters that open an entity in Telegram's legacy Markdown mode
_MARKDOWN_SPECIAL = re.compile(r"([_*`\[])")


def escape_markdown(value: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", value or "")


def format_notification_text(payload: ContactPayload) -> str:
    """Chat message text in Telegram legacy Markdown."""
    name = escape_markdown(payload.name)
    email = escape_markdown(payload.email)
    message = escape_markdown(payload.message)
    return f"📬 *New message from {name}*\n\n📧 Email: {email}\n📝 Message:\n{message}"


def header_value(value: str) -> str:
    # Mail headers may not carry CR or LF
    return " ".join((value or "").splitlines()).strip()


def format_plain_text(payload: ContactPayload) -> str:
    """Plain-text part of the email; same layout as the chat text, unescaped."""
    return f"📬 New message from {payload.name}\n\n📧 Email: {payload.email}\n📝 Message:\n{payload.message}"


def email_subject(payload: ContactPayload) -> str:
    return f"📩 New Message From {header_value(payload.name)}"


def render_email_html(payload: ContactPayload) -> str:
    name = html.escape(payload.name)
    email = html.escape(payload.email)
    # Keep the sender's line breaks visible in mail clients
    message = html.escape(payload.message).replace("\n", "<br>\n")
    return f"""
  <div style="font-family: Arial, sans-serif; padding: 20px; background-color: #f4f4f4;">
    <div style="max-width: 600px; margin: auto; background: #fff; padding: 20px; border-radius: 8px;">
      <h2 style="color: #007BFF;">New Message Received</h2>
      <p><strong>Name:</strong> {name}</p>
      <p><strong>Email:</strong> {email}</p>
      <p><strong>Message:</strong></p>
      <blockquote style="border-left: 4px solid #007BFF; padding-left: 10px;">
        {message}
      </blockquote>
      <p style="font-size: 12px; color: #888;">Click reply to respond to this message.</p>
    </div>
  </div>
"""
