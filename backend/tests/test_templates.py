from portfolio_contact.lib.payload import ContactPayload
from portfolio_contact.lib.templates import (
    email_subject,
    format_notification_text,
    format_plain_text,
    header_value,
    render_email_html,
)


def test_notification_text_layout():
    text = format_notification_text(
        ContactPayload(name="Alice", email="alice@example.com", message="Hello")
    )
    assert text == "📬 *New message from Alice*\n\n📧 Email: alice@example.com\n📝 Message:\nHello"


def test_notification_text_escapes_markdown():
    text = format_notification_text(
        ContactPayload(name="snake_case", email="a@b.com", message="*bold* [link]")
    )
    assert "snake\\_case" in text
    assert "\\*bold\\* \\[link]" in text


def test_html_escapes_user_fields():
    out = render_email_html(
        ContactPayload(name="<b>Eve</b>", email="eve@b.com", message='"quoted" & line\nnext')
    )
    assert "&lt;b&gt;Eve&lt;/b&gt;" in out
    assert "&quot;quoted&quot; &amp; line<br>" in out


def test_subject_includes_name():
    assert email_subject(ContactPayload(name="Bob", email="b@b.com", message="x")).endswith(
        "New Message From Bob"
    )


def test_plain_text_keeps_user_fields_verbatim():
    text = format_plain_text(
        ContactPayload(name="snake_case", email="a@b.com", message="*bold*")
    )
    assert text == "📬 New message from snake_case\n\n📧 Email: a@b.com\n📝 Message:\n*bold*"


def test_header_value_joins_lines():
    assert header_value("Alice\r\nSmith\nJr") == "Alice Smith Jr"
