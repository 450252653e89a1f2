import json

import httpx
import pytest

from portfolio_contact.core import telegram
from portfolio_contact.core.settings import Settings

settings = Settings(
    EMAIL_ADDRESS="owner@mail.com",
    GMAIL_PASSKEY="app-pass",
    TELEGRAM_BOT_TOKEN="123:abc",
    TELEGRAM_CHAT_ID="42",
    TELEGRAM_API_BASE="https://bot.test/",
)


def use_transport(monkeypatch, handler):
    requests = []

    def _record(request: httpx.Request):
        requests.append(request)
        return handler(request)

    monkeypatch.setattr(
        telegram,
        "_client",
        lambda s: httpx.AsyncClient(transport=httpx.MockTransport(_record)),
    )
    return requests


@pytest.mark.asyncio
async def test_acknowledged_message(monkeypatch):
    requests = use_transport(
        monkeypatch, lambda r: httpx.Response(200, json={"ok": True, "result": {}})
    )

    assert await telegram.send_telegram_message(settings, "hi *there*") is True

    req = requests[0]
    assert req.url.host == "bot.test"
    assert req.url.path == "/bot123:abc/sendMessage"
    assert json.loads(req.content) == {
        "chat_id": "42",
        "text": "hi *there*",
        "parse_mode": "Markdown",
    }


@pytest.mark.asyncio
async def test_not_acknowledged(monkeypatch):
    use_transport(monkeypatch, lambda r: httpx.Response(200, json={"ok": False}))
    assert await telegram.send_telegram_message(settings, "hi") is False


@pytest.mark.asyncio
async def test_http_error_status(monkeypatch):
    use_transport(
        monkeypatch,
        lambda r: httpx.Response(400, json={"ok": False, "description": "Bad Request"}),
    )
    assert await telegram.send_telegram_message(settings, "hi") is False


@pytest.mark.asyncio
async def test_transport_error(monkeypatch):
    def _fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    use_transport(monkeypatch, _fail)
    assert await telegram.send_telegram_message(settings, "hi") is False


@pytest.mark.asyncio
async def test_non_json_body(monkeypatch):
    use_transport(monkeypatch, lambda r: httpx.Response(200, text="<html>gateway</html>"))
    assert await telegram.send_telegram_message(settings, "hi") is False
