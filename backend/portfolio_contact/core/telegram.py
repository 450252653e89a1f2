import logging

import httpx

from portfolio_contact.core.settings import Settings

log = logging.getLogger("uvicorn.error")


def _client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.notify_timeout_seconds)


def send_message_url(api_base: str, token: str) -> str:
    return f"{api_base.rstrip('/')}/bot{token}/sendMessage"


async def send_telegram_message(settings: Settings, text: str) -> bool:
    """
    Posts `text` to the configured chat through the Bot API.
    Returns True only when Telegram acknowledges with ok=true; every
    failure is logged and reported as False.
    """
    url = send_message_url(settings.telegram_api_base, settings.telegram_bot_token)
    body = {
        "chat_id": settings.telegram_chat_id,
        "text": text,
        "parse_mode": "Markdown",
    }
    try:
        async with _client(settings) as client:
            resp = await client.post(url, json=body)
            resp.raise_for_status()
            data = resp.json()
    except httpx.HTTPStatusError as e:
        log.error(f"[telegram] sendMessage failed: {e.response.status_code} - {e.response.text}")
        return False
    except Exception as e:
        # Error text only; the URL carries the bot token
        log.error(f"[telegram] sendMessage failed: {type(e).__name__}: {e}")
        return False

    if not isinstance(data, dict) or data.get("ok") is not True:
        log.warning(f"[telegram] sendMessage not acknowledged: {data}")
        return False
    return True
