import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

import httpx

from portfolio_contact.lib.validation import all_fields_present, is_valid_email

log = logging.getLogger("uvicorn.error")

FIELD_LIMITS = {"name": 100, "email": 100, "message": 500}

SUCCESS_MESSAGE = "Message sent successfully!"
FALLBACK_ERROR = "Something went wrong"
EMAIL_ERROR = "Please provide a valid email!"
REQUIRED_ERROR = "All fields are required!"


class Notifier(Protocol):
    def success(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class LogNotifier:
    def success(self, message: str) -> None:
        log.info(f"[contact_form] {message}")

    def error(self, message: str) -> None:
        log.warning(f"[contact_form] {message}")


@dataclass
class FormErrors:
    email: bool = False
    required: bool = False


class ContactForm:
    """
    Client-side contact form: holds the three fields, validates them on
    blur and before submit, and posts to the contact endpoint. Nothing is
    sent while a required field is empty or the email looks invalid.
    """

    def __init__(
        self,
        endpoint: str = "/api/contact",
        base_url: str = "http://localhost:8000",
        client: Optional[httpx.AsyncClient] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.endpoint = endpoint
        self.base_url = base_url
        self.client = client
        self.notifier = notifier or LogNotifier()
        self.name = ""
        self.email = ""
        self.message = ""
        self.errors = FormErrors()
        self.is_loading = False

    def set_field(self, field: str, value: str) -> None:
        if field not in FIELD_LIMITS:
            raise ValueError(f"unknown field: {field}")
        setattr(self, field, (value or "")[: FIELD_LIMITS[field]])

    def _check_required(self) -> None:
        # Blur only clears the flag; submit is what sets it
        if all_fields_present(self.name, self.email, self.message):
            self.errors.required = False

    def blur(self, field: str) -> None:
        self._check_required()
        if field == "email":
            self.errors.email = not is_valid_email(self.email)

    def error_messages(self) -> list:
        out = []
        if self.errors.email:
            out.append(EMAIL_ERROR)
        if self.errors.required:
            out.append(REQUIRED_ERROR)
        return out

    def payload(self) -> Dict[str, str]:
        return {"name": self.name, "email": self.email, "message": self.message}

    def reset(self) -> None:
        self.name = ""
        self.email = ""
        self.message = ""

    async def submit(self) -> bool:
        """Returns True when the server accepted the message."""
        if not all_fields_present(self.name, self.email, self.message):
            self.errors.required = True
            return False
        self.errors.email = not is_valid_email(self.email)
        if self.errors.email:
            return False
        self.errors.required = False

        self.is_loading = True
        try:
            resp = await self._post(self.payload())
            if resp.is_success:
                self.notifier.success(SUCCESS_MESSAGE)
                self.reset()
                return True
            self.notifier.error(_server_message(resp) or FALLBACK_ERROR)
            return False
        except httpx.HTTPError as e:
            log.warning(f"[contact_form] request failed: {e}")
            self.notifier.error(FALLBACK_ERROR)
            return False
        finally:
            self.is_loading = False

    async def _post(self, body: Dict[str, str]) -> httpx.Response:
        if self.client is not None:
            return await self.client.post(self.endpoint, json=body)
        async with _client(self.base_url) as client:
            return await client.post(self.endpoint, json=body)


def _client(base_url: str) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url)


def _server_message(resp: httpx.Response) -> Optional[str]:
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None
