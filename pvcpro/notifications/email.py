"""Contact form relay through the EmailJS REST API."""

from __future__ import annotations

import requests
import structlog

from pvcpro.schemas.inquiry import ContactMessage

logger = structlog.get_logger()


class EmailRelay:
    """Posts contact messages to EmailJS using a service/template/public key.

    Blocking; call it from a sync route so FastAPI runs it in the threadpool.
    """

    def __init__(self, service_id: str, template_id: str, public_key: str, api_url: str):
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.api_url = api_url

    @property
    def enabled(self) -> bool:
        return bool(self.service_id and self.template_id and self.public_key)

    def send_contact(self, message: ContactMessage) -> bool:
        """Relay one contact message. Returns False on any failure."""
        if not self.enabled:
            logger.warning("contact_relay_not_configured")
            return False

        payload = {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": message.model_dump(),
        }

        try:
            resp = requests.post(self.api_url, json=payload)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.error("contact_relay_failed", error=str(e))
            return False

        logger.info("contact_message_sent", email=message.email, subject=message.subject)
        return True
