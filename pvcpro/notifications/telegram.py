"""Telegram notification service: announces new quotation requests to sales."""

from __future__ import annotations

from html import escape
from typing import Optional

import structlog
from aiogram import Bot

from pvcpro.schemas.quotation import Quotation

logger = structlog.get_logger()

QUOTATION_TEMPLATE = """🔔 <b>New quotation request</b>

📦 <b>Product:</b> {product_name}
🔢 <b>Quantity:</b> {quantity}
📏 <b>Size:</b> {preferred_size}
🧪 <b>Material:</b> {preferred_material}

👤 <b>Customer:</b> {customer_name}
✉️ <b>Email:</b> {customer_email}
📞 <b>Phone:</b> {customer_phone}
🏢 <b>Company:</b> {company}

📝 {additional_requirements}

<i>Request #{quotation_id}</i>"""


def format_quotation(quotation: Quotation) -> str:
    return QUOTATION_TEMPLATE.format(
        product_name=escape(quotation.product_name),
        quantity=escape(quotation.quantity),
        preferred_size=escape(quotation.preferred_size),
        preferred_material=escape(quotation.preferred_material),
        customer_name=escape(quotation.customer_name),
        customer_email=escape(quotation.customer_email),
        customer_phone=escape(quotation.customer_phone or "Not provided"),
        company=escape(quotation.company or "Not provided"),
        additional_requirements=escape(quotation.additional_requirements or "No additional requirements"),
        quotation_id=quotation.id[:8],
    )


class TelegramNotifier:
    """Sends formatted quotation alerts to the sales chat."""

    def __init__(self, bot_token: str, chat_id: Optional[str]):
        self.bot_token = bot_token
        self.chat_id = chat_id

    @property
    def enabled(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    async def send_quotation_notification(self, quotation: Quotation) -> bool:
        """Returns True if sent. Failures are logged, never raised."""
        if not self.enabled:
            return False

        bot: Optional[Bot] = None
        try:
            bot = Bot(token=self.bot_token)
            await bot.send_message(
                chat_id=int(self.chat_id),
                text=format_quotation(quotation),
                parse_mode="HTML",
            )
            logger.info("quotation_notification_sent", quotation_id=quotation.id)
            return True
        except Exception as e:
            logger.error(
                "quotation_notification_failed",
                error=str(e),
                quotation_id=quotation.id,
            )
            return False
        finally:
            if bot is not None:
                await bot.session.close()
