"""Backend webhook routes.

The hosted backend's database webhooks post every change to the
``comments``, ``comment_likes`` and ``site_settings`` collections here.
"""

import hmac

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from inkwell.config import Settings
from inkwell.domain.service import ChangeEvent, ChangeFeed, SiteSettingsCell
from inkwell.interface.error import WebhookAuthError

router = APIRouter(prefix="/hooks", tags=["hooks"], route_class=DishkaRoute)

SITE_SETTINGS_TABLE = "site_settings"


class ChangeAck(BaseModel):
    delivered: int


@router.post("/changes", response_model=ChangeAck)
async def receive_change(
    event: ChangeEvent,
    change_feed: FromDishka[ChangeFeed],
    settings_cell: FromDishka[SiteSettingsCell],
    settings: FromDishka[Settings],
    x_inkwell_webhook_secret: str | None = Header(default=None),
) -> ChangeAck:
    """Fan a backend row change out to subscribers.

    Raises:
        WebhookAuthError: If the shared secret is missing or wrong
    """
    if not x_inkwell_webhook_secret or not hmac.compare_digest(
        x_inkwell_webhook_secret, settings.backend.webhook_secret
    ):
        raise WebhookAuthError(f"Bad secret for change on {event.table}")

    if event.table == SITE_SETTINGS_TABLE:
        settings_cell.invalidate()

    delivered = await change_feed.publish(event)
    logfire.info(
        "Change received",
        table=event.table,
        type=event.type.value,
        delivered=delivered,
    )
    return ChangeAck(delivered=delivered)
