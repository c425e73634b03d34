"""Entrypoint: python -m hms_client

Opens a session for API_TOKEN and logs unread counters and inbound
real-time activity until interrupted.
"""
from __future__ import annotations

import asyncio
import logging

from hms_client.app import connect
from hms_client.config import settings

logger = logging.getLogger("hms_client")


async def run() -> None:
    async with connect(settings) as client:
        counters = client.session.counters
        counters.watch(
            lambda: logger.info(
                "Unread: %d messages, %d notifications",
                counters.message,
                counters.notification,
            )
        )
        await client.session.inbox.load()
        alerts = client.inventory_alerts()
        alerts.watch(lambda: logger.info("Inventory alerts: %d", alerts.alerts.total))
        await alerts.load()

        while client.session.active:
            await asyncio.sleep(1)


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
