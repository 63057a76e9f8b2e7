#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
from datetime import UTC, datetime, timedelta

from genesyscloud.data import GenesysCloudDataUtils


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Quickstart for audit log queries")
    p.add_argument("service", nargs="?", default="Architect")
    p.add_argument("days", nargs="?", type=int, default=7, help="Days back from now")
    p.add_argument("--entity-type", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    # Reads GENESYS_CLOUD_CLIENT_ID, GENESYS_CLOUD_CLIENT_SECRET and GENESYS_CLOUD_REGION
    utils = GenesysCloudDataUtils.from_env()

    def on_state(evt):
        print(f"STATE {evt.previous_state} -> {evt.new_state}")

    utils.subscribe_state_changes(on_state)

    end = datetime.now(UTC)
    start = end - timedelta(days=args.days)

    async with utils:
        total = 0
        async with contextlib.aclosing(
            utils.get_events_from_audit_log(start, end, args.service, entity_type=args.entity_type)
        ) as pages:
            async for events in pages:
                total += len(events)
                for event in events[:3]:
                    print(f"EVENT {event.get('eventDate')} | {event.get('action')} | {event.get('entityType')}")
        print(f"{total} {args.service} events between {start.isoformat()} and {end.isoformat()}")


if __name__ == "__main__":
    asyncio.run(main())
