#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import contextlib
import json
import sys
from datetime import timedelta

from genesyscloud.data import GenesysCloudDataUtils


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Export conversations details from the datalake as JSON lines")
    p.add_argument("days", nargs="?", type=int, default=1, help="Days before the availability date")
    p.add_argument("--days-per-job", type=int, default=30)
    p.add_argument("--page-size", type=int, default=2000)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with GenesysCloudDataUtils.from_env() as utils:
        end = await utils.get_conversations_datalake_availability_timestamp()
        start = end - timedelta(days=args.days)

        async with contextlib.aclosing(
            utils.get_conversations_details_from_datalake(
                start, end, page_size=args.page_size, days_per_job=args.days_per_job
            )
        ) as pages:
            async for conversations in pages:
                for conversation in conversations:
                    sys.stdout.write(json.dumps(conversation) + "\n")


if __name__ == "__main__":
    asyncio.run(main())
