#!/usr/bin/env python3
"""Print the next ISS passes over your current location.

Looks up your public IP, geolocates it, and asks the pass-prediction
service for upcoming flyovers.

Usage
-----
::

    python scripts/next_passes.py

Options::

    --json               Output the raw pass records as JSON
    --verbose, -v        Log every lookup step (and debug details)

Service URLs and the request timeout can be overridden with the
``ISSPASS_*`` environment variables read by ``IssPassConfig.from_env``.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from isspass import IssPassClient, IssPassConfig, format_pass_time, log_step_event  # noqa: E402


async def main() -> int:
    parser = argparse.ArgumentParser(
        description="Print upcoming ISS passes over the location of your public IP.",
    )
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each lookup step")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = IssPassConfig.from_env()
    on_step = log_step_event if args.verbose else None

    async with IssPassClient(config, on_step=on_step) as client:
        result = await client.try_next_pass_times()

    if not result.ok:
        print(f"It didn't work! {result.error}", file=sys.stderr)
        return 1

    passes = result.unwrap()
    if args.json_mode:
        print(json.dumps([record.raw or record.model_dump() for record in passes], indent=2))
    else:
        for record in passes:
            print(format_pass_time(record))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
