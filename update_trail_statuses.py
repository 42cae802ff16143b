#!/usr/bin/env python3
"""Regenerate public/trailStatuses.json.

Fetches current, recent-history and forecast weather for every trail,
classifies rideability and overwrites the status document. Meant to be run
on a schedule (cron / CI); the dashboard just re-reads whatever is there.

Usage:
    WEATHERAPI=<key> python update_trail_statuses.py
"""

import logging

import config
from trails import TRAILS, validate_trail
from services.snapshot import generate_statuses, write_statuses

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
        datefmt='%H:%M:%S',
    )
    trails = [validate_trail(t) for t in TRAILS]
    statuses = generate_statuses(trails)
    write_statuses(statuses, config.STATUS_FILE)
    unknown = [name for name, s in statuses.items() if s['status'] == 'Unknown']
    if unknown:
        logger.warning(f"No data for {len(unknown)} trail(s): {', '.join(unknown)}")


if __name__ == '__main__':
    main()
