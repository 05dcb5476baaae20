#!/usr/bin/env python3
"""
Write WakaTime language stats for the configured range into a GitHub Gist.

The gist must hold a single file; it is renamed to match the time range
title and its content is replaced with the rendered stats.

Environment variables:
  WAKATIME_TOKEN: WakaTime API key, already encoded for the Basic header
  GH_TOKEN: GitHub token with the 'gist' scope
  GIST_ID: id of the gist to update
  TIME_RANGE: yesterday, last_7_days, last_30_days or last_year (default: last_7_days)
  PROGRESS_STYLE: default, arrow or hash (default: default)
"""

import sys

from gist_stats_updater.controller import main


if __name__ == "__main__":
    sys.exit(main())
