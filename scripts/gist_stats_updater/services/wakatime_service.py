#------------------------------------------------------------
#                     wakatime_service.py
#              Handles WakaTime API requests and
#                normalizes the response shapes.

import sys
from typing import Dict, Optional
import requests
from ..config import (
    ERROR_TEMPLATE,
    STATS_FETCH_FAILED_TEMPLATE,
    WAKATIME_API_BASE_URL,
    WAKATIME_AUTH_TEMPLATE,
    WAKATIME_STATS_ENDPOINT_TEMPLATE,
    WAKATIME_SUMMARIES_ENDPOINT_TEMPLATE,
)
from ..models import (
    AggregateStatsResponse,
    DailySummariesResponse,
    StatsSnapshot,
    TimeRange,
    UpdateConfig,
)

class WakaTimeService:

    def __init__(self, config: UpdateConfig):
        self.config = config

    # This function does build request headers for WakaTime API calls.
    # The token is sent as-is; it is already encoded by the caller.
    def headers(self) -> Dict[str, str]:
        return {"Authorization": WAKATIME_AUTH_TEMPLATE.format(token=self.config.wakatime_token)}

    # This function does pick the endpoint for a time range.
    # Yesterday is served by summaries, every other range by stats.
    @staticmethod
    def endpoint_for(time_range: TimeRange) -> str:
        if time_range is TimeRange.YESTERDAY:
            path = WAKATIME_SUMMARIES_ENDPOINT_TEMPLATE.format(range=time_range.value)
        else:
            path = WAKATIME_STATS_ENDPOINT_TEMPLATE.format(range=time_range.value)
        return f"{WAKATIME_API_BASE_URL}{path}"

    # This function does parse a payload into its response variant.
    # The variant follows the requested range, never the payload shape.
    @staticmethod
    def parse_snapshot(time_range: TimeRange, payload: dict) -> StatsSnapshot:
        if time_range is TimeRange.YESTERDAY:
            return DailySummariesResponse.from_payload(payload).to_snapshot()
        return AggregateStatsResponse.from_payload(payload).to_snapshot()

    # This function does fetch language stats for the given range.
    # It returns None on any transport or parse failure.
    def fetch_stats(self, time_range: TimeRange) -> Optional[StatsSnapshot]:
        try:
            response = requests.get(
                self.endpoint_for(time_range),
                headers=self.headers(),
                timeout=self.config.request_timeout_seconds,
            )
            response.raise_for_status()
            return self.parse_snapshot(time_range, response.json())
        except (requests.RequestException, KeyError, TypeError, ValueError, OverflowError, AttributeError) as exc:
            message = STATS_FETCH_FAILED_TEMPLATE.format(error=exc)
            print(ERROR_TEMPLATE.format(message=message), file=sys.stderr)
            return None
