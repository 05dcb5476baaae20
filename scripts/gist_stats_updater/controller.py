#------------------------------------------------------------
#                        controller.py
#        Coordinates the stats fetch, gist lookup, and
#                   the final gist update.

import asyncio
import os
import sys
from typing import Mapping, Optional
from .config import (
    ENV_GIST_ID,
    ENV_GITHUB_TOKEN,
    ENV_PROGRESS_STYLE,
    ENV_TIME_RANGE,
    ENV_WAKATIME_TOKEN,
    ERROR_TEMPLATE,
    FETCHING_MESSAGE,
    INFO_TEMPLATE,
    MISSING_SETTING_TEMPLATE,
    OPERATION_FAILED_TEMPLATE,
    UPDATING_MESSAGE,
)
from .models import ProgressStyle, TimeRange, UpdateConfig
from .services.gist_service import GistService
from .services.wakatime_service import WakaTimeService
from .views.text_view import render_stats

# This function does build the run configuration from the environment.
# It never raises; missing secrets are only reported.
def build_update_config(environ: Optional[Mapping[str, str]] = None) -> UpdateConfig:
    environ = os.environ if environ is None else environ
    config = UpdateConfig(
        wakatime_token=environ.get(ENV_WAKATIME_TOKEN, "").strip(),
        github_token=environ.get(ENV_GITHUB_TOKEN, "").strip(),
        gist_id=environ.get(ENV_GIST_ID, "").strip(),
        time_range=TimeRange.resolve(environ.get(ENV_TIME_RANGE)),
        progress_style=ProgressStyle.resolve(environ.get(ENV_PROGRESS_STYLE)),
    )

    for name, value in (
        (ENV_WAKATIME_TOKEN, config.wakatime_token),
        (ENV_GITHUB_TOKEN, config.github_token),
        (ENV_GIST_ID, config.gist_id),
    ):
        if not value:
            print(ERROR_TEMPLATE.format(message=MISSING_SETTING_TEMPLATE.format(name=name)), file=sys.stderr)

    return config

# This function does execute one update run end-to-end.
# Stats and the target filename are fetched concurrently before writing.
async def run_update(config: UpdateConfig) -> bool:
    stats_service = WakaTimeService(config)
    gist_service = GistService(config)

    print(INFO_TEMPLATE.format(message=FETCHING_MESSAGE))
    snapshot, filename = await asyncio.gather(
        asyncio.to_thread(stats_service.fetch_stats, config.time_range),
        asyncio.to_thread(gist_service.locate_target_file, config.time_range.title),
    )

    print(INFO_TEMPLATE.format(message=UPDATING_MESSAGE))
    content = render_stats(snapshot, config.progress_style)
    return await asyncio.to_thread(gist_service.update_file_content, filename, content)

# This function does run one update and report any failure.
# It always returns 0; the next scheduled run is the retry.
def main(environ: Optional[Mapping[str, str]] = None) -> int:
    config = build_update_config(environ)
    try:
        asyncio.run(run_update(config))
    except Exception as exc:
        print(ERROR_TEMPLATE.format(message=OPERATION_FAILED_TEMPLATE.format(error=exc)), file=sys.stderr)
    return 0
