#------------------------------------------------------------
#                          config.py
#   Centralizes environment names, API endpoints, glyph
#          tables, titles, and message templates.

# Environment variable names for configuration
ENV_WAKATIME_TOKEN = "WAKATIME_TOKEN"
ENV_GITHUB_TOKEN = "GH_TOKEN"
ENV_GIST_ID = "GIST_ID"
ENV_TIME_RANGE = "TIME_RANGE"
ENV_PROGRESS_STYLE = "PROGRESS_STYLE"

# Default values for configuration parameters
DEFAULT_TIME_RANGE = "last_7_days"
DEFAULT_PROGRESS_STYLE = "default"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30

# Constants for WakaTime API interaction
WAKATIME_API_BASE_URL = "https://wakatime.com/api/v1/users/current"
WAKATIME_STATS_ENDPOINT_TEMPLATE = "/stats/{range}"
WAKATIME_SUMMARIES_ENDPOINT_TEMPLATE = "/summaries?range={range}"
WAKATIME_AUTH_TEMPLATE = "Basic {token}"

# Constants for GitHub Gist API interaction
GITHUB_API_ACCEPT_HEADER = "application/vnd.github+json"
GITHUB_API_BASE_URL = "https://api.github.com"
GIST_ENDPOINT_TEMPLATE = "/gists/{gist_id}"
GITHUB_AUTH_TEMPLATE = "Bearer {token}"

# Rendering limits and column widths for the gist text.
TOP_LANGUAGES_SHOWN = 5
LANGUAGE_NAME_WIDTH = 10
DURATION_WIDTH = 14

# Progress bar glyphs keyed by style name: (filled, empty, blocks).
PROGRESS_STYLES = {
    "default": ("▰", "▱", 14),
    "arrow": ("▶", "▷", 16),
    "hash": ("#", "-", 25),
}

# Gist file titles keyed by time range name.
GIST_TITLES = {
    "yesterday": "☕ Yesterday Coding Stats",
    "last_7_days": "☕ Last 7 Days Coding Stats",
    "last_30_days": "☕ Last 30 Days Coding Stats",
    "last_year": "☕ Last Year Coding Stats",
}

# Placeholder content written when stats are unavailable or empty.
NO_STATS_MESSAGE = "No WakaTime stats available"
EMPTY_STATS_MESSAGE = "No coding activity recorded for this period"

# Messages and templates for progress logging.
INFO_TEMPLATE = "ℹ️ {message}"
ERROR_TEMPLATE = "❌ {message}"
FETCHING_MESSAGE = "Fetching WakaTime stats and gist filename..."
UPDATING_MESSAGE = "Updating gist with latest stats..."
GIST_UPDATED_MESSAGE = "Gist updated successfully"
GIST_RENAMED_TEMPLATE = "Renamed gist file {old!r} to {new!r}"
STATS_FETCH_FAILED_TEMPLATE = "Failed to fetch WakaTime stats: {error}"
GIST_LOCATE_FAILED_TEMPLATE = "Failed to fetch/update gist filename: {error}"
GIST_UPDATE_FAILED_TEMPLATE = "Failed to update gist: {error}"
OPERATION_FAILED_TEMPLATE = "Operation failed: {error}"
NO_GIST_FILES_MESSAGE = "No files found in the gist"
MISSING_SETTING_TEMPLATE = "No {name} found - the update will likely fail"
