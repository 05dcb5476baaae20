import json

import requests

from gist_stats_updater.models import LanguageStat, TimeRange, UpdateConfig
from gist_stats_updater.services.wakatime_service import WakaTimeService

from conftest import FakeResponse


#============================================
def make_service() -> WakaTimeService:
    config = UpdateConfig(wakatime_token="d2FrYS10b2tlbg==", github_token="gh", gist_id="abc123")
    return WakaTimeService(config)


#============================================
def test_yesterday_uses_summaries_endpoint(fake_http) -> None:
    fake_http.queue("GET", FakeResponse({"data": [{"languages": [{"name": "Python", "total_seconds": 5400}]}]}))

    snapshot = make_service().fetch_stats(TimeRange.YESTERDAY)

    _, url, kwargs = fake_http.calls[0]
    assert url == "https://wakatime.com/api/v1/users/current/summaries?range=yesterday"
    assert kwargs["headers"] == {"Authorization": "Basic d2FrYS10b2tlbg=="}
    assert kwargs["timeout"] == 30
    assert snapshot.languages == (LanguageStat(name="Python", total_seconds=5400),)


#============================================
def test_other_ranges_use_stats_endpoint(fake_http) -> None:
    fake_http.queue("GET", FakeResponse({"data": {"languages": [{"name": "Go", "total_seconds": 60.5}]}}))

    snapshot = make_service().fetch_stats(TimeRange.LAST_30_DAYS)

    assert fake_http.calls[0][1] == "https://wakatime.com/api/v1/users/current/stats/last_30_days"
    assert snapshot.languages == (LanguageStat(name="Go", total_seconds=60),)
    assert fake_http.methods() == ["GET"]


#============================================
def test_yesterday_without_summaries_is_empty_not_failure(fake_http) -> None:
    fake_http.queue("GET", FakeResponse({"data": []}))

    snapshot = make_service().fetch_stats(TimeRange.YESTERDAY)

    assert snapshot is not None
    assert snapshot.languages == ()


#============================================
def test_transport_failure_returns_none(fake_http, capsys) -> None:
    fake_http.queue("GET", requests.ConnectionError("connection refused"))

    assert make_service().fetch_stats(TimeRange.LAST_7_DAYS) is None
    assert "❌ Failed to fetch WakaTime stats: connection refused" in capsys.readouterr().err


#============================================
def test_http_error_status_returns_none(fake_http, capsys) -> None:
    fake_http.queue("GET", FakeResponse({"error": "Unauthorized"}, status_code=401))

    assert make_service().fetch_stats(TimeRange.LAST_YEAR) is None
    assert "401" in capsys.readouterr().err


#============================================
def test_malformed_payload_returns_none(fake_http) -> None:
    fake_http.queue("GET", FakeResponse({"data": {"categories": []}}))
    assert make_service().fetch_stats(TimeRange.LAST_7_DAYS) is None


#============================================
def test_invalid_json_returns_none(fake_http) -> None:
    fake_http.queue("GET", FakeResponse(ValueError("Expecting value")))
    assert make_service().fetch_stats(TimeRange.LAST_7_DAYS) is None


#============================================
def test_overflowing_seconds_return_none(fake_http, capsys) -> None:
    """
    JSON numbers past float range decode as infinity and count as a parse failure.
    """
    payload = json.loads('{"data": {"languages": [{"name": "Py", "total_seconds": 1e400}]}}')
    fake_http.queue("GET", FakeResponse(payload))

    assert make_service().fetch_stats(TimeRange.LAST_7_DAYS) is None
    assert "Failed to fetch WakaTime stats" in capsys.readouterr().err
