"""Tests for the GitHub GraphQL client."""

import json

import httpx
import pytest

from gh_breakout.github_client import (
    GITHUB_GRAPHQL_URL,
    GitHubAPIError,
    fetch_contribution_colors,
)


def _calendar_payload(weeks):
    return {
        "data": {
            "user": {
                "contributionsCollection": {
                    "contributionCalendar": {
                        "weeks": [
                            {"contributionDays": [{"color": color} for color in week]}
                            for week in weeks
                        ]
                    }
                }
            }
        }
    }


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_fetch_returns_week_day_color_grid():
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_calendar_payload([["#ebedf0", "#9be9a8"], ["#216e39"]]))

    grid = fetch_contribution_colors("octocat", "secret", client=_client(handler))

    assert grid == [["#ebedf0", "#9be9a8"], ["#216e39"]]
    assert seen["url"] == GITHUB_GRAPHQL_URL
    assert seen["auth"] == "bearer secret"
    assert seen["body"]["variables"] == {"userName": "octocat"}
    assert "contributionCalendar" in seen["body"]["query"]


def test_http_error_status_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "Bad credentials"})

    with pytest.raises(GitHubAPIError, match="GitHub API error: 401 Unauthorized"):
        fetch_contribution_colors("octocat", "bad", client=_client(handler))


def test_graphql_errors_raise():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"errors": [{"message": "Something broke"}]})

    with pytest.raises(GitHubAPIError, match="Something broke"):
        fetch_contribution_colors("octocat", "secret", client=_client(handler))


def test_missing_user_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"user": None}})

    with pytest.raises(GitHubAPIError, match="not found"):
        fetch_contribution_colors("ghost", "secret", client=_client(handler))


def test_transport_failure_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GitHubAPIError, match="Request to GitHub failed"):
        fetch_contribution_colors("octocat", "secret", client=_client(handler))
