"""GitHub GraphQL client for contribution calendar colors."""

import json

import httpx

from .game.bricks import ContributionGrid

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
REQUEST_TIMEOUT = 30.0

CONTRIBUTION_COLORS_QUERY = """
query($userName:String!) {
  user(login: $userName){
    contributionsCollection {
      contributionCalendar {
        weeks {
          contributionDays {
            color
          }
        }
      }
    }
  }
}
"""


class GitHubAPIError(Exception):
    """Raised when the contribution calendar cannot be retrieved."""
    pass


def fetch_contribution_colors(
    username: str,
    token: str,
    client: httpx.Client | None = None,
) -> ContributionGrid:
    """
    Fetch a user's contribution calendar as a ``[week][day]`` color grid.

    Args:
        username: GitHub login to fetch contributions for
        token: Personal access token used as a bearer token
        client: Optional HTTP client, mainly for tests

    Returns:
        Colors per week and day, as returned by the API (light theme)

    Raises:
        GitHubAPIError: On transport failures, HTTP errors or GraphQL errors
    """
    http = client or httpx.Client(timeout=REQUEST_TIMEOUT)
    try:
        response = http.post(
            GITHUB_GRAPHQL_URL,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"bearer {token}",
            },
            json={"query": CONTRIBUTION_COLORS_QUERY, "variables": {"userName": username}},
        )
    except httpx.HTTPError as e:
        raise GitHubAPIError(f"Request to GitHub failed: {e}") from e
    finally:
        if client is None:
            http.close()

    if response.is_error:
        raise GitHubAPIError(f"GitHub API error: {response.status_code} {response.reason_phrase}")

    payload = response.json()
    if payload.get("errors"):
        raise GitHubAPIError("GitHub GraphQL error: " + json.dumps(payload["errors"]))

    user = (payload.get("data") or {}).get("user")
    if user is None:
        raise GitHubAPIError(f"User '{username}' not found")

    weeks = user["contributionsCollection"]["contributionCalendar"]["weeks"]
    return [[day["color"] for day in week["contributionDays"]] for week in weeks]
