"""
GitHub API Client - REST wrapper used by the github tool.

Requires GITHUB_TOKEN environment variable (classic or fine-grained token).
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

from apitoolbox.constants import GITHUB_PER_PAGE
from apitoolbox.tools.http import BaseAPIClient

logger = logging.getLogger(__name__)

BASE_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


def _seg(value: Any) -> str:
    """Quote one path segment."""
    return quote(str(value), safe="")


class GitHubClient(BaseAPIClient):
    """Async GitHub REST API client."""

    provider = "GitHub"
    base_url = BASE_URL

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request and return the parsed JSON body.

        Args:
            endpoint: Path under the API base, e.g. "/repos/octo/hello"
            method: GET, POST or PATCH
            body: JSON body (Content-Type is only sent with a body)
            params: Query string parameters
        """
        headers = self._headers
        kwargs: Dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body

        async with self._client() as client:
            resp = await client.request(method, f"{self.base_url}{endpoint}", headers=headers, **kwargs)
        self._raise_for_status(resp)
        return resp.json()

    # ── Repositories ──

    async def get_repo(self, owner: str, repo: str) -> Any:
        return await self.request(f"/repos/{_seg(owner)}/{_seg(repo)}")

    async def list_issues(self, owner: str, repo: str, state: str) -> Any:
        return await self.request(
            f"/repos/{_seg(owner)}/{_seg(repo)}/issues",
            params={"state": state, "per_page": GITHUB_PER_PAGE},
        )

    async def get_issue(self, owner: str, repo: str, number: int) -> Any:
        return await self.request(f"/repos/{_seg(owner)}/{_seg(repo)}/issues/{number}")

    async def create_issue(self, owner: str, repo: str, title: str, body: Optional[str] = None) -> Any:
        payload: Dict[str, Any] = {"title": title}
        if body is not None:
            payload["body"] = body
        return await self.request(f"/repos/{_seg(owner)}/{_seg(repo)}/issues", method="POST", body=payload)

    async def list_pulls(self, owner: str, repo: str, state: str) -> Any:
        return await self.request(
            f"/repos/{_seg(owner)}/{_seg(repo)}/pulls",
            params={"state": state, "per_page": GITHUB_PER_PAGE},
        )

    async def get_pull(self, owner: str, repo: str, number: int) -> Any:
        return await self.request(f"/repos/{_seg(owner)}/{_seg(repo)}/pulls/{number}")

    # ── Search ──

    async def search_code(self, query: str) -> Any:
        return await self.request("/search/code", params={"q": query, "per_page": GITHUB_PER_PAGE})

    async def search_repos(self, query: str) -> Any:
        return await self.request(
            "/search/repositories", params={"q": query, "per_page": GITHUB_PER_PAGE}
        )

    # ── Users ──

    async def get_user(self, username: Optional[str] = None) -> Any:
        if username:
            return await self.request(f"/users/{_seg(username)}")
        return await self.request("/user")

    async def list_gists(self, username: Optional[str] = None) -> Any:
        if username:
            return await self.request(
                f"/users/{_seg(username)}/gists", params={"per_page": GITHUB_PER_PAGE}
            )
        return await self.request("/gists", params={"per_page": GITHUB_PER_PAGE})
