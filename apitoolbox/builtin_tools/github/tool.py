"""
GitHub Tool - Repositories, issues, pull requests, search, users and gists.

Requires GITHUB_TOKEN environment variable.
"""

import logging
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from apitoolbox.constants import (
    ERROR_MISSING_TOKEN,
    GITHUB_DEFAULT_STATE,
    GITHUB_TOKEN_ENV,
    TOOL_GITHUB,
)
from apitoolbox.errors import ToolInputError
from apitoolbox.params import read_number_param, read_string_param, require_repo
from apitoolbox.tools.base import ActionHandler, IntegrationTool

from .client import GitHubClient

logger = logging.getLogger(__name__)

GitHubAction = Literal[
    "getRepo",
    "listIssues",
    "getIssue",
    "createIssue",
    "listPRs",
    "getPR",
    "searchCode",
    "searchRepos",
    "getUser",
    "listGists",
]


class GitHubToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, title="GitHubToolParams")

    action: GitHubAction = Field(description="GitHub API action to perform")
    owner: Optional[str] = Field(None, description="Repository owner (username or org)")
    repo: Optional[str] = Field(None, description="Repository name")
    number: Optional[int] = Field(None, description="Issue or PR number")
    title: Optional[str] = Field(None, description="Issue title (for createIssue)")
    body: Optional[str] = Field(None, description="Issue body (for createIssue)")
    query: Optional[str] = Field(None, description="Search query")
    username: Optional[str] = Field(None, description="GitHub username")
    state: Optional[str] = Field(None, description="Filter by state: open, closed, all")


class GitHubTool(IntegrationTool):
    """GitHub REST API tool."""

    name = TOOL_GITHUB
    label = "GitHub"
    description = (
        "GitHub API access. Actions: getRepo, listIssues, getIssue, createIssue, listPRs, getPR, "
        "searchCode, searchRepos, getUser, listGists. Token handled securely server-side."
    )
    credential_env = GITHUB_TOKEN_ENV
    credential_noun = "token"
    missing_credential_code = ERROR_MISSING_TOKEN
    params_model = GitHubToolParams

    def create_client(self, credential: str) -> GitHubClient:
        return GitHubClient(credential, transport=self.transport, timeout=self.timeout)

    def build_handlers(self) -> Dict[str, ActionHandler]:
        return {
            "getRepo": self._get_repo,
            "listIssues": self._list_issues,
            "getIssue": self._get_issue,
            "createIssue": self._create_issue,
            "listPRs": self._list_prs,
            "getPR": self._get_pr,
            "searchCode": self._search_code,
            "searchRepos": self._search_repos,
            "getUser": self._get_user,
            "listGists": self._list_gists,
        }

    # ── Parameter helpers ──

    @staticmethod
    def _repo(params: Dict[str, Any], action: str) -> Tuple[str, str]:
        owner = read_string_param(params, "owner")
        repo = read_string_param(params, "repo")
        require_repo(owner, repo, action)
        return owner, repo

    @staticmethod
    def _number(params: Dict[str, Any], action: str) -> int:
        number = read_number_param(params, "number")
        # 0 is not a valid issue/PR number
        if not number:
            raise ToolInputError(f"number is required for {action}")
        return int(number)

    @staticmethod
    def _state(params: Dict[str, Any]) -> str:
        return read_string_param(params, "state") or GITHUB_DEFAULT_STATE

    # ── Handlers ──

    async def _get_repo(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        owner, repo = self._repo(params, "getRepo")
        return await client.get_repo(owner, repo)

    async def _list_issues(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        owner, repo = self._repo(params, "listIssues")
        return await client.list_issues(owner, repo, self._state(params))

    async def _get_issue(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        owner, repo = self._repo(params, "getIssue")
        number = self._number(params, "getIssue")
        return await client.get_issue(owner, repo, number)

    async def _create_issue(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        owner, repo = self._repo(params, "createIssue")
        title = read_string_param(params, "title", required=True)
        body = read_string_param(params, "body")
        return await client.create_issue(owner, repo, title, body)

    async def _list_prs(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        owner, repo = self._repo(params, "listPRs")
        return await client.list_pulls(owner, repo, self._state(params))

    async def _get_pr(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        owner, repo = self._repo(params, "getPR")
        number = self._number(params, "getPR")
        return await client.get_pull(owner, repo, number)

    async def _search_code(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        query = read_string_param(params, "query", required=True)
        return await client.search_code(query)

    async def _search_repos(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        query = read_string_param(params, "query", required=True)
        return await client.search_repos(query)

    async def _get_user(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        return await client.get_user(read_string_param(params, "username"))

    async def _list_gists(self, client: GitHubClient, params: Dict[str, Any]) -> Any:
        return await client.list_gists(read_string_param(params, "username"))
