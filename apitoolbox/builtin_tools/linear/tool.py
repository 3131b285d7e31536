"""
Linear Tool - Issues, projects and teams via the Linear GraphQL API.

Requires LINEAR_API_KEY environment variable.
"""

import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from apitoolbox.constants import LINEAR_API_KEY_ENV, TOOL_LINEAR
from apitoolbox.params import drop_none, read_number_param, read_string_param
from apitoolbox.tools.base import ActionHandler, IntegrationTool

from .client import LinearClient

logger = logging.getLogger(__name__)

LinearAction = Literal[
    "listIssues",
    "getIssue",
    "createIssue",
    "updateIssue",
    "listProjects",
    "listTeams",
    "searchIssues",
]


class LinearToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, title="LinearToolParams")

    action: LinearAction = Field(description="Linear API action to perform")
    issue_id: Optional[str] = Field(None, alias="issueId", description="Issue ID")
    team_id: Optional[str] = Field(None, alias="teamId", description="Team ID")
    project_id: Optional[str] = Field(None, alias="projectId", description="Project ID")
    title: Optional[str] = Field(None, description="Issue title")
    description: Optional[str] = Field(None, description="Issue description")
    state_id: Optional[str] = Field(None, alias="stateId", description="State ID for status changes")
    query: Optional[str] = Field(None, description="Search query")
    priority: Optional[int] = Field(
        None, description="Priority (0=none, 1=urgent, 2=high, 3=medium, 4=low)"
    )


def build_issue_filter(team_id: Optional[str], project_id: Optional[str]) -> Optional[Dict[str, Any]]:
    """Issue filter for listIssues; a project filter replaces a team filter."""
    if project_id:
        return {"project": {"id": {"eq": project_id}}}
    if team_id:
        return {"team": {"id": {"eq": team_id}}}
    return None


class LinearTool(IntegrationTool):
    """Linear project management tool."""

    name = TOOL_LINEAR
    label = "Linear"
    description = (
        "Linear project management API. Actions: listIssues, getIssue, createIssue, updateIssue, "
        "listProjects, listTeams, searchIssues. API key handled securely server-side."
    )
    credential_env = LINEAR_API_KEY_ENV
    params_model = LinearToolParams

    def create_client(self, credential: str) -> LinearClient:
        return LinearClient(credential, transport=self.transport, timeout=self.timeout)

    def build_handlers(self) -> Dict[str, ActionHandler]:
        return {
            "listIssues": self._list_issues,
            "getIssue": self._get_issue,
            "createIssue": self._create_issue,
            "updateIssue": self._update_issue,
            "listProjects": self._list_projects,
            "listTeams": self._list_teams,
            "searchIssues": self._search_issues,
        }

    async def _list_issues(self, client: LinearClient, params: Dict[str, Any]) -> Any:
        issue_filter = build_issue_filter(
            read_string_param(params, "teamId"),
            read_string_param(params, "projectId"),
        )
        return await client.list_issues(issue_filter)

    async def _get_issue(self, client: LinearClient, params: Dict[str, Any]) -> Any:
        issue_id = read_string_param(params, "issueId", required=True)
        return await client.get_issue(issue_id)

    async def _create_issue(self, client: LinearClient, params: Dict[str, Any]) -> Any:
        issue_input = drop_none({
            "teamId": read_string_param(params, "teamId", required=True),
            "title": read_string_param(params, "title", required=True),
            "description": read_string_param(params, "description"),
            "priority": read_number_param(params, "priority"),
            "projectId": read_string_param(params, "projectId"),
        })
        return await client.create_issue(issue_input)

    async def _update_issue(self, client: LinearClient, params: Dict[str, Any]) -> Any:
        issue_id = read_string_param(params, "issueId", required=True)
        # Only fields the caller supplied are changed
        issue_input = drop_none({
            "title": read_string_param(params, "title"),
            "description": read_string_param(params, "description"),
            "stateId": read_string_param(params, "stateId"),
            "priority": read_number_param(params, "priority"),
        })
        return await client.update_issue(issue_id, issue_input)

    async def _list_projects(self, client: LinearClient, params: Dict[str, Any]) -> Any:
        return await client.list_projects()

    async def _list_teams(self, client: LinearClient, params: Dict[str, Any]) -> Any:
        return await client.list_teams()

    async def _search_issues(self, client: LinearClient, params: Dict[str, Any]) -> Any:
        query = read_string_param(params, "query", required=True)
        return await client.search_issues(query)
