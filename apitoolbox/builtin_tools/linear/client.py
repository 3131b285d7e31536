"""
Linear API Client - GraphQL wrapper used by the linear tool.

Requires LINEAR_API_KEY (personal API key, sent as-is in Authorization).
"""

import logging
from typing import Any, Dict, Optional

from apitoolbox.constants import (
    LINEAR_ISSUES_PAGE_SIZE,
    LINEAR_PROJECTS_PAGE_SIZE,
    LINEAR_SEARCH_PAGE_SIZE,
)
from apitoolbox.errors import ProviderAPIError
from apitoolbox.tools.http import BaseAPIClient

logger = logging.getLogger(__name__)

GRAPHQL_URL = "https://api.linear.app/graphql"

LIST_ISSUES_QUERY = """
query($filter: IssueFilter) {
  issues(filter: $filter, first: %d) {
    nodes {
      id
      title
      description
      state { name }
      priority
      assignee { name }
      createdAt
      updatedAt
    }
  }
}
""" % LINEAR_ISSUES_PAGE_SIZE

GET_ISSUE_QUERY = """
query($id: String!) {
  issue(id: $id) {
    id
    title
    description
    state { name }
    priority
    assignee { name }
    team { name }
    project { name }
    comments {
      nodes {
        body
        user { name }
        createdAt
      }
    }
    createdAt
    updatedAt
  }
}
"""

CREATE_ISSUE_MUTATION = """
mutation($input: IssueCreateInput!) {
  issueCreate(input: $input) {
    success
    issue {
      id
      title
      identifier
      url
    }
  }
}
"""

UPDATE_ISSUE_MUTATION = """
mutation($id: String!, $input: IssueUpdateInput!) {
  issueUpdate(id: $id, input: $input) {
    success
    issue {
      id
      title
      state { name }
    }
  }
}
"""

LIST_PROJECTS_QUERY = """
query {
  projects(first: %d) {
    nodes {
      id
      name
      description
      state
      progress
      targetDate
    }
  }
}
""" % LINEAR_PROJECTS_PAGE_SIZE

LIST_TEAMS_QUERY = """
query {
  teams {
    nodes {
      id
      name
      key
      description
    }
  }
}
"""

SEARCH_ISSUES_QUERY = """
query($query: String!) {
  searchIssues(query: $query, first: %d) {
    nodes {
      id
      title
      identifier
      state { name }
      team { name }
    }
  }
}
""" % LINEAR_SEARCH_PAGE_SIZE


class LinearClient(BaseAPIClient):
    """Async Linear GraphQL client."""

    provider = "Linear"

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.api_key,
            "Content-Type": "application/json",
        }

    async def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Any:
        """
        Run one query or mutation.

        A 200 response can still carry an ``errors`` array; the first message
        becomes the failure and any partial ``data`` is dropped.

        Returns:
            The ``data`` member of the response
        """
        async with self._client() as client:
            resp = await client.post(
                GRAPHQL_URL,
                headers=self._headers,
                json={"query": query, "variables": variables or {}},
            )
        self._raise_for_status(resp)

        result = resp.json()
        errors = result.get("errors") if isinstance(result, dict) else None
        if errors:
            first = errors[0]
            message = first.get("message", str(first)) if isinstance(first, dict) else str(first)
            raise ProviderAPIError(
                f"Linear GraphQL error: {message}",
                status_code=resp.status_code,
                body=resp.text,
            )

        return result.get("data") if isinstance(result, dict) else None

    # ── Issues ──

    async def list_issues(self, issue_filter: Optional[Dict[str, Any]] = None) -> Any:
        variables = {"filter": issue_filter} if issue_filter else {}
        return await self.graphql(LIST_ISSUES_QUERY, variables)

    async def get_issue(self, issue_id: str) -> Any:
        return await self.graphql(GET_ISSUE_QUERY, {"id": issue_id})

    async def create_issue(self, issue_input: Dict[str, Any]) -> Any:
        return await self.graphql(CREATE_ISSUE_MUTATION, {"input": issue_input})

    async def update_issue(self, issue_id: str, issue_input: Dict[str, Any]) -> Any:
        return await self.graphql(UPDATE_ISSUE_MUTATION, {"id": issue_id, "input": issue_input})

    async def search_issues(self, query: str) -> Any:
        return await self.graphql(SEARCH_ISSUES_QUERY, {"query": query})

    # ── Workspace ──

    async def list_projects(self) -> Any:
        return await self.graphql(LIST_PROJECTS_QUERY)

    async def list_teams(self) -> Any:
        return await self.graphql(LIST_TEAMS_QUERY)
