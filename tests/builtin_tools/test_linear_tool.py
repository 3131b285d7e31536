"""Tests for apitoolbox.builtin_tools.linear"""

import json

import httpx
import pytest

from apitoolbox.builtin_tools.linear import LinearClient, LinearTool, build_issue_filter
from apitoolbox.builtin_tools.linear.client import GRAPHQL_URL
from apitoolbox.credentials import StaticCredentialProvider
from apitoolbox.errors import ProviderAPIError


CREATE_RESPONSE = {
    "data": {
        "issueCreate": {
            "success": True,
            "issue": {
                "id": "I1",
                "title": "Bug",
                "identifier": "ENG-1",
                "url": "https://linear.app/acme/issue/ENG-1/bug",
            },
        }
    }
}


# =========================================================================
# build_issue_filter
# =========================================================================


class TestBuildIssueFilter:

    def test_no_filter(self):
        assert build_issue_filter(None, None) is None

    def test_team_filter(self):
        assert build_issue_filter("T1", None) == {"team": {"id": {"eq": "T1"}}}

    def test_project_filter(self):
        assert build_issue_filter(None, "P1") == {"project": {"id": {"eq": "P1"}}}

    def test_project_replaces_team(self):
        assert build_issue_filter("T1", "P1") == {"project": {"id": {"eq": "P1"}}}

    def test_identifier_with_quotes_kept_verbatim(self):
        issue_filter = build_issue_filter('T"1}', None)
        assert issue_filter["team"]["id"]["eq"] == 'T"1}'


# =========================================================================
# LinearClient
# =========================================================================


class TestLinearClient:

    def test_headers_use_raw_key(self):
        client = LinearClient("lin_api_123")
        assert client._headers["Authorization"] == "lin_api_123"
        assert client._headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_graphql_posts_query_and_variables(self, json_transport):
        transport = json_transport({"data": {"teams": {"nodes": []}}})
        client = LinearClient("key", transport=transport)

        data = await client.graphql("query { teams { nodes { id } } }", {"x": 1})

        assert data == {"teams": {"nodes": []}}
        request = transport.last_request
        assert request.method == "POST"
        assert str(request.url) == GRAPHQL_URL
        assert request.headers["Authorization"] == "key"
        assert transport.last_json() == {"query": "query { teams { nodes { id } } }", "variables": {"x": 1}}

    @pytest.mark.asyncio
    async def test_graphql_errors_discard_data(self, json_transport):
        transport = json_transport({
            "data": {"issue": {"id": "partial"}},
            "errors": [{"message": "Entity not found"}, {"message": "second"}],
        })
        client = LinearClient("key", transport=transport)

        with pytest.raises(ProviderAPIError) as exc_info:
            await client.graphql("query { issue(id: \"x\") { id } }")

        assert "Entity not found" in str(exc_info.value)
        assert "second" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_errors_array_is_success(self, json_transport):
        client = LinearClient("key", transport=json_transport({"data": {"ok": True}, "errors": []}))
        assert await client.graphql("query { ok }") == {"ok": True}

    @pytest.mark.asyncio
    async def test_http_error_includes_status_and_body(self, mock_transport):
        transport = mock_transport(lambda request: httpx.Response(401, text="Authentication required"))
        client = LinearClient("key", transport=transport)

        with pytest.raises(ProviderAPIError) as exc_info:
            await client.list_teams()

        assert str(exc_info.value) == "Linear API error (401): Authentication required"
        assert exc_info.value.status_code == 401


# =========================================================================
# LinearTool
# =========================================================================


class TestLinearTool:

    def test_descriptor(self):
        tool = LinearTool()
        assert tool.name == "linear"
        assert tool.label == "Linear"
        assert "listIssues" in tool.description
        schema = tool.parameters
        assert schema["type"] == "object"
        assert set(schema["properties"]) >= {"action", "issueId", "teamId", "projectId", "stateId"}
        assert schema["required"] == ["action"]

    def test_actions(self):
        assert LinearTool().actions == [
            "listIssues", "getIssue", "createIssue", "updateIssue",
            "listProjects", "listTeams", "searchIssues",
        ]

    @pytest.mark.asyncio
    async def test_missing_api_key(self, no_api_keys, json_transport):
        transport = json_transport({"data": {}})
        tool = LinearTool(transport=transport)

        envelope = await tool.execute("call_1", {"action": "listTeams"})

        assert envelope.details == {"error": "missing_api_key"}
        assert envelope.text == "Linear API key not configured. Set LINEAR_API_KEY."
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_create_issue_round_trip(self, api_keys, json_transport):
        transport = json_transport(CREATE_RESPONSE)
        tool = LinearTool(transport=transport)

        envelope = await tool.execute("call_1", {"action": "createIssue", "teamId": "T1", "title": "Bug"})

        assert envelope.details == {"action": "createIssue", "success": True}
        assert '"identifier": "ENG-1"' in envelope.text
        assert json.loads(envelope.text) == CREATE_RESPONSE["data"]
        body = transport.last_json()
        assert "issueCreate" in body["query"]
        # Absent optional fields are not sent
        assert body["variables"] == {"input": {"teamId": "T1", "title": "Bug"}}

    @pytest.mark.asyncio
    async def test_create_issue_optional_fields(self, api_keys, json_transport):
        transport = json_transport(CREATE_RESPONSE)
        tool = LinearTool(transport=transport)

        await tool.execute("c", {
            "action": "createIssue", "teamId": "T1", "title": "Bug",
            "description": "Steps", "priority": 2, "projectId": "P1",
        })

        assert transport.last_json()["variables"]["input"] == {
            "teamId": "T1", "title": "Bug", "description": "Steps", "priority": 2, "projectId": "P1",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["teamId", "title"])
    async def test_create_issue_requires_team_and_title(self, api_keys, json_transport, missing):
        transport = json_transport(CREATE_RESPONSE)
        args = {"action": "createIssue", "teamId": "T1", "title": "Bug"}
        del args[missing]

        envelope = await LinearTool(transport=transport).execute("c", args)

        assert missing in envelope.details["error"]
        assert envelope.details["action"] == "createIssue"
        assert envelope.text.startswith("Linear error: ")
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_get_issue_blank_id_rejected(self, api_keys, json_transport):
        transport = json_transport({"data": {}})
        envelope = await LinearTool(transport=transport).execute("c", {"action": "getIssue", "issueId": "  "})

        assert envelope.details["error"] == "issueId required"
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_get_issue(self, api_keys, json_transport):
        transport = json_transport({"data": {"issue": {"id": "I1", "title": "Bug"}}})
        envelope = await LinearTool(transport=transport).execute("c", {"action": "getIssue", "issueId": "I1"})

        assert envelope.is_success()
        assert transport.last_json()["variables"] == {"id": "I1"}

    @pytest.mark.asyncio
    async def test_list_issues_without_filter(self, api_keys, json_transport):
        transport = json_transport({"data": {"issues": {"nodes": []}}})
        await LinearTool(transport=transport).execute("c", {"action": "listIssues"})

        body = transport.last_json()
        assert body["variables"] == {}
        assert "first: 50" in body["query"]

    @pytest.mark.asyncio
    async def test_list_issues_with_team_filter(self, api_keys, json_transport):
        transport = json_transport({"data": {"issues": {"nodes": []}}})
        await LinearTool(transport=transport).execute("c", {"action": "listIssues", "teamId": "T1"})

        assert transport.last_json()["variables"] == {"filter": {"team": {"id": {"eq": "T1"}}}}

    @pytest.mark.asyncio
    async def test_update_issue_sends_only_given_fields(self, api_keys, json_transport):
        transport = json_transport({"data": {"issueUpdate": {"success": True}}})
        await LinearTool(transport=transport).execute(
            "c", {"action": "updateIssue", "issueId": "I1", "stateId": "S2", "priority": 0}
        )

        assert transport.last_json()["variables"] == {"id": "I1", "input": {"stateId": "S2", "priority": 0}}

    @pytest.mark.asyncio
    async def test_search_issues(self, api_keys, json_transport):
        transport = json_transport({"data": {"searchIssues": {"nodes": []}}})
        envelope = await LinearTool(transport=transport).execute(
            "c", {"action": "searchIssues", "query": "login crash"}
        )

        assert envelope.details == {"action": "searchIssues", "success": True}
        body = transport.last_json()
        assert body["variables"] == {"query": "login crash"}
        assert "first: 30" in body["query"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["listProjects", "listTeams"])
    async def test_workspace_listings(self, api_keys, json_transport, action):
        transport = json_transport({"data": {"nodes": []}})
        envelope = await LinearTool(transport=transport).execute("c", {"action": action})

        assert envelope.details == {"action": action, "success": True}
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_graphql_error_envelope(self, api_keys, json_transport):
        transport = json_transport({"data": {"issue": None}, "errors": [{"message": "Entity not found"}]})
        envelope = await LinearTool(transport=transport).execute("c", {"action": "getIssue", "issueId": "nope"})

        assert "Entity not found" in envelope.details["error"]
        assert envelope.text == "Linear error: Linear GraphQL error: Entity not found"

    @pytest.mark.asyncio
    async def test_not_found_envelope(self, api_keys, mock_transport):
        transport = mock_transport(lambda request: httpx.Response(404, text="Not Found"))
        envelope = await LinearTool(transport=transport).execute("c", {"action": "listTeams"})

        assert "404" in envelope.details["error"]
        assert "Not Found" in envelope.details["error"]

    @pytest.mark.asyncio
    async def test_credential_read_at_call_time(self, json_transport):
        credentials = StaticCredentialProvider()
        transport = json_transport({"data": {"teams": {"nodes": []}}})
        tool = LinearTool(credentials=credentials, transport=transport)

        first = await tool.execute("c1", {"action": "listTeams"})
        credentials.set("LINEAR_API_KEY", "lin_new")
        second = await tool.execute("c2", {"action": "listTeams"})

        assert first.details["error"] == "missing_api_key"
        assert second.is_success()
        assert transport.last_request.headers["Authorization"] == "lin_new"
