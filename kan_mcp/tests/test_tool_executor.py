"""Tests for tool schemas and the tool executor."""

import json

import pytest

from kan_mcp.client import KanAPIError
from kan_mcp.handlers import KanValidationError
from kan_mcp.tool_executor import HANDLERS, ToolExecutor, format_result
from kan_mcp.tool_schemas import TOOLS


class TestToolSchemas:
    def test_every_tool_has_a_handler(self):
        assert {t["name"] for t in TOOLS} == set(HANDLERS)

    def test_every_schema_requires_action(self):
        for tool in TOOLS:
            assert "action" in tool["input_schema"]["required"], tool["name"]
            assert "enum" in tool["input_schema"]["properties"]["action"], tool["name"]

    def test_search_limit_bounds(self):
        workspaces = next(t for t in TOOLS if t["name"] == "workspaces")
        limit = workspaces["input_schema"]["properties"]["limit"]
        assert (limit["minimum"], limit["maximum"]) == (1, 50)

    def test_label_colour_pattern(self):
        labels = next(t for t in TOOLS if t["name"] == "labels")
        assert labels["input_schema"]["properties"]["colourCode"]["pattern"] == "^#[0-9a-fA-F]{6}$"

    def test_toggle_tools_describe_toggle_semantics(self):
        for name in ("card_members", "card_labels"):
            tool = next(t for t in TOOLS if t["name"] == name)
            assert "toggle" in tool["description"]


class TestToolExecutor:
    @pytest.fixture
    def executor(self, mock_client):
        return ToolExecutor(mock_client)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "tool_name,tool_input,method,args",
        [
            ("workspaces", {"action": "list"}, "get", ("/workspaces",)),
            ("boards", {"action": "get", "boardPublicId": "bd_1"}, "get", ("/boards/bd_1",)),
            ("lists", {"action": "delete", "listPublicId": "lst_1"}, "delete", ("/lists/lst_1",)),
            ("cards", {"action": "get", "cardPublicId": "card_1"}, "get", ("/cards/card_1",)),
            ("labels", {"action": "get", "labelPublicId": "lbl_1"}, "get", ("/labels/lbl_1",)),
            (
                "card_comments",
                {"action": "create", "cardPublicId": "card_1", "comment": "hi"},
                "post",
                ("/cards/card_1/comments", {"comment": "hi"}),
            ),
            (
                "card_members",
                {"action": "remove", "cardPublicId": "card_1", "workspaceMemberPublicId": "mem_1"},
                "put",
                ("/cards/card_1/members/mem_1",),
            ),
            (
                "card_labels",
                {"action": "add", "cardPublicId": "card_1", "labelPublicId": "lbl_1"},
                "put",
                ("/cards/card_1/labels/lbl_1",),
            ),
        ],
    )
    async def test_routes_to_handler(self, executor, mock_client, tool_name, tool_input, method, args):
        getattr(mock_client, method).return_value = {"publicId": "x"}

        result = await executor.execute(tool_name, tool_input)

        getattr(mock_client, method).assert_awaited_once_with(*args)
        assert result == {"publicId": "x"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, executor, mock_client):
        with pytest.raises(KanValidationError, match="Unknown tool: archive_card"):
            await executor.execute("archive_card", {"action": "get"})

        assert mock_client.mock_calls == []

    @pytest.mark.asyncio
    async def test_missing_schema_required_params(self, executor, mock_client):
        with pytest.raises(KanValidationError, match="Missing required parameter\\(s\\): action, labelPublicId"):
            await executor.execute("card_labels", {"cardPublicId": "card_1"})

        assert mock_client.mock_calls == []

    @pytest.mark.asyncio
    async def test_api_errors_pass_through(self, executor, mock_client):
        error = KanAPIError("Kan API 404: nope", status_code=404, body="nope")
        mock_client.get.side_effect = error

        with pytest.raises(KanAPIError) as exc_info:
            await executor.execute("boards", {"action": "get", "boardPublicId": "bd_1"})

        assert exc_info.value is error


class TestFormatResult:
    def test_pretty_prints_json(self):
        text = format_result({"success": True, "ids": ["a"]})
        assert text == json.dumps({"success": True, "ids": ["a"]}, indent=2)
        assert "\n  " in text
