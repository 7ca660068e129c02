"""Tests for the cards handler."""

import pytest

from kan_mcp.handlers import KanValidationError, cards_handler


class TestCardsHandler:
    @pytest.mark.asyncio
    async def test_get(self, mock_client):
        await cards_handler(mock_client, {"action": "get", "cardPublicId": "card_1"})
        mock_client.get.assert_awaited_once_with("/cards/card_1")

    @pytest.mark.asyncio
    async def test_create_applies_defaults(self, mock_client):
        await cards_handler(mock_client, {"action": "create", "listPublicId": "lst_1", "title": "Fix bug"})
        mock_client.post.assert_awaited_once_with(
            "/cards",
            {
                "title": "Fix bug",
                "listPublicId": "lst_1",
                "description": "",
                "position": "end",
                "labelPublicIds": [],
                "memberPublicIds": [],
            },
        )

    @pytest.mark.asyncio
    async def test_create_with_all_optional_fields(self, mock_client):
        await cards_handler(
            mock_client,
            {
                "action": "create",
                "listPublicId": "lst_1",
                "title": "Fix bug",
                "description": "Details here",
                "position": "start",
                "dueDate": "2026-03-01",
            },
        )
        mock_client.post.assert_awaited_once_with(
            "/cards",
            {
                "title": "Fix bug",
                "listPublicId": "lst_1",
                "description": "Details here",
                "position": "start",
                "labelPublicIds": [],
                "memberPublicIds": [],
                "dueDate": "2026-03-01",
            },
        )

    @pytest.mark.asyncio
    async def test_update_title(self, mock_client):
        await cards_handler(mock_client, {"action": "update", "cardPublicId": "card_1", "title": "Updated"})
        mock_client.put.assert_awaited_once_with("/cards/card_1", {"title": "Updated"})

    @pytest.mark.asyncio
    async def test_update_moves_card_to_other_list(self, mock_client):
        await cards_handler(
            mock_client,
            {"action": "update", "cardPublicId": "card_1", "listPublicId": "lst_2", "index": 0},
        )
        mock_client.put.assert_awaited_once_with("/cards/card_1", {"listPublicId": "lst_2", "index": 0})

    @pytest.mark.asyncio
    async def test_update_can_clear_description(self, mock_client):
        await cards_handler(
            mock_client,
            {"action": "update", "cardPublicId": "card_1", "description": "", "dueDate": "2026-04-01"},
        )
        mock_client.put.assert_awaited_once_with("/cards/card_1", {"description": "", "dueDate": "2026-04-01"})

    @pytest.mark.asyncio
    async def test_delete(self, mock_client):
        await cards_handler(mock_client, {"action": "delete", "cardPublicId": "card_1"})
        mock_client.delete.assert_awaited_once_with("/cards/card_1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params,missing",
        [
            ({"action": "get"}, "cardPublicId"),
            ({"action": "create", "title": "Fix bug"}, "listPublicId"),
            ({"action": "create", "listPublicId": "lst_1"}, "title"),
            ({"action": "update", "title": "x"}, "cardPublicId"),
            ({"action": "delete"}, "cardPublicId"),
        ],
    )
    async def test_missing_required_field(self, mock_client, params, missing):
        with pytest.raises(KanValidationError, match=f"{missing} required for {params['action']}"):
            await cards_handler(mock_client, params)

        assert mock_client.mock_calls == []
