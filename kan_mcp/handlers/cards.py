"""Card handler: get, create, update (including moves), delete."""

from typing import Any, Literal, Required, TypedDict

from ..client import KanClient
from ._common import pick, require, unknown_action

CardAction = Literal["get", "create", "update", "delete"]


class CardParams(TypedDict, total=False):
    action: Required[CardAction]
    cardPublicId: str
    listPublicId: str
    title: str
    description: str
    position: Literal["start", "end"]
    dueDate: str
    index: int


async def cards_handler(client: KanClient, params: CardParams) -> Any:
    """
    Dispatch a card action.

    ``update`` moves a card to another list when ``listPublicId`` is given
    and reorders it within its list when ``index`` is given.
    """
    action = params.get("action")
    match action:
        case "get":
            require(params, action, "cardPublicId")
            return await client.get(f"/cards/{params['cardPublicId']}")

        case "create":
            require(params, action, "listPublicId", "title")
            description = params.get("description")
            position = params.get("position")
            body = {
                "title": params["title"],
                "listPublicId": params["listPublicId"],
                "description": "" if description is None else description,
                "position": "end" if position is None else position,
                "labelPublicIds": [],
                "memberPublicIds": [],
                **pick(params, "dueDate"),
            }
            return await client.post("/cards", body)

        case "update":
            require(params, action, "cardPublicId")
            return await client.put(
                f"/cards/{params['cardPublicId']}",
                pick(params, "title", "description", "listPublicId", "index", "dueDate"),
            )

        case "delete":
            require(params, action, "cardPublicId")
            return await client.delete(f"/cards/{params['cardPublicId']}")

        case _:
            unknown_action("cards", action)
