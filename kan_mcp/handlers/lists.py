"""List handler: create, rename/reorder, delete."""

from typing import Any, Literal, Required, TypedDict

from ..client import KanClient
from ._common import pick, require, unknown_action

ListAction = Literal["create", "update", "delete"]


class ListParams(TypedDict, total=False):
    action: Required[ListAction]
    listPublicId: str
    boardPublicId: str
    name: str
    index: int


async def lists_handler(client: KanClient, params: ListParams) -> Any:
    action = params.get("action")
    match action:
        case "create":
            require(params, action, "boardPublicId", "name")
            return await client.post("/lists", {"name": params["name"], "boardPublicId": params["boardPublicId"]})

        case "update":
            require(params, action, "listPublicId")
            return await client.put(f"/lists/{params['listPublicId']}", pick(params, "name", "index"))

        case "delete":
            require(params, action, "listPublicId")
            return await client.delete(f"/lists/{params['listPublicId']}")

        case _:
            unknown_action("lists", action)
