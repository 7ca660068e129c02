"""Board handler: list, get, create, update, delete."""

from typing import Any, Literal, Required, TypedDict

from ..client import KanClient
from ._common import pick, require, unknown_action

BoardAction = Literal["list", "get", "create", "update", "delete"]

DEFAULT_BOARD_LISTS = ("do", "doing", "done")


class BoardParams(TypedDict, total=False):
    action: Required[BoardAction]
    workspacePublicId: str
    boardPublicId: str
    name: str
    slug: str
    visibility: Literal["public", "private"]
    favorite: bool
    lists: list[str]
    labels: list[str]


async def boards_handler(client: KanClient, params: BoardParams) -> Any:
    action = params.get("action")
    match action:
        case "list":
            require(params, action, "workspacePublicId")
            return await client.get(f"/workspaces/{params['workspacePublicId']}/boards")

        case "get":
            require(params, action, "boardPublicId")
            return await client.get(f"/boards/{params['boardPublicId']}")

        case "create":
            require(params, action, "workspacePublicId", "name")
            body = {
                "name": params["name"],
                "lists": list(DEFAULT_BOARD_LISTS),
                "labels": [],
            }
            body.update(pick(params, "lists", "labels"))
            return await client.post(f"/workspaces/{params['workspacePublicId']}/boards", body)

        case "update":
            require(params, action, "boardPublicId")
            return await client.put(
                f"/boards/{params['boardPublicId']}",
                pick(params, "name", "slug", "visibility", "favorite"),
            )

        case "delete":
            require(params, action, "boardPublicId")
            return await client.delete(f"/boards/{params['boardPublicId']}")

        case _:
            unknown_action("boards", action)
