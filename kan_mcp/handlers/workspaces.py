"""Workspace handler: list, get, create, update, delete, search."""

from typing import Any, Literal, Required, TypedDict
from urllib.parse import urlencode

from ..client import KanClient
from ._common import pick, require, unknown_action

WorkspaceAction = Literal["list", "get", "create", "update", "delete", "search"]


class WorkspaceParams(TypedDict, total=False):
    action: Required[WorkspaceAction]
    workspacePublicId: str
    name: str
    slug: str
    description: str
    query: str
    limit: int


async def workspaces_handler(client: KanClient, params: WorkspaceParams) -> Any:
    action = params.get("action")
    match action:
        case "list":
            return await client.get("/workspaces")

        case "get":
            require(params, action, "workspacePublicId")
            return await client.get(f"/workspaces/{params['workspacePublicId']}")

        case "create":
            require(params, action, "name")
            return await client.post("/workspaces", {"name": params["name"], **pick(params, "slug")})

        case "update":
            require(params, action, "workspacePublicId")
            return await client.put(
                f"/workspaces/{params['workspacePublicId']}",
                pick(params, "name", "slug", "description"),
            )

        case "delete":
            require(params, action, "workspacePublicId")
            return await client.delete(f"/workspaces/{params['workspacePublicId']}")

        case "search":
            require(params, action, "workspacePublicId", "query")
            # limit is bounded 1-50 by the tool schema, not here
            query = urlencode({"query": params["query"], **pick(params, "limit")})
            return await client.get(f"/workspaces/{params['workspacePublicId']}/search?{query}")

        case _:
            unknown_action("workspaces", action)
