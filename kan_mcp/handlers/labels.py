"""Board label handler: get, create, update, delete."""

from typing import Any, Literal, Required, TypedDict

from ..client import KanClient
from ._common import pick, require, unknown_action

LabelAction = Literal["get", "create", "update", "delete"]


class LabelParams(TypedDict, total=False):
    action: Required[LabelAction]
    labelPublicId: str
    boardPublicId: str
    name: str
    colourCode: str  # "#rrggbb", checked by the tool schema


async def labels_handler(client: KanClient, params: LabelParams) -> Any:
    action = params.get("action")
    match action:
        case "get":
            require(params, action, "labelPublicId")
            return await client.get(f"/labels/{params['labelPublicId']}")

        case "create":
            require(params, action, "boardPublicId", "name", "colourCode")
            return await client.post(
                "/labels",
                {
                    "name": params["name"],
                    "boardPublicId": params["boardPublicId"],
                    "colourCode": params["colourCode"],
                },
            )

        case "update":
            require(params, action, "labelPublicId")
            return await client.put(f"/labels/{params['labelPublicId']}", pick(params, "name", "colourCode"))

        case "delete":
            require(params, action, "labelPublicId")
            return await client.delete(f"/labels/{params['labelPublicId']}")

        case _:
            unknown_action("labels", action)
