"""Card action handlers: comments, member toggles and label toggles."""

from typing import Any, Literal, Required, TypedDict

from ..client import KanClient
from ._common import require, unknown_action

CommentAction = Literal["create", "update", "delete"]
ToggleAction = Literal["add", "remove"]

TOGGLE_ACTIONS = ("add", "remove")


class CardCommentParams(TypedDict, total=False):
    action: Required[CommentAction]
    cardPublicId: Required[str]
    commentPublicId: str
    comment: str


class CardMemberParams(TypedDict, total=False):
    action: Required[ToggleAction]
    cardPublicId: Required[str]
    workspaceMemberPublicId: Required[str]


class CardLabelParams(TypedDict, total=False):
    action: Required[ToggleAction]
    cardPublicId: Required[str]
    labelPublicId: Required[str]


async def card_comments_handler(client: KanClient, params: CardCommentParams) -> Any:
    action = params.get("action")
    if action not in ("create", "update", "delete"):
        unknown_action("card_comments", action)
    require(params, action, "cardPublicId")
    card_path = f"/cards/{params['cardPublicId']}/comments"

    match action:
        case "create":
            require(params, action, "comment")
            return await client.post(card_path, {"comment": params["comment"]})

        case "update":
            require(params, action, "commentPublicId", "comment")
            return await client.put(f"{card_path}/{params['commentPublicId']}", {"comment": params["comment"]})

        case "delete":
            require(params, action, "commentPublicId")
            return await client.delete(f"{card_path}/{params['commentPublicId']}")


async def card_members_handler(client: KanClient, params: CardMemberParams) -> Any:
    """
    Add or remove a workspace member on a card.

    Kan exposes one PUT toggle for both: it adds the member when absent and
    removes them when present. ``action`` does not change the request.
    """
    action = params.get("action")
    if action not in TOGGLE_ACTIONS:
        unknown_action("card_members", action)
    require(params, action, "cardPublicId", "workspaceMemberPublicId")
    return await client.put(f"/cards/{params['cardPublicId']}/members/{params['workspaceMemberPublicId']}")


async def card_labels_handler(client: KanClient, params: CardLabelParams) -> Any:
    """
    Add or remove a label on a card.

    Same toggle semantics as card_members_handler.
    """
    action = params.get("action")
    if action not in TOGGLE_ACTIONS:
        unknown_action("card_labels", action)
    require(params, action, "cardPublicId", "labelPublicId")
    return await client.put(f"/cards/{params['cardPublicId']}/labels/{params['labelPublicId']}")
