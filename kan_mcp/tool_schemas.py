"""MCP tool schema definitions for the Kan API.

Pure data: one entry per resource family. Value constraints (lengths,
ranges, patterns) live here; the handlers only check that each action got
the fields it needs.
"""

TOGGLE_NOTE = (
    "NOTE: Kan uses a single PUT toggle endpoint for both operations. 'action' is semantic only and both "
    "call the same endpoint: the API adds the {thing} if not already present, or removes it if it is."
)

# Tool definitions for MCP
TOOLS = [
    {
        "name": "workspaces",
        "description": "Manage Kan workspaces: list all, get one, create, update, delete, or search boards/cards within a workspace.",
        "input_schema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["list", "get", "create", "update", "delete", "search"],
                    "description": "Operation to perform",
                },
                "workspacePublicId": {
                    "type": "string",
                    "description": "Workspace ID (required for get, update, delete, search)",
                },
                "name": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": 64,
                    "description": "Workspace name (required for create)",
                },
                "slug": {
                    "type": "string",
                    "minLength": 3,
                    "maxLength": 64,
                    "description": "URL-safe workspace slug",
                },
                "description": {
                    "type": "string",
                    "description": "Workspace description (for update)",
                },
                "query": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": 100,
                    "description": "Search query text (required for search)",
                },
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 50,
                    "description": "Max search results (1-50)",
                },
            },
            "required": ["action"],
        },
    },
    {
        "name": "boards",
        "description": "Manage Kan boards: list workspace boards, get, create, update (name/slug/visibility/favorite), or delete.",
        "input_schema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["list", "get", "create", "update", "delete"],
                    "description": "Operation to perform",
                },
                "workspacePublicId": {
                    "type": "string",
                    "description": "Workspace ID (required for list, create)",
                },
                "boardPublicId": {
                    "type": "string",
                    "description": "Board ID (required for get, update, delete)",
                },
                "name": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": 100,
                    "description": "Board name (required for create)",
                },
                "slug": {
                    "type": "string",
                    "description": "Board slug (for update)",
                },
                "visibility": {
                    "type": "string",
                    "enum": ["public", "private"],
                    "description": "Board visibility (for update)",
                },
                "favorite": {
                    "type": "boolean",
                    "description": "Favorite status (for update)",
                },
                "lists": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "List names to create the board with (for create, default: do, doing, done)",
                },
                "labels": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Label names to create the board with (for create, default: none)",
                },
            },
            "required": ["action"],
        },
    },
    {
        "name": "lists",
        "description": "Manage Kan lists within a board: create, rename/reorder (update), or delete.",
        "input_schema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["create", "update", "delete"],
                    "description": "Operation to perform",
                },
                "listPublicId": {
                    "type": "string",
                    "description": "List ID (required for update, delete)",
                },
                "boardPublicId": {
                    "type": "string",
                    "description": "Board ID (required for create)",
                },
                "name": {
                    "type": "string",
                    "minLength": 1,
                    "description": "List name",
                },
                "index": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "List position index (for reordering)",
                },
            },
            "required": ["action"],
        },
    },
    {
        "name": "cards",
        "description": "Manage Kan cards: get, create (in a list), update (title/description/list/position/due date), or delete.",
        "input_schema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["get", "create", "update", "delete"],
                    "description": "Operation to perform",
                },
                "cardPublicId": {
                    "type": "string",
                    "description": "Card ID (required for get, update, delete)",
                },
                "listPublicId": {
                    "type": "string",
                    "description": "List ID (required for create; use in update to move card between lists)",
                },
                "title": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": 2000,
                    "description": "Card title (required for create)",
                },
                "description": {
                    "type": "string",
                    "maxLength": 10000,
                    "description": "Card description (markdown supported)",
                },
                "position": {
                    "type": "string",
                    "enum": ["start", "end"],
                    "description": "Where to insert card in list (default: end)",
                },
                "dueDate": {
                    "type": "string",
                    "description": "Due date in ISO 8601 format e.g. 2026-03-15",
                },
                "index": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Card position index within list",
                },
            },
            "required": ["action"],
        },
    },
    {
        "name": "labels",
        "description": "Manage Kan labels on a board: get, create (with hex colour), update, or delete.",
        "input_schema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["get", "create", "update", "delete"],
                    "description": "Operation to perform",
                },
                "labelPublicId": {
                    "type": "string",
                    "description": "Label ID (required for get, update, delete)",
                },
                "boardPublicId": {
                    "type": "string",
                    "description": "Board ID (required for create)",
                },
                "name": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": 36,
                    "description": "Label name (required for create, 1-36 chars)",
                },
                "colourCode": {
                    "type": "string",
                    "pattern": "^#[0-9a-fA-F]{6}$",
                    "description": "7-char hex colour e.g. #ff0000 (required for create)",
                },
            },
            "required": ["action"],
        },
    },
    {
        "name": "card_comments",
        "description": "Add, edit, or delete comments on a Kan card.",
        "input_schema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["create", "update", "delete"],
                    "description": "Operation to perform",
                },
                "cardPublicId": {
                    "type": "string",
                    "description": "Card ID",
                },
                "commentPublicId": {
                    "type": "string",
                    "description": "Comment ID (required for update, delete)",
                },
                "comment": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Comment text (required for create, update)",
                },
            },
            "required": ["action", "cardPublicId"],
        },
    },
    {
        "name": "card_members",
        "description": "Add or remove a workspace member from a card. " + TOGGLE_NOTE.format(thing="member"),
        "input_schema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["add", "remove"],
                    "description": "Whether to add or remove the member",
                },
                "cardPublicId": {
                    "type": "string",
                    "description": "Card ID",
                },
                "workspaceMemberPublicId": {
                    "type": "string",
                    "description": "Workspace member ID to add or remove",
                },
            },
            "required": ["action", "cardPublicId", "workspaceMemberPublicId"],
        },
    },
    {
        "name": "card_labels",
        "description": "Add or remove a label from a card. " + TOGGLE_NOTE.format(thing="label"),
        "input_schema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["add", "remove"],
                    "description": "Whether to add or remove the label",
                },
                "cardPublicId": {
                    "type": "string",
                    "description": "Card ID",
                },
                "labelPublicId": {
                    "type": "string",
                    "description": "Label ID to add or remove",
                },
            },
            "required": ["action", "cardPublicId", "labelPublicId"],
        },
    },
]
