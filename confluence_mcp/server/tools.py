"""Tool declarations advertised to MCP clients.

Argument names are camelCase to match the JSON schema conventions MCP
clients expect; ToolDispatcher maps them onto the operation classes.
"""

from typing import Any, Dict, List, Optional

from mcp.types import Tool

PAGE_ID = {"type": "string", "description": "The ID of the page"}
SPACE_KEY = {"type": "string", "description": "The key of the space (e.g., 'DEV', 'TEAM')"}
OPTIONAL_SPACE_KEY = {"type": "string", "description": "Optional: Limit search to a specific space"}
STORAGE_CONTENT = {
    "type": "string",
    "description": (
        "The content in Confluence storage format (XHTML). Use <p> tags for "
        "paragraphs, <h1>-<h6> for headings, etc."
    ),
}


def _limit(what: str) -> Dict[str, Any]:
    return {"type": "number", "description": f"Maximum number of {what} to return (default: 25)"}


def _tool(
    name: str,
    description: str,
    properties: Dict[str, Any],
    required: Optional[List[str]] = None,
) -> Tool:
    return Tool(
        name=name,
        description=description,
        inputSchema={
            "type": "object",
            "properties": properties,
            "required": required or [],
        },
    )


TOOLS: List[Tool] = [
    # Page operations
    _tool(
        "confluence_get_page",
        "Get a Confluence page by ID, including its content, version, and metadata",
        {"pageId": PAGE_ID},
        ["pageId"],
    ),
    _tool(
        "confluence_get_page_content",
        "Get the content of a Confluence page as plain text or HTML",
        {
            "pageId": PAGE_ID,
            "format": {
                "type": "string",
                "enum": ["text", "html"],
                "description": "Output format: 'text' (default) or 'html'",
            },
        },
        ["pageId"],
    ),
    _tool(
        "confluence_get_child_pages",
        "Get all child pages of a parent page (handles pagination automatically)",
        {"parentId": {"type": "string", "description": "The ID of the parent page"}},
        ["parentId"],
    ),
    _tool(
        "confluence_get_child_pages_extended",
        "Get all child pages of a parent page including parent and space IDs "
        "(handles pagination automatically)",
        {"parentId": {"type": "string", "description": "The ID of the parent page"}},
        ["parentId"],
    ),
    _tool(
        "confluence_get_page_with_children",
        "Get a page together with its direct children, optionally including "
        "each child's full content",
        {
            "pageId": PAGE_ID,
            "includeFullBody": {
                "type": "boolean",
                "description": "Fetch every child's full content (default: false)",
            },
        },
        ["pageId"],
    ),
    _tool(
        "confluence_create_page",
        "Create a new Confluence page in a space, optionally as a child of another page",
        {
            "spaceKey": SPACE_KEY,
            "title": {"type": "string", "description": "The title of the new page"},
            "content": STORAGE_CONTENT,
            "parentId": {
                "type": "string",
                "description": "Optional: ID of the parent page if creating a child page",
            },
        },
        ["spaceKey", "title", "content"],
    ),
    _tool(
        "confluence_update_page",
        "Update an existing Confluence page content and/or title",
        {
            "pageId": PAGE_ID,
            "title": {"type": "string", "description": "The new title of the page"},
            "content": STORAGE_CONTENT,
            "version": {
                "type": "number",
                "description": "The current version number of the page (required for update)",
            },
        },
        ["pageId", "title", "content", "version"],
    ),
    _tool(
        "confluence_update_page_auto_version",
        "Update a Confluence page without supplying a version; the current "
        "version is read first. Omitted title or content keep their current values",
        {
            "pageId": PAGE_ID,
            "title": {"type": "string", "description": "Optional: the new title"},
            "content": STORAGE_CONTENT,
        },
        ["pageId"],
    ),
    _tool(
        "confluence_move_page",
        "Move a page under a new parent page",
        {
            "pageId": PAGE_ID,
            "newParentId": {"type": "string", "description": "The ID of the new parent page"},
        },
        ["pageId", "newParentId"],
    ),
    _tool(
        "confluence_delete_page",
        "Delete a Confluence page by ID (moves to trash)",
        {"pageId": PAGE_ID},
        ["pageId"],
    ),
    # Space operations
    _tool(
        "confluence_list_spaces",
        "List all accessible Confluence spaces",
        {"limit": _limit("spaces")},
    ),
    _tool(
        "confluence_get_space",
        "Get details about a specific Confluence space",
        {"spaceKey": SPACE_KEY},
        ["spaceKey"],
    ),
    _tool(
        "confluence_get_space_content",
        "Get pages or blogposts in a specific space",
        {
            "spaceKey": SPACE_KEY,
            "type": {
                "type": "string",
                "enum": ["page", "blogpost"],
                "description": "Content type: 'page' (default) or 'blogpost'",
            },
            "limit": _limit("items"),
        },
        ["spaceKey"],
    ),
    # Search operations
    _tool(
        "confluence_search",
        "Search Confluence using CQL (Confluence Query Language)",
        {
            "cql": {
                "type": "string",
                "description": "CQL query string (e.g., 'type=page AND space=DEV AND text ~ \"report\"')",
            },
            "limit": _limit("results"),
        },
        ["cql"],
    ),
    _tool(
        "confluence_search_by_text",
        "Search Confluence pages by text content",
        {
            "text": {"type": "string", "description": "Text to search for"},
            "spaceKey": OPTIONAL_SPACE_KEY,
            "limit": _limit("results"),
        },
        ["text"],
    ),
    _tool(
        "confluence_search_by_title",
        "Search Confluence pages by title",
        {
            "title": {"type": "string", "description": "Title text to search for"},
            "spaceKey": OPTIONAL_SPACE_KEY,
            "limit": _limit("results"),
        },
        ["title"],
    ),
    # Label operations
    _tool(
        "confluence_get_page_labels",
        "Get all labels attached to a page",
        {"pageId": PAGE_ID},
        ["pageId"],
    ),
    _tool(
        "confluence_add_page_label",
        "Add a label to a page",
        {
            "pageId": PAGE_ID,
            "labelName": {"type": "string", "description": "The label name to add"},
        },
        ["pageId", "labelName"],
    ),
    _tool(
        "confluence_remove_page_label",
        "Remove a label from a page",
        {
            "pageId": PAGE_ID,
            "labelName": {"type": "string", "description": "The label name to remove"},
        },
        ["pageId", "labelName"],
    ),
    _tool(
        "confluence_manage_labels",
        "Add or remove several labels on a page. 'add' is all-or-nothing; "
        "'remove' reports each label's outcome separately",
        {
            "pageId": PAGE_ID,
            "action": {
                "type": "string",
                "enum": ["add", "remove"],
                "description": "Whether to add or remove the labels",
            },
            "labels": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Label names",
            },
        },
        ["pageId", "action", "labels"],
    ),
    # Comment and attachment operations
    _tool(
        "confluence_get_page_comments",
        "Get comments on a page",
        {"pageId": PAGE_ID, "limit": _limit("comments")},
        ["pageId"],
    ),
    _tool(
        "confluence_add_page_comment",
        "Add a comment to a page",
        {
            "pageId": PAGE_ID,
            "content": {"type": "string", "description": "The comment content in HTML format"},
        },
        ["pageId", "content"],
    ),
    _tool(
        "confluence_get_page_attachments",
        "Get attachments on a page",
        {"pageId": PAGE_ID, "limit": _limit("attachments")},
        ["pageId"],
    ),
    # Special operations
    _tool(
        "confluence_extract_done_sections",
        "Extract DONE sections from a page (useful for daily reports). "
        "Returns content between 'DONE' and 'TODO' markers.",
        {"pageId": PAGE_ID},
        ["pageId"],
    ),
]

TOOL_NAMES = [tool.name for tool in TOOLS]
