"""Tool dispatch: named tool + argument bag -> result payload.

ToolDispatcher is the boundary between the MCP layer and the Confluence
operations. Every exception raised below it is caught here and turned
into a failure payload; nothing escapes call().
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..confluence_client.api_wrapper import APIWrapper
from ..confluence_client.errors import UnknownToolError, ValidationError
from ..page_operations import (
    CommentOperations,
    LabelOperations,
    PageOperations,
    SearchOperations,
    SpaceOperations,
)

logger = logging.getLogger(__name__)

Arguments = Dict[str, Any]


@dataclass
class ToolResult:
    """Outcome of one tool call.

    Attributes:
        payload: JSON-serializable result (None on failure)
        error: Error message (None on success)
    """

    payload: Any = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        if self.is_error:
            return {"error": self.error, "is_error": True}
        return {"result": self.payload}


def _required(args: Arguments, name: str, allow_empty: bool = False) -> Any:
    value = args.get(name)
    if value is None or (value == "" and not allow_empty):
        raise ValidationError(f"Missing required argument '{name}'")
    return value


def _flag(args: Arguments, name: str) -> bool:
    value = args.get(name)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ValidationError(f"Argument '{name}' must be a boolean, got {value!r}")


def _limit(args: Arguments, default: int = 25) -> int:
    value = args.get("limit")
    if value is None:
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Argument 'limit' must be a number, got {value!r}")
    if limit <= 0:
        raise ValidationError(f"Argument 'limit' must be positive, got {limit}")
    return limit


class ToolDispatcher:
    """Maps tool names onto the Confluence operation classes.

    Example:
        >>> dispatcher = ToolDispatcher(APIWrapper(settings))
        >>> result = dispatcher.call("confluence_get_page", {"pageId": "123"})
        >>> result.to_dict()
        {'result': {'id': '123', ...}}
    """

    def __init__(self, api: APIWrapper):
        self.api = api
        self.pages = PageOperations(api)
        self.labels = LabelOperations(api)
        self.spaces = SpaceOperations(api)
        self.search = SearchOperations(api)
        self.comments = CommentOperations(api)
        self._handlers: Dict[str, Callable[[Arguments], Any]] = {
            "confluence_get_page": self._get_page,
            "confluence_get_page_content": self._get_page_content,
            "confluence_get_child_pages": self._get_child_pages,
            "confluence_get_child_pages_extended": self._get_child_pages_extended,
            "confluence_get_page_with_children": self._get_page_with_children,
            "confluence_create_page": self._create_page,
            "confluence_update_page": self._update_page,
            "confluence_update_page_auto_version": self._update_page_auto_version,
            "confluence_move_page": self._move_page,
            "confluence_delete_page": self._delete_page,
            "confluence_list_spaces": self._list_spaces,
            "confluence_get_space": self._get_space,
            "confluence_get_space_content": self._get_space_content,
            "confluence_search": self._search,
            "confluence_search_by_text": self._search_by_text,
            "confluence_search_by_title": self._search_by_title,
            "confluence_get_page_labels": self._get_page_labels,
            "confluence_add_page_label": self._add_page_label,
            "confluence_remove_page_label": self._remove_page_label,
            "confluence_manage_labels": self._manage_labels,
            "confluence_get_page_comments": self._get_page_comments,
            "confluence_add_page_comment": self._add_page_comment,
            "confluence_get_page_attachments": self._get_page_attachments,
            "confluence_extract_done_sections": self._extract_done_sections,
        }

    @property
    def tool_names(self):
        return list(self._handlers)

    def call(self, name: str, arguments: Optional[Arguments] = None) -> ToolResult:
        """Invoke a tool and convert any failure into a ToolResult.

        Args:
            name: Registered tool name
            arguments: Tool arguments (may be None)

        Returns:
            ToolResult with either payload or error set
        """
        args = arguments or {}
        logger.info(f"Tool call: {name}")
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(name)
            return ToolResult(payload=handler(args))
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}")
            logger.debug("Tool failure details", exc_info=True)
            return ToolResult(error=str(e) or type(e).__name__)

    # Page operations

    def _get_page(self, args: Arguments) -> Any:
        return self.pages.get_page(_required(args, "pageId")).to_dict()

    def _get_page_content(self, args: Arguments) -> Any:
        return self.pages.get_page_content(
            _required(args, "pageId"), args.get("format") or "text"
        )

    def _get_child_pages(self, args: Arguments) -> Any:
        children = self.pages.get_child_pages(_required(args, "parentId"))
        return [child.to_dict() for child in children]

    def _get_child_pages_extended(self, args: Arguments) -> Any:
        children = self.pages.get_child_pages_extended(_required(args, "parentId"))
        return [child.to_dict(extended=True) for child in children]

    def _get_page_with_children(self, args: Arguments) -> Any:
        return self.pages.get_page_with_children(
            _required(args, "pageId"), _flag(args, "includeFullBody")
        ).to_dict()

    def _create_page(self, args: Arguments) -> Any:
        return self.pages.create_page(
            _required(args, "spaceKey"),
            _required(args, "title"),
            _required(args, "content", allow_empty=True),
            args.get("parentId"),
        ).to_dict()

    def _update_page(self, args: Arguments) -> Any:
        version = _required(args, "version")
        try:
            version = int(version)
        except (TypeError, ValueError):
            raise ValidationError(f"Argument 'version' must be a number, got {version!r}")
        return self.pages.update_page(
            _required(args, "pageId"),
            _required(args, "title"),
            _required(args, "content", allow_empty=True),
            version,
        ).to_dict()

    def _update_page_auto_version(self, args: Arguments) -> Any:
        return self.pages.update_page_auto(
            _required(args, "pageId"), args.get("title"), args.get("content")
        ).to_dict()

    def _move_page(self, args: Arguments) -> Any:
        return self.pages.move_page(
            _required(args, "pageId"), _required(args, "newParentId")
        ).to_dict()

    def _delete_page(self, args: Arguments) -> Any:
        return self.pages.delete_page(_required(args, "pageId"))

    def _extract_done_sections(self, args: Arguments) -> Any:
        return self.pages.extract_done_sections(_required(args, "pageId")).to_dict()

    # Space operations

    def _list_spaces(self, args: Arguments) -> Any:
        return [space.to_dict() for space in self.spaces.list_spaces(_limit(args))]

    def _get_space(self, args: Arguments) -> Any:
        return self.spaces.get_space(_required(args, "spaceKey")).to_dict()

    def _get_space_content(self, args: Arguments) -> Any:
        items = self.spaces.get_space_content(
            _required(args, "spaceKey"), args.get("type") or "page", _limit(args)
        )
        return [item.to_dict() for item in items]

    # Search operations

    def _search(self, args: Arguments) -> Any:
        results = self.search.search(_required(args, "cql"), _limit(args))
        return [r.to_dict() for r in results]

    def _search_by_text(self, args: Arguments) -> Any:
        results = self.search.search_by_text(
            _required(args, "text"), args.get("spaceKey"), _limit(args)
        )
        return [r.to_dict() for r in results]

    def _search_by_title(self, args: Arguments) -> Any:
        results = self.search.search_by_title(
            _required(args, "title"), args.get("spaceKey"), _limit(args)
        )
        return [r.to_dict() for r in results]

    # Label operations

    def _get_page_labels(self, args: Arguments) -> Any:
        return [label.to_dict() for label in self.labels.get_labels(_required(args, "pageId"))]

    def _add_page_label(self, args: Arguments) -> Any:
        labels = self.labels.add_label(_required(args, "pageId"), _required(args, "labelName"))
        return [label.to_dict() for label in labels]

    def _remove_page_label(self, args: Arguments) -> Any:
        return self.labels.remove_label(_required(args, "pageId"), _required(args, "labelName"))

    def _manage_labels(self, args: Arguments) -> Any:
        labels = args.get("labels") or []
        if isinstance(labels, str):
            labels = [labels]
        return self.labels.manage_labels(
            _required(args, "pageId"), _required(args, "action"), labels
        ).to_dict()

    # Comment and attachment operations

    def _get_page_comments(self, args: Arguments) -> Any:
        comments = self.comments.get_comments(_required(args, "pageId"), _limit(args))
        return [comment.to_dict() for comment in comments]

    def _add_page_comment(self, args: Arguments) -> Any:
        return self.comments.add_comment(_required(args, "pageId"), _required(args, "content"))

    def _get_page_attachments(self, args: Arguments) -> Any:
        attachments = self.comments.get_attachments(_required(args, "pageId"), _limit(args))
        return [a.to_dict() for a in attachments]
