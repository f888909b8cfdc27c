"""Unit tests for server.dispatcher module."""

import pytest
from unittest.mock import Mock

from confluence_mcp.confluence_client.errors import ApiError
from confluence_mcp.models import Label, Page, PageRef, PageSummary
from confluence_mcp.page_operations.models import LabelBatchResult, PageWithChildren
from confluence_mcp.server.dispatcher import ToolDispatcher, ToolResult
from confluence_mcp.server.tools import TOOL_NAMES, TOOLS
from tests.fixtures import page_response
from tests.helpers import make_response


@pytest.fixture
def dispatcher(api):
    """ToolDispatcher whose operation objects are Mocks."""
    d = ToolDispatcher(api)
    d.pages = Mock()
    d.labels = Mock()
    d.spaces = Mock()
    d.search = Mock()
    d.comments = Mock()
    return d


class TestToolResult:

    def test_success_dict(self):
        assert ToolResult(payload={"a": 1}).to_dict() == {"result": {"a": 1}}

    def test_error_dict(self):
        result = ToolResult(error="boom")
        assert result.is_error
        assert result.to_dict() == {"error": "boom", "is_error": True}


class TestRegistry:

    def test_every_declared_tool_has_a_handler(self, api):
        assert sorted(ToolDispatcher(api).tool_names) == sorted(TOOL_NAMES)

    def test_tool_names_are_unique(self):
        assert len(TOOL_NAMES) == len(set(TOOL_NAMES)) == 24

    def test_required_arguments_are_declared_properties(self):
        for tool in TOOLS:
            schema = tool.inputSchema
            assert set(schema["required"]) <= set(schema["properties"]), tool.name


class TestCall:
    """Test cases for ToolDispatcher.call."""

    def test_unknown_tool(self, dispatcher):
        result = dispatcher.call("confluence_nope", {})

        assert result.is_error
        assert result.error == "Unknown tool: confluence_nope"

    def test_missing_required_argument(self, dispatcher):
        result = dispatcher.call("confluence_get_page", {})

        assert result.is_error
        assert "pageId" in result.error
        dispatcher.pages.get_page.assert_not_called()

    def test_none_arguments(self, dispatcher):
        dispatcher.spaces.list_spaces.return_value = []

        result = dispatcher.call("confluence_list_spaces", None)

        assert not result.is_error
        dispatcher.spaces.list_spaces.assert_called_once_with(25)

    def test_operation_error_becomes_payload(self, dispatcher):
        dispatcher.pages.get_page.side_effect = ApiError(404, "No content found")

        result = dispatcher.call("confluence_get_page", {"pageId": "1"})

        assert result.is_error
        assert result.error == "Confluence API error (404): No content found"

    def test_unexpected_exception_is_caught(self, dispatcher):
        dispatcher.search.search.side_effect = RuntimeError("surprise")

        result = dispatcher.call("confluence_search", {"cql": "type=page"})

        assert result.error == "surprise"

    @pytest.mark.parametrize("limit", ["ten", 0, -5])
    def test_invalid_limit(self, dispatcher, limit):
        result = dispatcher.call("confluence_search", {"cql": "x", "limit": limit})

        assert result.is_error
        assert "limit" in result.error

    def test_end_to_end_through_real_operations(self, api):
        api._session.request.return_value = make_response(200, page_response())

        result = ToolDispatcher(api).call("confluence_get_page", {"pageId": "12345"})

        assert result.payload["id"] == "12345"
        assert result.payload["content_as_text"] == "Hello World"


class TestRouting:
    """Each tool forwards its arguments to the right operation."""

    def test_get_page(self, dispatcher):
        dispatcher.pages.get_page.return_value = Page(page_id="1", title="T")

        result = dispatcher.call("confluence_get_page", {"pageId": "1"})

        dispatcher.pages.get_page.assert_called_once_with("1")
        assert result.payload["id"] == "1"

    def test_get_page_content_defaults_to_text(self, dispatcher):
        dispatcher.pages.get_page_content.return_value = "body"

        result = dispatcher.call("confluence_get_page_content", {"pageId": "1"})

        dispatcher.pages.get_page_content.assert_called_once_with("1", "text")
        assert result.payload == "body"

    def test_get_child_pages(self, dispatcher):
        dispatcher.pages.get_child_pages.return_value = [PageSummary("2", "C", "current")]

        result = dispatcher.call("confluence_get_child_pages", {"parentId": "1"})

        assert result.payload == [{"id": "2", "title": "C", "status": "current"}]

    def test_get_child_pages_extended(self, dispatcher):
        dispatcher.pages.get_child_pages_extended.return_value = [
            PageSummary("2", "C", "current", parent_id="1", space_id="9")
        ]

        result = dispatcher.call("confluence_get_child_pages_extended", {"parentId": "1"})

        assert result.payload[0]["parent_id"] == "1"
        assert result.payload[0]["space_id"] == "9"

    def test_get_page_with_children(self, dispatcher):
        dispatcher.pages.get_page_with_children.return_value = PageWithChildren(
            parent=Page(page_id="1", title="P")
        )

        result = dispatcher.call(
            "confluence_get_page_with_children", {"pageId": "1", "includeFullBody": True}
        )

        dispatcher.pages.get_page_with_children.assert_called_once_with("1", True)
        assert result.payload["child_count"] == 0

    @pytest.mark.parametrize("flag,expected", [
        (None, False), (False, False), ("false", False), ("True", True),
    ])
    def test_get_page_with_children_flag_parsing(self, dispatcher, flag, expected):
        dispatcher.pages.get_page_with_children.return_value = PageWithChildren(
            parent=Page(page_id="1", title="P")
        )

        dispatcher.call(
            "confluence_get_page_with_children", {"pageId": "1", "includeFullBody": flag}
        )

        dispatcher.pages.get_page_with_children.assert_called_once_with("1", expected)

    def test_get_page_with_children_rejects_non_boolean_flag(self, dispatcher):
        result = dispatcher.call(
            "confluence_get_page_with_children", {"pageId": "1", "includeFullBody": "yes"}
        )

        assert result.is_error
        assert "includeFullBody" in result.error
        dispatcher.pages.get_page_with_children.assert_not_called()

    def test_create_page(self, dispatcher):
        dispatcher.pages.create_page.return_value = PageRef("5", "New", 1)

        dispatcher.call("confluence_create_page", {
            "spaceKey": "DEV", "title": "New", "content": "<p>x</p>", "parentId": "1",
        })

        dispatcher.pages.create_page.assert_called_once_with("DEV", "New", "<p>x</p>", "1")

    def test_update_page_converts_version(self, dispatcher):
        dispatcher.pages.update_page.return_value = PageRef("5", "T", 4)

        dispatcher.call("confluence_update_page", {
            "pageId": "5", "title": "T", "content": "<p>x</p>", "version": "3",
        })

        dispatcher.pages.update_page.assert_called_once_with("5", "T", "<p>x</p>", 3)

    def test_update_page_accepts_empty_body(self, dispatcher):
        dispatcher.pages.update_page.return_value = PageRef("1", "T", 4)

        result = dispatcher.call("confluence_update_page", {
            "pageId": "1", "title": "T", "content": "", "version": 3,
        })

        assert not result.is_error
        dispatcher.pages.update_page.assert_called_once_with("1", "T", "", 3)

    def test_create_page_accepts_empty_body(self, dispatcher):
        dispatcher.pages.create_page.return_value = PageRef("5", "New", 1)

        result = dispatcher.call(
            "confluence_create_page", {"spaceKey": "DEV", "title": "New", "content": ""}
        )

        assert not result.is_error
        dispatcher.pages.create_page.assert_called_once_with("DEV", "New", "", None)

    def test_update_page_missing_body_is_rejected(self, dispatcher):
        result = dispatcher.call(
            "confluence_update_page", {"pageId": "1", "title": "T", "version": 3}
        )

        assert result.error == "Missing required argument 'content'"
        dispatcher.pages.update_page.assert_not_called()

    def test_update_page_bad_version(self, dispatcher):
        result = dispatcher.call("confluence_update_page", {
            "pageId": "5", "title": "T", "content": "<p>x</p>", "version": "latest",
        })

        assert result.is_error
        dispatcher.pages.update_page.assert_not_called()

    def test_update_page_auto_version(self, dispatcher):
        dispatcher.pages.update_page_auto.return_value = PageRef("5", "T", 4)

        dispatcher.call("confluence_update_page_auto_version", {"pageId": "5", "content": "<p>x</p>"})

        dispatcher.pages.update_page_auto.assert_called_once_with("5", None, "<p>x</p>")

    def test_move_page(self, dispatcher):
        dispatcher.pages.move_page.return_value = PageRef("5", "T", 4, parent_id="9")

        result = dispatcher.call("confluence_move_page", {"pageId": "5", "newParentId": "9"})

        dispatcher.pages.move_page.assert_called_once_with("5", "9")
        assert result.payload["parent_id"] == "9"

    def test_delete_page(self, dispatcher):
        dispatcher.pages.delete_page.return_value = {"success": True, "deleted_page_id": "5"}

        result = dispatcher.call("confluence_delete_page", {"pageId": "5"})

        assert result.payload == {"success": True, "deleted_page_id": "5"}

    def test_get_space_content(self, dispatcher):
        dispatcher.spaces.get_space_content.return_value = []

        dispatcher.call("confluence_get_space_content", {"spaceKey": "DEV", "type": "blogpost", "limit": 5})

        dispatcher.spaces.get_space_content.assert_called_once_with("DEV", "blogpost", 5)

    def test_get_space(self, dispatcher):
        dispatcher.call("confluence_get_space", {"spaceKey": "DEV"})

        dispatcher.spaces.get_space.assert_called_once_with("DEV")

    def test_search_by_text(self, dispatcher):
        dispatcher.search.search_by_text.return_value = []

        dispatcher.call("confluence_search_by_text", {"text": "report", "spaceKey": "DEV"})

        dispatcher.search.search_by_text.assert_called_once_with("report", "DEV", 25)

    def test_search_by_title(self, dispatcher):
        dispatcher.search.search_by_title.return_value = []

        dispatcher.call("confluence_search_by_title", {"title": "Weekly", "limit": "10"})

        dispatcher.search.search_by_title.assert_called_once_with("Weekly", None, 10)

    def test_labels(self, dispatcher):
        dispatcher.labels.get_labels.return_value = [Label("a")]
        dispatcher.labels.add_label.return_value = [Label("a"), Label("b")]
        dispatcher.labels.remove_label.return_value = {"success": True}

        assert dispatcher.call("confluence_get_page_labels", {"pageId": "1"}).payload == [
            {"name": "a", "prefix": "global"}
        ]
        assert len(dispatcher.call(
            "confluence_add_page_label", {"pageId": "1", "labelName": "b"}
        ).payload) == 2
        assert dispatcher.call(
            "confluence_remove_page_label", {"pageId": "1", "labelName": "a"}
        ).payload == {"success": True}

    def test_manage_labels_accepts_single_string(self, dispatcher):
        dispatcher.labels.manage_labels.return_value = LabelBatchResult("1", "add", ["a"])

        result = dispatcher.call(
            "confluence_manage_labels", {"pageId": "1", "action": "add", "labels": "a"}
        )

        dispatcher.labels.manage_labels.assert_called_once_with("1", "add", ["a"])
        assert result.payload["processed"] == ["a"]

    def test_manage_labels_partial_failure_is_not_a_tool_error(self, dispatcher):
        dispatcher.labels.manage_labels.return_value = LabelBatchResult(
            "1", "remove", ["y"], [{"label": "x", "error": "not found"}]
        )

        result = dispatcher.call(
            "confluence_manage_labels", {"pageId": "1", "action": "remove", "labels": ["x", "y"]}
        )

        assert not result.is_error
        assert result.payload["errors"] == [{"label": "x", "error": "not found"}]

    def test_comments_and_attachments(self, dispatcher):
        dispatcher.comments.get_comments.return_value = []
        dispatcher.comments.add_comment.return_value = {"id": "c1"}
        dispatcher.comments.get_attachments.return_value = []

        dispatcher.call("confluence_get_page_comments", {"pageId": "1"})
        result = dispatcher.call("confluence_add_page_comment", {"pageId": "1", "content": "<p>hi</p>"})
        dispatcher.call("confluence_get_page_attachments", {"pageId": "1", "limit": 3})

        dispatcher.comments.get_comments.assert_called_once_with("1", 25)
        dispatcher.comments.add_comment.assert_called_once_with("1", "<p>hi</p>")
        dispatcher.comments.get_attachments.assert_called_once_with("1", 3)
        assert result.payload == {"id": "c1"}

    def test_extract_done_sections(self, dispatcher):
        dispatcher.call("confluence_extract_done_sections", {"pageId": "1"})

        dispatcher.pages.extract_done_sections.assert_called_once_with("1")
