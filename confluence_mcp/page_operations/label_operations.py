"""Label operations for Confluence pages.

Confluence can add several labels in one request but removes them one at
a time. manage_labels mirrors that: a batch add succeeds or fails as a
whole, while a batch remove records each label's outcome separately and
keeps going after a failure.
"""

import logging
from typing import List, Sequence
from urllib.parse import quote

from ..confluence_client.api_wrapper import APIWrapper
from ..confluence_client.errors import ValidationError
from ..models import GLOBAL_PREFIX, Label
from .models import LabelAction, LabelBatchResult

logger = logging.getLogger(__name__)


class LabelOperations:
    """Reads and writes page labels (always with the "global" prefix)."""

    def __init__(self, api: APIWrapper):
        self.api = api

    def _label_path(self, page_id: str) -> str:
        return f"/wiki/rest/api/content/{quote(str(page_id), safe='')}/label"

    def get_labels(self, page_id: str) -> List[Label]:
        data = self.api.get(self._label_path(page_id)) or {}
        return [Label.from_api(item) for item in data.get('results') or []]

    def add_labels(self, page_id: str, label_names: Sequence[str]) -> List[Label]:
        """Add labels in a single request.

        Returns:
            The page's labels as reported by the server after the add
        """
        payload = [{"prefix": GLOBAL_PREFIX, "name": name} for name in label_names]
        data = self.api.post(self._label_path(page_id), payload) or {}
        return [Label.from_api(item) for item in data.get('results') or []]

    def add_label(self, page_id: str, label_name: str) -> List[Label]:
        return self.add_labels(page_id, [label_name])

    def remove_label(self, page_id: str, label_name: str) -> dict:
        self.api.delete(f"{self._label_path(page_id)}/{quote(label_name, safe='')}")
        return {"success": True}

    def manage_labels(
        self, page_id: str, action: str, label_names: Sequence[str]
    ) -> LabelBatchResult:
        """Add or remove several labels, collecting per-item failures.

        Args:
            page_id: Page to modify
            action: "add" or "remove"
            label_names: Non-empty list of label names

        Returns:
            LabelBatchResult; see its docstring for the error granularity
            of each action

        Raises:
            ValidationError: If label_names is empty or action is unknown
                             (no request is made)
        """
        if not label_names:
            raise ValidationError("label_names must contain at least one label")
        try:
            label_action = LabelAction(action)
        except ValueError:
            raise ValidationError(
                f"Invalid action '{action}'. Must be 'add' or 'remove'"
            )

        names = list(label_names)
        result = LabelBatchResult(page_id=page_id, action=label_action.value)

        if label_action is LabelAction.ADD:
            try:
                labels = self.add_labels(page_id, names)
                result.processed = [label.name for label in labels]
            except Exception as e:
                logger.warning(f"Adding labels {names} to page {page_id} failed: {e}")
                result.errors.append({"labels": names, "error": str(e)})
            return result

        for name in names:
            try:
                self.remove_label(page_id, name)
                result.processed.append(name)
            except Exception as e:
                logger.warning(f"Removing label '{name}' from page {page_id} failed: {e}")
                result.errors.append({"label": name, "error": str(e)})

        logger.info(
            f"Removed {len(result.processed)}/{len(names)} labels from page {page_id}"
        )
        return result
