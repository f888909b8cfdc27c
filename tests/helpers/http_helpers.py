"""Helpers for faking HTTP traffic in unit tests."""

from unittest.mock import Mock


def make_response(status_code=200, json_data=None, text=""):
    """Create a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = json_data
    return response


def requested_urls(session):
    """Return the URLs passed to a mocked Session.request, in call order."""
    return [c.args[1] for c in session.request.call_args_list]
