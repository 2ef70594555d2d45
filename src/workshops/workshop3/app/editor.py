"""Quill rich-text editor configuration passed to the page editor."""

from __future__ import annotations

import json
from typing import Any

QUILL_CONFIG: dict[str, Any] = {
    "theme": "snow",
    "modules": {
        "toolbar": [
            [{"header": [1, 2, False]}],
            ["bold", "italic", "underline"],
            ["link", "blockquote"],
            [{"list": "ordered"}, {"list": "bullet"}],
            [{"indent": "-1"}, {"indent": "+1"}],
            ["clean"],
        ]
    },
}


def quill_config_json() -> str:
    return json.dumps(QUILL_CONFIG)


def editor_context(editor: str | None, **extra: Any) -> dict[str, Any]:
    """Template context for the page editor in Markdown or Quill mode."""

    use_quill = editor == "quill"
    return {
        "title": "Create a page",
        "errors": {},
        "form": {},
        "editor": "quill" if use_quill else "markdown",
        "quill_config": quill_config_json(),
        **extra,
    }
