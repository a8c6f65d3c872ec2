# shelf/llm/tools.py
# coding: utf-8
"""
Tools for exposing subject lookups to an LLM (OpenAI function calling).

Provides:
  - build_tools_spec(): OpenAI "function" schema for tool-calling.
  - handle_tool_call(name, arguments_json): router to execute a tool call.

The tool result always has the same shape, and says whether the lookup
degraded, so the model can tell "no books" from "lookup failed".
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from shelf.catalog.openlibrary_client import OpenLibrarySettings
from shelf.catalog.subjects import extract_titles, fetch_subject

TOOL_NAME = "get_titles_by_subject"


def build_tools_spec() -> list:
    """Return OpenAI Chat Completions 'tools' spec for function calling."""
    return [
        {
            "type": "function",
            "function": {
                "name": TOOL_NAME,
                "description": "List book titles filed under a subject on Open Library.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "subject": {
                            "type": "string",
                            "description": "Subject key, e.g. 'fiction' or 'science_fiction'."
                        }
                    },
                    "required": ["subject"],
                    "additionalProperties": False
                },
            },
        }
    ]


def handle_tool_call(
    name: str,
    arguments_json: str,
    settings: Optional[OpenLibrarySettings] = None,
) -> Dict[str, Any]:
    """Dispatch a tool call by name and return a JSON-serializable result.

    Returns:
        { "subject": str, "titles": [str, ...], "count": int, "degraded": bool }
    """
    if name == TOOL_NAME:
        try:
            args = json.loads(arguments_json or "{}")
        except json.JSONDecodeError:
            raise ValueError(f"Invalid JSON arguments for {TOOL_NAME}")
        if not isinstance(args, dict):
            raise ValueError(f"Arguments for {TOOL_NAME} must be a JSON object.")
        subject = args.get("subject")
        if not isinstance(subject, str) or not subject.strip():
            raise ValueError("Argument 'subject' must be a non-empty string.")

        fetched = fetch_subject(subject.strip(), settings=settings)
        titles = extract_titles(fetched.payload)
        return {
            "subject": fetched.subject,
            "titles": titles,
            "count": len(titles),
            "degraded": fetched.degraded,
        }
    raise ValueError(f"Unknown tool: {name}")
