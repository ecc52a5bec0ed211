"""Pydantic argument types for MCP tool validation.

FastMCP builds each tool's argument model from its signature, so these
annotated types carry the field descriptions and constraints advertised in
the JSON schema. Missing or non-string arguments are rejected by pydantic
before a tool body runs.

Arguments are plain strings used verbatim: note identifiers get ``.md``
appended, file paths do not.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

NoteName = Annotated[
    str,
    Field(
        description=(
            "Note identifier (path without .md extension). "
            "Examples: 'Daily Notes/2025-10-27', 'Projects/New Project'. "
            "Forward slashes for folders, case-sensitive."
        ),
        examples=["Daily Notes/2025-10-27", "README"],
    ),
]

NoteContent = Annotated[
    str,
    Field(description="Full markdown content for the note. Replaces any existing content."),
]

DirPath = Annotated[
    str,
    Field(
        description=(
            "Folder path relative to the vault root. "
            "Use an empty string for the vault root itself."
        ),
        examples=["Projects", "Daily Notes/2025"],
    ),
]

FilePath = Annotated[
    str,
    Field(
        description=(
            "File path relative to the vault root, including its extension. "
            "Example: 'Projects/todo.md'."
        ),
        examples=["Projects/todo.md", "inbox.md"],
    ),
]

AppendText = Annotated[
    str,
    Field(description="Text appended verbatim to the end of the file. No separator is added."),
]

SearchQuery = Annotated[
    str,
    Field(
        description=(
            "Literal, case-sensitive text to look for in note contents. "
            "Only notes in the vault root are searched."
        ),
        examples=["TODO", "meeting"],
    ),
]
