# src/todo_console/tasks/task_codec.py

"""
Line codec for the flat task file.

Format (one task per line, no header, no quoting):
    <id>,<title>,<category>,<done:0|1>,<created_at>

Escaping is destructive substitution: newlines become spaces and commas
become semicolons. A decoded ';' cannot be told apart from an original ','.
Existing files depend on this, so it is kept as is.
"""

from __future__ import annotations

from .task_models import Task

DELIMITER = ","
DELIMITER_SUBSTITUTE = ";"
FIELD_COUNT = 5

_ESCAPES = str.maketrans({"\n": " ", "\r": " ", DELIMITER: DELIMITER_SUBSTITUTE})


def encode_field(text: str) -> str:
    return text.translate(_ESCAPES)


def encode_record(task: Task) -> str:
    """Render one task as a line (without the trailing newline)."""
    return DELIMITER.join(
        (
            str(task.id),
            encode_field(task.title),
            encode_field(task.category),
            "1" if task.done else "0",
            encode_field(task.created_at),
        )
    )


def decode_line(line: str) -> Task | None:
    """
    Parse one line into a Task.

    Returns None for lines that should be skipped:
    - blank lines
    - fewer than five fields
    - id that is not an integer

    Fields past the fifth are ignored. Done is True only for the literal "1".
    """
    line = line.rstrip("\r\n")
    if not line:
        return None

    parts = line.split(DELIMITER)
    if len(parts) < FIELD_COUNT:
        return None

    try:
        task_id = int(parts[0])
    except ValueError:
        return None

    return Task(
        id=task_id,
        title=parts[1],
        category=parts[2],
        done=parts[3] == "1",
        created_at=parts[4],
    )
