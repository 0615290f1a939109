"""Parse and edit task and index markdown documents.

Edits work on lists of lines so anything outside the touched range is
written back exactly as it was read.
"""

import re

from mdkanban.frontmatter import (
    FrontmatterValue,
    apply_frontmatter_updates,
    build_frontmatter_block,
    parse_frontmatter,
    split_frontmatter,
    split_lines,
)
from mdkanban.models import DEFAULT_COLUMNS, TASKS_DIR, ParsedIndex, ParsedTask

_TASK_LINK = re.compile(r"^- \[[^\]]+\]\(" + TASKS_DIR + r"/([^)]+)\)")


def _is_fence(line: str) -> bool:
    return line.startswith("```")


def _is_h1(line: str) -> bool:
    return line.startswith("# ")


def _is_h2(line: str) -> bool:
    return line.startswith("## ")


# --- Task documents ---


def parse_task(content: str) -> ParsedTask:
    """Parse a task file into frontmatter, title and description.

    The first ``# `` heading in the body is the title; everything after it,
    trimmed, is the description. Missing pieces fall back to empty values.
    """
    frontmatter_lines, body = split_frontmatter(content)
    task = ParsedTask(frontmatter=parse_frontmatter(frontmatter_lines))

    description_lines: list[str] = []
    found_title = False
    for line in split_lines(body):
        if not found_title and _is_h1(line):
            task.title = line[2:].strip()
            found_title = True
            continue
        if found_title:
            description_lines.append(line)

    task.description = "\n".join(description_lines).strip()
    return task


def build_task_body(title: str, content: str = "") -> str:
    """Render the ``# title`` heading followed by the body, if any."""
    content = content.strip()
    if content:
        return f"# {title}\n\n{content}"
    return f"# {title}"


def build_task_file(frontmatter_lines: list[str], body: str) -> str:
    """Assemble a complete task document."""
    return f"{build_frontmatter_block(frontmatter_lines)}\n\n{body}\n"


def serialize_task(
    content: str,
    updates: dict[str, FrontmatterValue | None],
    title: str | None = None,
    body: str = "",
) -> str:
    """Apply frontmatter updates to a task document.

    With a non-empty title, the heading and body are regenerated from title
    and body. Without one, the original body is kept and only the
    frontmatter changes.
    """
    frontmatter_lines, original_body = split_frontmatter(content)
    frontmatter_lines = apply_frontmatter_updates(frontmatter_lines, updates)

    if not title:
        new_body = original_body.strip()
    else:
        new_body = build_task_body(title, body)
    return build_task_file(frontmatter_lines, new_body)


# --- Index documents ---


def task_link(name: str) -> str:
    """The index line that references a task."""
    return f"- [{name}]({TASKS_DIR}/{name}.md)"


def parse_index(content: str) -> ParsedIndex:
    """Parse the board index into a title and ordered task names per column.

    The canonical columns are always present in the result, after any
    columns the document defines.
    """
    frontmatter_lines, body = split_frontmatter(content)
    index = ParsedIndex()
    current: str | None = None
    in_fence = False

    for line in split_lines(body):
        if _is_fence(line):
            in_fence = not in_fence
        if in_fence:
            continue
        if _is_h1(line):
            index.title = line[2:].strip()
        elif _is_h2(line):
            current = line[3:].strip()
            index.columns.setdefault(current, [])
        elif current is not None:
            match = _TASK_LINK.match(line)
            if match:
                name = match.group(1)
                if name.endswith(".md"):
                    name = name[:-3]
                index.columns[current].append(name)

    for column in DEFAULT_COLUMNS:
        index.columns.setdefault(column, [])
    return index


def find_column_range(lines: list[str], column: str) -> tuple[int, int] | None:
    """Locate [heading, next heading) for a column, or None if absent."""
    current: str | None = None
    start = -1
    in_fence = False

    for i, line in enumerate(lines):
        if _is_fence(line):
            in_fence = not in_fence
        if in_fence or not _is_h2(line):
            continue
        if current == column:
            return start, i
        current = line[3:].strip()
        start = i

    if current == column:
        return start, len(lines)
    return None


def remove_task_link(lines: list[str], name: str, column: str) -> bool:
    """Remove the first link to name inside column. Returns whether one was removed."""
    span = find_column_range(lines, column)
    if span is None:
        return False
    start, end = span
    target = task_link(name)
    for i in range(start + 1, end):
        if lines[i].strip() == target:
            del lines[i]
            return True
    return False


def insert_task_link(lines: list[str], name: str, column: str) -> None:
    """Append a link to name at the end of column.

    A single blank line before the next heading is kept after the new link.
    A column with no heading yet gets one at the end of the document.
    """
    span = find_column_range(lines, column)
    if span is None:
        while lines and lines[-1].strip() == "":
            lines.pop()
        lines.extend(["", f"## {column}", "", task_link(name), ""])
        return

    start, end = span
    insert_at = end
    if insert_at > start + 1 and lines[insert_at - 1].strip() == "":
        insert_at -= 1
    lines.insert(insert_at, task_link(name))


def move_task_link(content: str, name: str, from_column: str, to_column: str) -> str:
    """Move a task's link from one column to another."""
    lines = split_lines(content)
    remove_task_link(lines, name, from_column)
    insert_task_link(lines, name, to_column)
    return "\n".join(lines)


def add_task_link(content: str, name: str, column: str) -> str:
    """Add a task's link to the end of a column."""
    lines = split_lines(content)
    insert_task_link(lines, name, column)
    return "\n".join(lines)


def build_index(title: str, columns=DEFAULT_COLUMNS) -> str:
    """Render a fresh index with empty columns."""
    parts = [f"# {title}", ""]
    for column in columns:
        parts.append(f"## {column}")
        parts.append("")
    return "\n".join(parts)
