"""Line-oriented codec for the key/value block at the top of a document.

Values are either scalars (str, int, float) or lists of strings. Updates are
spliced into the existing lines by key range, so keys that are not touched
keep their original text.
"""

import json
import math
import re
from decimal import Decimal

FrontmatterValue = str | int | float | list[str]

DELIMITER = "---"

_KEY_LINE = re.compile(r"^([A-Za-z0-9_-]+):\s*(.*)$")
_KEY_START = re.compile(r"^([A-Za-z0-9_-]+):")
_NEEDS_QUOTES = re.compile(r"[:#\s]")
_NEWLINE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split text on LF or CRLF, keeping a trailing empty line."""
    return _NEWLINE.split(text)


def split_frontmatter(content: str) -> tuple[list[str], str]:
    """Split content into (frontmatter lines, body).

    Frontmatter starts with a first line of exactly ``---`` and ends at the
    next such line. Without both delimiters the whole content is body.
    """
    lines = split_lines(content)
    if lines[0].strip() != DELIMITER:
        return [], content

    for i in range(1, len(lines)):
        if lines[i].strip() == DELIMITER:
            return lines[1:i], "\n".join(lines[i + 1 :])

    return [], content


def unquote(value: str) -> str:
    """Strip one pair of matching single or double quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def format_number(value: int | float) -> str:
    """Render a finite number in its shortest canonical decimal form.

    Plain digits between 1e-7 and 1e21, exponent form outside that range:
    100.0 -> "100", 1e-05 -> "0.00001", 1e-07 -> "1e-7", 1e21 -> "1e+21".
    """
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)
    value = float(value)
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)

    _sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return "0." + "0" * -n + digits
    e = n - 1
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def coerce_number(text: str) -> int | float | None:
    """Return text as a number only if the number renders back to text exactly.

    "42" -> 42, "2.5" -> 2.5, "0.00001" -> 1e-05, but "007", "1.0", "+3",
    "inf" and integers too large to hold exactly stay strings.
    """
    try:
        real = float(text)
    except ValueError:
        return None
    if not math.isfinite(real) or format_number(real) != text:
        return None
    return int(real) if real.is_integer() else real


def parse_frontmatter(lines: list[str]) -> dict[str, FrontmatterValue]:
    """Parse frontmatter lines into a dict of scalars and lists."""
    data: dict[str, FrontmatterValue] = {}
    current_key: str | None = None

    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("- "):
            if current_key is not None and isinstance(data[current_key], list):
                data[current_key].append(unquote(stripped[2:]))
            continue

        match = _KEY_LINE.match(line)
        if not match:
            # Stray text never continues the previous key
            current_key = None
            continue

        key, value = match.group(1), match.group(2).strip()
        current_key = key
        if value in ("", "[]"):
            data[key] = []
        else:
            text = unquote(value)
            number = coerce_number(text)
            data[key] = text if number is None else number

    return data


def format_scalar(value: str | int | float) -> str:
    """Render a scalar the way it should appear after ``key: ``."""
    if isinstance(value, (int, float)):
        return format_number(value)
    if value == "":
        return '""'
    if _NEEDS_QUOTES.search(value):
        return json.dumps(value, ensure_ascii=False)
    return value


def render_frontmatter(values: dict[str, FrontmatterValue | None]) -> list[str]:
    """Render values as frontmatter lines, in dict order. None values are skipped."""
    lines: list[str] = []
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, list):
            if not value:
                lines.append(f"{key}: []")
            else:
                lines.append(f"{key}:")
                lines.extend(f"  - {item}" for item in value)
            continue
        lines.append(f"{key}: {format_scalar(value)}")
    return lines


def find_key_range(lines: list[str], key: str) -> tuple[int, int] | None:
    """Locate [start, end) for key: its key line plus any list items below it.

    Blank lines between items belong to the range, as the parser reads past
    them. Blank lines after the last item do not.
    """
    for i, line in enumerate(lines):
        match = _KEY_START.match(line)
        if not match or match.group(1) != key:
            continue
        end = i + 1
        scan = end
        while scan < len(lines):
            stripped = lines[scan].strip()
            if stripped.startswith("- "):
                end = scan + 1
            elif stripped:
                break
            scan += 1
        return i, end
    return None


def apply_frontmatter_updates(lines: list[str], updates: dict[str, FrontmatterValue | None]) -> list[str]:
    """Return a copy of lines with each updated key spliced in place.

    Keys not present yet are appended. Every other line is left as it was.
    """
    updated = list(lines)
    for key, value in updates.items():
        replacement = render_frontmatter({key: value})
        if not replacement:
            continue
        span = find_key_range(updated, key)
        if span is None:
            updated.extend(replacement)
        else:
            start, end = span
            updated[start:end] = replacement
    return updated


def build_frontmatter_block(lines: list[str]) -> str:
    """Wrap frontmatter lines in ``---`` delimiters."""
    return "\n".join([DELIMITER, *lines, DELIMITER])
