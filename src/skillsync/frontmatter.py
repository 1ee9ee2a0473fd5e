"""Frontmatter parsing and emission for skill and rule templates.

Templates start with a small metadata block fenced by ``---`` lines::

    ---
    name: foo
    langs:
      - typescript
    ---
    Body text...

Only a narrow dialect is understood: ``key: value`` scalars and indented
``- item`` lists under the preceding key. Anything else inside the block is
ignored, and a file whose block is not closed is treated as all body.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Iterable, Union

FrontmatterValue = Union[str, list[str]]
Metadata = dict[str, FrontmatterValue]

DELIMITER = "---"

_BLOCK_RE = re.compile(r"\A---\n(?:(.*?)\n)?---\n(.*)\Z", re.DOTALL)
_LIST_ITEM_RE = re.compile(r"^\s+-\s+(.+)$")
_KEY_VALUE_RE = re.compile(r"^(\w[\w-]*):\s*(.*)$")


class _ScanState(Enum):
    SCALAR = "scalar"
    LIST = "list"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


def _parse_block(block: str) -> Metadata:
    data: Metadata = {}
    current_key = ""
    state = _ScanState.SCALAR
    items: list[str] = []

    for line in block.split("\n"):
        item = _LIST_ITEM_RE.match(line)
        if item and current_key:
            state = _ScanState.LIST
            items.append(_unquote(item.group(1).strip()))
            continue

        if state is _ScanState.LIST:
            data[current_key] = list(items)
            items.clear()
            state = _ScanState.SCALAR

        key_value = _KEY_VALUE_RE.match(line)
        if key_value:
            current_key = key_value.group(1)
            value = key_value.group(2).strip()
            if value:
                data[current_key] = _unquote(value)

    if state is _ScanState.LIST:
        data[current_key] = list(items)

    return data


def parse_frontmatter(text: str) -> tuple[Metadata, str]:
    """Split ``text`` into its metadata mapping and body.

    Returns ``({}, text)`` when the text has no well-formed block. Never
    raises on malformed input.
    """
    match = _BLOCK_RE.match(text)
    if not match:
        return {}, text
    block, body = match.group(1), match.group(2)
    return _parse_block(block or ""), body


def read_frontmatter(path: Path) -> tuple[Metadata, str]:
    """Read ``path`` as UTF-8 and parse its frontmatter.

    Undecodable bytes become U+FFFD rather than failing the read.
    """
    return parse_frontmatter(path.read_text(encoding="utf-8", errors="replace"))


def extract_field(text: str, key: str) -> str:
    """Return the first ``key: value`` line anywhere in ``text`` (or "")."""
    match = re.search(rf"^{re.escape(key)}:[ \t]*(.+)$", text, re.MULTILINE)
    return match.group(1).strip() if match else ""


def _list_lines(key: str, items: Iterable[str], quoted: bool) -> list[str]:
    lines = [f"{key}:"]
    for item in items:
        lines.append(f'  - "{item}"' if quoted else f"  - {item}")
    return lines


def build_rule_frontmatter(
    description: str,
    *,
    root: bool = False,
    globs: Iterable[str] | None = None,
    targets: Iterable[str] | None = None,
) -> str:
    """Emit a rule frontmatter block in the order the generator expects.

    ``root``, ``description``, ``globs`` (double quoted) and ``targets``
    (bare), fenced by delimiter lines. No trailing newline.
    """
    lines = [DELIMITER]
    if root:
        lines.append("root: true")
    lines.append(f"description: {description}")
    if globs is not None:
        lines.extend(_list_lines("globs", globs, quoted=True))
    if targets is not None:
        lines.extend(_list_lines("targets", targets, quoted=False))
    lines.append(DELIMITER)
    return "\n".join(lines)


def serialize_rule(
    description: str,
    body: str,
    *,
    root: bool = False,
    globs: Iterable[str] | None = None,
    targets: Iterable[str] | None = None,
) -> str:
    """Return a full rule document: frontmatter, newline, body."""
    frontmatter = build_rule_frontmatter(description, root=root, globs=globs, targets=targets)
    return f"{frontmatter}\n{body}"


def inject_targets(text: str, targets: Iterable[str]) -> str:
    """Append a ``targets:`` list to the metadata block of ``text``.

    Existing metadata lines and the body are kept as they are. Text without a
    block gets a new block holding only the targets.
    """
    target_lines = "\n".join(_list_lines("targets", targets, quoted=False))
    match = _BLOCK_RE.match(text)
    if not match:
        return f"{DELIMITER}\n{target_lines}\n{DELIMITER}\n{text}"

    block, body = match.group(1), match.group(2)
    if block is None:
        return f"{DELIMITER}\n{target_lines}\n{DELIMITER}\n{body}"
    return f"{DELIMITER}\n{block}\n{target_lines}\n{DELIMITER}\n{body}"


__all__ = [
    "DELIMITER",
    "FrontmatterValue",
    "Metadata",
    "build_rule_frontmatter",
    "extract_field",
    "inject_targets",
    "parse_frontmatter",
    "read_frontmatter",
    "serialize_rule",
]
