"""Front-matter rendering and output file persistence."""

from pathlib import Path
from typing import Union

from doccrawl.config import FRONTMATTER_DESCRIPTION_MAX_LENGTH


def _escape_yaml(value: str) -> str:
    """Escape characters that would break inline double-quoted YAML strings."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def make_frontmatter(title: str, description: str) -> str:
    """Return the front-matter block (without trailing blank line)."""
    description = description[:FRONTMATTER_DESCRIPTION_MAX_LENGTH]
    lines = [
        "---",
        f'title: "{_escape_yaml(title)}"',
        f'description: "{_escape_yaml(description)}"',
        "---",
    ]
    return "\n".join(lines)


def render_document(title: str, description: str, markdown: str) -> str:
    return f"{make_frontmatter(title, description)}\n\n{markdown}"


def write_page(
    path: Union[str, Path],
    title: str,
    description: str,
    markdown: str,
) -> Path:
    """Write a rendered document to *path*, replacing any existing file.

    Missing parent directories are created. Filesystem errors propagate.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_document(title, description, markdown), encoding="utf-8")
    return path
