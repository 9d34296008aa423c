"""Loading the URL manifest and resolving page URLs against its base URL."""

import json
from pathlib import Path
from typing import Union

from doccrawl.models.manifest import Manifest


def load_manifest(path: Union[str, Path]) -> Manifest:
    """Read and validate the JSON manifest at *path*.

    Raises:
        OSError: if the file cannot be read.
        json.JSONDecodeError: if the file is not valid JSON.
        pydantic.ValidationError: if the JSON does not match the manifest schema.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return Manifest.model_validate(raw)


def resolve_url(url: str, base_url: str) -> str:
    """Return *url* unchanged when it starts with ``http``, else prefix *base_url*.

    Plain concatenation: protocol-relative (``//host/x``) and ``../`` paths are
    not resolved.
    """
    if url.startswith("http"):
        return url
    return f"{base_url}{url}"
