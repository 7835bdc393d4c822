# apps/publishing/frontmatter.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

DELIMITER = "---"


class FrontMatterError(ValueError):
    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def split_front_matter(text: str, *, path: Optional[Path] = None) -> Tuple[Dict[str, Any], str]:
    """
    Sépare l'en-tête YAML (entre deux lignes ``---``) du corps de la page.
    Retourne ``({}, text)`` si la page n'a pas d'en-tête.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != DELIMITER:
        return {}, text

    for idx in range(1, len(lines)):
        if lines[idx].strip() == DELIMITER:
            header = "".join(lines[1:idx])
            body = "".join(lines[idx + 1:])
            break
    else:
        raise FrontMatterError("front matter opened with '---' but never closed", path=path)

    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"invalid YAML front matter ({exc})", path=path) from exc

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"front matter must be a mapping, got {type(data).__name__}", path=path
        )
    return data, body
