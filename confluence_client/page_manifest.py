"""
Page manifest loader.

Loads the set of pages to publish from a YAML file used by
``scripts/publish_pages.py``. Path is read from CONFLUENCE_PAGE_MANIFEST or
defaults to pages.yaml.

The YAML file should have structure:

    space_key: DOC
    pages:
      - title: "Release notes"
        body_file: release-notes.html   # relative to the manifest
        ancestor: 12345                 # optional parent page id
      - title: "Runbook"
        page_id: 67890                  # present: update instead of create
        body: "<p>Restart the service.</p>"
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import yaml


@dataclass
class ManifestEntry:
    """
    One page to publish.

    Attributes:
        title: Page title.
        body: Page content in storage format, or None to publish without a body.
        ancestor: Optional parent page id, used on create only.
        page_id: Id of an existing page to update; None means create.
    """

    title: str
    body: Optional[str] = None
    ancestor: Optional[int] = None
    page_id: Optional[int] = None

    @property
    def is_update(self) -> bool:
        return self.page_id is not None


@dataclass
class PageManifest:
    space_key: str
    pages: List[ManifestEntry] = field(default_factory=list)


def _optional_int(value, what: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be a page id number, got {value!r}") from None


def _load_entry(raw, index: int, base_dir: Path) -> ManifestEntry:
    if not isinstance(raw, dict):
        raise ValueError(f"pages[{index}] must be a mapping")
    title = raw.get("title")
    if not title:
        raise ValueError(f"pages[{index}] is missing a title")
    if "body" in raw and "body_file" in raw:
        raise ValueError(f"pages[{index}] ({title}): use either body or body_file, not both")

    body = raw.get("body")
    if raw.get("body_file"):
        body_path = Path(raw["body_file"])
        if not body_path.is_absolute():
            body_path = base_dir / body_path
        body = body_path.read_text(encoding="utf-8")

    return ManifestEntry(
        title=str(title),
        body=body,
        ancestor=_optional_int(raw.get("ancestor"), f"pages[{index}].ancestor"),
        page_id=_optional_int(raw.get("page_id"), f"pages[{index}].page_id"),
    )


def load_page_manifest(path: Optional[Union[str, Path]] = None) -> PageManifest:
    """
    Load a page manifest from YAML.

    Args:
        path: Path to YAML file. If None, uses env CONFLUENCE_PAGE_MANIFEST or
              default "pages.yaml" in the current working directory.

    Returns:
        PageManifest with the pages in file order.

    Raises:
        FileNotFoundError: If the manifest or a referenced body_file does not exist.
        ValueError: If the file is empty or malformed.
    """
    if path is None:
        path = os.getenv("CONFLUENCE_PAGE_MANIFEST", "pages.yaml")
    path = Path(path)
    if not path.is_absolute():
        path = Path.cwd() / path

    if not path.exists():
        raise FileNotFoundError(f"Page manifest not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or not isinstance(data, dict):
        raise ValueError(f"Page manifest is empty or not a mapping: {path}")

    space_key = data.get("space_key")
    if not space_key:
        raise ValueError(f"Page manifest has no space_key: {path}")

    raw_pages = data.get("pages") or []
    if not isinstance(raw_pages, list):
        raise ValueError("pages must be a list")

    entries = [_load_entry(raw, i, path.parent) for i, raw in enumerate(raw_pages)]
    return PageManifest(space_key=str(space_key), pages=entries)
