"""
Tests for the YAML page manifest loader and the publish script.
"""

from unittest.mock import Mock

import pytest

from confluence_client import ManifestEntry, Page, RemoteError, load_page_manifest
from confluence_client.content import Links, Version
from scripts.publish_pages import publish_entry


def write_manifest(tmp_path, text):
    path = tmp_path / "pages.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadPageManifest:
    """Test suite for load_page_manifest."""

    def test_loads_entries_in_order(self, tmp_path):
        (tmp_path / "notes.html").write_text("<p>Notes</p>", encoding="utf-8")
        path = write_manifest(
            tmp_path,
            """
space_key: DOC
pages:
  - title: Release notes
    body_file: notes.html
    ancestor: 12345
  - title: Runbook
    page_id: "67890"
    body: "<p>Restart</p>"
  - title: Empty
""",
        )

        manifest = load_page_manifest(path)

        assert manifest.space_key == "DOC"
        assert [e.title for e in manifest.pages] == ["Release notes", "Runbook", "Empty"]
        notes, runbook, empty = manifest.pages
        assert notes.body == "<p>Notes</p>"
        assert notes.ancestor == 12345
        assert not notes.is_update
        assert runbook.page_id == 67890
        assert runbook.is_update
        assert empty.body is None

    def test_path_from_env(self, tmp_path, monkeypatch):
        path = write_manifest(tmp_path, "space_key: OPS\npages: []\n")
        monkeypatch.setenv("CONFLUENCE_PAGE_MANIFEST", str(path))

        manifest = load_page_manifest()

        assert manifest.space_key == "OPS"
        assert manifest.pages == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_page_manifest(tmp_path / "nope.yaml")

    def test_missing_space_key(self, tmp_path):
        path = write_manifest(tmp_path, "pages: []\n")

        with pytest.raises(ValueError, match="space_key"):
            load_page_manifest(path)

    def test_missing_title(self, tmp_path):
        path = write_manifest(tmp_path, "space_key: DOC\npages:\n  - body: x\n")

        with pytest.raises(ValueError, match="title"):
            load_page_manifest(path)

    def test_body_and_body_file_conflict(self, tmp_path):
        path = write_manifest(
            tmp_path, "space_key: DOC\npages:\n  - title: A\n    body: x\n    body_file: a.html\n"
        )

        with pytest.raises(ValueError, match="either body or body_file"):
            load_page_manifest(path)

    def test_bad_page_id(self, tmp_path):
        path = write_manifest(tmp_path, "space_key: DOC\npages:\n  - title: A\n    page_id: abc\n")

        with pytest.raises(ValueError, match="page_id"):
            load_page_manifest(path)


class TestPublishEntry:
    """Test the create-or-update step of the publish script."""

    def _page(self, page_id, version):
        return Page(
            id=page_id,
            title="T",
            status="current",
            links=Links(self_link=f"https://x/{page_id}"),
            version=Version(number=version),
        )

    def test_update_sends_next_version(self):
        session = Mock()
        session.get_page_by_id.return_value = self._page("5", 3)
        session.update_page.return_value = self._page("5", 4)

        page = publish_entry(session, "DOC", ManifestEntry(title="T", body="B", page_id=5))

        session.update_page.assert_called_once_with("DOC", 5, 4, "T", "B")
        assert page.version.number == 4

    def test_create_uses_ancestor(self):
        session = Mock()
        session.add_new_page.return_value = self._page("9", 1)

        publish_entry(session, "DOC", ManifestEntry(title="New", body=None, ancestor=7))

        session.add_new_page.assert_called_once_with("DOC", 7, "New", None)
        session.get_page_by_id.assert_not_called()

    def test_conflict_propagates(self):
        session = Mock()
        session.get_page_by_id.return_value = self._page("5", 3)
        session.update_page.side_effect = RemoteError("conflict", status_code=409, response_body="stale")

        with pytest.raises(RemoteError):
            publish_entry(session, "DOC", ManifestEntry(title="T", page_id=5))

        assert session.update_page.call_count == 1
