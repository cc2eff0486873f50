"""
Publish pages listed in a YAML manifest to Confluence.

Loads pages.yaml (or CONFLUENCE_PAGE_MANIFEST, or the path given as first
argument), creates every page without a page_id and updates every page with
one. Updates read the current version first and send version + 1; if someone
edits the page in between, the server rejects the update and the page is
reported as failed (nothing is retried).
"""

import logging
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from confluence_client import (  # noqa: E402
    ConfluenceClientError,
    ConfluenceConfig,
    DecodeError,
    RemoteError,
    load_page_manifest,
)
from confluence_client.logging_utils import setup_script_logging  # noqa: E402

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
logger = logging.getLogger(__name__)


def publish_entry(session, space_key, entry):
    """Create or update one manifest entry. Returns the resulting page."""
    if not entry.is_update:
        return session.add_new_page(space_key, entry.ancestor, entry.title, entry.body)

    current = session.get_page_by_id(entry.page_id)
    if current.version is None:
        raise DecodeError(f"Page {entry.page_id} was returned without version information")
    return session.update_page(
        space_key,
        entry.page_id,
        current.version.number + 1,
        entry.title,
        entry.body,
    )


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    setup_script_logging(log_format=_LOG_FORMAT, datefmt=_LOG_DATEFMT)

    logger.info("=" * 60)
    logger.info("PUBLISH PAGES")
    logger.info("=" * 60)

    try:
        logger.info("Loading configuration...")
        config = ConfluenceConfig.from_env()
        session = config.create_session()

        logger.info("Loading page manifest...")
        try:
            manifest = load_page_manifest(argv[0] if argv else None)
        except (FileNotFoundError, ValueError) as e:
            logger.error("%s", e)
            return 1
        logger.info("Found %d page(s) for space %s", len(manifest.pages), manifest.space_key)

        published = []
        failed = []
        for i, entry in enumerate(manifest.pages, 1):
            action = "Updating" if entry.is_update else "Creating"
            logger.info("[%d/%d] %s: %s", i, len(manifest.pages), action, entry.title)
            try:
                page = publish_entry(session, manifest.space_key, entry)
            except RemoteError as e:
                if e.status_code == 409:
                    logger.warning("Version conflict, page changed while publishing: %s", entry.title)
                failed.append((entry.title, f"HTTP {e.status_code}"))
                continue
            except DecodeError as e:
                # The write may have gone through even though the response was unreadable
                logger.warning("Unreadable response for %s, check the page manually: %s", entry.title, e)
                failed.append((entry.title, "unreadable response"))
                continue
            version = page.version.number if page.version else "?"
            logger.info("  -> page %s (version %s)", page.id, version)
            published.append(page)

        logger.info("")
        logger.info("=" * 60)
        logger.info("SUMMARY REPORT")
        logger.info("=" * 60)
        logger.info("  Published: %d", len(published))
        logger.info("  Failed:    %d", len(failed))
        for title, reason in failed:
            logger.info("  - %s: %s", title, reason)
        return 0 if not failed else 1

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except ConfluenceClientError as e:
        logger.error("Confluence error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
