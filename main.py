#!/usr/bin/env python3
"""
Main orchestrator script for inspecting a Confluence instance.

This script runs the complete read-only workflow:
1. Tests the connection and credentials
2. Lists all global spaces
3. Walks every page of one space (following pagination links)
4. Prints a summary report
5. Prepares an inventory data structure (stored in a variable)

The space is taken from the first argument, from CONFLUENCE_SPACE_KEY, or
defaults to the first global space.

Usage:
    python3 main.py [SPACE_KEY]

Output:
    Returns an inventory dictionary, e.g.
    {
        "generated_at": "2024-01-01T12:00:00",
        "space": {"key": "DOC", "name": "Documentation"},
        "total_pages": 3,
        "pages": [
            {"id": "65601", "title": "Home", "status": "current", "version": 7,
             "has_children": True, "webui": "/spaces/DOC/pages/65601/Home"}
        ]
    }
"""

import logging
import os
import sys
from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional

from confluence_client import (
    ConfluenceClientError,
    ConfluenceConfig,
    ConfluenceSession,
    Page,
    Space,
)
from confluence_client.logging_utils import setup_script_logging

logger = logging.getLogger(__name__)


def prepare_inventory_data(space: Space, pages: List[Page]) -> Dict[str, Any]:
    """
    Build the inventory data structure for a walked space.

    Args:
        space: The space that was walked.
        pages: Every page of the space, in server order.

    Returns:
        Dictionary with generated_at, space, total_pages and pages keys.
        Serialize with json.dumps(inventory, indent=2) if needed.
    """
    return {
        "generated_at": datetime.now().isoformat(),
        "space": {"key": space.key, "name": space.name},
        "total_pages": len(pages),
        "pages": [
            {
                "id": page.id,
                "title": page.title,
                "status": page.status,
                "version": page.version.number if page.version else None,
                "has_children": bool(page.children and page.children.page.results),
                "webui": page.links.webui,
            }
            for page in pages
        ],
    }


def choose_space(spaces: List[Space], space_key: Optional[str]) -> Optional[Space]:
    if not spaces:
        return None
    if not space_key:
        return spaces[0]
    for space in spaces:
        if space.key == space_key:
            return space
    return None


def run(session: ConfluenceSession, space_key: Optional[str]) -> Optional[Dict[str, Any]]:
    logger.info("Testing connection...")
    session.test_connection()
    logger.info("Connection successful")

    logger.info("Listing global spaces...")
    spaces = session.get_spaces()
    logger.info("Found %d space(s)", len(spaces))
    for space in spaces:
        logger.info("  - %s: %s", space.key, space.name)

    space = choose_space(spaces, space_key)
    if space is None:
        logger.error("Space %s not found among global spaces", space_key or "(any)")
        return None

    logger.info("Walking pages of space %s...", space.key)
    pages = session.get_pages_for_space(space.key)

    statuses = Counter(page.status for page in pages)
    logger.info("")
    logger.info("=" * 60)
    logger.info("SUMMARY REPORT")
    logger.info("=" * 60)
    logger.info("  Space:       %s (%s)", space.name, space.key)
    logger.info("  Pages:       %d", len(pages))
    for status, count in sorted(statuses.items()):
        logger.info("    %-10s %d", status, count)
    for page in pages:
        version = page.version.number if page.version else "?"
        logger.info("  - [%s] %s (v%s)", page.id, page.title, version)

    return prepare_inventory_data(space, pages)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    setup_script_logging()

    logger.info("=" * 60)
    logger.info("CONFLUENCE INVENTORY")
    logger.info("=" * 60)

    try:
        config = ConfluenceConfig.from_env()
        logger.info("Base URL: %s", config.base_url)
        session = config.create_session()
        space_key = argv[0] if argv else os.getenv("CONFLUENCE_SPACE_KEY")
        inventory = run(session, space_key)
        return 0 if inventory is not None else 1

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        logger.info(
            "Ensure CONFLUENCE_BASE_URL, CONFLUENCE_USERNAME, CONFLUENCE_API_KEY are set, or use .env."
        )
        return 1
    except ConfluenceClientError as e:
        logger.error("Confluence error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
