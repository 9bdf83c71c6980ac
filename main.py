"""Main application entry point for inspecting the Google Base attributes of an entry."""

import logging
import sys

from src.common.exceptions.custom_exceptions import ApplicationError
from src.common.logger_config import setup_logging
from src.gbase_domain.application.attribute_service import GBaseAttributeApplicationService

logger = logging.getLogger(__name__)


def run_attribute_dump(entry_path: str) -> int:
    """Reads an Atom entry file, logs its attributes and prints the normalized entry."""
    service = GBaseAttributeApplicationService()

    try:
        with open(entry_path, "rb") as f:
            collection = service.read_entry_attributes(f.read())
    except FileNotFoundError:
        logger.error(f"Entry file not found: {entry_path}")
        return 1
    except ApplicationError as e:
        logger.error(f"Could not read attributes from {entry_path}: {e}")
        return 1

    for row in service.describe(collection):
        logger.info(f"{row.name} [{row.type_name or 'untyped'}, {row.access}]: {row.content}")

    print(service.render_entry(collection).decode(service.encoding))
    return 0


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} ENTRY_XML_FILE")
        sys.exit(2)

    sys.exit(run_attribute_dump(sys.argv[1]))
