import asyncio
import logging
import logging.config

from doccrawl.config import manifest_path, output_root
from doccrawl.services.manifest import load_manifest
from doccrawl.services.orchestrator import crawl_documentation

logger = logging.getLogger(__name__)

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    # httpx logs every request at INFO; the fetcher already does
    "loggers": {"httpx": {"level": "WARNING"}},
}


def format_summary(succeeded: int, failed: int) -> str:
    return "\n".join(
        [
            "Crawl complete!",
            f"   Success: {succeeded} pages",
            f"   Failed: {failed} pages",
        ]
    )


def main() -> None:
    """Crawl every page in the manifest and print the success/failure tally."""
    logging.config.dictConfig(LOGGING_CONFIG)

    path = manifest_path()
    logger.info("Loading manifest from %s", path)
    manifest = load_manifest(path)

    report = asyncio.run(crawl_documentation(manifest, output_root()))
    print(format_summary(report.succeeded, report.failed))


if __name__ == "__main__":
    main()
