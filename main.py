"""
CRM service entry point.

Runs the FastAPI app under uvicorn, or prints the dashboard snapshot for
the seeded store without starting a server.

Usage:
    Serve:      python main.py serve
    Stats dump: python main.py stats
"""

import logging
import sys

from crm.config import settings

logger = logging.getLogger(__name__)


def _run_server() -> None:
    """Start the HTTP API on the configured host and port."""
    import uvicorn

    from crm.api.app import create_app

    app = create_app()
    logger.info("Listening on %s:%d", settings.server.host, settings.server.port)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.log_level.lower(),
    )


def _print_stats() -> None:
    """Print the dashboard snapshot for the seed data as JSON."""
    from crm.api.app import build_store
    from crm.stats import compute_stats

    stats = compute_stats(build_store())
    print(stats.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "stats":
        _print_stats()
    else:
        _run_server()
