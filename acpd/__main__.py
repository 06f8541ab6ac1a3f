import argparse
import logging
import sys
from pathlib import Path

from .core.constants import LOG_LEVELS
from .core.exceptions import AcpdError


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="acpd",
        description="acpd - background service for codebase intelligence",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="run",
        choices=["run"],
        help="Run the daemon in the foreground (default)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind (default 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="HTTP server port (default 9222)"
    )
    parser.add_argument(
        "-C", "--directory",
        type=Path,
        default=None,
        help="Project root directory (default: current directory)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=LOG_LEVELS,
        help="Logging level"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: <project>/.acp/acpd.yaml)"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for acpd."""
    args = build_parser().parse_args(argv)

    from .core.config import load_settings
    from .core.primer import PrimerEngine, load_catalog
    from .core.snapshot import SnapshotStore

    project_root = args.directory or Path.cwd()

    try:
        settings = load_settings(
            project_root,
            config_file=args.config,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
        )
    except AcpdError as e:
        setup_logging()
        logger.error(f"Failed to load settings: {e}")
        return 1

    setup_logging(settings.log_level)
    logger.info("Starting acpd in foreground mode")
    logger.info(f"Project root: {settings.project_root}")

    try:
        catalog = load_catalog(settings.catalog_path)
        store = SnapshotStore.from_project(settings.project_root)
    except AcpdError as e:
        logger.error(f"Failed to load ACP state: {e}")
        return 1

    from .api.app import create_app
    app = create_app(store, PrimerEngine(catalog), settings)

    import uvicorn

    logger.info(f"Listening on http://{settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

    logger.info("Daemon stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
