"""Main entry point for the Solid inbox agent."""

import argparse
import logging
import os
import sys
import time
from datetime import datetime

from .config import DISPLAY_METHODS, AppConfig, load_config
from .db import HandledSet, clear_handled, get_meta, init_db, set_meta
from .display import create_display
from .errors import ConfigurationError
from .ldp_client import LdpClient
from .scheduler import next_delay, should_run_now
from .session import NotificationSession

# Configure logging
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def _last_cycle(conn):
    value = get_meta(conn, "last_cycle")
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.rstrip("Z"))
    except ValueError:
        logger.warning(f"Could not parse last_cycle '{value}', ignoring it")
        return None


def build_session(config: AppConfig) -> NotificationSession:
    """Wire the session to its transport and display."""
    client = LdpClient(
        timeout=config.solid.request_timeout,
        accept=config.solid.accept,
        access_token=config.solid.access_token,
    )
    return NotificationSession(client, create_display(config))


def run(args) -> int:
    """Run one cycle, or poll until interrupted. Returns the exit code."""
    try:
        config = load_config(profile=args.profile, method=args.method)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    logger.info(f"Initializing database at {config.db_path}...")
    conn = init_db(config.db_path)
    try:
        if args.reset_handled:
            logger.info("Clearing handled notifications from database...")
            clear_handled(conn)

        handled = HandledSet.load(conn)
        session = build_session(config)
        logger.info(f"Watching inbox of {config.solid.profile} ({len(handled)} already shown)")

        if not args.once and not should_run_now(_last_cycle(conn), config.scheduler):
            delay = config.scheduler.min_gap_minutes * 60
            logger.info(f"Last cycle was recent, waiting {delay:.0f}s")
            time.sleep(delay)

        while True:
            try:
                session.run_cycle(config.solid.profile, handled)
                set_meta(conn, "last_cycle", datetime.utcnow().isoformat() + "Z")
            except ConfigurationError:
                # already reported by the session; the profile may be fixed by the next cycle
                if args.once:
                    return 1
            except Exception as e:
                logger.error(f"Cycle failed: {e}", exc_info=True)
                if args.once:
                    return 1

            if args.once:
                return 0

            delay = next_delay(config.scheduler)
            logger.info(f"Next cycle in {delay:.0f}s")
            time.sleep(delay)
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping.")
        return 0
    finally:
        conn.close()


def main():
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description="Show new notifications from a Solid pod inbox"
    )
    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="WebID whose inbox to watch (overrides SOLID_PROFILE env var)"
    )
    parser.add_argument(
        "--method",
        choices=DISPLAY_METHODS,
        default=None,
        help="How to show notifications (default: from NOTIFICATION_METHOD env var or 'log')"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single cycle and exit instead of polling"
    )
    parser.add_argument(
        "--reset-handled",
        action="store_true",
        help="Forget which notifications were already shown before starting"
    )

    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
