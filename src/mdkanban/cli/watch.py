"""Handler for 'mdkanban watch'."""

import logging
import signal
import time

from mdkanban.cli._common import open_session_or_die, output_json
from mdkanban.watch import BoardWatcher

logger = logging.getLogger(__name__)


def watch(args) -> int:
    """Report changes under the board directory until SIGINT/SIGTERM."""
    session = open_session_or_die(args.dir, args.json)

    def _report(path: str) -> None:
        if args.json:
            output_json({"type": "externalChange", "path": path})
        else:
            print(f"changed: {path}", flush=True)

    watcher = BoardWatcher(session, _report)
    running = True

    def _stop(signum, frame):
        nonlocal running
        running = False

    signal.signal(signal.SIGINT, _stop)
    signal.signal(signal.SIGTERM, _stop)

    watcher.start()
    try:
        while running:
            time.sleep(1)
    finally:
        watcher.stop()

    logger.info("stopped")
    return 0
