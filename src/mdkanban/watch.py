"""Change notifier for a board directory, built on watchdog."""

import logging
import os
from typing import Callable

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from mdkanban.model.session import BoardSession

logger = logging.getLogger(__name__)

CHANGE_EVENTS = (EVENT_TYPE_CREATED, EVENT_TYPE_DELETED, EVENT_TYPE_MODIFIED, EVENT_TYPE_MOVED)


class BoardEventHandler(FileSystemEventHandler):
    """Forward file changes under a board to on_change as relative paths.

    Changes seen while the session's suppression window is open are treated
    as our own writes and dropped.
    """

    def __init__(self, session: BoardSession, on_change: Callable[[str], None]) -> None:
        self.session = session
        self.on_change = on_change

    def _relative(self, path) -> str:
        return os.path.relpath(os.fsdecode(path), self.session.path)

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in CHANGE_EVENTS:
            return
        path = event.dest_path if event.event_type == EVENT_TYPE_MOVED else event.src_path
        relative = self._relative(path)
        if self.session.is_suppressed():
            logger.debug("suppressed change notification for %s", relative)
            return
        self.on_change(relative)


class BoardWatcher:
    """Recursive watchdog observer over a board directory."""

    def __init__(self, session: BoardSession, on_change: Callable[[str], None]) -> None:
        self.session = session
        self.handler = BoardEventHandler(session, on_change)
        self.observer = None

    def start(self) -> None:
        self.observer = Observer()
        self.observer.schedule(self.handler, str(self.session.path), recursive=True)
        self.observer.start()
        logger.info("watching %s", self.session.path)

    def stop(self) -> None:
        if self.observer is None:
            return
        self.observer.stop()
        self.observer.join()
        self.observer = None
