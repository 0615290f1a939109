"""CLI argument parser and dispatch for mdkanban."""

import argparse

from mdkanban.cli.board import board_get, board_summary
from mdkanban.cli.config import config
from mdkanban.cli.init import init_board
from mdkanban.cli.task import task_add, task_get, task_list, task_move, task_update
from mdkanban.cli.watch import watch


def _add_task_field_options(parser: argparse.ArgumentParser, defaults: bool) -> None:
    """Options shared by 'task add' and 'task update'.

    With defaults=False every option defaults to None so update can tell
    which fields were given.
    """
    parser.add_argument("--assigned", default="" if defaults else None, help="Assignee")
    parser.add_argument("--progress", type=int, default=0 if defaults else None, help="Progress percentage")
    parser.add_argument("--due", default=None, help="Due date")
    parser.add_argument("--tag", action="append", help="Tag (repeatable)")
    parser.add_argument("--body", default="" if defaults else None, help="Task description")


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dir", default=".", help="Board directory or its parent (default: .)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log file writes to stderr")

    parser = argparse.ArgumentParser(
        prog="mdkanban",
        description="Kanban board stored as markdown files",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Create an empty board", parents=[common])
    init_p.add_argument("--title", default=None, help="Board title")
    init_p.set_defaults(func=init_board)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    board_get_p = board_verbs.add_parser("get", help="Dump board index.md", parents=[common])
    board_get_p.set_defaults(func=board_get)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- task ---
    task_p = nouns.add_parser("task", help="Task operations", parents=[common])
    task_verbs = task_p.add_subparsers(dest="verb")

    task_list_p = task_verbs.add_parser("list", help="List tasks", parents=[common])
    task_list_p.add_argument("--column", dest="column", help="Filter by column name")
    task_list_p.set_defaults(func=task_list)

    task_get_p = task_verbs.add_parser("get", help="Dump task markdown", parents=[common])
    task_get_p.add_argument("name", help="Task name")
    task_get_p.set_defaults(func=task_get)

    task_add_p = task_verbs.add_parser("add", help="Create a task in Backlog", parents=[common])
    task_add_p.add_argument("title", help="Task title")
    _add_task_field_options(task_add_p, defaults=True)
    task_add_p.set_defaults(func=task_add)

    task_move_p = task_verbs.add_parser("move", help="Move a task", parents=[common])
    task_move_p.add_argument("name", help="Task name")
    task_move_p.add_argument("--column", dest="column", required=True, help="Target column name")
    task_move_p.set_defaults(func=task_move)

    task_update_p = task_verbs.add_parser("update", help="Change task fields", parents=[common])
    task_update_p.add_argument("name", help="Task name")
    task_update_p.add_argument("--title", default=None, help="New title")
    _add_task_field_options(task_update_p, defaults=False)
    task_update_p.set_defaults(func=task_update)

    # task with no verb = list
    task_p.set_defaults(func=task_list, column=None)

    # --- watch ---
    watch_p = nouns.add_parser("watch", help="Report external changes to the board", parents=[common])
    watch_p.set_defaults(func=watch)

    # --- config ---
    config_p = nouns.add_parser("config", help="Show or change settings", parents=[common])
    config_p.add_argument("key", nargs="?", help="Setting name")
    config_p.add_argument("value", nargs="?", help="New value")
    config_p.set_defaults(func=config)

    return parser
