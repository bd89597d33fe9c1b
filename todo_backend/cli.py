#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
To-do list (MySQL / SQLite via SQLAlchemy)

Commands:
  init                  Create the tasks table if missing
  add GOAL              Insert a task and print its id
  get ID                Print one task
  list [--completed V]  Print all tasks, optionally filtered (true/false/1/0/...)
  update ID GOAL        Overwrite goal (and completed with --completed)
  done ID               Mark a task completed
  rm ID                 Delete a task (missing ids are ignored)

Connection settings come from config.yaml or TODO_DB_* environment variables.
"""

import argparse
import logging
import sys

from .db import ensure_schema, get_engine
from .errors import NotFoundError, ParseError, TaskRepositoryError
from .services import task_svc

logger = logging.getLogger("todo_backend.cli")


def _print_task(t):
    mark = "x" if t.completed else " "
    print(f"[{mark}] {t.id}\t{t.goal}")


def cmd_init(args):
    ensure_schema(get_engine())
    print("tasks table ready")


def cmd_add(args):
    print(task_svc.create_task(task_svc.get_dao(), args.goal))


def cmd_get(args):
    _print_task(task_svc.get_task(task_svc.get_dao(), args.id))


def cmd_list(args):
    for t in task_svc.list_tasks(task_svc.get_dao(), args.completed):
        _print_task(t)


def cmd_update(args):
    n = task_svc.update_task(task_svc.get_dao(), args.id, args.goal, args.completed)
    print(f"rows updated: {n}")


def cmd_done(args):
    n = task_svc.complete_task(task_svc.get_dao(), args.id)
    print(f"rows updated: {n}")


def cmd_rm(args):
    task_svc.delete_task(task_svc.get_dao(), args.id)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="todo", description="To-do list")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("init")
    p.set_defaults(func=cmd_init)

    p = sub.add_parser("add")
    p.add_argument("goal")
    p.set_defaults(func=cmd_add)

    p = sub.add_parser("get")
    p.add_argument("id", type=int)
    p.set_defaults(func=cmd_get)

    p = sub.add_parser("list")
    p.add_argument("--completed", default="", help="true/false filter; empty for all")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("update")
    p.add_argument("id", type=int)
    p.add_argument("goal")
    p.add_argument("--completed", action="store_true")
    p.set_defaults(func=cmd_update)

    p = sub.add_parser("done")
    p.add_argument("id", type=int)
    p.set_defaults(func=cmd_done)

    p = sub.add_parser("rm")
    p.add_argument("id", type=int)
    p.set_defaults(func=cmd_rm)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (NotFoundError, ParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except TaskRepositoryError as e:
        logger.error("%s failed: %s", args.cmd, e)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
