#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Roommates chore console (SQLite)

Commands:
  init                Create the database schema
  list                List all chores
  show ID             Show one chore
  add NAME            Add a chore
  unassigned          List chores nobody is responsible for
  assign              Assign a chore to a roommate
  rename ID NAME      Rename a chore
  delete ID           Delete a chore (refused while it is assigned)
  report              Export the chore board to CSV and print it

The database path comes from --db, then ROOMMATES_DB_PATH, then config.yaml.
"""

import argparse
import logging
import os
import sys

import pandas as pd

from .db import ensure_schema
from .domain.chore import Chore
from .logs import ensure_log_schema
from .services import chore_svc, report_svc


def _print_chores(chores):
    if not chores:
        print("(none)")
        return
    for c in chores:
        print(f"{c.id}\t{c.name}")


# ---------------- Commands ----------------

def cmd_init(args):
    ensure_schema()
    ensure_log_schema()
    print("DB initialized.")


def cmd_list(args):
    _print_chores(chore_svc.list_chores())


def cmd_show(args):
    chore = chore_svc.get_chore(args.id)
    if chore is None:
        print(f"Chore {args.id} not found.")
        return 1
    print(f"{chore.id}\t{chore.name}")


def cmd_add(args):
    chore = chore_svc.create_chore(args.name)
    print(f"{chore.name} has been added and assigned an Id of {chore.id}")


def cmd_unassigned(args):
    _print_chores(chore_svc.list_unassigned_chores())


def cmd_assign(args):
    chore_svc.assign_chore(args.roommate, args.chore)
    print(f"Chore {args.chore} assigned to roommate {args.roommate}.")


def cmd_rename(args):
    chore_svc.update_chore(Chore(id=args.id, name=args.name))
    print("Chore updated.")


def cmd_delete(args):
    conflict = chore_svc.delete_chore(args.id)
    if conflict is not None:
        print(f"Chore {args.id} is assigned to a roommate and can't be deleted.")
        return
    print("Chore deleted.")


def cmd_report(args):
    path, df = report_svc.export_chore_board(args.out)

    pd.set_option("display.max_rows", 200)
    pd.set_option("display.width", 160)

    print("\n=== Chore Board ===")
    if not df.empty:
        print(df)
    else:
        print("(empty)")
    print(f"\nCSV exported to {path}")


# ---------------- Entry ----------------

def main(argv=None):
    parser = argparse.ArgumentParser(description="Roommates chore console (SQLite)")
    parser.add_argument("--db", default=None, help="SQLite path (overrides ROOMMATES_DB_PATH/config.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers()

    p_init = sub.add_parser("init", help="create schema")
    p_init.set_defaults(func=cmd_init)

    p_list = sub.add_parser("list", help="list all chores")
    p_list.set_defaults(func=cmd_list)

    p_show = sub.add_parser("show", help="show one chore")
    p_show.add_argument("id", type=int)
    p_show.set_defaults(func=cmd_show)

    p_add = sub.add_parser("add", help="add a chore")
    p_add.add_argument("name")
    p_add.set_defaults(func=cmd_add)

    p_un = sub.add_parser("unassigned", help="list unassigned chores")
    p_un.set_defaults(func=cmd_unassigned)

    p_assign = sub.add_parser("assign", help="assign a chore to a roommate")
    p_assign.add_argument("--roommate", required=True, type=int)
    p_assign.add_argument("--chore", required=True, type=int)
    p_assign.set_defaults(func=cmd_assign)

    p_rename = sub.add_parser("rename", help="rename a chore")
    p_rename.add_argument("id", type=int)
    p_rename.add_argument("name")
    p_rename.set_defaults(func=cmd_rename)

    p_del = sub.add_parser("delete", help="delete a chore")
    p_del.add_argument("id", type=int)
    p_del.set_defaults(func=cmd_delete)

    p_rep = sub.add_parser("report", help="export the chore board")
    p_rep.add_argument("--out", default="exports", help="output directory")
    p_rep.set_defaults(func=cmd_report)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    if not args.db:
        return args.func(args) or 0

    # --db only applies to this invocation
    prev = os.environ.get("ROOMMATES_DB_PATH")
    os.environ["ROOMMATES_DB_PATH"] = args.db
    try:
        return args.func(args) or 0
    finally:
        if prev is None:
            os.environ.pop("ROOMMATES_DB_PATH", None)
        else:
            os.environ["ROOMMATES_DB_PATH"] = prev


if __name__ == "__main__":
    sys.exit(main())
