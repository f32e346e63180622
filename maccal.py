#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Calendar.app database reader (SQLite, read-only)

Commands:
  list                List events from yesterday through the configured weeks ahead
  attendee            List every event a participant identity is attached to
  participants        List the attendees of one event
  export              Write the default window to CSV

Notes:
- The database is opened read-only; nothing is ever written back.
- Database path comes from --db, then config.yaml `db_path`, then
  ~/Library/Calendars/Calendar.sqlitedb.
"""

import argparse
import logging
import sys

from caldata.db import CalendarDBError
from caldata.services import event_svc
from caldata.services.config_svc import get_config, window_defaults
from caldata.services.export_svc import export_events_csv
from caldata.services.window_svc import CalendarWindow


# ---------------- CFG helpers ----------------

def load_cfg(args) -> dict:
    cfg = get_config(args.config)
    if args.db:
        cfg["db_path"] = args.db
    level = logging.DEBUG if args.verbose else getattr(logging, cfg["log_level"], logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return cfg


def init_window(cfg: dict) -> CalendarWindow:
    return CalendarWindow(cfg["db_path"], defaults=window_defaults(cfg))


# ---------------- Commands ----------------

def cmd_list(args):
    cfg = load_cfg(args)
    window = init_window(cfg)
    for item in window.events:
        print(item)


def cmd_attendee(args):
    cfg = load_cfg(args)
    for item in event_svc.fetch_events_for_attendee(cfg["db_path"], args.id):
        print(item)


def cmd_participants(args):
    cfg = load_cfg(args)
    attendees = event_svc.fetch_attendees_for_event(cfg["db_path"], args.event)
    if not attendees:
        print("(none)")
    for a in attendees:
        print(a)


def cmd_export(args):
    cfg = load_cfg(args)
    window = init_window(cfg)
    out_dir = args.out or cfg["export_dir"]
    name = f"events_{window.start_date:%Y%m%d}_{window.end_date:%Y%m%d}"
    path = export_events_csv(window.events, out_dir, name)
    print(f"{len(window.events)} events exported to {path}")


# ---------------- Entry ----------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calendar.app database reader")
    parser.add_argument("--config", default="config.yaml")
    parser.add_argument("--db", required=False, help="path to Calendar.sqlitedb (overrides config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers()

    p_list = sub.add_parser("list", help="list events in the default window")
    p_list.set_defaults(func=cmd_list)

    p_att = sub.add_parser("attendee", help="list events for an attendee identity id")
    p_att.add_argument("--id", type=int, default=1)
    p_att.set_defaults(func=cmd_attendee)

    p_part = sub.add_parser("participants", help="list attendees of an event")
    p_part.add_argument("--event", type=int, required=True, help="event rowid")
    p_part.set_defaults(func=cmd_participants)

    p_exp = sub.add_parser("export", help="export the default window to CSV")
    p_exp.add_argument("--out", required=False, help="output directory (default from config)")
    p_exp.set_defaults(func=cmd_export)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        args.func(args)
    except (CalendarDBError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
