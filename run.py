# run.py
from __future__ import annotations

import argparse

from chronicle.loader import ArtifactCatalog
from chronicle.log import setup_logging
from chronicle.models import HistoryEntry
from chronicle.session import PlayerSession


def print_entry(e: HistoryEntry) -> None:
    tags = ",".join(t.name.lower() for t in e.tags)
    print(f"{e.turn:>8}  {e.dungeon_level * 50:>5}ft  {e.character_level:>3}  {e.text}  [{tags}]", flush=True)


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay a short playthrough and print its history log")
    parser.add_argument("--catalog", default="data/artifacts.json", help="Path to artifact list (JSON)")
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--log-format", default="console", choices=("console", "json"))
    parser.add_argument("--stream", action="store_true", help="Print entries as they are logged")
    args = parser.parse_args()

    setup_logging(level=args.log_level, format=args.log_format)
    catalog = ArtifactCatalog.from_json(args.catalog)

    session = PlayerSession(describer=catalog, on_entry=print_entry if args.stream else None)
    session.birth("Frodo", "Hobbit", "Rogue")

    phial = catalog.get(1)
    ring = catalog.get(5)
    sword = catalog.get(12)
    cap = catalog.get(31)

    session.descend(1)
    session.pass_time(25_000)
    session.find_artifact(phial, known=True)
    session.gain_level(5)

    session.descend(7)
    session.pass_time(140_000)
    session.find_artifact(ring)
    session.gain_level(12)

    # Left behind on the stairs before the player ever saw it.
    session.lose_artifact(sword)

    session.descend(15)
    session.pass_time(300_000)
    session.identify_artifact(ring)
    session.find_artifact(cap)
    session.note("Dove for the Ring of Barahir")

    session.pass_time(90_000)
    session.die("a cave troll")

    if not args.stream:
        for e in session.history.entries():
            print_entry(e)


if __name__ == "__main__":
    main()
