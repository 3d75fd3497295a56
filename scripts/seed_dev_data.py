"""Seed dev data from scripts/seed-data.json into the SQLite database.

Loads events, donors (find-or-create by first/last name, so re-running does
not duplicate donors) and one pending task per (event, invited donor).

Usage:
    uv run python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Uses DATABASE_PATH from the environment or .env; the file is created if missing.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from donor_tracker.application.dtos.donor import DonorCreate
from donor_tracker.application.dtos.event import EventCreate
from donor_tracker.application.results import Failure
from donor_tracker.core.config import get_settings
from donor_tracker.infrastructure.persistence.database import Database
from donor_tracker.infrastructure.persistence.store import DonorTaskStore


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_PATH when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(path: Path) -> int:
    _load_env()
    get_settings.cache_clear()
    settings = get_settings()
    data = json.loads(path.read_text(encoding="utf-8"))

    database = Database(settings.database_path)
    store = DonorTaskStore(database)
    await store.initialize()
    failures = 0
    try:
        donor_ids: dict[str, int] = {}
        for donor in data.get("donors", []):
            key = f"{donor.get('first_name')} {donor.get('last_name')}"
            result = await store.find_or_create_donor(DonorCreate(**donor))
            if isinstance(result, Failure):
                print(f"  Skip donor {key}: {result.message}", file=sys.stderr)
                failures += 1
                continue
            donor_ids[key] = result.value.donor_id
            state = "created" if result.value.created else "exists"
            print(f"  Donor {key} -> {result.value.donor_id} ({state})")

        for ev in data.get("events", []):
            invited = ev.pop("invite", [])
            result = await store.create_event(EventCreate(**ev))
            if isinstance(result, Failure):
                print(f"  Skip event {ev['name']}: {result.message}", file=sys.stderr)
                failures += 1
                continue
            event_id = result.value
            print(f"  Event {ev['name']} -> {event_id}")
            ids = [donor_ids[name] for name in invited if name in donor_ids]
            tasks = await store.create_tasks_for_event(event_id, ids)
            if isinstance(tasks, Failure):
                print(f"  Skip tasks for {ev['name']}: {tasks.message}", file=sys.stderr)
                failures += 1
            else:
                print(f"    {len(tasks.value)} pending tasks")
    finally:
        await database.dispose()

    print("Seed completed." if not failures else f"Seed completed with {failures} failures.")
    return 1 if failures else 0


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    sys.exit(asyncio.run(run(path)))


if __name__ == "__main__":
    main()
