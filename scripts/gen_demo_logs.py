"""Generate demo log files, optionally appending forever to exercise tailing."""

# ruff: noqa: S311, PLR2004, T201
from __future__ import annotations

import argparse
import random
import time
from datetime import datetime, timedelta
from pathlib import Path

LEVELS = [("Info", 70), ("Debug", 15), ("Warning", 10), ("Error", 5)]
MESSAGES = {
    "Info": ["Request handled in {ms}ms", "User {user} logged in", "Cache warmed ({n} keys)"],
    "Debug": ["Polling queue {queue}", "Lease renewed for worker {n}"],
    "Warning": ["Slow query took {ms}ms", "Retrying connection to db-{n}"],
    "Error": ["Failed to process job {n}", "Unhandled exception in worker {n}"],
}


def format_header(ts: datetime, level: str, message: str) -> str:
    return f"{ts.strftime('%a %b %d %Y %H:%M:%S.%f')} [{level}] - {message}"


def gen_entry(ts: datetime) -> list[str]:
    level = random.choices([name for name, _ in LEVELS], weights=[w for _, w in LEVELS])[0]
    template = random.choice(MESSAGES[level])
    message = template.format(
        ms=random.randint(1, 5000),
        user=f"user{random.randint(1, 50)}",
        n=random.randint(1, 999),
        queue=random.choice(["jobs", "mail", "reports"]),
    )
    lines = [format_header(ts, level, message)]
    if level == "Error":
        # Multi-line stack trace without headers
        lines.append("Traceback (most recent call last):")
        lines.extend(f"  at frame {i}" for i in range(random.randint(1, 4)))
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("output", type=Path, help="Log file to write")
    parser.add_argument("--count", type=int, default=500, help="Entries to write up front")
    parser.add_argument("--follow", action="store_true", help="Keep appending entries")
    parser.add_argument("--interval", type=float, default=0.5, help="Seconds between appended entries")
    args = parser.parse_args()

    ts = datetime.now() - timedelta(hours=1)  # noqa: DTZ005
    with args.output.open("a", encoding="utf-8") as f:
        for _ in range(args.count):
            ts += timedelta(seconds=random.uniform(0, 5))
            f.write("\n".join(gen_entry(ts)) + "\n")
        f.flush()
        print(f"Wrote {args.count} entries to {args.output}")
        while args.follow:
            time.sleep(args.interval)
            f.write("\n".join(gen_entry(datetime.now())) + "\n")  # noqa: DTZ005
            f.flush()


if __name__ == "__main__":
    main()
