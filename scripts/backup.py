"""Backup the attendance log to a local CSV file.

Note: The spreadsheet keeps its own version history; this is for an offline copy.
"""

from __future__ import annotations

import csv
from pathlib import Path

from dotenv import load_dotenv

from config import load_settings

from church_attendance.common.datetime_utils import now_local
from church_attendance.container import build_container

FIELDS = ["timestamp", "name", "className", "status", "note"]


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    container = build_container(google_config=dict(settings.GOOGLE_CONFIG))

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = now_local(getattr(settings, "SCHOOL_TIMEZONE", "Asia/Seoul")).strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_{ts}.csv"

    records = container.attendance_service.list_records()
    with out_file.open("w", encoding="utf-8-sig", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        for record in records:
            writer.writerow(record.to_dict())
    print(f"OK: Backup created: {out_file} ({len(records)} records)")


if __name__ == "__main__":
    main()
