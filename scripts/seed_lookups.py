from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.student_portal.student_portal.database.connection import SupabaseConfig, SupabaseConnection
from src.student_portal.student_portal.database.supabase_base import db_client

DEPARTMENTS = [
    {"code": "CIVIL", "name": "Civil Engineering"},
    {"code": "CSE", "name": "Computer Science and Engineering"},
    {"code": "EEE", "name": "Electrical and Electronics Engineering"},
    {"code": "ECE", "name": "Electronics and Communication Engineering"},
    {"code": "IT", "name": "Information Technology"},
]
YEARS = [{"label": label, "value": value} for value, label in enumerate(["I", "II", "III", "IV"], start=1)]
SEMESTERS = [{"number": n} for n in range(1, 9)]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    supabase_config = dict(settings.SUPABASE_CONFIG)
    # Row level security only lets the service role write lookup tables
    supabase_config["key"] = os.getenv("SUPABASE_SERVICE_ROLE_KEY") or supabase_config.get("key")

    conn = SupabaseConnection(SupabaseConfig.from_dict(supabase_config))
    with db_client(conn) as client:
        client.table("departments").upsert(DEPARTMENTS, on_conflict="code").execute()
        client.table("years").upsert(YEARS, on_conflict="value").execute()
        client.table("semesters").upsert(SEMESTERS, on_conflict="number").execute()

    print(
        f"OK: Seeded {len(DEPARTMENTS)} departments, {len(YEARS)} years, "
        f"{len(SEMESTERS)} semesters -> {conn.url}"
    )


if __name__ == "__main__":
    main()
