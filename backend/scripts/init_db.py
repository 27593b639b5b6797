"""Create the course-review tables and check the change-log numbering constraints."""
import argparse
import os
import sys

from sqlalchemy import inspect

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from coursereview.database import engine, Base  # noqa: E402
import coursereview.models  # noqa: E402,F401 - registers all models

# (table, owner column) pairs whose version numbers must be unique per owner
NUMBERED_LOGS = [
    ("page_versions", "field_id"),
    ("subject_versions", "subject_id"),
]


def _has_numbering_constraint(insp, table: str, owner: str) -> bool:
    wanted = {owner, "version_number"}
    uniques = [set(uc["column_names"]) for uc in insp.get_unique_constraints(table)]
    uniques += [set(ix["column_names"]) for ix in insp.get_indexes(table) if ix.get("unique")]
    return wanted in uniques


def init_db() -> bool:
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    for table in Base.metadata.sorted_tables:
        if table.name in existing:
            print(f"[SKIP] table already exists: {table.name}")
        else:
            print(f"[OK] created table: {table.name}")

    # create_all never alters a table that was already there
    insp = inspect(engine)
    ok = True
    for table, owner in NUMBERED_LOGS:
        if _has_numbering_constraint(insp, table, owner):
            print(f"[OK] unique ({owner}, version_number) on {table}")
        else:
            ok = False
            print(f"[WARN] {table} lacks unique ({owner}, version_number); concurrent writers may share a number")
    return ok


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--seed", action="store_true", help="Load demo campuses, subjects and history afterwards")
    args = parser.parse_args()

    constraints_ok = init_db()
    if args.seed:
        from seed_data import seed

        seed()
    sys.exit(0 if constraints_ok else 1)
