# scripts/import_cars.py
import argparse
import json
import logging

from garage.importer import import_csv
from garage.storage.factory import build_store


def main():
    parser = argparse.ArgumentParser(description="Bulk-load cars from a CSV into the configured store")
    parser.add_argument("csv_path")
    parser.add_argument("--user-id", default=None, help="owner for rows without a user_id column")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    store = build_store(seed=False)
    try:
        report = import_csv(args.csv_path, store, default_user_id=args.user_id)
    finally:
        store.close()

    print(json.dumps(report, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
