"""Sweet Treats Bakery database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Insert the default cakes into an empty catalogue
    python src/manage.py seed --file products.json
"""

import argparse
import sys
from pathlib import Path


def setup_database():
    from bakery.domain import bakery
    from bakery.utils.db import setup_db

    print("Initializing bakery domain...")
    bakery.init()
    print("Creating bakery database schema...")
    setup_db(bakery)
    print("Done.")


def drop_database():
    from bakery.domain import bakery
    from bakery.utils.db import drop_db

    print("Initializing bakery domain...")
    bakery.init()
    print("Dropping bakery database schema...")
    drop_db(bakery)
    print("Done.")


def seed_catalogue(products_file=None):
    from bakery.domain import bakery
    from bakery.product.seeding import SeedCatalogue

    products = Path(products_file).read_text(encoding="utf-8") if products_file else None

    bakery.init()
    with bakery.domain_context():
        inserted = bakery.process(SeedCatalogue(products=products), asynchronous=False)

    if inserted:
        print(f"Inserted {inserted} products.")
    else:
        print("Catalogue already populated; nothing inserted.")


def main():
    parser = argparse.ArgumentParser(description="Sweet Treats Bakery database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Seed the catalogue if it is empty")
    seed_parser.add_argument(
        "--file",
        help="JSON file with a list of {name, price, image} objects (default: built-in cakes)",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_catalogue(args.file)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
