#!/usr/bin/env python3
"""
Seed the products table from the JSON catalog file.

Features:
- Same data as the JSON source: the file at CATALOG_FILE (default data/catalog.json)
- Idempotent: safe to run multiple times (clears before seeding)
- Array order becomes the position column, i.e. the unsorted display order

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_products.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from catalog_view.adapters.json_file_catalog_source import JsonFileCatalogSource
from catalog_view.domain.catalog import Catalog
from catalog_view.infra.config import catalog_file
from catalog_view.infra.db.models.product import ProductRow
from catalog_view.infra.db.session import get_session


def seed_products(path: Path | None = None) -> None:
    """
    Replace the products table with the records of a JSON catalog file.

    Args:
        path: Catalog file (defaults to CATALOG_FILE)
    """
    source_path = path or catalog_file()
    records = JsonFileCatalogSource(source_path).load()

    print(f"🌱 Seeding database with {len(records)} products from {source_path}...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        deleted_count = session.query(ProductRow).delete()
        print(f"🗑️  Deleted {deleted_count} existing products")

        # Step 2: Insert in file order
        rows = [
            ProductRow(position=position, name=record.name, price=record.price, rating=record.rating)
            for position, record in enumerate(records, start=1)
        ]
        session.add_all(rows)
        session.flush()

        print(f"✅ Successfully seeded {len(rows)} products!")

    # Show how the catalog will be categorised at ingestion
    catalog = Catalog.from_records(records)
    print("\n📊 Sample products:")
    for item in catalog.items[:5]:
        print(f"   {item.id}. {item.name} [{item.category.value}] - {item.price:,} ({item.rating})")

    if len(catalog) > 5:
        print(f"   ... and {len(catalog) - 5} more")


if __name__ == "__main__":
    try:
        seed_products()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
