"""
Setup Database Indexes

Creates the MongoDB indexes used by the comment board.

Usage:
    # Create all indexes
    python scripts/setup_indexes.py

    # Drop existing and recreate
    python scripts/setup_indexes.py --drop

    # Just list existing indexes
    python scripts/setup_indexes.py --list
"""
import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from disclosure_watchdog.config.settings import settings
from disclosure_watchdog.database.connection import close_client, get_database, ping
from disclosure_watchdog.database.indexes import create_all_indexes, list_existing_indexes


def run(args):
    ping()
    db = get_database()

    if args.list:
        for collection_name, names in list_existing_indexes(db).items():
            print(f"📁 {collection_name}")
            for name in names:
                print(f"   - {name}")
        return

    created = create_all_indexes(db, drop_existing=args.drop)
    print(f"Created: {', '.join(created)}")


def main():
    parser = argparse.ArgumentParser(
        description=f"Create MongoDB indexes for {settings.APP_NAME}"
    )
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing indexes before creating new ones"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List existing indexes only (don't create)"
    )

    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)

    print(f"🔧 {settings.APP_NAME} - Database Index Setup")
    print("=" * 60)
    print()

    if args.list:
        print("📋 Listing existing indexes...")
    else:
        print("⚙️  Creating database indexes...")
        if args.drop:
            print("⚠️  Will drop existing indexes first!")

    print()

    try:
        run(args)
        print()
        print("✅ Index setup complete!")

    except Exception as e:
        print(f"\n❌ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

    finally:
        close_client()


if __name__ == "__main__":
    main()
