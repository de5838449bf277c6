#!/usr/bin/env python3
"""
Project store seeding script for development.
Initializes the configured store with the default projects, or resets it.
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import our modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from portfolio.api.dependencies import create_project_store
from portfolio.config import settings


async def seed_data(reset: bool):
    """Seed the configured project store"""
    store = create_project_store(settings)
    try:
        if reset:
            projects = await store.reset()
            print(f"✓ Reset {store.backend_name} store to {len(projects)} default projects")
        elif await store.initialize():
            print(f"✓ Initialized {store.backend_name} store with default projects")
        else:
            print(f"✓ {store.backend_name} store already initialized, nothing to do")

        stats = await store.stats()
        print("\nSummary:")
        print(f"  - Projects: {stats.total_projects}")
        print(f"  - Size: {stats.db_size}")
        print(f"  - Version: {stats.db_version}")

    except Exception as e:
        print(f"❌ Error seeding project store: {e}")
        raise
    finally:
        await store.close()


async def main():
    """Main function"""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--reset",
        action="store_true",
        help="discard all projects and restore the defaults",
    )
    args = parser.parse_args()

    print("Starting project store seeding...\n")
    await seed_data(reset=args.reset)


if __name__ == "__main__":
    asyncio.run(main())
