#!/usr/bin/env python3
"""Back-fill subdomains for platforms created before subdomains existed.

Every platform without a subdomain gets its slug as subdomain. Platforms
whose slug is already another platform's subdomain are skipped and logged.

Usage:
    ./scripts/assign_subdomains.py
    ./scripts/assign_subdomains.py --dry-run   # Only list affected platforms
"""

import argparse
import asyncio
import sys
from contextlib import aclosing
from pathlib import Path

from rich.console import Console
from rich.table import Table

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "api"))

from infrastructure.database.dependencies import (  # noqa: E402
    close_database_connections,
    get_write_session,
)
from infrastructure.logging import configure_logging  # noqa: E402
from infrastructure.settings import get_tenancy_settings  # noqa: E402
from platforms.application.services import PlatformService  # noqa: E402
from platforms.infrastructure.platform_repository import (  # noqa: E402
    PlatformRepository,
)

console = Console()


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Assign slug-based subdomains to platforms that have none",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List platforms without a subdomain and exit",
    )
    return parser.parse_args()


async def list_pending() -> None:
    """Print the platforms that would be updated."""
    suffix = get_tenancy_settings().subdomain_suffixes[0]
    async with aclosing(get_write_session()) as sessions:
        async for session in sessions:
            platforms = await PlatformRepository(session).list_without_subdomain()

            if not platforms:
                console.print("[green]Every platform has a subdomain[/green]")
                return

            table = Table(title="Platforms without subdomain")
            table.add_column("ID", justify="right")
            table.add_column("Name")
            table.add_column("Would resolve at")
            for platform in platforms:
                table.add_row(
                    str(platform.id), platform.name, f"{platform.slug}{suffix}"
                )
            console.print(table)


async def assign() -> int:
    """Assign subdomains and return how many platforms were updated."""
    async with aclosing(get_write_session()) as sessions:
        async for session in sessions:
            service = PlatformService(
                platform_repository=PlatformRepository(session),
                session=session,
            )
            return await service.assign_missing_subdomains()
    return 0


async def main() -> None:
    args = parse_args()
    configure_logging()

    try:
        if args.dry_run:
            await list_pending()
            return

        with console.status("Assigning subdomains..."):
            updated = await assign()
        console.print(f"[green]Updated {updated} platform(s)[/green]")
    finally:
        await close_database_connections()


if __name__ == "__main__":
    asyncio.run(main())
