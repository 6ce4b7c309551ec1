#!/usr/bin/env python3
"""
CLI script to seed the database with demo users, activities and emission factors.

Usage:
    # Basic seeding (built-in factors overridden by app/test/test_data/*.csv)
    python scripts/seed_database.py

    # Clear existing data before seeding
    python scripts/seed_database.py --clear

    # Apply Alembic migrations first
    python scripts/seed_database.py --migrate

    # Use a different data directory or configuration
    python scripts/seed_database.py --data-dir path/to/factor/files --config production.toml
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.config import get_config
from app.database.base import apply_db_migration, get_db_url, get_engine_kw
from app.database.session_manager.db_session import Database
from app.services.seed_database import DemoDataSeeder
from app.utils.constants import ConfigFile
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create Rich console
console = Console()


def print_header(text: str, style: str = "bold cyan"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="cyan",
            padding=(1, 2),
        )
    )


def print_config(args):
    """Print configuration details."""
    config_table = Table(show_header=False, box=None, padding=(0, 2))
    config_table.add_column("Setting", style="bold yellow")
    config_table.add_column("Value", style="green")

    config_table.add_row("⚙️  Config File", args.config)
    config_table.add_row("📁 Data Directory", args.data_dir)
    config_table.add_row("🗑️  Clear Existing", "Yes" if args.clear else "No")
    config_table.add_row("🛠️  Apply Migrations", "Yes" if args.migrate else "No")

    console.print(config_table)
    console.print()


def print_stats(stats: dict):
    """Print seeding statistics using Rich Table."""
    print_header("SEEDING STATISTICS", "bold green")

    stats_table = Table(show_header=True, box=None, padding=(0, 2))
    stats_table.add_column("Category", style="bold cyan", width=30)
    stats_table.add_column("Count", justify="right", style="bold green")

    stats_table.add_row("🚌 Transport Factors", str(stats["transport_factors"]))
    stats_table.add_row("🥗 Food Factors", str(stats["food_factors"]))
    stats_table.add_row("👤 Users", str(stats["users"]))
    stats_table.add_row("📅 Activities", str(stats["activities"]))

    console.print(stats_table)
    console.print()

    if not stats["users"]:
        console.print(
            Panel(
                "[yellow]⚠️  Users already present, demo users and activities skipped[/yellow]",
                border_style="yellow",
            )
        )
        console.print()


async def main():
    """Main entry point for the seeding script."""
    parser = argparse.ArgumentParser(
        description="Seed the database with demo users, activities and emission factors"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear existing data before seeding",
    )
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Apply Alembic migrations before seeding",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default="app/test/test_data",
        help="Directory containing factor files (default: app/test/test_data)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=ConfigFile.DEVELOPMENT,
        choices=[ConfigFile.DEVELOPMENT, ConfigFile.PRODUCTION, ConfigFile.TEST],
        help=f"Configuration file in app/cfg (default: {ConfigFile.DEVELOPMENT})",
    )

    args = parser.parse_args()

    print_header("DATABASE SEEDING", "bold cyan")
    print_config(args)

    try:
        config = get_config(args.config)

        if args.migrate:
            with console.status("[bold cyan]Applying migrations...", spinner="dots"):
                await apply_db_migration(config)

        async_db_url = get_db_url(config)
        Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
        logger.info("Database initialized")

        with console.status("[bold cyan]Seeding database...", spinner="dots"):
            async with DemoDataSeeder(data_dir=args.data_dir) as seeder:
                stats = await seeder.seed_all(clear_existing=args.clear)

        print_stats(stats)

        console.print(
            Panel(
                Text("✅ SEEDING COMPLETED SUCCESSFULLY", justify="center"),
                border_style="bold green",
                style="bold green",
            )
        )

    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)

        console.print()
        console.print(
            Panel(
                f"[bold red]❌ SEEDING FAILED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        console.print()
        sys.exit(1)

    finally:
        await Database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
