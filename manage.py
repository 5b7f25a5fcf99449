#!/usr/bin/env python3
"""
Lansky ledger management CLI.

Usage:
    python manage.py serve           Start the API server
    python manage.py migrate         Apply database migrations
    python manage.py metrics         Print dashboard and tax figures
    python manage.py seed            Load the demo dataset
    python manage.py clear --yes     Delete all inventory, sales and expenses
    python manage.py export          Write the full ledger CSV
    python manage.py tax-export      Write the sales CSV for tax preparation
    python manage.py import FILE     Replace collections from a raw JSON file
    python manage.py advise          Ask the AI advisor about the ledger
"""

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path

from lansky.application.ledger_store import LedgerStore, get_ledger_store
from lansky.config import configure_logging, get_settings
from lansky.core.exceptions import LedgerError
from lansky.core.services.metrics import compute_metrics, compute_tax_summary, format_currency


async def _open_store() -> LedgerStore:
    """Migrate the database and return the loaded store."""
    from lansky.infrastructure.storage.sqlite.migrations.migrator import run_migrations

    results = await run_migrations()
    for result in results:
        if not result.success:
            raise SystemExit(f"Migration v{result.version} failed: {result.error}")
    return await get_ledger_store()


def _run(command: Callable[[argparse.Namespace, LedgerStore], Awaitable[None]]) -> Callable:
    """Wrap an async command: open the store, run it, close the database."""

    def runner(args: argparse.Namespace) -> None:
        async def main() -> None:
            from lansky.infrastructure.storage.sqlite import close_database

            try:
                await command(args, await _open_store())
            finally:
                await close_database()

        try:
            asyncio.run(main())
        except LedgerError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            sys.exit(1)

    return runner


def cmd_serve(args: argparse.Namespace) -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "lansky.api.main:app",
        host=args.host or settings.api.host,
        port=args.port or settings.api.port,
        reload=args.reload,
    )


def cmd_migrate(args: argparse.Namespace) -> None:
    from lansky.infrastructure.storage.sqlite.migrations.migrator import run_migrations

    results = asyncio.run(run_migrations())
    if not results:
        print("Database is up to date.")
    for result in results:
        state = "SUCCESS" if result.success else "FAILED"
        print(f"[{state}] v{result.version}: {result.name} ({result.execution_time_ms}ms)")
        if result.error:
            print(f"         Error: {result.error}")


async def cmd_metrics(args: argparse.Namespace, store: LedgerStore) -> None:
    state = store.state
    metrics = compute_metrics(state.sales, state.inventory)
    tax = compute_tax_summary(state.sales, state.expenses)

    print(f"Sales:               {len(state.sales)}")
    print(f"Revenue:             {format_currency(metrics.total_revenue)}")
    print(f"Cost of goods sold:  {format_currency(metrics.total_cogs)}")
    print(f"Net profit:          {format_currency(metrics.total_net_profit)}")
    print(f"Average margin:      {metrics.avg_margin:.1f}%")
    print(f"Active inventory:    {metrics.active_inventory_count} items, "
          f"{format_currency(metrics.active_inventory_value)} at cost")
    print(f"Other expenses:      {format_currency(tax.total_other_expenses)}")
    print(f"Net business income: {format_currency(tax.net_business_income)}")


async def cmd_seed(args: argparse.Namespace, store: LedgerStore) -> None:
    state = await store.seed_demo_data()
    print(f"Seeded {len(state.inventory)} items, {len(state.sales)} sales, "
          f"{len(state.expenses)} expenses.")


async def cmd_clear(args: argparse.Namespace, store: LedgerStore) -> None:
    await store.clear_all_data(confirm=args.yes)
    print("All inventory, sales and expenses deleted.")


async def cmd_export(args: argparse.Namespace, store: LedgerStore) -> None:
    from lansky.application.use_cases import ExportLedgerUseCase

    export = await ExportLedgerUseCase(store=store).ledger_csv()
    output = args.output or Path(export.filename)
    output.write_bytes(export.content)
    print(f"Wrote {export.rows} rows to {output}")


async def cmd_tax_export(args: argparse.Namespace, store: LedgerStore) -> None:
    from lansky.application.use_cases import ExportLedgerUseCase

    export = await ExportLedgerUseCase(store=store).sales_csv(args.year)
    output = args.output or Path(export.filename)
    output.write_bytes(export.content)
    print(f"Wrote {export.rows} sales to {output}")


async def cmd_import(args: argparse.Namespace, store: LedgerStore) -> None:
    with args.file:
        replaced = await store.import_raw_state(args.file.read())
    if replaced:
        print(f"Replaced: {', '.join(replaced)}")
    else:
        print("Nothing to import (no sales, expenses or inventory keys).")


async def cmd_advise(args: argparse.Namespace, store: LedgerStore) -> None:
    from lansky.application.use_cases import GenerateAdviceUseCase

    result = await GenerateAdviceUseCase(store=store).execute()
    print(result.advice)


def main() -> None:
    configure_logging()

    parser = argparse.ArgumentParser(
        description="Lansky ledger management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: API_PORT)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Apply database migrations")
    p_migrate.set_defaults(func=cmd_migrate)

    # metrics
    p_metrics = sub.add_parser("metrics", help="Print dashboard and tax figures")
    p_metrics.set_defaults(func=_run(cmd_metrics))

    # seed
    p_seed = sub.add_parser("seed", help="Replace the ledger with the demo dataset")
    p_seed.set_defaults(func=_run(cmd_seed))

    # clear
    p_clear = sub.add_parser("clear", help="Delete all inventory, sales and expenses")
    p_clear.add_argument("--yes", action="store_true", help="Confirm the deletion")
    p_clear.set_defaults(func=_run(cmd_clear))

    # export
    p_export = sub.add_parser("export", help="Write the full ledger CSV")
    p_export.add_argument("--output", "-o", type=Path, default=None, help="Output file")
    p_export.set_defaults(func=_run(cmd_export))

    # tax-export
    p_tax = sub.add_parser("tax-export", help="Write the sales CSV for tax preparation")
    p_tax.add_argument("--year", type=int, default=None, help="Year in the file name (default: current)")
    p_tax.add_argument("--output", "-o", type=Path, default=None, help="Output file")
    p_tax.set_defaults(func=_run(cmd_tax_export))

    # import
    p_import = sub.add_parser("import", help="Replace collections from a raw JSON file")
    p_import.add_argument("file", type=argparse.FileType("rb"), help="JSON file with sales/expenses/inventory")
    p_import.set_defaults(func=_run(cmd_import))

    # advise
    p_advise = sub.add_parser("advise", help="Ask the AI advisor about the ledger")
    p_advise.set_defaults(func=_run(cmd_advise))

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
