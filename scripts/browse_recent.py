"""Page through the most recent ledger transactions from the command line.

Usage:
    PYTHONPATH=src python scripts/browse_recent.py [PAGES]

Set LEDGERVIEW_OFFLINE_MODE=true to browse the bundled fixture set instead
of a live node.
"""

import asyncio
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logger = logging.getLogger("browse_recent")

# Suppress noisy loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def separator(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


async def main(pages: int) -> None:
    from ledgerview.container import Container
    from ledgerview.domain.models.load_state import Failed

    container = Container()
    settings = container.settings()
    source = "fixtures" if settings.offline_mode else settings.rpc_urls.get(settings.network, "?")
    separator(f"Recent transactions - {settings.network} ({source})")

    controller = container.page_controller()
    try:
        await controller.mount()
        for page in range(1, pages + 1):
            if page > 1:
                controller.change_page(page)
            await controller.machine.wait_idle()

            state = controller.load_state
            if isinstance(state, Failed):
                logger.error("Page %d failed: %s (%s)", page, state.message, state.error_type)
                break

            meta = controller.pagination
            print(f"Page {meta.current_page}/{meta.max_page}  ({meta.total_count} transactions)")
            for row in controller.rows():
                addresses = " -> ".join(cell.name for cell in row.addresses)
                kind = row.tx_types.kind.value if row.tx_types.kind else "?"
                print(
                    f"  {row.date:<14} {kind:<15} {row.transaction_id[0].name:<12} "
                    f"{addresses:<26} {row.amount:>24} {row.gas:>10}"
                )
            if controller.is_empty:
                print("  No Transactions Found")
            if meta.current_page >= meta.max_page:
                break
    finally:
        controller.close()
        await container.http_client().close()


if __name__ == "__main__":
    asyncio.run(main(int(sys.argv[1]) if len(sys.argv) > 1 else 1))
