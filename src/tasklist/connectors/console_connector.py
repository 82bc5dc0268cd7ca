# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.state import AppState
from ..tasks.task_store import InvalidDescriptionError, TaskStoreError

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    registry: MenuRegistry | None = None,
) -> None:
    """
    Interactive menu loop.

    Ends on the Exit option, EOF or Ctrl+C. Store failures are reported and the
    loop keeps going.
    """
    registry = registry or menu_registry
    logger.info("Console connector started (store=%s).", type(state.task_store).__name__)

    while True:
        write("\n" + registry.build_menu())
        try:
            choice = read("Choose an option: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if choice == str(registry.exit_choice):
            write("Exiting...")
            break

        try:
            reply = registry.handle(state, choice, read, write)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed inside a menu action, exiting.")
            break
        except TaskStoreError as e:
            logger.exception("Task store operation failed.")
            reply = f"Storage error: {e}"
        except InvalidDescriptionError as e:
            logger.info("Description rejected: %s", e)
            reply = f"Rejected: {e}"
        except Exception:
            logger.exception("Menu handler crashed.")
            reply = "Internal error while handling the menu option."

        write(reply)

    logger.info("Console connector finished.")
