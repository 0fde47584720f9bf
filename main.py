# main.py

import sys

from witsearch.bootstrap import build_engine
from witsearch.interface.cli import (
    display_welcome_banner,
    display_catalog_status,
    prompt_for_query,
    display_outcome,
    display_error,
    ask_continue,
)


def main() -> None:
    display_welcome_banner()

    # ── 1. Initialize infrastructure ─────────────────────────────────────────
    try:
        engine = build_engine()
    except (RuntimeError, ValueError, FileNotFoundError) as error:
        display_error(str(error))
        sys.exit(1)

    if len(engine.repository) == 0:
        display_error(f"No items found in '{engine.settings.catalog_path}'.")
        sys.exit(1)

    display_catalog_status(len(engine.repository), engine.expander.index.group_count)

    # ── 2. Interactive search loop ────────────────────────────────────────────
    while True:
        query = prompt_for_query()
        outcome = engine.service.search(query)
        display_outcome(query, outcome)

        if not ask_continue():
            break


if __name__ == "__main__":
    main()
