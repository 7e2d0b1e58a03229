"""Registry of tour pages.

Each page is a module with numbered ``demo_*`` functions and a ``run_all``
that executes them in order. Demos print numbered lines, so a missing line
is immediately obvious when reading the output.

To add a page:
1. Create ``<topic>_page.py`` with numbered ``demo_*`` functions and a ``run_all``.
2. Map the page name to the module in ``PAGE_MODULES``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Callable

from guided_tour.exceptions import UnknownPageError

PAGE_MODULES = {
    "generics": "generics_page",
    "protocols_extensions": "protocols_page",
}

PAGES: list[tuple[str, Callable[[], None]]] = []


def register(page_name: str) -> None:
    module = import_module(f"{__name__}.{PAGE_MODULES[page_name]}")
    PAGES.append((page_name, module.run_all))


for name in PAGE_MODULES:
    register(name)


def get_page(page_name: str) -> Callable[[], None]:
    """Return the ``run_all`` of ``page_name`` or raise :class:`UnknownPageError`."""
    for registered, runner in PAGES:
        if registered == page_name:
            return runner
    known = ", ".join(registered for registered, _ in PAGES)
    raise UnknownPageError(f"Unknown page '{page_name}'. Known pages: {known}.")
