"""
utils/pagination.py
--------------------

Provides helpers for safely iterating through paginated API responses.

List endpoints answer with a ``data`` array and a ``pagination``
object (``current_page``, ``total_pages``...).  ``paginate`` abstracts
the control flow and enforces sensible limits to avoid infinite loops
or API misuse.  It stops when one of the following conditions is met:

* A page returns an empty list of items.
* The next token is missing from the response.
* The next token is identical to the previous token.
* The configured maximum number of pages or items is reached.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from conexa.core.config import Settings, get_settings


def paginate(
    fetch_page: Callable[[Any], Any],
    extract: Callable[[Any], Tuple[List[Any], Optional[Any]]],
    initial_token: Any = 1,
    settings: Optional[Settings] = None,
) -> List[Any]:
    """Iterate through pages of an API until termination criteria are met.

    :param fetch_page: function accepting a page token and returning the
        page, raw or converted.
    :param extract: function taking the page and returning a tuple of
        (items, next_token). ``next_token`` is ``None`` when no further
        pages exist.
    :param initial_token: starting token (defaults to page number ``1``)
    :param settings: settings providing ``max_pages``/``max_items``
    :return: a list containing all collected items across pages
    """
    settings = settings or get_settings()
    items: List[Any] = []
    token = initial_token
    previous_token = None
    page_count = 0

    while True:
        page_count += 1
        if page_count > settings.max_pages:
            break
        page = fetch_page(token)
        page_items, next_token = extract(page)
        if not page_items:
            break
        items.extend(page_items)
        if len(items) >= settings.max_items:
            del items[settings.max_items:]
            break
        # stop if next token is not present or repeats
        if next_token is None or next_token == previous_token or next_token == token:
            break
        previous_token = token
        token = next_token
    return items


def next_page(pagination: Any) -> Optional[int]:
    """Return the page after ``pagination.current_page`` or ``None`` on the last page."""
    if pagination is None:
        return None
    current = pagination.current_page
    total = pagination.total_pages
    if current is None or total is None or current >= total:
        return None
    return current + 1
