"""
Pagination

Slices the filtered deal list into fixed-size, 1-based pages and
builds the page window shown by the navigation controls.
"""

# Python Packages
import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

# Constants
from ..base import constants

# Exceptions
from ..util.exceptions import PageOutOfRangeError

# App Messages
from ..util import messages





@dataclass
class PageWindow:
    total_items: int
    total_pages: int
    current_page: int
    start: int
    end: int
    pages: List[Union[int, str]] = field(default_factory = list)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages



def total_pages(total_items: int, page_size: int) -> int:
    return math.ceil(total_items / page_size) if total_items > 0 else 0



def paginate(items: Sequence, page_size: int, page_number: int) -> Tuple[list, PageWindow]:
    """
    Take one page

    Args:
        items: filtered and sorted deals
        page_size: items per page
        page_number: 1-based page; page 1 of an empty list is allowed

    Returns:
        tuple: (items on the page, PageWindow)

    Raises:
        ValueError: page_size is not positive
        PageOutOfRangeError: page_number outside 1..total_pages
    """

    if not isinstance(page_size, int) or page_size < 1:
        raise ValueError(messages.ERROR["INVALID_PAGE_SIZE"].format(page_size = page_size))

    total = len(items)
    pages = total_pages(total, page_size)

    if not isinstance(page_number, int) or page_number < 1 or page_number > max(pages, 1):
        raise PageOutOfRangeError(page_number, pages)

    offset = (page_number - 1) * page_size
    page_items = list(items[offset: offset + page_size])

    window = PageWindow(
        total_items = total,
        total_pages = pages,
        current_page = page_number,
        start = offset + 1 if page_items else 0,
        end = offset + len(page_items),
        pages = page_window(pages, page_number)
    )

    return page_items, window



def page_window(pages: int, current: int) -> List[Union[int, str]]:
    """
    Compressed page list

    Up to PAGE_WINDOW_MAX_PAGES pages are all listed. Beyond that: first,
    last and current +/- 1, with an ellipsis over every gap, e.g.
    (10, 5) -> [1, '...', 4, 5, 6, '...', 10].
    """

    if pages <= constants.PAGE_WINDOW_MAX_PAGES:
        return list(range(1, pages + 1))

    shown = sorted(
        {1, pages, current - 1, current, current + 1} & set(range(1, pages + 1))
    )

    window = []
    for page in shown:
        if window and page - window[-1] > 1:
            window.append(constants.PAGE_ELLIPSIS)
        window.append(page)

    return window
