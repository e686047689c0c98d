from __future__ import annotations

from typing import Iterable

from .errors import InvalidPageIdError

DEFAULT_PAGE_ID = "dashboard"


def page_id_from_segments(segments: Iterable[str] | None, *, default: str = DEFAULT_PAGE_ID) -> str:
    """
    Join route segments into a page identifier.

    ["about", "team"] -> "about/team"; no segments -> the default page.
    """
    parts = [s for s in (segments or []) if s]
    if not parts:
        return default
    return "/".join(parts)


def validate_page_id(page_id: str) -> str:
    """
    Reject identifiers that are empty or would escape the store root.
    """
    if not isinstance(page_id, str) or not page_id:
        raise InvalidPageIdError("page id must be a non-empty string")
    if "\x00" in page_id or "\\" in page_id:
        raise InvalidPageIdError(f"page id contains a forbidden character: {page_id!r}")
    if page_id.startswith("/"):
        raise InvalidPageIdError(f"page id must be relative: {page_id!r}")
    for segment in page_id.split("/"):
        if segment in ("", ".", ".."):
            raise InvalidPageIdError(f"page id has an invalid segment: {page_id!r}")
    return page_id
