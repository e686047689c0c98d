from __future__ import annotations

import pytest

from persistence import DEFAULT_PAGE_ID, InvalidPageIdError, page_id_from_segments, validate_page_id


def test_segments_are_joined_with_slash():
    assert page_id_from_segments(["about", "team"]) == "about/team"


@pytest.mark.parametrize("segments", [None, [], [""]])
def test_no_segments_defaults_to_dashboard(segments):
    assert page_id_from_segments(segments) == DEFAULT_PAGE_ID == "dashboard"


def test_custom_default():
    assert page_id_from_segments([], default="home") == "home"


def test_valid_ids_pass_through():
    assert validate_page_id("about/team") == "about/team"
    assert validate_page_id("v1.2-notes") == "v1.2-notes"


def test_invalid_id_is_a_value_error():
    with pytest.raises(ValueError):
        validate_page_id("../escape")
    with pytest.raises(InvalidPageIdError):
        validate_page_id("a/\x00")
