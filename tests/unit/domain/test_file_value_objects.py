import pytest

from file_store.app.domain.files.access import can_retrieve
from file_store.app.domain.files.value_objects import (
    new_storage_name,
    sanitize_filename,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("report.pdf", "report.pdf"),
        ("my report (final).pdf", "my_report_final_.pdf"),
        ("../../etc/passwd", ".._.._etc_passwd"),
        ("a__b", "a_b"),
        ("ünïcödé.txt", "_n_c_d_.txt"),
        ("keep-these_chars.ok", "keep-these_chars.ok"),
    ],
)
def test_sanitize_filename(raw, expected):
    assert sanitize_filename(raw) == expected


def test_sanitized_names_are_single_path_segments():
    assert "/" not in sanitize_filename("a/b\\c")
    assert "\\" not in sanitize_filename("a/b\\c")


def test_storage_names_do_not_repeat():
    names = {new_storage_name() for _ in range(1000)}
    assert len(names) == 1000
    assert all(sanitize_filename(n) == n for n in names)


@pytest.mark.parametrize(
    "is_private, authenticated, allowed",
    [
        (False, False, True),
        (False, True, True),
        (True, True, True),
        (True, False, False),
    ],
)
def test_access_policy(is_private, authenticated, allowed):
    assert can_retrieve(is_private=is_private, authenticated=authenticated) is allowed
