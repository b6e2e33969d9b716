"""Unit tests for error types and size formatting."""

import pytest

from .errors import (
    EmptyResponseError,
    LinguistError,
    RemoteCallError,
    SizeLimitExceeded,
    format_file_size,
)


@pytest.mark.parametrize(
    "size,expected",
    [
        (0, "0 Bytes"),
        (512, "512 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024, "1 MB"),
        (5 * 1024 * 1024, "5 MB"),
        (3 * 1024**3, "3 GB"),
    ],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_hierarchy():
    assert issubclass(EmptyResponseError, RemoteCallError)
    assert issubclass(RemoteCallError, LinguistError)
    assert issubclass(SizeLimitExceeded, LinguistError)


def test_size_limit_message():
    error = SizeLimitExceeded("a.pdf", 1536, 1024)
    assert str(error) == "File is too large (1.5 KB). Max allowed size is 1 KB."
    assert error.size == 1536
    assert error.limit == 1024
