"""Tests for extension extraction and category classification."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from dirsort.core.categories import classify, extract_extension
from dirsort.shared.constants import CATEGORY_TABLE, FALLBACK_CATEGORY, Categories

TABLE_PAIRS = [
    (extension, category)
    for category, extensions in CATEGORY_TABLE.items()
    for extension in sorted(extensions)
]


@pytest.mark.parametrize(("extension", "category"), TABLE_PAIRS)
def test_classify_every_listed_extension(extension: str, category: str) -> None:
    """Each listed extension lands in the category that lists it."""
    assert classify(extension) == category


@pytest.mark.parametrize("extension", [".xyz", ".exe", ".md", ".tgz", ""])
def test_classify_unknown_extension_falls_back(extension: str) -> None:
    assert classify(extension) == FALLBACK_CATEGORY == "outros"


def test_classify_is_case_insensitive_after_extraction() -> None:
    assert classify(extract_extension("photo.JPG")) == Categories.IMAGES
    assert classify(extract_extension("photo.jpg")) == Categories.IMAGES
    assert classify(extract_extension("Report.PdF")) == Categories.DOCUMENTS


def test_classify_first_declared_category_wins() -> None:
    table = MappingProxyType(
        {
            "first": frozenset({".dup"}),
            "second": frozenset({".dup", ".other"}),
        },
    )

    assert classify(".dup", table) == "first"
    assert classify(".other", table) == "second"


def test_extensions_are_unique_across_categories() -> None:
    seen: dict[str, str] = {}
    for category, extensions in CATEGORY_TABLE.items():
        for extension in extensions:
            assert extension not in seen, f"{extension} in {seen.get(extension)} and {category}"
            seen[extension] = category


def test_category_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CATEGORY_TABLE["new"] = frozenset({".new"})  # type: ignore[index]


def test_category_table_declaration_order() -> None:
    assert list(CATEGORY_TABLE) == [
        "images",
        "documents",
        "videos",
        "audio",
        "archives",
        "code",
    ]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("photo.JPG", ".jpg"),
        ("notes.txt", ".txt"),
        ("backup.tar.gz", ".gz"),
        ("README", ""),
        ("run", ""),
        (".gitignore", ""),
        (".env.local", ".local"),
    ],
)
def test_extract_extension(name: str, expected: str) -> None:
    assert extract_extension(name) == expected
