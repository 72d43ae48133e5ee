# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the collision-checked target file collection."""

import pytest

from apiforge.generator.errors import ResolveError, ResolveErrorKind
from apiforge.generator.target_files import TargetFile, TargetFiles


class TestInsert:
    def test_insert_and_get(self) -> None:
        files = TargetFiles()
        files.insert(TargetFile("foo", "contentA"))
        assert "foo" in files
        assert files.get("foo") == "contentA"
        assert len(files) == 1

    def test_duplicate_filename(self) -> None:
        files = TargetFiles([TargetFile("foo", "contentA")])
        with pytest.raises(ResolveError) as exc_info:
            files.insert(TargetFile("foo", "contentB"))
        assert exc_info.value.kind is ResolveErrorKind.DUPLICATE_FILENAME
        assert exc_info.value.filenames == ["foo"]
        assert files.get("foo") == "contentA"

    def test_identical_content_still_collides(self) -> None:
        files = TargetFiles([TargetFile("foo", "same")])
        with pytest.raises(ResolveError):
            files.insert(TargetFile("foo", "same"))

    def test_insertion_order(self) -> None:
        files = TargetFiles([TargetFile("b", ""), TargetFile("a", ""), TargetFile("c", "")])
        assert files.filenames() == ["b", "a", "c"]
        assert [f.filename for f in files] == ["b", "a", "c"]


class TestInsertAll:
    def test_merge(self) -> None:
        files = TargetFiles([TargetFile("a", "1")])
        files.insert_all(TargetFiles([TargetFile("b", "2"), TargetFile("c", "3")]))
        assert files.items() == [("a", "1"), ("b", "2"), ("c", "3")]

    def test_batch_lists_every_collision(self) -> None:
        files = TargetFiles([TargetFile("foo", "1"), TargetFile("bar", "2")])
        batch = TargetFiles([TargetFile("foo", "3"), TargetFile("new", "4"), TargetFile("bar", "5")])
        with pytest.raises(ResolveError) as exc_info:
            files.insert_all(batch)
        assert exc_info.value.kind is ResolveErrorKind.DUPLICATE_FILENAMES
        assert exc_info.value.filenames == ["foo", "bar"]
        assert "'foo'" in str(exc_info.value)
        assert "'bar'" in str(exc_info.value)

    def test_failed_batch_inserts_nothing(self) -> None:
        files = TargetFiles([TargetFile("foo", "1")])
        with pytest.raises(ResolveError):
            files.insert_all(TargetFiles([TargetFile("new", "2"), TargetFile("foo", "3")]))
        assert files.filenames() == ["foo"]


def test_equality_compares_names_and_content() -> None:
    assert TargetFiles([TargetFile("a", "1")]) == TargetFiles([TargetFile("a", "1")])
    assert TargetFiles([TargetFile("a", "1")]) != TargetFiles([TargetFile("a", "2")])
