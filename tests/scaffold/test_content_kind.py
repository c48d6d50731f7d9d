import dataclasses

import pytest

from reviewkit.scaffold.content_kind import BOOK_REVIEW


@pytest.mark.unit
class TestBookReview:

    def test_branch_name_is_prefix_and_slug(self):
        assert BOOK_REVIEW.branch_name("dune") == "book/dune"

    def test_content_path_has_trailing_slash(self):
        assert BOOK_REVIEW.content_path("dune") == "book-review/dune/"

    def test_archetype_is_book(self):
        assert BOOK_REVIEW.kind == "book"
        assert BOOK_REVIEW.label == "Book review"

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            BOOK_REVIEW.kind = "film"
