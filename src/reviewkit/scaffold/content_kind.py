"""Hugo archetypes that reviewkit knows how to scaffold."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContentKind:
    """A Hugo archetype plus the naming rules for its branch and directory.

    The slug is used verbatim in both names.
    """

    label: str
    kind: str
    section: str
    branch_prefix: str

    def branch_name(self, slug: str) -> str:
        return f"{self.branch_prefix}/{slug}"

    def content_path(self, slug: str) -> str:
        return f"{self.section}/{slug}/"


BOOK_REVIEW = ContentKind(
    label="Book review",
    kind="book",
    section="book-review",
    branch_prefix="book",
)
