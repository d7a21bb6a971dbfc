"""
Branch prefix catalog for mkcheckout.

The catalog is fixed: its order defines the menu order and the default selection.
"""

from dataclasses import dataclass

__all__ = [
    "PrefixEntry",
    "PREFIXES",
    "DEFAULT_PREFIX_INDEX",
    "prefix_codes",
]


@dataclass(frozen=True)
class PrefixEntry:
    """
    A commit-type prefix with its human-readable label.

    Attributes:
        code: Prefix used as the first branch name segment (e.g. "feat").
        label: Description shown next to the code in the selection menu.
    """

    code: str
    label: str

    def display(self) -> str:
        """Return the menu text for this entry, e.g. ``feat: 新機能追加``."""
        return f"{self.code}: {self.label}"


PREFIXES: tuple[PrefixEntry, ...] = (
    PrefixEntry("feat", "新機能追加"),
    PrefixEntry("fix", "バグ修正"),
    PrefixEntry("refactor", "コード修正"),
    PrefixEntry("chore", "それ以外"),
)

DEFAULT_PREFIX_INDEX: int = 0


def prefix_codes(catalog: tuple[PrefixEntry, ...] = PREFIXES) -> tuple[str, ...]:
    """Return the prefix codes of the catalog in display order."""
    return tuple(entry.code for entry in catalog)
