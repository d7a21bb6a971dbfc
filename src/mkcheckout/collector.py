"""
Interactive collection of branch fields.
"""

from loguru import logger

from .branch_spec import BranchSpec
from .errors import InputError, NoPrefixSelected
from .prefixes import DEFAULT_PREFIX_INDEX, PREFIXES, PrefixEntry
from .prompts import Prompter

__all__ = [
    "InputCollector",
]

PREFIX_PROMPT: str = "プレフィックスを選択してください"
REFERENCE_PROMPT: str = "Option: リファレンス（e.g.issue-1）"
DESCRIPTION_PROMPT: str = "ブランチの目的"
START_BRANCH_PROMPT: str = "Option: 開始ブランチ（e.g.origin/main）"


class InputCollector:
    """
    Ask for prefix, reference, description and start branch, in that order.

    Any failure stops the sequence: later prompts are never shown.

    Args:
        prompter: Capability used to ask the user.
        catalog: Prefix entries offered in the selection menu.
    """

    def __init__(self, prompter: Prompter, catalog: tuple[PrefixEntry, ...] = PREFIXES):
        self.prompter = prompter
        self.catalog = catalog

    def collect(self) -> BranchSpec:
        """
        Run the prompts and build a BranchSpec.

        Returns:
            BranchSpec: The collected answers.

        Raises:
            NoPrefixSelected: If the prefix menu is cancelled.
            InputError: If any prompt fails.
        """
        prefix = self._select_prefix()
        reference = self.prompter.text(REFERENCE_PROMPT, allow_empty=True)
        description = self.prompter.text(DESCRIPTION_PROMPT, allow_empty=False)
        if not description:
            raise InputError("ブランチの目的が入力されていません")
        start_branch = self.prompter.text(START_BRANCH_PROMPT, allow_empty=True)
        logger.debug(
            f"Collected answers: prefix={prefix!r} reference={reference!r} "
            f"description={description!r} start_branch={start_branch!r}"
        )
        return BranchSpec.from_answers(prefix, reference, description, start_branch)

    def _select_prefix(self) -> str:
        items = [entry.display() for entry in self.catalog]
        index = self.prompter.select(PREFIX_PROMPT, items, default=DEFAULT_PREFIX_INDEX)
        if index is None:
            logger.error("No prefix selected")
            raise NoPrefixSelected()
        if not 0 <= index < len(self.catalog):
            logger.error(f"Prompter returned out-of-range index {index}")
            raise InputError(f"不正な選択です: {index}")
        return self.catalog[index].code
