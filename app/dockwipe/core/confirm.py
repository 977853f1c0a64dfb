"""Operator confirmation gate.

Every destructive action passes through :func:`confirm`. The answer is read
once; only "y" or "yes" (any case) accepts, and there is no re-prompt on
unrecognized input. Closed input counts as a decline.
"""

import logging
from collections.abc import Callable

import typer

logger = logging.getLogger(__name__)

# Signature shared by confirm() and the test doubles injected in its place
ConfirmFn = Callable[[str], bool]

_AFFIRMATIVE: frozenset[str] = frozenset({"y", "yes"})


def is_affirmative(answer: str) -> bool:
    """Check whether an operator answer accepts the prompt.

    Args:
        answer: Raw line typed by the operator.

    Returns:
        True only for "y" or "yes" in any letter case.
    """
    return answer.strip().lower() in _AFFIRMATIVE


def confirm(message: str, default: bool = False) -> bool:
    """Ask the operator a yes/no question.

    Args:
        message: Question shown to the operator.
        default: Answer assumed on empty input.

    Returns:
        True if the operator accepted. End of input declines regardless of
        the default.
    """
    suffix = "[Y/n]" if default else "[y/N]"
    try:
        answer: str = typer.prompt(f"{message} {suffix}", default="", show_default=False)
    except typer.Abort:
        logger.debug("Input closed at %r, declining", message)
        return False

    if not answer.strip():
        accepted = default
    else:
        accepted = is_affirmative(answer)
    logger.debug("Confirmation %r -> %s", message, accepted)
    return accepted
