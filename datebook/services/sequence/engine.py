"""Generation loop: walks candidates forward and folds accepted ones into a list."""

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from datebook.errors import GenerationLimitError

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")


def generate(
    start: S,
    step: Callable[[S, Sequence[T]], S | None],
    convert: Callable[[S, Sequence[T]], T],
    include: Callable[[T, Sequence[T]], bool],
    keep_going: Callable[[T, Sequence[T]], bool],
    max_iterations: int | None = None,
) -> list[T]:
    """Produce the accepted items, in order, starting at ``start``.

    Each round converts the current candidate into an item, stops if
    ``keep_going`` rejects it, keeps it if ``include`` accepts it and then
    steps to the next candidate. All callbacks see the items accepted so far.
    Generation also ends when ``step`` returns None, meaning no candidates
    are left.

    Args:
        start: First candidate.
        step: Next candidate after the current one, or None if there is none.
        convert: Turns a candidate into an item.
        include: Whether an item is accepted.
        keep_going: Whether generation continues with this item.
        max_iterations: Most candidates that may pass ``keep_going``
            before giving up. None or 0 means no limit.

    Raises:
        GenerationLimitError: If ``max_iterations`` candidates were examined.
    """
    accepted: list[T] = []
    current = start
    examined = 0

    while True:
        item = convert(current, accepted)
        if not keep_going(item, accepted):
            break
        if max_iterations and examined >= max_iterations:
            logger.warning(
                "Stopping after %d candidates with %d accepted", examined, len(accepted)
            )
            raise GenerationLimitError(max_iterations)

        examined += 1
        if include(item, accepted):
            accepted.append(item)

        following = step(current, accepted)
        if following is None:
            logger.debug("No candidates left after %r", current)
            break
        current = following

    logger.debug("Accepted %d of %d candidates", len(accepted), examined)
    return accepted
