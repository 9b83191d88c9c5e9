"""Batch tokenizer events into table rows."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .models import Table
from .tokenizer import Event, RowBreak, Token

logger = logging.getLogger(__name__)


def collect_rows(
    events: Iterable[Event],
    exclude_header: bool = False,
    header: Sequence[str] | None = None,
) -> Table:
    """
    Build a Table from a token/row-boundary stream.

    Args:
        events: Output of ``tokenize``
        exclude_header: Discard everything up to the first row boundary
        header: Names that replace the first collected row. Ignored when
            ``exclude_header`` is set.

    Returns:
        The materialized table. Blank lines never produce rows.
    """
    rows: list[list[str]] = []
    current: list[str] = []
    skipping = exclude_header

    for event in events:
        if isinstance(event, Token):
            if not skipping:
                current.append(event.text)
        elif isinstance(event, RowBreak):
            if skipping:
                skipping = False
                continue
            if current:
                rows.append(current)
                current = []

    # Last row when input does not end with a newline
    if current:
        rows.append(current)

    if header:
        if exclude_header:
            logger.debug("Ignoring explicit header %r: first line is excluded", list(header))
        elif rows:
            rows[0] = list(header)
        else:
            rows.append(list(header))

    logger.debug("Collected %d row(s)", len(rows))
    return Table(rows=rows)
