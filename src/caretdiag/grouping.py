from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .errors import OverlappingLabels
from .source import Line, Source
from .spans import Label


logger = logging.getLogger(__name__)


def group_labels(source: Source, labels: Iterable[Label]) -> Iterator[tuple[Line, list[Label]]]:
    """Partition labels over the lines that anchor them, in source order.

    Lines without labels are skipped. A label starting inside a span accepted
    on an earlier line raises `OverlappingLabels`.
    """
    pending = list(labels)
    placed: list[Label] = []

    for line in source.lines():
        if not pending:
            break
        here: list[Label] = []
        rest: list[Label] = []
        for label in pending:
            if not line.anchors(label.span.start):
                rest.append(label)
                continue
            for prev in placed:
                if prev.span.contains(label.span.start):
                    raise OverlappingLabels(span=label.span, placed=prev.span)
            here.append(label)
        pending = rest
        if not here:
            continue
        logger.debug("line %d anchors %d label(s)", line.number, len(here))
        yield line, here
        placed.extend(here)

    for label in pending:
        logger.warning("label %s does not start on any line, dropped", label.span.format())
