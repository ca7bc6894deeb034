"""Detection of the units a statement's amounts are stated in."""

import logging
from typing import Pattern, Sequence, Tuple

from balance_sheet_pro.models.document import UnitScale
from balance_sheet_pro.services.pattern_rules import UNIT_SCALE_RULES

logger = logging.getLogger(__name__)

DEFAULT_PREFIX_CHARS = 20_000


def detect_unit_scale(
    text: str,
    prefix_chars: int = DEFAULT_PREFIX_CHARS,
    rules: Sequence[Tuple[UnitScale, Pattern]] = UNIT_SCALE_RULES
) -> UnitScale:
    """Find the units declaration near the top of the statement text.

    Only the first ``prefix_chars`` characters are examined; declarations sit
    next to statement headings, not in footnotes. Rules are tried in priority
    order (crores, lakhs, thousands) and the first hit wins.

    Args:
        text: Text accumulated by the page scanner
        prefix_chars: Number of leading characters to examine
        rules: (scale, pattern) pairs in priority order

    Returns:
        Detected scale, ``UnitScale.ABSOLUTE`` when nothing is declared
    """
    if not text:
        return UnitScale.ABSOLUTE

    prefix = text[:prefix_chars]
    for scale, pattern in rules:
        match = pattern.search(prefix)
        if match:
            logger.debug("Unit scale %s from %r", scale.name, match.group(0))
            return scale

    return UnitScale.ABSOLUTE
