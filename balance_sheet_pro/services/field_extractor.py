"""Rule-based extractor for interest rate, bank charges and loan amount.

Deterministic regex rules only. Each field is independent: a field with no
matching rule is simply absent from the result.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

from balance_sheet_pro.models.document import ExtractedFact
from balance_sheet_pro.services.pattern_rules import FALLBACK_RULES, FIELD_RULES, FieldRule

RULE_CONFIDENCE = 0.75
FALLBACK_CONFIDENCE = 0.4
SNIPPET_CONTEXT = 60


class FieldExtractionService:
    """First-match-wins extractor over ordered rule tables."""

    def __init__(
        self,
        rules: Mapping[str, Tuple[FieldRule, ...]] = FIELD_RULES,
        fallback_rules: Mapping[str, Tuple[FieldRule, ...]] = FALLBACK_RULES
    ):
        self.rules = rules
        self.fallback_rules = fallback_rules

    def extract(self, text: str, filename: Optional[str] = None) -> Dict[str, ExtractedFact]:
        """Return the first matching literal for every field that has one.

        Args:
            text: Full statement text
            filename: Used in source references only

        Returns:
            Mapping of field name to the fact found for it
        """
        facts: Dict[str, ExtractedFact] = {}
        if not text:
            return facts

        for field, rules in self.rules.items():
            fact = self._first_match(field, rules, text, filename, RULE_CONFIDENCE)
            if fact is None and field in self.fallback_rules:
                fact = self._first_match(field, self.fallback_rules[field], text, filename, FALLBACK_CONFIDENCE)
            if fact is not None:
                facts[field] = fact

        return facts

    def _first_match(
        self,
        field: str,
        rules: Tuple[FieldRule, ...],
        text: str,
        filename: Optional[str],
        confidence: float
    ) -> Optional[ExtractedFact]:
        # Rule order is priority; position of the match in the text is irrelevant
        for rule in rules:
            m = rule.pattern.search(text)
            if not m:
                continue

            snippet = text[max(m.start() - SNIPPET_CONTEXT, 0): min(m.end() + SNIPPET_CONTEXT, len(text))]
            return ExtractedFact(
                key=field,
                value=m.group(1).strip(),
                confidence=confidence,
                rule=rule.name,
                source_text=snippet,
                source_reference=f"{filename or 'document'}:~{m.start()}-{m.end()}"
            )
        return None
