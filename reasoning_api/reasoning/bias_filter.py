"""
Bias Filter

Two keyword passes over a text:

  detect_bias           counts absolute/stereotyping phrases and notes
                        gendered slash-forms that have inclusive alternatives
  suggest_improvements  rewrites a subset of those phrases with softer wording

All matching is case-insensitive substring matching, so 'never' also hits
'nevertheless'. The tables are ordered lists, not dicts keyed by phrase:
their order fixes both the order of reported issues and the order in
which rewrites are applied.

Rewrites test each entry against the pristine input but apply to one
shared working buffer, so an entry is reported whenever the original
text contained it, even if an earlier rewrite already changed that span.
"""

import logging
import re

from reasoning_api.models.schemas import BiasAnalysis, BiasLevel

logger = logging.getLogger(__name__)

BIAS_INDICATORS: list[str] = [
    "always", "never", "all people", "everyone knows",
    "obviously", "clearly", "of course", "definitely",
    "men are", "women are", "people from", "typical",
]

# Reported as advice only; these do not raise bias_score.
GENDERED_PATTERNS: list[str] = ["he/she", "his/her", "man/woman"]

BALANCED_ALTERNATIVES: list[tuple[str, str]] = [
    ("always", "often"),
    ("never", "rarely"),
    ("everyone knows", "it is commonly understood"),
    ("obviously", "it appears that"),
    ("clearly", "it seems that"),
    ("definitely", "likely"),
]

CONFIDENCE_PER_INDICATOR = 0.2


def detect_bias(text: str) -> BiasAnalysis:
    """Scan text for bias indicators. Pure and total."""
    text_lower = text.lower()
    bias_score = 0
    issues: list[str] = []

    for keyword in BIAS_INDICATORS:
        if keyword in text_lower:
            bias_score += 1
            issues.append(f"Potential absolute statement: '{keyword}'")

    for pattern in GENDERED_PATTERNS:
        if pattern in text_lower:
            issues.append(f"Consider using inclusive language instead of '{pattern}'")

    return BiasAnalysis(
        bias_score=bias_score,
        issues=issues,
        confidence=min(bias_score * CONFIDENCE_PER_INDICATOR, 1.0),
    )


def suggest_improvements(
    text: str,
    alternatives: list[tuple[str, str]] = BALANCED_ALTERNATIVES,
) -> tuple[str, list[str]]:
    """Rewrite biased phrases with softer alternatives.

    Returns (improved_text, suggestions). Each suggestion names one
    applied substitution, in table order.
    """
    text_lower = text.lower()
    improved_text = text
    suggestions: list[str] = []

    for biased, alternative in alternatives:
        if biased not in text_lower:
            continue
        improved_text, replaced = re.subn(
            re.escape(biased), lambda _match: alternative, improved_text, flags=re.IGNORECASE
        )
        logger.debug("Replaced %d occurrence(s) of %r with %r", replaced, biased, alternative)
        suggestions.append(f"Replaced '{biased}' with '{alternative}'")

    return improved_text, suggestions


def bias_level(bias_score: int) -> BiasLevel:
    """Band a bias score for display: 0-1 low, 2-3 medium, 4+ high."""
    if bias_score <= 1:
        return "low"
    if bias_score <= 3:
        return "medium"
    return "high"
