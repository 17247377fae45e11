"""
Input Classifier

Gives a user's input a shallow four-field classification. Nothing here
understands language; every field comes from a fixed rule:

  1. Complexity: whitespace token count. <10 low, 10-29 medium, 30+ high
  2. Category: first keyword table (creative, analytical, practical) with
     a case-insensitive substring hit, else general
  3. Context: first context label sharing a word with the input, else a
     label picked at random
  4. Reasoning type: '?' -> problem-solving, why/how -> explanatory,
     compare/vs -> comparative, else exploratory

The random context fallback is the only nondeterminism in the pipeline.
Pass a seeded random.Random (or anything with a choice() method) to pin it.
"""

import logging
import random

from reasoning_api.models.schemas import (
    Category,
    Complexity,
    ContextLabel,
    InputAnalysis,
    ReasoningType,
)

logger = logging.getLogger(__name__)

MEDIUM_COMPLEXITY_MIN_TOKENS = 10
HIGH_COMPLEXITY_MIN_TOKENS = 30

# Checked top to bottom; the first table with any hit decides the category.
CATEGORY_KEYWORDS: list[tuple[Category, tuple[str, ...]]] = [
    (Category.creative, ("creative", "innovative", "brainstorm", "idea", "design")),
    (Category.analytical, ("analyze", "compare", "evaluate", "assess", "data")),
    (Category.practical, ("solve", "implement", "plan", "strategy", "action")),
]

CONTEXT_LABELS: list[ContextLabel] = list(ContextLabel)

# (markers, reasoning type) in priority order. '?' is matched as-is,
# the word markers case-insensitively.
REASONING_MARKERS: list[tuple[tuple[str, ...], ReasoningType]] = [
    (("why", "how"), ReasoningType.explanatory),
    (("compare", "vs"), ReasoningType.comparative),
]


def assess_complexity(text: str) -> Complexity:
    token_count = len(text.split())
    if token_count < MEDIUM_COMPLEXITY_MIN_TOKENS:
        return Complexity.low
    if token_count < HIGH_COMPLEXITY_MIN_TOKENS:
        return Complexity.medium
    return Complexity.high


def categorize(text: str) -> Category:
    text_lower = text.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text_lower for keyword in keywords):
            return category
    return Category.general


def identify_context(text: str, rng: random.Random | None = None) -> ContextLabel:
    """Return the first context label with a word found in the text.

    With no match, a label is chosen uniformly at random from the same list.
    """
    text_lower = text.lower()
    for label in CONTEXT_LABELS:
        if any(word in text_lower for word in label.value.split()):
            return label

    chosen = (rng or random).choice(CONTEXT_LABELS)
    logger.debug("No context keyword matched, picked %r at random", chosen.value)
    return chosen


def determine_reasoning_type(text: str) -> ReasoningType:
    if "?" in text:
        return ReasoningType.problem_solving
    text_lower = text.lower()
    for markers, reasoning_type in REASONING_MARKERS:
        if any(marker in text_lower for marker in markers):
            return reasoning_type
    return ReasoningType.exploratory


def classify(text: str, rng: random.Random | None = None) -> InputAnalysis:
    """Classify an input. Total for any string, including the empty string."""
    return InputAnalysis(
        complexity=assess_complexity(text),
        category=categorize(text),
        context=identify_context(text, rng),
        reasoning_type=determine_reasoning_type(text),
    )
