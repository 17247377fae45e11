"""
Reasoning Assistant API — Pydantic Data Models

Every value that crosses a module boundary is defined here: the
classification of a user's input, the bias scan of a response, the
combined result of one analysis, and the history records that survive
between requests.

The core records (InputAnalysis, BiasAnalysis, AnalysisResult, HistoryItem)
are frozen: once produced they are never mutated. The Field() calls add
descriptions and examples that show up in the interactive docs at /docs.
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums — Constrained choices for classification fields
# ---------------------------------------------------------------------------

class Complexity(str, Enum):
    """Word-count band of the input. Describes length, not difficulty."""

    low = "low"          # fewer than 10 tokens
    medium = "medium"    # 10 to 29 tokens
    high = "high"        # 30 tokens or more


class Category(str, Enum):
    """Topic family, picked by keyword search in priority order."""

    creative = "creative"
    analytical = "analytical"
    practical = "practical"
    general = "general"


class ContextLabel(str, Enum):
    """The five real-world settings a response can be framed in.
    Declaration order is the order the classifier searches them."""

    business_environment = "business environment"
    educational_setting = "educational setting"
    social_context = "social context"
    technological_landscape = "technological landscape"
    environmental_considerations = "environmental considerations"


class ReasoningType(str, Enum):
    """How the input asks to be reasoned about."""

    problem_solving = "problem-solving"
    explanatory = "explanatory"
    comparative = "comparative"
    exploratory = "exploratory"


BiasLevel = Literal["low", "medium", "high"]


# ---------------------------------------------------------------------------
# Core records
# ---------------------------------------------------------------------------

class InputAnalysis(BaseModel):
    """Four-field shallow classification of a user's input."""

    model_config = ConfigDict(frozen=True)

    complexity: Complexity = Field(
        description="Word-count band: low (<10), medium (10-29), high (30+).",
        examples=["low"],
    )
    category: Category = Field(
        description="Keyword-derived topic family.",
        examples=["practical"],
    )
    context: ContextLabel = Field(
        description="Real-world setting used to frame the response.",
        examples=["business environment"],
    )
    reasoning_type: ReasoningType = Field(
        description="How the input asks to be reasoned about.",
        examples=["problem-solving"],
    )


class BiasAnalysis(BaseModel):
    """Result of scanning a text for absolute or non-inclusive language.

    confidence is always min(bias_score * 0.2, 1.0). Gendered-pattern
    advice appears in issues but does not count toward bias_score."""

    model_config = ConfigDict(frozen=True)

    bias_score: int = Field(
        ge=0,
        description="Number of bias indicators found in the text.",
        examples=[2],
    )
    issues: tuple[str, ...] = Field(
        default=(),
        description="Human-readable findings, in indicator-table order.",
        examples=[["Potential absolute statement: 'always'"]],
    )
    confidence: float = Field(
        ge=0.0, le=1.0,
        description="How confident the filter is that the text is biased.",
        examples=[0.4],
    )


class AnalysisResult(BaseModel):
    """Everything produced for one submitted input."""

    model_config = ConfigDict(frozen=True)

    response: str = Field(
        description="The synthesized response, rewritten if bias was detected.",
    )
    analysis: InputAnalysis
    bias_analysis: BiasAnalysis = Field(
        description="Bias scan of the synthesized response (before rewriting).",
    )
    suggestions: tuple[str, ...] = Field(
        default=(),
        description="Substitutions applied to the response, in the order applied.",
        examples=[["Replaced 'always' with 'often'"]],
    )


class HistoryItem(BaseModel):
    """One past interaction, as kept in the bounded history snapshot."""

    model_config = ConfigDict(frozen=True)

    input: str = Field(
        description="The text the user submitted.",
        examples=["How should we plan the product launch?"],
    )
    response: str = Field(
        description="The final (possibly rewritten) response shown to the user.",
    )
    analysis: InputAnalysis
    bias_analysis: BiasAnalysis
    timestamp: datetime = Field(
        description="When the interaction was processed (UTC).",
        examples=["2026-02-07T10:30:00Z"],
    )


# ---------------------------------------------------------------------------
# /v1/analyze — Classify, respond, de-bias
# ---------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    """What the client sends to have an input analyzed."""

    input: str = Field(
        description="Free-text question, problem, or topic to reason through.",
        examples=["What is the typical approach to solve this?"],
    )


class AnalyzeResponse(AnalysisResult):
    """AnalysisResult plus presentation helpers.
    Inherits response/analysis/bias_analysis/suggestions from AnalysisResult."""

    bias_level: BiasLevel = Field(
        description="Band of the bias score: low (0-1), medium (2-3), high (4+).",
        examples=["low"],
    )
    latency_ms: int = Field(
        description="Time taken for the whole pipeline, in milliseconds.",
        examples=[3],
    )


# ---------------------------------------------------------------------------
# /v1/history — Interaction history
# ---------------------------------------------------------------------------

class HistoryResponse(BaseModel):
    """The current history snapshot, most recent first."""

    items: list[HistoryItem]
    count: int = Field(
        description="Number of items currently held.",
        examples=[3],
    )
    capacity: int = Field(
        description="Maximum number of items kept before the oldest is evicted.",
        examples=[10],
    )


class ClearHistoryResponse(BaseModel):
    """Confirmation that the history was emptied."""

    status: Literal["cleared"] = "cleared"
    removed: int = Field(
        description="How many items were discarded.",
        examples=[4],
    )
