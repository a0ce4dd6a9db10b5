# Heuristic "human-likeness" score for blog prose.
#
# Starts at 100 and deducts capped penalties for clichés, formal vocabulary,
# missing contractions, uniform sentence lengths and "three <things>" lists.
# Read-only: the text is never modified.

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Literal

from data_designer_humanizer.lexicon import DEFAULT_LEXICON, Lexicon
from data_designer_humanizer.tokenizer import split_sentences, strip_tags

RiskLevel = Literal["LOW", "MEDIUM", "HIGH"]

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Deductions, caps and thresholds used by the scorer."""

    cliche_penalty: int = 5
    cliche_cap: int = 25
    formal_min_count: int = 5
    formal_penalty: int = 2
    formal_cap: int = 20
    uncontracted_min_count: int = 3
    uncontracted_penalty: int = 3
    uncontracted_cap: int = 15
    rhythm_min_sentences: int = 5
    rhythm_cv_threshold: float = 30.0
    rhythm_penalty: int = 15
    rule_of_three_min_count: int = 1
    rule_of_three_penalty: int = 10
    human_like_cv: float = 40.0

    score_min: int = 0
    score_max: int = 100
    risk_low_min: int = 85
    risk_medium_min: int = 70


DEFAULT_HYPERPARAMETERS = Hyperparameters()

_VERDICTS: dict[str, str] = {
    "LOW": "Content appears human-written",
    "MEDIUM": "Content may trigger some AI detectors",
    "HIGH": "Content likely to be flagged as AI-written",
}

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Burstiness:
    """Sentence-length spread. ``cv`` is the coefficient of variation in percent."""

    lengths: tuple[int, ...]
    mean: float
    variance: float
    std_dev: float
    cv: float
    is_human_like: bool


@dataclass(frozen=True)
class HumanScore:
    score: int
    issues: tuple[str, ...]
    recommendations: tuple[str, ...]
    risk_level: RiskLevel
    verdict: str
    counts: dict[str, int]

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
            "risk_level": self.risk_level,
            "verdict": self.verdict,
            "counts": dict(self.counts),
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _count_whole_words(phrases, text: str) -> int:
    return sum(
        len(re.findall(r"\b" + re.escape(phrase) + r"\b", text, re.IGNORECASE))
        for phrase in phrases
    )


def _risk(score: int, hp: Hyperparameters) -> RiskLevel:
    if score >= hp.risk_low_min:
        return "LOW"
    if score >= hp.risk_medium_min:
        return "MEDIUM"
    return "HIGH"


def analyze_burstiness(text: str, hyperparameters: Hyperparameters | None = None) -> Burstiness:
    """Measure how much sentence lengths vary, ignoring markup.

    Fewer than two sentences yields all-zero statistics.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    parts = split_sentences(strip_tags(text)).parts
    lengths = tuple(n for n in (len(part.split()) for part in parts) if n)
    if len(lengths) < 2:
        return Burstiness(lengths=lengths, mean=0.0, variance=0.0, std_dev=0.0, cv=0.0, is_human_like=False)

    mean = sum(lengths) / len(lengths)
    variance = sum((n - mean) ** 2 for n in lengths) / len(lengths)
    std_dev = math.sqrt(variance)
    cv = 100 * std_dev / mean if mean > 0 else 0.0
    return Burstiness(
        lengths=lengths,
        mean=mean,
        variance=variance,
        std_dev=std_dev,
        cv=cv,
        is_human_like=cv > hp.human_like_cv,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def score_human_likeness(
    text: str,
    *,
    lexicon: Lexicon | None = None,
    hyperparameters: Hyperparameters | None = None,
) -> HumanScore:
    """Estimate how likely ``text`` is to pass as human-written.

    Args:
        text: Raw or humanized prose, with or without markup.
        lexicon: Phrase tables. Defaults to the packaged lexicon.
        hyperparameters: Optional overrides for deductions and thresholds.

    Returns:
        A HumanScore clamped to [score_min, score_max] with one issue and one
        recommendation per penalized category.
    """
    lexicon = lexicon or DEFAULT_LEXICON
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    score = hp.score_max
    issues: list[str] = []
    recommendations: list[str] = []

    lowered = text.lower()
    cliches = sum(1 for phrase in dict.fromkeys(c.lower() for c in lexicon.cliches) if phrase in lowered)
    if cliches > 0:
        score -= min(hp.cliche_cap, cliches * hp.cliche_penalty)
        issues.append(f"Found {cliches} AI clichés")
        recommendations.append('Remove AI clichés like "In conclusion", "Furthermore", etc.')

    formal = _count_whole_words(lexicon.replacements, text)
    if formal > hp.formal_min_count:
        score -= min(hp.formal_cap, formal * hp.formal_penalty)
        issues.append(f"Found {formal} formal/AI vocabulary words")
        recommendations.append("Replace formal words with casual alternatives")

    uncontracted = _count_whole_words(lexicon.uncontracted_phrases, text)
    if uncontracted > hp.uncontracted_min_count:
        score -= min(hp.uncontracted_cap, uncontracted * hp.uncontracted_penalty)
        issues.append(f"Found {uncontracted} uncontracted phrases")
        recommendations.append("Use contractions (don't, isn't, it's, etc.)")

    burst = analyze_burstiness(text, hp)
    monotonous = len(burst.lengths) > hp.rhythm_min_sentences and burst.cv < hp.rhythm_cv_threshold
    if monotonous:
        score -= hp.rhythm_penalty
        issues.append(f"Low sentence length variation (CV: {burst.cv:.1f}%)")
        recommendations.append("Vary sentence lengths more (mix short and long)")

    nouns = "|".join(re.escape(n) for n in lexicon.scored_rule_of_three_nouns)
    triples = len(re.findall(r"\bthree\s+(?:" + nouns + r")\b", text, re.IGNORECASE))
    if triples > hp.rule_of_three_min_count:
        score -= hp.rule_of_three_penalty
        issues.append(f'Found {triples} "Rule of Three" patterns')
        recommendations.append("Use 2, 4, or 5 items instead of exactly 3")

    score = max(hp.score_min, min(hp.score_max, score))
    risk = _risk(score, hp)
    return HumanScore(
        score=score,
        issues=tuple(issues),
        recommendations=tuple(recommendations),
        risk_level=risk,
        verdict=_VERDICTS[risk],
        counts={
            "cliches": cliches,
            "formal_vocabulary": formal,
            "uncontracted": uncontracted,
            "rhythm": int(monotonous),
            "rule_of_three": triples,
        },
    )
