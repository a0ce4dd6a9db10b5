from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from functools import partial
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from data_designer_humanizer.lexicon import DEFAULT_LEXICON, Lexicon
from data_designer_humanizer.passes import (
    DEFAULT_ASIDE_FREQUENCY,
    DEFAULT_HEDGE_FREQUENCY,
    DEFAULT_QUESTION_FREQUENCY,
    DEFAULT_REPETITION_FREQUENCY,
    DEFAULT_STARTER_FREQUENCY,
    DEFAULT_VOICE_FREQUENCY,
    add_casual_starters,
    add_hedging,
    add_mild_repetition,
    add_personal_asides,
    add_rhetorical_questions,
    apply_contractions,
    casualize_vocabulary,
    fix_rule_of_three,
    inject_human_voice,
    normalize_document,
    remove_cliches,
    vary_sentence_lengths,
)
from data_designer_humanizer.randomness import RandomSource, SeededRandom
from data_designer_humanizer.tokenizer import count_words

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def _frequency(default: float, description: str):
    return Field(default=default, ge=0.0, le=1.0, description=description)


class PipelineConfig(BaseModel):
    """Which rewrite passes run and how often the probabilistic ones fire.

    Every pass is enabled by default. Frequencies are per-site probabilities;
    values outside [0, 1] are rejected here rather than deep inside a pass.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    remove_cliches: bool = Field(default=True, description="Delete stock AI phrases")
    casualize: bool = Field(default=True, description="Swap formal vocabulary for casual words")
    use_contractions: bool = Field(default=True, description="Contract expanded phrases (do not -> don't)")
    fix_three_rule: bool = Field(default=True, description="Rewrite 'three <things>' as two or four")
    vary_sentences: bool = Field(default=True, description="Split runs of similar-length sentences")
    add_starters: bool = Field(default=True, description="Open some sentences with And/But/So")
    inject_voice: bool = Field(default=True, description="Prepend a voice marker to some paragraphs")
    add_hedges: bool = Field(default=True, description="Insert hedging words into long sentences")
    add_questions: bool = Field(default=True, description="Close some paragraphs with a rhetorical question")
    add_asides: bool = Field(default=True, description="Insert parenthetical personal asides")
    add_repetition: bool = Field(default=True, description="Double up an emphasis word now and then")

    starter_frequency: float = _frequency(DEFAULT_STARTER_FREQUENCY, "Chance per eligible sentence")
    voice_frequency: float = _frequency(DEFAULT_VOICE_FREQUENCY, "Chance per eligible paragraph")
    hedge_frequency: float = _frequency(DEFAULT_HEDGE_FREQUENCY, "Chance per eligible sentence")
    question_frequency: float = _frequency(DEFAULT_QUESTION_FREQUENCY, "Chance per eligible paragraph")
    aside_frequency: float = _frequency(DEFAULT_ASIDE_FREQUENCY, "Chance per eligible paragraph")
    repetition_frequency: float = _frequency(DEFAULT_REPETITION_FREQUENCY, "Chance per eligible paragraph")

    def enabled_flags(self) -> dict[str, bool]:
        return {step.flag: getattr(self, step.flag) for step in _STEPS}


DEFAULT_CONFIG = PipelineConfig()

# ---------------------------------------------------------------------------
# Step table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Step:
    flag: str
    name: str
    apply: Callable[..., str]
    randomized: bool = False
    frequency_field: str | None = None

    def bind(self, config: PipelineConfig, lexicon: Lexicon, rng: RandomSource) -> Callable[[str], str]:
        kwargs: dict[str, object] = {"lexicon": lexicon}
        if self.randomized:
            kwargs["rng"] = rng
        if self.frequency_field:
            kwargs["frequency"] = getattr(config, self.frequency_field)
        return partial(self.apply, **kwargs)


# Order is part of the contract: later passes judge eligibility on the
# output of earlier ones.
_STEPS: tuple[_Step, ...] = (
    _Step("remove_cliches", "Removed AI clichés", remove_cliches),
    _Step("casualize", "Casualized vocabulary", casualize_vocabulary, randomized=True),
    _Step("use_contractions", "Applied contractions", apply_contractions),
    _Step("fix_three_rule", "Fixed Rule of Three", fix_rule_of_three, randomized=True),
    _Step("vary_sentences", "Varied sentence lengths", vary_sentence_lengths, randomized=True),
    _Step("add_starters", "Added casual starters", add_casual_starters, True, "starter_frequency"),
    _Step("inject_voice", "Injected human voice", inject_human_voice, True, "voice_frequency"),
    _Step("add_hedges", "Added hedging", add_hedging, True, "hedge_frequency"),
    _Step("add_questions", "Added rhetorical questions", add_rhetorical_questions, True, "question_frequency"),
    _Step("add_asides", "Added personal asides", add_personal_asides, True, "aside_frequency"),
    _Step("add_repetition", "Added mild repetition", add_mild_repetition, True, "repetition_frequency"),
)

STEP_NAMES: tuple[str, ...] = tuple(step.name for step in _STEPS)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PipelineResult:
    content: str
    steps_applied: tuple[str, ...]
    word_count: int
    elapsed_ms: int
    options: dict[str, bool]

    def to_payload(self) -> dict[str, object]:
        return {
            "content": self.content,
            "steps_applied": list(self.steps_applied),
            "word_count": self.word_count,
            "elapsed_ms": self.elapsed_ms,
            "options": dict(self.options),
        }


def run_pipeline(
    document: str,
    config: PipelineConfig | None = None,
    *,
    lexicon: Lexicon | None = None,
    rng: RandomSource | None = None,
) -> PipelineResult:
    """Humanize a document by running the enabled rewrite passes in order.

    Args:
        document: Plain prose or light HTML (paragraphs, headings, lists).
        config: Pass toggles and frequencies. Defaults to every pass on.
        lexicon: Phrase tables. Defaults to the packaged lexicon.
        rng: Random source. A fresh unseeded one is created per call if omitted.

    Returns:
        A PipelineResult. ``steps_applied`` names every enabled pass whether or
        not it changed anything; ``word_count`` counts the final text with
        markup stripped.
    """
    config = config or DEFAULT_CONFIG
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()

    started = time.perf_counter()
    content = document
    steps: list[str] = []
    for step in _STEPS:
        if not getattr(config, step.flag):
            continue
        content = step.bind(config, lexicon, rng)(content)
        steps.append(step.name)
        logger.debug(f"Step {len(steps)}: {step.name}")
    content = normalize_document(content)
    elapsed_ms = round((time.perf_counter() - started) * 1000)

    word_count = count_words(content)
    logger.debug(f"Humanized {len(document)} chars into {word_count} words in {elapsed_ms} ms")
    return PipelineResult(
        content=content,
        steps_applied=tuple(steps),
        word_count=word_count,
        elapsed_ms=elapsed_ms,
        options=config.enabled_flags(),
    )
