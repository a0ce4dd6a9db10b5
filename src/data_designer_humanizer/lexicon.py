"""Word lists and phrase pools the humanizer mutates against.

The tables live in ``data/lexicon.json`` so they can be edited, swapped out,
or shrunk to a small controlled vocabulary in tests without touching code.
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

_Pool = Annotated[tuple[str, ...], Field(min_length=1)]


class RepetitionPattern(BaseModel):
    """An emphasis doubling: the first ``trigger`` in a block becomes ``replacement``."""

    model_config = ConfigDict(frozen=True)

    trigger: str = Field(min_length=1)
    replacement: str = Field(min_length=1)


class Lexicon(BaseModel):
    """Read-only phrase tables shared by the rewrite passes and the scorer.

    Attributes:
        cliches: Robotic stock phrases. Deleted by the pipeline, penalized by the scorer.
        replacements: Formal term -> casual alternatives (stored lower-case-first).
        contractions: Expanded phrase -> contracted form.
        uncontracted_phrases: Expanded forms whose presence the scorer penalizes.
        split_words: Conjunctions and relative pronouns a long sentence may be split at.
        starters: Casual sentence openers ("And ", "But ", "So ").
        starter_guards: Openers that mark a sentence as already casual.
        voice_markers: Phrases prepended to a paragraph to give it a speaker.
        hedge_terms: Terms that mark a sentence as already hedged.
        hedges: Single hedging words the pipeline inserts.
        rhetorical_questions: Questions appended to the end of a paragraph.
        personal_asides: Parentheticals inserted before a sentence's final period.
        repetition_patterns: Emphasis doublings, one chosen per eligible block.
        rule_of_three_nouns: Nouns after which "three" is rewritten by the pipeline.
        scored_rule_of_three_nouns: Narrower noun list the scorer counts.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cliches: _Pool
    replacements: dict[str, _Pool] = Field(min_length=1)
    contractions: dict[str, str] = Field(min_length=1)
    uncontracted_phrases: _Pool
    split_words: _Pool
    starters: _Pool
    starter_guards: _Pool
    voice_markers: _Pool
    hedge_terms: _Pool
    hedges: _Pool
    rhetorical_questions: _Pool
    personal_asides: _Pool
    repetition_patterns: tuple[RepetitionPattern, ...] = Field(min_length=1)
    rule_of_three_nouns: _Pool
    scored_rule_of_three_nouns: _Pool


def load_lexicon(path: str | Path | None = None) -> Lexicon:
    """Load a lexicon from a JSON file, or the packaged default when ``path`` is None."""
    if path is None:
        raw = (files(__package__) / "data" / "lexicon.json").read_text(encoding="utf-8")
    else:
        raw = Path(path).read_text(encoding="utf-8")
    return Lexicon.model_validate_json(raw)


DEFAULT_LEXICON = load_lexicon()
