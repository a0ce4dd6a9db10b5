# Rewrite passes that make AI-generated blog prose read as hand-written.
#
# Each pass takes a document and returns a new one. Passes never raise on
# empty or markup-only input; a pass with no eligible site returns the text
# as it found it (modulo the whitespace tidy cliché removal performs).

from __future__ import annotations

import re
from typing import Callable, Iterable

from data_designer_humanizer.lexicon import DEFAULT_LEXICON, Lexicon
from data_designer_humanizer.randomness import RandomSource, SeededRandom
from data_designer_humanizer.tokenizer import (
    is_blank_line_separator,
    is_prose_block,
    map_blocks,
    segment_blocks,
    split_sentences,
)

# ---------------------------------------------------------------------------
# Defaults and eligibility thresholds
# ---------------------------------------------------------------------------

DEFAULT_STARTER_FREQUENCY = 0.08
DEFAULT_VOICE_FREQUENCY = 0.10
DEFAULT_HEDGE_FREQUENCY = 0.06
DEFAULT_QUESTION_FREQUENCY = 0.06
DEFAULT_ASIDE_FREQUENCY = 0.04
DEFAULT_REPETITION_FREQUENCY = 0.03

_VARY_MIN_CHARS = 100
_VARY_MIN_SENTENCES = 3
_VARY_SIMILAR_WORDS = 5
_VARY_MIN_WORDS = 12
_VARY_SPLIT_MIN_WORDS = 15
_VARY_SPLIT_PROBABILITY = 0.3
_VARY_SPLIT_MARGIN = 5

_STARTER_MIN_CHARS = 100
_STARTER_MIN_SENTENCES = 2

_VOICE_MIN_CHARS = 150

_HEDGE_MIN_CHARS = 80
_HEDGE_MIN_WORDS = 8
_HEDGE_POSITIONS = (2, 3, 4)

_QUESTION_MIN_CHARS = 200
_QUESTION_SKIP_BLOCKS = 2

_ASIDE_MIN_CHARS = 200
_ASIDE_SKIP_BLOCKS = 3
_ASIDE_MIN_SENTENCES = 2

_REPETITION_MIN_CHARS = 200
_REPETITION_INNER_PROBABILITY = 0.5

_RULE_OF_THREE_SUBSTITUTES = ("two", "four")

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

_WHITESPACE_RE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,])")
_REPEATED_PERIODS_RE = re.compile(r"\.(?:\s*\.)+")
_EMPTY_PARAGRAPH_RE = re.compile(r"<p(?:\s[^>]*)?>\s*</p>", re.IGNORECASE)
_LEAD_RE = re.compile(r"^\s*(?:<p(?:\s[^>]*)?>\s*)?", re.IGNORECASE)
_KEEP_CASE_RE = re.compile(r"^(?:I\b|[A-Z]{2,}\b)")
_INLINE_MARKUP_RE = re.compile(r"^(?:<(?:strong|em|b|i|u|a|span|mark)(?:\s[^>]*)?>\s*)*", re.IGNORECASE)
_CLOSING_P = "</p>"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _clamp(frequency: float) -> float:
    return min(1.0, max(0.0, frequency))


def _words_re(words: Iterable[str], *, suffix: str = "") -> re.Pattern[str]:
    ordered = sorted(words, key=len, reverse=True)
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in ordered) + r")\b" + suffix, re.IGNORECASE)


def _match_case(source: str, replacement: str) -> str:
    if source[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _lower_first(text: str) -> str:
    markup = _INLINE_MARKUP_RE.match(text).group(0)
    word = text[len(markup):]
    if not word or _KEEP_CASE_RE.match(word):
        return text
    return f"{markup}{word[0].lower()}{word[1:]}"


def _split_lead(text: str) -> tuple[str, str]:
    """Split off leading whitespace and an opening ``<p>`` tag."""
    lead = _LEAD_RE.match(text).group(0)
    return lead, text[len(lead):]


def _opening_text(text: str) -> str:
    """Text after the lead and any inline tags (``<strong>``, ``<em>``) that open it."""
    _, rest = _split_lead(text)
    return rest[len(_INLINE_MARKUP_RE.match(rest).group(0)):]


def _prepend(text: str, phrase: str) -> str:
    lead, rest = _split_lead(text)
    return f"{lead}{phrase}{_lower_first(rest)}"


def _is_eligible(block: str, min_chars: int) -> bool:
    return len(block) >= min_chars and is_prose_block(block)


def _collapse_gap(gap: list[str]) -> str:
    if any(is_blank_line_separator(sep) for sep in gap):
        return "\n\n"
    return "\n" if any("\n" in sep for sep in gap) else ""


def _rebuild(text: str, clean: Callable[[str], str]) -> str:
    """Clean every block, drop the ones left empty and normalise the gaps between the rest."""
    blocks, separators = segment_blocks(text)
    out: list[str] = []
    gap: list[str] = []
    for i, block in enumerate(blocks):
        if i:
            gap.append(separators[i - 1])
        block = clean(block)
        if not block:
            continue
        if out:
            out.append(_collapse_gap(gap))
        out.append(block)
        gap = []
    return "".join(out)


def _squeeze(block: str) -> str:
    return _EMPTY_PARAGRAPH_RE.sub("", _WHITESPACE_RE.sub(" ", block)).strip()


# ---------------------------------------------------------------------------
# Deterministic passes
# ---------------------------------------------------------------------------


def remove_cliches(text: str, *, lexicon: Lexicon | None = None) -> str:
    """Delete every listed cliché, with a trailing "that" and comma or period.

    When a capitalised cliché opened a sentence the next word is capitalised
    in its place. Runs to a fixed point, so applying it twice changes nothing.
    """
    lexicon = lexicon or DEFAULT_LEXICON
    pattern = _words_re(lexicon.cliches, suffix=r"(?:[ \t]+that\b)?[,.]?[ \t]*(?P<next>\w)?")

    def _cut(m: re.Match[str]) -> str:
        following = m.group("next") or ""
        return following.upper() if m.group(0)[0].isupper() else following

    while True:
        cleaned = _rebuild(pattern.sub(_cut, text), _squeeze)
        if cleaned == text:
            return cleaned
        text = cleaned


def apply_contractions(text: str, *, lexicon: Lexicon | None = None) -> str:
    lexicon = lexicon or DEFAULT_LEXICON
    for phrase in sorted(lexicon.contractions, key=len, reverse=True):
        contracted = lexicon.contractions[phrase]
        text = re.sub(
            r"\b" + re.escape(phrase) + r"\b",
            lambda m: _match_case(m.group(0), contracted),
            text,
            flags=re.IGNORECASE,
        )
    return text


def normalize_document(text: str) -> str:
    """Final tidy: single spaces, no space before ``.``/``,``, no doubled periods, no empty paragraphs."""

    def _finish(block: str) -> str:
        block = _WHITESPACE_RE.sub(" ", block)
        block = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", block)
        block = _REPEATED_PERIODS_RE.sub(".", block)
        return _EMPTY_PARAGRAPH_RE.sub("", block).strip()

    return _rebuild(text, _finish)


# ---------------------------------------------------------------------------
# Randomised substitutions
# ---------------------------------------------------------------------------


def casualize_vocabulary(text: str, *, rng: RandomSource | None = None, lexicon: Lexicon | None = None) -> str:
    """Swap every formal term for a random casual alternative, longest term first."""
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    for formal in sorted(lexicon.replacements, key=len, reverse=True):
        alternatives = lexicon.replacements[formal]
        text = re.sub(
            r"\b" + re.escape(formal) + r"\b",
            lambda m: _match_case(m.group(0), rng.choice(alternatives)),
            text,
            flags=re.IGNORECASE,
        )
    return text


def fix_rule_of_three(text: str, *, rng: RandomSource | None = None, lexicon: Lexicon | None = None) -> str:
    """Turn "three <listed noun>" into "two ..." or "four ...", never leaving "three"."""
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    nouns = "|".join(re.escape(n) for n in lexicon.rule_of_three_nouns)
    pattern = re.compile(r"\b(three)(\s+)(" + nouns + r")\b", re.IGNORECASE)
    return pattern.sub(
        lambda m: _match_case(m.group(1), rng.choice(_RULE_OF_THREE_SUBSTITUTES)) + m.group(2) + m.group(3),
        text,
    )


# ---------------------------------------------------------------------------
# Block and sentence passes
# ---------------------------------------------------------------------------


def _split_long_sentence(part: str, split_words: frozenset[str], rng: RandomSource) -> str:
    lead = part[: len(part) - len(part.lstrip())]
    words = part.split()
    if len(words) <= _VARY_SPLIT_MIN_WORDS:
        return part
    candidates = [
        i for i, word in enumerate(words)
        if _VARY_SPLIT_MARGIN < i < len(words) - _VARY_SPLIT_MARGIN and word.lower() in split_words
    ]
    if not candidates:
        return part
    at = rng.choice(candidates)
    first = " ".join(words[:at]).rstrip(",;:")
    second = " ".join(words[at:])
    return f"{lead}{first}. {second[0].upper()}{second[1:]}"


def vary_sentence_lengths(text: str, *, rng: RandomSource | None = None, lexicon: Lexicon | None = None) -> str:
    """Break up runs of similar-length long sentences at a conjunction."""
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    split_words = frozenset(w.lower() for w in lexicon.split_words)

    def _vary(_index: int, block: str) -> str:
        if not _is_eligible(block, _VARY_MIN_CHARS):
            return block
        sentences = split_sentences(block)
        if len(sentences) < _VARY_MIN_SENTENCES:
            return block
        lengths = [len(part.split()) for part in sentences.parts]
        for i in range(1, len(sentences)):
            similar = abs(lengths[i - 1] - lengths[i]) < _VARY_SIMILAR_WORDS
            if similar and lengths[i] > _VARY_MIN_WORDS and rng.chance(_VARY_SPLIT_PROBABILITY):
                sentences.parts[i] = _split_long_sentence(sentences.parts[i], split_words, rng)
        return sentences.join()

    return map_blocks(text, _vary)


def add_casual_starters(
    text: str,
    *,
    frequency: float = DEFAULT_STARTER_FREQUENCY,
    rng: RandomSource | None = None,
    lexicon: Lexicon | None = None,
) -> str:
    """Open some sentences with "And", "But" or "So"."""
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    frequency = _clamp(frequency)
    already_casual = _words_re(lexicon.starter_guards, suffix=r"\s")

    def _start(index: int, block: str) -> str:
        if index == 0 or not _is_eligible(block, _STARTER_MIN_CHARS):
            return block
        sentences = split_sentences(block)
        if len(sentences) < _STARTER_MIN_SENTENCES:
            return block
        for i in range(1, len(sentences)):
            opening = _opening_text(sentences.parts[i])
            if not opening[:1].isalpha() or already_casual.match(opening):
                continue
            if rng.chance(frequency):
                sentences.parts[i] = _prepend(sentences.parts[i], rng.choice(lexicon.starters))
        return sentences.join()

    return map_blocks(text, _start)


def inject_human_voice(
    text: str,
    *,
    frequency: float = DEFAULT_VOICE_FREQUENCY,
    rng: RandomSource | None = None,
    lexicon: Lexicon | None = None,
) -> str:
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    frequency = _clamp(frequency)

    def _voice(index: int, block: str) -> str:
        if index == 0 or not _is_eligible(block, _VOICE_MIN_CHARS):
            return block
        if not _opening_text(block)[:1].isalpha():
            return block
        if rng.chance(frequency):
            return _prepend(block, rng.choice(lexicon.voice_markers))
        return block

    return map_blocks(text, _voice)


def add_hedging(
    text: str,
    *,
    frequency: float = DEFAULT_HEDGE_FREQUENCY,
    rng: RandomSource | None = None,
    lexicon: Lexicon | None = None,
) -> str:
    """Soften long declarative sentences with a hedge word a few words in.

    Every sentence in the document is a candidate regardless of its block.
    """
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    frequency = _clamp(frequency)
    already_hedged = _words_re(lexicon.hedge_terms)

    def _hedge(_index: int, block: str) -> str:
        sentences = split_sentences(block)
        for i, part in enumerate(sentences.parts):
            stripped = part.strip()
            if len(stripped) < _HEDGE_MIN_CHARS or "?" in stripped or already_hedged.search(stripped):
                continue
            words = stripped.split()
            if len(words) <= _HEDGE_MIN_WORDS or not rng.chance(frequency):
                continue
            hedge = rng.choice(lexicon.hedges)
            words.insert(rng.choice(_HEDGE_POSITIONS), hedge)
            sentences.parts[i] = part[: len(part) - len(part.lstrip())] + " ".join(words)
        return sentences.join()

    return map_blocks(text, _hedge)


def add_rhetorical_questions(
    text: str,
    *,
    frequency: float = DEFAULT_QUESTION_FREQUENCY,
    rng: RandomSource | None = None,
    lexicon: Lexicon | None = None,
) -> str:
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    frequency = _clamp(frequency)

    def _ask(index: int, block: str) -> str:
        if index < _QUESTION_SKIP_BLOCKS or not _is_eligible(block, _QUESTION_MIN_CHARS):
            return block
        body = block.rstrip()
        trailing = block[len(body):]
        closes_paragraph = body.lower().endswith(_CLOSING_P)
        if not (closes_paragraph or body.endswith(".")) or not rng.chance(frequency):
            return block
        question = rng.choice(lexicon.rhetorical_questions)
        if closes_paragraph:
            return f"{body[: -len(_CLOSING_P)]} {question}{body[-len(_CLOSING_P):]}{trailing}"
        return f"{body} {question}{trailing}"

    return map_blocks(text, _ask)


def add_personal_asides(
    text: str,
    *,
    frequency: float = DEFAULT_ASIDE_FREQUENCY,
    rng: RandomSource | None = None,
    lexicon: Lexicon | None = None,
) -> str:
    """Tuck a parenthetical aside before the period of one later sentence."""
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    frequency = _clamp(frequency)

    def _aside(index: int, block: str) -> str:
        if index < _ASIDE_SKIP_BLOCKS or not _is_eligible(block, _ASIDE_MIN_CHARS):
            return block
        sentences = split_sentences(block)
        if len(sentences) <= _ASIDE_MIN_SENTENCES or not rng.chance(frequency):
            return block
        aside = rng.choice(lexicon.personal_asides)
        target = rng.choice(range(1, len(sentences)))
        part = sentences.parts[target]
        if not part.endswith(".") or part.endswith(".."):
            return block
        sentences.parts[target] = f"{part[:-1]} {aside}."
        return sentences.join()

    return map_blocks(text, _aside)


def add_mild_repetition(
    text: str,
    *,
    frequency: float = DEFAULT_REPETITION_FREQUENCY,
    rng: RandomSource | None = None,
    lexicon: Lexicon | None = None,
) -> str:
    """Double up one emphasis word ("important. Really important").

    Only the first occurrence of the chosen trigger in a block is considered,
    and even then it is rewritten only half the time.
    """
    lexicon = lexicon or DEFAULT_LEXICON
    rng = rng or SeededRandom()
    frequency = _clamp(frequency)

    def _repeat(_index: int, block: str) -> str:
        if not _is_eligible(block, _REPETITION_MIN_CHARS) or not rng.chance(frequency):
            return block
        pattern = rng.choice(lexicon.repetition_patterns)
        m = re.search(r"\b" + re.escape(pattern.trigger) + r"\b", block, re.IGNORECASE)
        if not m or not rng.chance(_REPETITION_INNER_PROBABILITY):
            return block
        return block[: m.start()] + _match_case(m.group(0), pattern.replacement) + block[m.end():]

    return map_blocks(text, _repeat)
