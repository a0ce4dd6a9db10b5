# SPDX-License-Identifier: Apache-2.0
"""Humanizer plugin for NeMo Data Designer.

Adds a ``humanizer`` column type that rewrites AI-generated blog text with a
fixed sequence of rule-based passes (cliché removal, casual vocabulary,
contractions, sentence variation, voice and hedging) and scores the result
for human-likeness. No LLM calls, no API dependencies.

Usage::

    from data_designer_humanizer import HumanizerColumnConfig, PipelineConfig

    builder.add_column(HumanizerColumnConfig(
        name="humanized",
        target_columns=["article"],
        pipeline=PipelineConfig(voice_frequency=0.2),
        seed=7,
    ))

The engine is also usable on its own::

    from data_designer_humanizer import run_pipeline, score_human_likeness

    result = run_pipeline(html)
    report = score_human_likeness(result.content)
"""

from data_designer_humanizer.lexicon import DEFAULT_LEXICON, Lexicon, load_lexicon
from data_designer_humanizer.pipeline import PipelineConfig, PipelineResult, run_pipeline
from data_designer_humanizer.prompts import build_humanize_prompt
from data_designer_humanizer.randomness import RandomSource, SeededRandom
from data_designer_humanizer.scoring import Hyperparameters, HumanScore, analyze_burstiness, score_human_likeness

__all__ = [
    "HumanizerColumnConfig",
    "PipelineConfig",
    "PipelineResult",
    "run_pipeline",
    "score_human_likeness",
    "analyze_burstiness",
    "Hyperparameters",
    "HumanScore",
    "Lexicon",
    "DEFAULT_LEXICON",
    "load_lexicon",
    "RandomSource",
    "SeededRandom",
    "build_humanize_prompt",
]


def __getattr__(name: str):
    # The column config pulls in Data Designer; the engine does not need it.
    if name == "HumanizerColumnConfig":
        from data_designer_humanizer.config import HumanizerColumnConfig

        return HumanizerColumnConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
