from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_humanizer.pipeline import PipelineConfig


class HumanizerColumnConfig(SingleColumnConfig):
    """Rewrite text columns so they read as human-written, then score the result.

    Runs the rule-based humanizer pipeline on each row (cliché removal, casual
    vocabulary, contractions, sentence variation and light voice injection) and
    optionally attaches a 0-100 human-likeness score with a risk tier.

    Attributes:
        target_columns: Columns whose text is joined (one block per column) and humanized.
        pipeline: Which rewrite passes run and how often the probabilistic ones fire.
        seed: Seed for the random source, for reproducible output. None draws fresh entropy.
        include_score: Score the humanized text and include score, risk level and advice.
        include_steps: Include the names of the passes that ran.
    """

    target_columns: list[str]
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig, description="Pass toggles and frequencies")
    seed: int | None = Field(default=None, description="Random seed for reproducible rewrites")
    include_score: bool = Field(default=True, description="Score the humanized text")
    include_steps: bool = Field(default=False, description="Include the list of applied passes")
    column_type: Literal["humanizer"] = "humanizer"

    @staticmethod
    def get_column_emoji() -> str:
        return "✍️"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
