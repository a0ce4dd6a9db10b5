from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import data_designer.lazy_heavy_imports as lazy
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_humanizer.config import HumanizerColumnConfig
from data_designer_humanizer.pipeline import run_pipeline
from data_designer_humanizer.randomness import SeededRandom
from data_designer_humanizer.scoring import score_human_likeness

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class HumanizerColumnGenerator(ColumnGeneratorFullColumn[HumanizerColumnConfig]):
    """Column generator that humanizes text with the rule pipeline and scores it."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"✍️ Humanizing column {self.config.name!r}")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   seed: {self.config.seed}")

        rng = SeededRandom(self.config.seed)
        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = "\n\n".join(str(v) for v in row.values if lazy.pd.notna(v))
            result = run_pipeline(text, self.config.pipeline, rng=rng)
            output: dict = {
                "content": result.content,
                "word_count": result.word_count,
                "elapsed_ms": result.elapsed_ms,
            }
            if self.config.include_steps:
                output["steps_applied"] = list(result.steps_applied)
            if self.config.include_score:
                report = score_human_likeness(result.content)
                output["human_score"] = report.score
                output["risk_level"] = report.risk_level
                output["verdict"] = report.verdict
                output["issues"] = list(report.issues)
                output["recommendations"] = list(report.recommendations)
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
