import pytest

from data_designer_humanizer.scoring import Hyperparameters, analyze_burstiness, score_human_likeness

CLEAN = "The bridge opened on a Tuesday. Two cars crossed first."

CLICHES = (
    "In conclusion, to summarize, in summary, to wrap up, it should be noted, "
    "as stated earlier, we shipped."
)

FORMAL = "Utilize, leverage, optimize, facilitate, implement and streamline robust systems."

UNCONTRACTED = "We do not know. It is late. That is fine. There is time."

MONOTONE = (
    "The cat sat down. The dog ran off. The bird flew up. "
    "The fish swam by. The cow ate grass. The pig lay still."
)


class TestScoreHumanLikeness:
    def test_clean_text_scores_full(self):
        report = score_human_likeness(CLEAN)
        assert report.score == 100
        assert report.risk_level == "LOW"
        assert report.verdict == "Content appears human-written"
        assert report.issues == ()

    def test_cliche_penalty_is_capped(self):
        report = score_human_likeness(CLICHES)
        assert report.counts["cliches"] == 6
        assert report.score == 75
        assert report.risk_level == "MEDIUM"
        assert report.issues == ("Found 6 AI clichés",)

    def test_formal_vocabulary(self):
        report = score_human_likeness(FORMAL)
        assert report.score == 88
        assert report.issues == ("Found 6 formal/AI vocabulary words",)

    def test_few_formal_words_are_free(self):
        assert score_human_likeness("Utilize, leverage, optimize, facilitate and implement.").score == 100

    def test_uncontracted_phrases(self):
        report = score_human_likeness(UNCONTRACTED)
        assert report.counts["uncontracted"] == 4
        assert report.score == 88
        assert report.recommendations == ("Use contractions (don't, isn't, it's, etc.)",)

    def test_monotone_rhythm(self):
        report = score_human_likeness(MONOTONE)
        assert report.score == 85
        assert report.risk_level == "LOW"
        assert report.issues == ("Low sentence length variation (CV: 0.0%)",)

    def test_monotone_rhythm_with_sentence_ending_in_no(self):
        report = score_human_likeness(MONOTONE.replace("The cat sat down.", "The cat said no."))
        assert report.counts["rhythm"] == 1
        assert report.score == 85

    def test_five_sentences_skip_rhythm_check(self):
        five = MONOTONE.rsplit(" The pig", 1)[0]
        assert score_human_likeness(five).score == 100

    def test_rule_of_three(self):
        report = score_human_likeness("There are three steps and three tips here.")
        assert report.score == 90
        assert report.counts["rule_of_three"] == 2

    def test_single_rule_of_three_is_free(self):
        assert score_human_likeness("There are three steps here.").score == 100

    def test_high_risk(self):
        report = score_human_likeness(f"{CLICHES} {FORMAL}")
        assert report.score == 63
        assert report.risk_level == "HIGH"
        assert report.verdict == "Content likely to be flagged as AI-written"
        assert len(report.recommendations) == 2

    def test_score_is_clamped(self):
        hp = Hyperparameters(cliche_penalty=200, cliche_cap=500)
        report = score_human_likeness(CLICHES, hyperparameters=hp)
        assert report.score == 0
        assert report.risk_level == "HIGH"

    def test_adding_a_cliche_never_raises_score(self):
        assert score_human_likeness(f"Moreover, {CLEAN}").score <= score_human_likeness(CLEAN).score

    @pytest.mark.parametrize("text", ["", "....", "<p></p>", "no punctuation at all"])
    def test_degenerate_input(self, text):
        report = score_human_likeness(text)
        assert report.score == 100
        assert report.risk_level == "LOW"

    def test_payload(self):
        payload = score_human_likeness(CLICHES).to_payload()
        assert payload["score"] == 75
        assert payload["issues"] == ["Found 6 AI clichés"]
        assert set(payload["counts"]) == {"cliches", "formal_vocabulary", "uncontracted", "rhythm", "rule_of_three"}


class TestAnalyzeBurstiness:
    def test_statistics(self):
        burst = analyze_burstiness("One two three. Four five six seven eight nine.")
        assert burst.lengths == (3, 6)
        assert burst.mean == pytest.approx(4.5)
        assert burst.variance == pytest.approx(2.25)
        assert burst.std_dev == pytest.approx(1.5)
        assert burst.cv == pytest.approx(33.333, rel=1e-3)
        assert not burst.is_human_like

    def test_varied_text_is_human_like(self):
        burst = analyze_burstiness("Short. This one runs on for quite a few more words than the first. Ok.")
        assert burst.is_human_like

    def test_ignores_markup(self):
        burst = analyze_burstiness("<p>One two three.</p><p>Four five.</p>")
        assert burst.lengths == (3, 2)

    def test_single_sentence(self):
        burst = analyze_burstiness("Just one sentence here.")
        assert burst.cv == 0.0
        assert not burst.is_human_like
