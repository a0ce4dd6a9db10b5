from data_designer_humanizer.prompts import build_humanize_prompt


class TestBuildHumanizePrompt:
    def test_embeds_content_last(self):
        prompt = build_humanize_prompt("<p>Hello {world}.</p>")
        assert prompt.endswith("Blog post to humanize:\n\n<p>Hello {world}.</p>")

    def test_keeps_rewrite_rules(self):
        prompt = build_humanize_prompt("x")
        assert "Keep all HTML formatting intact" in prompt
        assert "Do NOT add new ideas or remove any" in prompt
