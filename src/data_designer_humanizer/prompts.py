from __future__ import annotations

_HUMANIZE_PROMPT = """You are rewriting an already written blog post so it sounds naturally human-written.

Do NOT change the structure, intent, or information. Only adjust the language and flow so it reads like a real person wrote it.

Follow these rules carefully:

1. Keep the same meaning, facts, and message
2. Make the tone conversational, natural, and slightly imperfect
3. Add very light human-like imperfections (minor grammar or flow issues only where natural)
4. Vary sentence length (mix short and long sentences)
5. Allow mild repetition of words
6. Use casual connectors like "and", "but", "so" naturally
7. Avoid robotic or overly polished wording
8. No marketing buzzwords
9. No AI cliches (no "In conclusion", "Furthermore", etc.)
10. Do NOT add new ideas or remove any
11. Do NOT correct everything to perfection

Style reference:
- Write as if a real person is explaining from experience
- Slightly informal but still professional
- Readable and SEO-safe
- Write like someone typed this naturally, not trying to sound perfect

Output requirement:
- Only return the humanized version of the blog post
- No explanations, no comments
- Keep all HTML formatting intact

Blog post to humanize:

{content}"""


def build_humanize_prompt(content: str) -> str:
    """Instruction for an LLM rewrite of ``content``, the model-based alternative to the rule pipeline."""
    return _HUMANIZE_PROMPT.format(content=content)
