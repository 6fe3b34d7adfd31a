"""Answer Extraction: reduce a free-text completion to a single word.

Invariants:
    - Leading/trailing whitespace trimmed before anything else
    - Every occurrence of . , ! ? ; : removed (other punctuation kept)
    - First whitespace-delimited token returned; "" when the text is blank
"""

import re

ANSWER_PROMPT_SUFFIX = ". Respond with exactly one single word, which is the direct answer."

_STRIPPED_PUNCTUATION_RE = re.compile(r"[.,!?;:]")


def build_answer_prompt(question: str) -> str:
    """Prompt asking the model for a one-word answer to question."""
    return f"{question}{ANSWER_PROMPT_SUFFIX}"


def extract_first_word(raw_text: str) -> str:
    cleaned = _STRIPPED_PUNCTUATION_RE.sub("", raw_text.strip())
    tokens = cleaned.split()
    return tokens[0] if tokens else ""
