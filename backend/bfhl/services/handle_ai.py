"""AI Handler: one-word answers from the delegated text-generation service.

Invariants:
    - Question validated before any outbound call
    - Exactly one generate_text call per request, no retries
    - Result is always a single token (possibly "") with . , ! ? ; : removed
"""

import logging
from typing import Any

from bfhl.core.client_protocols import TextGenerator
from bfhl.core.extract_answer import build_answer_prompt, extract_first_word
from bfhl.core.validate_inputs import validate_question

logger = logging.getLogger(__name__)


class AIHandlers:
    """Delegates a question to the text generator and reduces the answer."""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def answer(self, value: Any) -> str:
        question = validate_question(value)
        raw_text = await self.generator.generate_text(build_answer_prompt(question))
        word = extract_first_word(raw_text)
        if not word:
            logger.warning("AI answer was empty after extraction", extra={"operation": "AI"})
        return word
