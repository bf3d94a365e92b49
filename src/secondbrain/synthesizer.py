# src/secondbrain/synthesizer.py
"""Answer synthesis from ranked chunks.

The generation step yields an explicit outcome, Generated or Unavailable,
and resolve_answer() maps either one to the final answer text. A failing
model therefore never fails the query: the caller gets the retrieved
context back instead.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from secondbrain.exceptions import GenerationUnavailable
from secondbrain.models import RankedChunk, Synthesis
from secondbrain.providers.base import LLMClient
from secondbrain.settings import DEFAULT_FALLBACK_PREFIX, DEFAULT_SYSTEM_PROMPT

logger = structlog.get_logger()

CONTEXT_SEPARATOR = "\n\n---\n\n"

PROMPT_TEMPLATE = """System instructions:
{system_prompt}

User question: {question}

Context:
{context}"""


@dataclass(frozen=True)
class Generated:
    """The model produced an answer."""

    text: str


@dataclass(frozen=True)
class Unavailable:
    """The model could not be used."""

    reason: str


GenerationOutcome = Generated | Unavailable


def render_context(ranked: list[RankedChunk]) -> str:
    """Render ranked chunks as the numbered grounding block, best first."""
    return CONTEXT_SEPARATOR.join(
        f"Chunk {i} (score={item.score:.3f}):\n{item.chunk.content}"
        for i, item in enumerate(ranked, 1)
    )


def build_prompt(
    question: str,
    context: str,
    system_prompt: str = DEFAULT_SYSTEM_PROMPT,
) -> str:
    """Assemble the single prompt sent to the model."""
    return PROMPT_TEMPLATE.format(
        system_prompt=system_prompt,
        question=question,
        context=context,
    )


def resolve_answer(
    outcome: GenerationOutcome,
    context: str,
    fallback_prefix: str = DEFAULT_FALLBACK_PREFIX,
) -> str:
    """Map a generation outcome to the answer returned to the caller."""
    if isinstance(outcome, Generated):
        return outcome.text
    return f"{fallback_prefix}\n\n{context}"


class AnswerSynthesizer:
    """Builds a grounded prompt, asks the model, and falls back to raw context.

    Example:
        synthesizer = AnswerSynthesizer(llm_client=LiteLLMClient())
        synthesis = synthesizer.synthesize("What did I note about X?", ranked)
    """

    def __init__(
        self,
        llm_client: LLMClient | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        temperature: float | None = 0.3,
        fallback_prefix: str = DEFAULT_FALLBACK_PREFIX,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            llm_client: Generation client. Without one every answer is the fallback.
            system_prompt: Instruction constraining answers to the context
            temperature: Temperature for generation calls
            fallback_prefix: Text placed before the raw context when generation fails
        """
        self._llm_client = llm_client
        self.system_prompt = system_prompt
        self.temperature = temperature
        self.fallback_prefix = fallback_prefix

    def _messages(self, prompt: str) -> list[dict]:
        return [{"role": "user", "content": prompt}]

    def _require_client(self) -> LLMClient:
        if self._llm_client is None:
            raise GenerationUnavailable("no generation client configured")
        return self._llm_client

    def _checked(self, text: str) -> str:
        text = text.strip()
        if not text:
            raise GenerationUnavailable("model returned an empty answer")
        return text

    def _call(self, prompt: str) -> str:
        client = self._require_client()
        try:
            text = client.complete(self._messages(prompt), temperature=self.temperature)
        except Exception as e:
            raise GenerationUnavailable(str(e)) from e
        return self._checked(text)

    async def _acall(self, prompt: str) -> str:
        client = self._require_client()
        try:
            text = await client.acomplete(self._messages(prompt), temperature=self.temperature)
        except Exception as e:
            raise GenerationUnavailable(str(e)) from e
        return self._checked(text)

    def generate(self, prompt: str) -> GenerationOutcome:
        """Run the generation step, capturing failure as Unavailable."""
        try:
            return Generated(self._call(prompt))
        except GenerationUnavailable as e:
            logger.warning("generation_failed", reason=str(e))
            return Unavailable(str(e))

    async def agenerate(self, prompt: str) -> GenerationOutcome:
        """Run the generation step (async), capturing failure as Unavailable."""
        try:
            return Generated(await self._acall(prompt))
        except GenerationUnavailable as e:
            logger.warning("generation_failed", reason=str(e))
            return Unavailable(str(e))

    def _finish(self, outcome: GenerationOutcome, context: str, used_count: int) -> Synthesis:
        return Synthesis(
            answer=resolve_answer(outcome, context, self.fallback_prefix),
            used_count=used_count,
            generated=isinstance(outcome, Generated),
        )

    def synthesize(self, question: str, ranked: list[RankedChunk]) -> Synthesis:
        """Answer the question from the ranked chunks.

        Never raises for generation problems; used_count is len(ranked)
        whichever path was taken.
        """
        context = render_context(ranked)
        outcome = self.generate(build_prompt(question, context, self.system_prompt))
        return self._finish(outcome, context, len(ranked))

    async def asynthesize(self, question: str, ranked: list[RankedChunk]) -> Synthesis:
        """Answer the question from the ranked chunks (async)."""
        context = render_context(ranked)
        outcome = await self.agenerate(build_prompt(question, context, self.system_prompt))
        return self._finish(outcome, context, len(ranked))
