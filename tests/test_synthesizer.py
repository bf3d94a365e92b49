"""Tests for answer synthesis and the fallback path."""

from datetime import UTC, datetime

import pytest

from secondbrain.models import Chunk, RankedChunk
from secondbrain.providers import LLMClient
from secondbrain.settings import DEFAULT_FALLBACK_PREFIX, DEFAULT_SYSTEM_PROMPT
from secondbrain.synthesizer import (
    AnswerSynthesizer,
    Generated,
    Unavailable,
    build_prompt,
    render_context,
    resolve_answer,
)

NOW = datetime(2025, 1, 1, tzinfo=UTC)


def ranked(content: str, score: float, chunk_id: int = 1) -> RankedChunk:
    chunk = Chunk(
        id=chunk_id,
        user_id=1,
        source_id=1,
        content=content,
        embedding=[1.0],
        created_at=NOW,
        content_time=NOW,
    )
    return RankedChunk(chunk=chunk, score=score)


@pytest.fixture
def two_ranked():
    return [ranked("Alpha beta.", 0.98765, 1), ranked("Gamma delta.", 0.5, 2)]


class TestRenderContext:
    def test_format(self, two_ranked):
        assert render_context(two_ranked) == (
            "Chunk 1 (score=0.988):\nAlpha beta.\n\n---\n\nChunk 2 (score=0.500):\nGamma delta."
        )

    def test_single(self):
        assert render_context([ranked("Only.", 1.0)]) == "Chunk 1 (score=1.000):\nOnly."

    def test_empty(self):
        assert render_context([]) == ""


class TestBuildPrompt:
    def test_contains_instruction_question_and_context(self):
        prompt = build_prompt("What is alpha?", "Chunk 1 (score=1.000):\nAlpha.")

        assert prompt.startswith("System instructions:\n" + DEFAULT_SYSTEM_PROMPT)
        assert "User question: What is alpha?" in prompt
        assert prompt.endswith("Context:\nChunk 1 (score=1.000):\nAlpha.")
        assert "ONLY the provided context" in prompt
        assert "don't know" in prompt


class TestResolveAnswer:
    def test_generated(self):
        assert resolve_answer(Generated("The answer."), "ctx") == "The answer."

    def test_unavailable(self):
        answer = resolve_answer(Unavailable("down"), "ctx")
        assert answer == f"{DEFAULT_FALLBACK_PREFIX}\n\nctx"

    def test_custom_prefix(self):
        assert resolve_answer(Unavailable("down"), "ctx", "Notes:") == "Notes:\n\nctx"


class TestAnswerSynthesizer:
    def test_generated_answer(self, fake_llm_client, two_ranked):
        synthesizer = AnswerSynthesizer(llm_client=fake_llm_client)

        result = synthesizer.synthesize("What is alpha?", two_ranked)

        assert result.answer == "Generated answer."
        assert result.used_count == 2
        assert result.generated is True
        assert fake_llm_client.prompts == [
            build_prompt("What is alpha?", render_context(two_ranked))
        ]

    def test_fallback_when_generation_fails(self, failing_llm_client, two_ranked):
        synthesizer = AnswerSynthesizer(llm_client=failing_llm_client)

        result = synthesizer.synthesize("What is alpha?", two_ranked)

        assert result.answer.startswith(DEFAULT_FALLBACK_PREFIX)
        assert render_context(two_ranked) in result.answer
        assert "Alpha beta." in result.answer
        assert "Gamma delta." in result.answer
        assert result.used_count == 2
        assert result.generated is False

    def test_fallback_without_client(self, two_ranked):
        result = AnswerSynthesizer().synthesize("q", two_ranked)

        assert result.answer.startswith(DEFAULT_FALLBACK_PREFIX)
        assert result.used_count == 2

    def test_blank_model_reply_falls_back(self, two_ranked):
        class BlankClient(LLMClient):
            def complete(self, messages, temperature=None):
                return "   "

        result = AnswerSynthesizer(llm_client=BlankClient()).synthesize("q", two_ranked)

        assert result.generated is False
        assert result.answer.startswith(DEFAULT_FALLBACK_PREFIX)

    def test_generate_returns_outcome(self, failing_llm_client, fake_llm_client):
        assert AnswerSynthesizer(llm_client=fake_llm_client).generate("p") == Generated(
            "Generated answer."
        )
        outcome = AnswerSynthesizer(llm_client=failing_llm_client).generate("p")
        assert isinstance(outcome, Unavailable)
        assert "model unavailable" in outcome.reason

    def test_passes_temperature(self, two_ranked):
        seen = []

        class RecordingClient(LLMClient):
            def complete(self, messages, temperature=None):
                seen.append(temperature)
                return "ok"

        AnswerSynthesizer(llm_client=RecordingClient(), temperature=0.7).synthesize(
            "q", two_ranked
        )

        assert seen == [0.7]

    @pytest.mark.asyncio
    async def test_asynthesize(self, fake_llm_client, two_ranked):
        result = await AnswerSynthesizer(llm_client=fake_llm_client).asynthesize("q", two_ranked)

        assert result.answer == "Generated answer."
        assert result.used_count == 2

    @pytest.mark.asyncio
    async def test_asynthesize_fallback(self, two_ranked):
        class AsyncFailingClient(LLMClient):
            def complete(self, messages, temperature=None):
                return "sync path unused"

            async def acomplete(self, messages, temperature=None):
                raise TimeoutError("generation timed out")

        result = await AnswerSynthesizer(llm_client=AsyncFailingClient()).asynthesize(
            "q", two_ranked
        )

        assert result.generated is False
        assert result.answer.startswith(DEFAULT_FALLBACK_PREFIX)
        assert result.used_count == 2
