"""
Integration Tests

End-to-end scenarios through the AIAdapter facade with mocked upstreams:

Scenario 1: JSON reply is returned as the parsed document
Scenario 2: Plain-text reply falls back to {"text": ...}
Scenario 3: Unknown provider fails with ProviderUnavailable
Scenario 4: Upstream HTTP 500 fails with UpstreamError
Scenario 5: Empty API key means the provider is not registered
"""

import pytest

from ai_adapter import AIAdapter, ProviderUnavailable, UpstreamError

from conftest import gemini_body, json_reply, openai_body

SPAM_PROMPT = "Is this spam? 'Congratulations, you won a free cruise!'"


# ============================================================================
# Scenario 1 & 2: normalization
# ============================================================================


@pytest.mark.asyncio
async def test_json_reply_returned_as_document(make_client):
    content = '{"is_spam":true,"confidence":0.9,"reason":"..."}'
    client, _ = make_client(json_reply(openai_body(content)))

    async with AIAdapter({"openai": {"apiKey": "sk-openai"}}, http_client=client) as adapter:
        result = await adapter.process(SPAM_PROMPT, {"provider": "openai"})

    assert result == {"is_spam": True, "confidence": 0.9, "reason": "..."}


@pytest.mark.asyncio
async def test_plain_text_reply_falls_back(make_client):
    client, _ = make_client(json_reply(openai_body("not json")))

    async with AIAdapter({"openai": {"apiKey": "sk-openai"}}, http_client=client) as adapter:
        result = await adapter.process(SPAM_PROMPT, {"provider": "openai"})

    assert result == {"text": "not json"}


@pytest.mark.asyncio
async def test_empty_candidates_give_empty_text(make_client):
    client, _ = make_client(json_reply({"candidates": []}))

    async with AIAdapter({"gemini": {"apiKey": "g-key"}}, http_client=client) as adapter:
        result = await adapter.process(SPAM_PROMPT, {"provider": "gemini"})

    assert result == {"text": ""}


@pytest.mark.asyncio
async def test_passthrough_fields_tolerated(make_client):
    client, recorder = make_client(json_reply(gemini_body('{"score": 3}')))

    async with AIAdapter({"gemini": {"apiKey": "g-key"}}, http_client=client) as adapter:
        result = await adapter.process(
            SPAM_PROMPT, {"provider": "gemini", "dimension": "spam", "sectionIndex": 0}
        )

    assert result == {"score": 3}
    assert "dimension" not in recorder.last_json()


# ============================================================================
# Scenario 3 & 5: unavailable providers
# ============================================================================


@pytest.mark.asyncio
async def test_unknown_provider_unavailable(make_client):
    client, recorder = make_client(json_reply(openai_body("x")))
    adapter = AIAdapter({"openai": {"apiKey": "sk-openai"}}, http_client=client)

    with pytest.raises(ProviderUnavailable) as exc_info:
        await adapter.process(SPAM_PROMPT, {"provider": "mistral"})

    assert exc_info.value.provider == "mistral"
    assert recorder.requests == []  # fails before any network call


@pytest.mark.asyncio
async def test_empty_key_behaves_like_unknown_provider(make_client):
    client, recorder = make_client(json_reply(openai_body("x")))
    adapter = AIAdapter(
        {"openai": {"apiKey": "sk-openai"}, "anthropic": {"apiKey": ""}}, http_client=client
    )

    with pytest.raises(ProviderUnavailable) as exc_info:
        await adapter.process(SPAM_PROMPT, {"provider": "anthropic"})

    assert exc_info.value.provider == "anthropic"
    assert recorder.requests == []


# ============================================================================
# Scenario 4: upstream failure
# ============================================================================


@pytest.mark.asyncio
async def test_upstream_500_raises(make_client):
    client, recorder = make_client(json_reply({"error": {"message": "overloaded"}}, status_code=500))
    adapter = AIAdapter({"openai": {"apiKey": "sk-openai"}}, http_client=client)

    with pytest.raises(UpstreamError) as exc_info:
        await adapter.process(SPAM_PROMPT, {"provider": "openai"})

    assert exc_info.value.status_code == 500
    assert exc_info.value.provider == "openai"
    assert "500" in str(exc_info.value)
    assert len(recorder.requests) == 1
