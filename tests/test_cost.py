"""Tests for token usage extraction, cost calculation, and structured logging."""

from unittest.mock import MagicMock, patch

from study_buddy.cost import (
    INPUT_PRICE_PER_TOKEN,
    OUTPUT_PRICE_PER_TOKEN,
    TokenUsage,
    extract_usage,
    log_usage,
)


def _make_mock_response(prompt_tokens: int | None, completion_tokens: int | None) -> MagicMock:
    """Build a mock Gemini response with usage_metadata."""
    metadata = MagicMock()
    metadata.prompt_token_count = prompt_tokens
    metadata.candidates_token_count = completion_tokens
    response = MagicMock()
    response.usage_metadata = metadata
    return response


def test_extract_usage_normal():
    response = _make_mock_response(prompt_tokens=2_000, completion_tokens=8_000)

    usage = extract_usage(response)

    assert usage.total_tokens == 10_000
    expected_cost = (2_000 * INPUT_PRICE_PER_TOKEN) + (8_000 * OUTPUT_PRICE_PER_TOKEN)
    assert abs(usage.cost_usd - expected_cost) < 1e-10
    # 2K * $0.30/1M + 8K * $2.50/1M = $0.0006 + $0.02
    assert abs(usage.cost_usd - 0.0206) < 1e-10


def test_extract_usage_none_counts():
    """None token counts default to 0 tokens and $0 cost."""
    usage = extract_usage(_make_mock_response(prompt_tokens=None, completion_tokens=None))

    assert usage.prompt_tokens == 0
    assert usage.completion_tokens == 0
    assert usage.cost_usd == 0.0


def test_extract_usage_no_metadata():
    usage = extract_usage(MagicMock(spec=[]))

    assert usage.total_tokens == 0
    assert usage.cost_usd == 0.0


def test_log_usage_structured_output():
    """log_usage emits one INFO log with structured extra fields."""
    usage = TokenUsage(prompt_tokens=100, completion_tokens=50, total_tokens=150, cost_usd=0.00015512)

    with patch("study_buddy.cost.logger") as mock_logger:
        log_usage(["Photosynthesis", "Cell Division"], "gemini-flash-latest", usage)

    mock_logger.info.assert_called_once()
    call_args = mock_logger.info.call_args
    assert call_args[0][0] == "Gemini generation complete"
    extra = call_args[1]["extra"]
    assert extra["topics"] == ["Photosynthesis", "Cell Division"]
    assert extra["model"] == "gemini-flash-latest"
    assert extra["total_tokens"] == 150
    assert extra["cost_usd"] == 0.000155
