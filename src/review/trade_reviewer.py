# src/review/trade_reviewer.py
"""Trade reviewer - qualitative AI review of journal trades via Claude."""
import json
import logging
import time

from anthropic import Anthropic
from pydantic import ValidationError

from src.journal.errors import ExternalReviewError
from src.journal.metrics import planned_reward_to_risk
from src.journal.models import AIReview, TradeRecord

logger = logging.getLogger(__name__)


class TradeReviewer:
    """Qualitative trade review using Claude API.

    Note: Rate limiting via _enforce_rate_limit() is not thread-safe.
    Reviews are requested one at a time per trade by the orchestrator.
    """

    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    DEFAULT_MAX_TOKENS = 1500

    REVIEW_PROMPT = '''Review this discretionary trade from a personal trading journal.

Trade:
{trade_json}

Planned reward-to-risk: {reward_to_risk:.2f}

Respond with a JSON object containing:
- grade: One of [A, B, C, D, F] rating execution quality
- summary: Two or three sentences on how the trade was planned and managed
- strengths: List of things done well
- mistakes: List of mistakes made
- rule_violations: List of broken risk or trading rules
- invalidation_triggers: List of conditions that should have invalidated the setup
- next_actions: List of concrete actions for future trades
- risk_flags: List of risk management concerns

Respond ONLY with valid JSON, no other text.'''

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        max_tokens: int | None = None,
        rate_limit_per_minute: int = 20,
    ):
        self.client = Anthropic(api_key=api_key)
        self.model = model or self.DEFAULT_MODEL
        self.max_tokens = max_tokens or self.DEFAULT_MAX_TOKENS
        self.rate_limit_per_minute = rate_limit_per_minute
        self._last_call_time: float | None = None

    def review(self, trade: TradeRecord) -> AIReview:
        """Request a qualitative review of a trade.

        Raises:
            ExternalReviewError: If the API call fails or the reply is not a
                valid review.
        """
        self._enforce_rate_limit()

        payload = trade.to_dict()
        # A previous review is not part of the request
        payload.pop("ai_review", None)
        prompt = self.REVIEW_PROMPT.format(
            trade_json=json.dumps(payload, indent=2),
            reward_to_risk=planned_reward_to_risk(trade),
        )

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as e:
            logger.warning(f"Trade review request failed for {trade.id}: {e}")
            raise ExternalReviewError(f"Review request failed: {e}") from e

        try:
            result_text = response.content[0].text
            return AIReview.model_validate(json.loads(_strip_code_fence(result_text)))
        except (IndexError, AttributeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Could not parse review for {trade.id}: {e}")
            raise ExternalReviewError(f"Reviewer returned an invalid review: {e}") from e

    def _enforce_rate_limit(self) -> None:
        """Enforce rate limiting between API calls."""
        if self._last_call_time is not None:
            min_interval = 60.0 / self.rate_limit_per_minute
            elapsed = time.time() - self._last_call_time
            if elapsed < min_interval:
                time.sleep(min_interval - elapsed)
        self._last_call_time = time.time()


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code block, if any."""
    text = text.strip()
    if not text.startswith("```"):
        return text

    lines = text.split("\n")
    lines = lines[1:]  # ```json
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)
