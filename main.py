# main.py
"""Main entry point for the trade journal."""
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config.settings import Settings
from src.journal import (
    ExternalReviewError,
    JournalStats,
    ReviewInProgressError,
    TradeRepository,
    seed_sample_trades,
)
from src.journal.repository import sequential_ids
from src.review import ReviewOrchestrator, TradeReviewer


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def load_config(config_path: str = "config/settings.yaml") -> Settings:
    """Load environment variables and settings.

    Returns:
        Settings object loaded from YAML.

    Raises:
        SystemExit: If the config file is missing or YAML parsing fails.
    """
    load_dotenv()

    path = Path(config_path)
    if not path.exists():
        logger.error(f"{config_path} not found")
        sys.exit(1)

    try:
        settings = Settings.from_yaml(path)
    except Exception as e:
        logger.error(f"Failed to parse {config_path}: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(settings.system.log_level.upper())
    logger.info(f"✓ Settings loaded from {config_path}")
    return settings


def build_journal(settings: Settings) -> tuple[TradeRepository, JournalStats]:
    """Create the trade repository and its statistics service."""
    repository = TradeRepository(
        contract_multiplier=settings.journal.contract_multiplier,
        id_factory=sequential_ids(),
    )
    if settings.journal.seed_sample_data:
        seeded = seed_sample_trades(repository)
        logger.info(f"✓ Loaded {len(seeded)} sample trades")

    return repository, JournalStats(repository)


def build_orchestrator(
    settings: Settings, repository: TradeRepository
) -> ReviewOrchestrator | None:
    """Create the review orchestrator.

    Returns:
        The orchestrator, or None if reviews are disabled or no API key is set.
    """
    if not settings.reviewer.enabled:
        logger.info("AI reviews disabled")
        return None

    if not settings.anthropic.api_key:
        logger.warning("ANTHROPIC_API_KEY not set, AI reviews unavailable")
        return None

    reviewer = TradeReviewer(
        api_key=settings.anthropic.api_key,
        model=settings.reviewer.model,
        max_tokens=settings.reviewer.max_tokens,
        rate_limit_per_minute=settings.reviewer.rate_limit_per_minute,
    )
    logger.info("✓ TradeReviewer initialized")
    return ReviewOrchestrator(repository, reviewer)


def log_dashboard(stats: JournalStats, recent_limit: int) -> None:
    """Log the dashboard statistics and the most recent trades."""
    summary = stats.summary(recent_limit)

    logger.info("=" * 60)
    logger.info(f"Today PnL:    {summary.today_pnl:,.2f}")
    logger.info(f"Win rate:     {summary.win_rate:.1f}%")
    logger.info(f"Total trades: {summary.total_trades}")
    logger.info(f"Average R:    {summary.average_r:.2f}")
    logger.info("=" * 60)

    for trade in summary.recent_trades:
        pnl = f"{trade.pnl:,.2f}" if trade.pnl is not None else "-"
        r_multiple = f"{trade.r_multiple:.2f}" if trade.r_multiple is not None else "-"
        logger.info(
            f"{trade.id}  {trade.entry_time:%Y-%m-%d %H:%M}  {trade.instrument:<8} "
            f"{trade.direction.value:<5}  pnl={pnl}  r={r_multiple}"
        )


async def review(orchestrator: ReviewOrchestrator | None, trade_id: str) -> bool:
    """Request an AI review for one trade and log the outcome.

    Returns:
        True if a review was attached.
    """
    if orchestrator is None:
        logger.error("AI reviews are not available")
        return False

    try:
        trade = await orchestrator.review_trade(trade_id)
    except (ExternalReviewError, ReviewInProgressError) as e:
        logger.error(f"Review failed: {e}")
        return False

    if trade is None:
        logger.error(f"Trade {trade_id} not found")
        return False

    ai_review = trade.ai_review
    logger.info(f"Grade: {ai_review.grade or 'n/a'}")
    if ai_review.summary:
        logger.info(ai_review.summary)
    for flag in ai_review.risk_flags:
        logger.info(f"Risk flag: {flag}")
    return True


async def main(argv: list[str] | None = None) -> int:
    """Load the journal, log the dashboard and optionally review a trade.

    Args:
        argv: Command line arguments; an optional trade id to review.

    Returns:
        Process exit code.
    """
    args = sys.argv[1:] if argv is None else argv

    settings = load_config()
    logger.info(f"Starting {settings.system.name} v{settings.system.version}")

    repository, stats = build_journal(settings)
    log_dashboard(stats, settings.journal.recent_trades_limit)

    if args:
        orchestrator = build_orchestrator(settings, repository)
        if not await review(orchestrator, args[0]):
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
