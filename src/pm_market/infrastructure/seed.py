"""Seed catalogue for the demo: Pokemon collectibles markets and categories."""

from datetime import datetime, timezone

from src.pm_common.enums import MarketCategory, MarketStatus
from src.pm_market.domain.models import CategoryInfo, Market

CATEGORIES: dict[MarketCategory, CategoryInfo] = {
    MarketCategory.CARD_PRICES: CategoryInfo(
        key=MarketCategory.CARD_PRICES.value,
        label="Card Prices",
        description="Markets on individual card values and price movements",
        icon="💎",
    ),
    MarketCategory.EVENTS: CategoryInfo(
        key=MarketCategory.EVENTS.value,
        label="Events",
        description="Markets on Pokemon events, tournaments, and announcements",
        icon="🎯",
    ),
    MarketCategory.SET_PERFORMANCE: CategoryInfo(
        key=MarketCategory.SET_PERFORMANCE.value,
        label="Set Performance",
        description="Markets on booster box values and set market performance",
        icon="📈",
    ),
}


def _utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def seed_markets() -> list[Market]:
    """Fresh Market objects; every call returns new instances."""
    return [
        Market(
            id=1,
            title="Will PSA 10 Base Set Charizard exceed $15,000 by Jan 1, 2026?",
            description=(
                "Based on TCGPlayer market price for PSA 10 Base Set Shadowless Charizard "
                "(Card #4/102). Price must be sustained for at least 7 consecutive days."
            ),
            category=MarketCategory.CARD_PRICES.value,
            yes_price=68,
            no_price=32,
            total_volume=245_000,
            end_date=_utc(2026, 1, 1),
            status=MarketStatus.ACTIVE.value,
            resolution_source="TCGPlayer API average of last 7 sales",
        ),
        Market(
            id=2,
            title="Will Pokemon Worlds 2025 have over 1000 Masters Division players?",
            description=(
                "The Pokemon World Championships 2025 Masters Division (18+) will have more "
                "than 1000 registered participants on the first day of competition."
            ),
            category=MarketCategory.EVENTS.value,
            yes_price=45,
            no_price=55,
            total_volume=182_000,
            end_date=_utc(2025, 8, 15),
            status=MarketStatus.ACTIVE.value,
            resolution_source="Official Pokemon World Championships registration data",
        ),
        Market(
            id=3,
            title="Will Stellar Crown booster boxes stay above $120 after 6 months?",
            description=(
                "Pokemon TCG Stellar Crown booster box market price (new, sealed) will remain "
                "above $120 USD six months after initial release date."
            ),
            category=MarketCategory.SET_PERFORMANCE.value,
            yes_price=72,
            no_price=28,
            total_volume=310_000,
            end_date=_utc(2025, 3, 20),
            status=MarketStatus.ACTIVE.value,
            resolution_source="TCGPlayer and eBay sold listings average",
        ),
        Market(
            id=4,
            title="Will Moonbreon (Umbreon VMAX Alt Art) hit $500 PSA 10 by end of 2025?",
            description=(
                "PSA 10 graded Umbreon VMAX Alternate Art from Evolving Skies "
                "(Card #215/203) will reach or exceed $500 market value."
            ),
            category=MarketCategory.CARD_PRICES.value,
            yes_price=38,
            no_price=62,
            total_volume=195_000,
            end_date=_utc(2025, 12, 31, 23, 59, 59),
            status=MarketStatus.ACTIVE.value,
            resolution_source="PSA certified population and recent sales data",
        ),
        Market(
            id=5,
            title="Will the next Pokemon set introduce a new card rarity?",
            description=(
                "The next major Pokemon TCG expansion will introduce a card rarity type that "
                "has never been used before in the English TCG."
            ),
            category=MarketCategory.EVENTS.value,
            yes_price=25,
            no_price=75,
            total_volume=89_000,
            end_date=_utc(2025, 5, 1),
            status=MarketStatus.ACTIVE.value,
            resolution_source="Official Pokemon TCG announcements and set releases",
        ),
        Market(
            id=6,
            title="Will Paradox Rift have better market performance than Paldea Evolved?",
            description=(
                "Average booster box price of Paradox Rift will exceed average booster box "
                "price of Paldea Evolved 12 months post-release."
            ),
            category=MarketCategory.SET_PERFORMANCE.value,
            yes_price=58,
            no_price=42,
            total_volume=268_000,
            end_date=_utc(2025, 9, 15),
            status=MarketStatus.ACTIVE.value,
            resolution_source="Market price comparison across major retailers",
        ),
    ]
