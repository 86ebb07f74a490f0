"""Fixed game balance values and storage settings."""

from __future__ import annotations

from types import MappingProxyType

from outrun.ids import CharaType, ItemID, id_str

__all__ = [
    "POINT_SCORES",
    "CHAO_ROULETTE_RED_RING_COST",
    "CHAO_ROULETTE_TICKET_COST",
    "CHAO_ROULETTE_CHARACTER_STAR_INCREASE",
    "CHAO_ROULETTE_CHARACTER_LEVEL_INCREASE",
    "CHAO_ROULETTE_CHAO_LEVEL_INCREASE_LOW",
    "CHAO_ROULETTE_CHAO_LEVEL_INCREASE_HIGH",
    "UPGRADE_INCREASES",
    "DB_FILE_NAME",
    "DB_BUCKET_SESSION_IDS",
    "DB_BUCKET_PLAYERS",
    "DB_BUCKET_ANALYTICS",
    "DB_SESSION_EXPIRY_TIME",
    "EPISODE_WITH_CHAPTERS",
    "ITEM_PRICES",
    "CHARACTER_UPGRADE_INCREASE",
    "ROULETTE_JACKPOT_RINGS",
    "ROULETTE_FREE_SPINS",
]


def _points(score: int) -> tuple[int, ...]:
    # Five map points followed by the boss point, which never carries a score.
    return (score,) * 5 + (-1,)


# Score per map point, by chapter, starting at chapter 1.
_CHAPTER_SCORES = (
    1000, 50000, 50000, 65000, 65000, 65000, 110000, 110000, 160000, 160000,
    260000, 390000, 420000, 420000, 420000, 600000, 1200000, 1280000, 1600000,
    1700000, 2040000, 2160000, 2280000, 2800000, 2280000,
)

# Chapter number -> score needed to reach each point of the mileage map.
POINT_SCORES = MappingProxyType(
    {chapter: _points(score) for chapter, score in enumerate(_CHAPTER_SCORES, start=1)}
)

CHAO_ROULETTE_RED_RING_COST = 30
CHAO_ROULETTE_TICKET_COST = 1
CHAO_ROULETTE_CHARACTER_STAR_INCREASE = 1
CHAO_ROULETTE_CHARACTER_LEVEL_INCREASE = 5
CHAO_ROULETTE_CHAO_LEVEL_INCREASE_LOW = 1
CHAO_ROULETTE_CHAO_LEVEL_INCREASE_HIGH = 5

# Upgrade cost increase of the base characters, in ID order from the first one.
_UPGRADE_COSTS = (
    250, 250, 250, 300, 450, 500, 500, 600, 650, 700,
    600, 600, 650, 750, 850, 950, 800, 700, 1050, 1500, 2250,
)

# Character ID -> ring cost added to the next upgrade after each level-up.
UPGRADE_INCREASES = MappingProxyType(
    {
        id_str(int(CharaType.SONIC) + offset): cost
        for offset, cost in enumerate(_UPGRADE_COSTS)
    }
)

DB_FILE_NAME = "outrun.db"
DB_BUCKET_SESSION_IDS = "sessionIDs"
DB_BUCKET_PLAYERS = "players"
DB_BUCKET_ANALYTICS = "analytics"
DB_SESSION_EXPIRY_TIME = 3600  # seconds

_TWO_CHAPTER_EPISODES = (
    6, 11, 16, 19, 20, 22, 23, 24, 29, 31, 33, 36, 38, 39,
    42, 43, 44, 46, 47, 48, 49,
)

# Episode -> number of chapters, for episodes with more than one.
EPISODE_WITH_CHAPTERS = MappingProxyType(
    dict(
        sorted(
            {**dict.fromkeys(_TWO_CHAPTER_EPISODES, 2), 40: 3, 41: 3, 50: 5}.items()
        )
    )
)

_ITEM_RING_PRICES = (
    (ItemID.INVINCIBLE, 3000),
    (ItemID.BARRIER, 1000),
    (ItemID.MAGNET, 3000),
    (ItemID.TRAMPOLINE, 2000),
    (ItemID.COMBO, 3000),
    (ItemID.LASER, 5000),
    (ItemID.DRILL, 4000),
    (ItemID.ASTEROID, 5000),
    (ItemID.BOOST_SCORE, 6000),
    (ItemID.BOOST_TRAMPOLINE, 1000),
    (ItemID.BOOST_SUB_CHARA, 4000),
)

# Item ID string -> ring price in the pre-run item shop.
ITEM_PRICES = MappingProxyType({id_str(item): price for item, price in _ITEM_RING_PRICES})

CHARACTER_UPGRADE_INCREASE = 5500

ROULETTE_JACKPOT_RINGS = 185000
ROULETTE_FREE_SPINS = 5