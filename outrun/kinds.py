"""Small enumerations shared by the game client and the server."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "AbilityType",
    "AdvertEventType",
    "BoostItem",
    "CampaignType",
    "ChaoDealing",
    "ChaoRarity",
    "ChaoStatus",
    "ChaoType",
    "ChaoWheelType",
    "CharacterStatus",
    "CollectEventType",
    "DAILY_MISSION_DONT_KNOW_YET",
    "EventID",
    "EventType",
    "IncentiveType",
    "ItemType",
    "Language",
    "LockCondition",
    "RankingLeague",
    "RankingMode",
    "RewardType",
    "UpgradeAbility",
    "WheelRank",
]

# A daily mission ID seen from the client whose meaning is still unknown.
DAILY_MISSION_DONT_KNOW_YET = 68


class AbilityType(IntEnum):
    NONE = -1
    LASER = 0
    DRILL = 1
    ASTEROID = 2
    RING_BONUS = 3
    DISTANCE_BONUS = 4
    TRAMPOLINE = 5
    ANIMAL = 6
    COMBO = 7
    MAGNET = 8
    INVINCIBLE = 9
    NUM = 10


class AdvertEventType(IntEnum):
    ROULETTE = 0
    CHARACTER = 1
    SHOP = 2


class BoostItem(IntEnum):
    UNKNOWN = -1
    SCORE_BONUS = 0
    ASSIST_TRAMPOLINE = 1
    SUB_CHARACTER = 2
    NUM = 3


class CampaignType(IntEnum):
    BANKED_RING_BONUS = 0
    DAILY_MISSION_BONUS = 1
    CHAO_ROULETTE_COST = 2
    GAME_ITEM_COST = 3
    CHARACTER_UPGRADE_COST = 4
    PURCHASE_ADD_RINGS = 5
    JACKPOT_VALUE_BONUS = 6
    MILEAGE_PASSING_RING_BONUS = 7
    PURCHASE_ADD_ENERGIES = 8
    PURCHASE_ADD_RED_RINGS = 9
    PURCHASE_ADD_RED_RINGS_NO_CHARGE_USER = 10
    SEND_ADD_ENERGIES = 11
    INVITE_COUNT = 12
    PREMIUM_ROULETTE_ODDS = 13
    FREE_WHEEL_SPIN_COUNT = 14
    CONTINUE_COST = 15
    PURCHASE_ADD_RAID_ENERGIES = 16


class ChaoDealing(IntEnum):
    NONE = 0
    LEADER = 1
    SUB = 2


class ChaoRarity(IntEnum):
    NORMAL = 0
    RARE = 1
    SUPER_RARE = 2
    NONE = 3


class ChaoStatus(IntEnum):
    NOT_OWNED = 0
    OWNED = 1
    MAX_LEVEL = 2


class ChaoType(IntEnum):
    MAIN = 0
    SUB = 1


class ChaoWheelType(IntEnum):
    NORMAL = 0
    SPECIAL = 1


class CharacterStatus(IntEnum):
    LOCKED = 0
    UNLOCKED = 1
    MAX_LEVEL = 2


class CollectEventType(IntEnum):
    GET_ANIMALS = 0
    GET_RING = 1
    RUN_DISTANCE = 2


class EventID(IntEnum):
    """Base IDs of event kinds; a real event ID adds an offset to one of these."""

    SPECIAL_STAGE = 100000000
    RAID_BOSS = 200000000
    COLLECT_OBJECT = 300000000
    GACHA = 400000000
    ADVERT = 500000000
    QUICK = 600000000
    BGM = 700000000


class EventType(IntEnum):
    SPECIAL_STAGE = 0
    RAID_BOSS = 1
    COLLECT_OBJECT = 2
    GACHA = 3
    ADVERT = 4
    QUICK = 5
    BGM = 6


class IncentiveType(IntEnum):
    NONE = 0
    POINT = 1
    CHAPTER = 2
    EPISODE = 3
    FRIEND = 4


class ItemType(IntEnum):
    """In-run item kinds; the phantom (Wisp) items span LASER to NUM."""

    TIMER_GOLD = -5
    TIMER_SILVER = -4
    TIMER_BRONZE = -3
    RED_RING = -2
    UNKNOWN = -1
    BEGIN = 0
    INVINCIBLE = 0
    BARRIER = 1
    MAGNET = 2
    TRAMPOLINE = 3
    COMBO = 4
    LASER = 5
    DRILL = 6
    ASTEROID = 7
    NUM = 8
    PHANTOM_START = 5
    PHANTOM_END = 8


class Language(IntEnum):
    JAPANESE = 0
    ENGLISH = 1
    CHINESE_ZHJ = 2
    CHINESE_ZH = 3
    KOREAN = 4
    FRENCH = 5
    GERMAN = 6
    SPANISH = 7
    PORTUGUESE = 8
    ITALIAN = 9
    RUSSIAN = 10


class LockCondition(IntEnum):
    OPEN = 0
    MILEAGE_EPISODE = 1
    RING_OR_RED_RING = 2
    ROULETTE = 3


class RankingLeague(IntEnum):
    NONE = -1
    F_M = 0
    F = 1
    F_P = 2
    E_M = 3
    E = 4
    E_P = 5
    D_M = 6
    D = 7
    D_P = 8
    C_M = 9
    C = 10
    C_P = 11
    B_M = 12
    B = 13
    B_P = 14
    A_M = 15
    A = 16
    A_P = 17
    S_M = 18
    S = 19
    S_P = 20


class RankingMode(IntEnum):
    ENDLESS = 0
    QUICK = 1


class RewardType(IntEnum):
    NONE = -1
    ITEM_INVINCIBLE = 0
    ITEM_BARRIER = 1
    ITEM_MAGNET = 2
    ITEM_TRAMPOLINE = 3
    ITEM_COMBO = 4
    ITEM_LASER = 5
    ITEM_DRILL = 6
    ITEM_ASTEROID = 7
    RING = 8
    RED_RING = 9
    MISSION_INCENTIVE_COUNT = 10
    ITEM_ROULETTE_PRIZE_COUNT = 10
    SPECIAL_EGG = 220000
    CHARA_BEGIN = 300000
    CHAO_BEGIN = 400000
    ENERGY = 920000


class UpgradeAbility(IntEnum):
    """Ability IDs sent when upgrading a character; 120001 is unused."""

    INVINCIBLE = 120000
    MAGNET = 120002
    TRAMPOLINE = 120003
    COMBO = 120004
    LASER = 120005
    DRILL = 120006
    ASTEROID = 120007
    RING_BONUS = 120008
    DISTANCE_BONUS = 120009
    ANIMAL_BONUS = 120010


class WheelRank(IntEnum):
    NORMAL = 0
    BIG = 1
    SUPER = 2
    MAX = 3