"""Identifiers the game client exchanges with the server.

The client divides an ID by 10000 to tell what kind of thing it is:
11xxxx boost items, 12xxxx equip items, 30xxxx characters, 40xxxx Chao,
9xxxxx currencies.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ChaoID", "CharaType", "ItemID", "IDType", "GameID", "id_str"]


class _WireID(IntEnum):
    """An integer ID whose string form is its decimal value, as sent on the wire."""

    def __str__(self) -> str:
        return str(int(self))

    def __format__(self, spec: str) -> str:
        return format(int(self), spec)


def id_str(value: int) -> str:
    """Return the decimal string form of an ID, as the client expects it."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"an integer ID is required, not {type(value).__name__}")
    return str(int(value))


class ChaoID(_WireID):
    """Chao IDs. The third digit is the rarity: 0 normal, 1 rare, 2 super rare."""

    HERO_CHAO = 400000
    GOLD_CHAO = 400001
    DARK_CHAO = 400002
    JEWEL_CHAO = 400003
    NORMAL_CHAO = 400004
    OMOCHAO = 400005
    RC_MONKEY = 400006
    RC_SPRING = 400007
    RC_ELECTROMAGNET = 400008
    BABY_CYAN_WISP = 400012
    BABY_INDIGO_WISP = 400013
    BABY_YELLOW_WISP = 400014
    RC_PINWHEEL = 400018
    RC_PIGGY_BANK = 400019
    RC_BALLOON = 400020
    EASTER_CHAO = 400021
    PURPLE_PAPURISU = 400024
    MAG_LV1 = 400025
    EGG_CHAO = 401000
    PUMPKIN_CHAO = 401001
    SKULL_CHAO = 401002
    YACKER = 401003
    RC_GOLDEN_PIGGY_BANK = 401004
    WIZARD_CHAO = 401005
    RC_TURTLE = 401009
    RC_UFO = 401010
    RC_BOMBER = 401011
    EASTER_BUNNY = 401015
    MAGIC_LAMP = 401016
    STAR_SHAPED_MISSILE = 401017
    SUKETOUDARA = 401018
    RAPPY = 401019
    BLOWFISH_TRANSPORTER = 401020
    GENESIS = 401021
    CARTRIDGE = 401022
    RC_FIGHTER = 401023
    RC_HOVERCRAFT = 401024
    RC_HELICOPTER = 401025
    GREEN_CRYSTAL_MONSTER_S = 401026
    GREEN_CRYSTAL_MONSTER_L = 401027
    RC_AIRSHIP = 401028
    DESERT_CHAO = 401029
    RC_SATELLITE = 401030
    MARINE_CHAO = 401031
    NIGHTOPIAN = 401032
    ORCA = 401033
    SONIC_OMOCHAO = 401034
    TAILS_OMOCHAO = 401035
    KNUCKLES_OMOCHAO = 401036
    BOO = 401037
    HALLOWEEN_CHAO = 401038
    HEAVY_BOMB = 401039
    BLOCK_BOMB = 401040
    HUNK_OF_MEAT = 401041
    YETI = 401042
    SNOW_CHAO = 401043
    IDEYA = 401044
    CHRISTMAS_NIGHTOPIAN = 401045
    ORBOT = 401046
    CUBOT = 401047
    LIGHT_CHAOS = 402000
    HERO_CHAOS = 402001
    DARK_CHAOS = 402002
    CHIP = 402003
    SHAHRA = 402004
    CALIBURN = 402005
    KING_ARTHURS_GHOST = 402006
    RC_TORNADO = 402007
    RC_BATTLE_CRUISER = 402008
    MERLINA = 402009
    ERAZOR_DJINN = 402010
    RC_MOON_MECH = 402011
    CARBUNCLE = 402012
    KUNA = 402013
    CHAOS = 402014
    DEATH_EGG = 402015
    RED_CRYSTAL_MONSTER_S = 402016
    RED_CRYSTAL_MONSTER_L = 402017
    GOLDEN_GOOSE = 402018
    MOTHER_WISP = 402019
    RC_PIRATE_SPACESHIP = 402020
    GOLDEN_ANGEL = 402021
    NIGHTS = 402022
    REALA = 402023
    RC_TORNADO_2 = 402024
    CHAO_WALKER = 402025
    DARK_QUEEN = 402026
    KING_BOOM_BOO = 402027
    O_PAPA = 402028
    OPA_OPA = 402029
    RC_BLOCK_FACE = 402030
    CHRISTMAS_YETI = 402031
    CHRISTMAS_NIGHTS = 402032
    D_FEKT = 402033
    DARK_CHAO_WALKER = 402034


class CharaType(_WireID):
    """Character IDs as they are sent over the network."""

    UNKNOWN = -1
    SONIC = 300000
    TAILS = 300001
    KNUCKLES = 300002
    AMY = 300003
    SHADOW = 300004
    BLAZE = 300005
    ROUGE = 300006
    OMEGA = 300007
    BIG = 300008
    CREAM = 300009
    ESPIO = 300010
    CHARMY = 300011
    VECTOR = 300012
    SILVER = 300013
    METAL_SONIC = 300014
    CLASSIC_SONIC = 300015
    WEREHOG = 300016
    STICKS = 300017
    TIKAL = 300018
    MEPHILES = 300019
    PSI_SILVER = 300020
    AMITIE_AMY = 301000
    GOTHIC_AMY = 301001
    HALLOWEEN_SHADOW = 301002
    HALLOWEEN_ROUGE = 301003
    HALLOWEEN_OMEGA = 301004
    XMAS_SONIC = 301005
    XMAS_TAILS = 301006
    XMAS_KNUCKLES = 301007


class ItemID(_WireID):
    """Boost items, equip items, packed items and mileage reward currencies."""

    NONE = -1

    BOOST_SCORE = 110000
    BOOST_TRAMPOLINE = 110001
    BOOST_SUB_CHARA = 110002

    INVINCIBLE = 120000
    BARRIER = 120001
    MAGNET = 120002
    TRAMPOLINE = 120003
    COMBO = 120004
    LASER = 120005
    DRILL = 120006
    ASTEROID = 120007
    RING_BONUS = 120008
    DISTANCE_BONUS = 120009
    ANIMAL_BONUS = 120010

    PACKED_INVINCIBLE_0 = 120100
    PACKED_BARRIER_0 = 120101
    PACKED_MAGNET_0 = 120102
    PACKED_TRAMPOLINE_0 = 120103
    PACKED_COMBO_0 = 120104
    PACKED_LASER_0 = 120105
    PACKED_DRILL_0 = 120106
    PACKED_ASTEROID_0 = 120107
    PACKED_RING_BONUS_0 = 120108
    PACKED_DISTANCE_BONUS_0 = 120109
    PACKED_ANIMAL_BONUS_0 = 120110

    PACKED_INVINCIBLE_1 = 121000
    PACKED_BARRIER_1 = 121001
    PACKED_MAGNET_1 = 121002
    PACKED_TRAMPOLINE_1 = 121003
    PACKED_COMBO_1 = 121004
    PACKED_LASER_1 = 121005
    PACKED_DRILL_1 = 121006
    PACKED_ASTEROID_1 = 121007
    PACKED_RING_BONUS_1 = 121008
    PACKED_DISTANCE_BONUS_1 = 121009
    PACKED_ANIMAL_BONUS_1 = 121010

    RED_RING = 900000
    RED_RING_0 = 900010
    RED_RING_1 = 900030
    RED_RING_2 = 900060
    RED_RING_3 = 900210
    RED_RING_4 = 900380
    RING = 910000
    RING_0 = 910021
    RING_1 = 910045
    RING_2 = 910094
    RING_3 = 910147
    RING_4 = 910204
    RING_5 = 910265


class IDType(_WireID):
    """Kinds of item the server may hand to the client."""

    NONE = -1
    BOOST_ITEM = 110000
    EQUIP_ITEM = 110001
    ITEM_ROULETTE_WIN = 200000
    ROULETTE_TOKEN = 200001
    EGG_ITEM = 200002
    PREMIUM_ROULETTE_TICKET = 200003
    ITEM_ROULETTE_TICKET = 200004
    CHARA = 300000
    CHAO = 400000
    RED_RING = 900000
    RING = 900001
    ENERGY = 900002
    ENERGY_MAX = 900003
    RAID_RING = 960000


class GameID(_WireID):
    """General-purpose IDs: roulette ranks, tickets, ID ranges and currencies."""

    BIG = 200000
    SUPER = 200001
    JACKPOT = 200002
    ROULETTE_TOKEN = 210000
    SPECIAL_EGG = 220000
    ROULETTE_TICKET_BEGIN = 229999
    ROULETTE_TICKET_PREMIUM = 230000
    ROULETTE_TICKET_ITEM = 240000
    ROULETTE_TICKET_RAID = 250000
    ROULETTE_TICKET_EVENT = 260000
    ROULETTE_TICKET_END = 299999
    CHARA_BEGIN = 300000
    CHAO_BEGIN = 400000
    CHAO_BEGIN_RARE = 401000
    CHAO_BEGIN_SUPER_RARE = 402000
    RED_RING = 900000
    RED_RING_0 = 900010
    RED_RING_1 = 900030
    RED_RING_2 = 900060
    RED_RING_3 = 900210
    RED_RING_4 = 900380
    RING = 910000
    RING_0 = 910021
    RING_1 = 910045
    RING_2 = 910094
    RING_3 = 910147
    RING_4 = 910204
    RING_5 = 910265
    ENERGY = 920000
    ENERGY_0 = 920001
    ENERGY_1 = 920005
    ENERGY_2 = 920010
    ENERGY_3 = 920015
    ENERGY_4 = 920020
    ENERGY_5 = 930005
    ENERGY_MAX = 930000
    SUB_CHARA = 940000
    CONTINUE = 950000
    RAID_RING = 960000
    DAILY_BATTLE_RESET_0 = 980000
    DAILY_BATTLE_RESET_1 = 980001
    DAILY_BATTLE_RESET_2 = 980002