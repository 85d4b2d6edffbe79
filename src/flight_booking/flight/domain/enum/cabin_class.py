from enum import Enum


class CabinClass(str, Enum):
    """客室クラス（料金と機内ゾーンを決定する）"""

    ECONOMY = "ECONOMY"
    PREMIUM_ECONOMY = "PREMIUM_ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"
