"""Shared game types, enum names and small numeric helpers."""

from __future__ import annotations

import logging
import math
import os
import random
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


def _format_number(value: float) -> str:
    """Format a number the short way: whole floats lose their trailing '.0'."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


@dataclass
class Euler:
    """Orientation as pitch, roll and yaw."""

    pitch: float = 0.0
    roll: float = 0.0
    yaw: float = 0.0

    def __str__(self) -> str:
        return (
            f"pitch : {_format_number(self.pitch)}, "
            f"roll : {_format_number(self.roll)}， "
            f"yaw : {_format_number(self.yaw)}"
        )


class Direction(Enum):
    UNKNOWN = 0
    CW = 1
    CCW = 2


class FilterMethod(Enum):
    UNKNOWN = 0
    KF = 1
    EKF = 2


@dataclass
class Alert:
    """Flags raised by the radar about threats to either side."""

    enemy_buff: bool = False
    enemy_snipe: bool = False
    enemy_slope: bool = False
    self_outpost: bool = False
    self_sentry: bool = False
    self_base: bool = False


class AimMethod(Enum):
    UNKNOWN = 0
    ARMOR = 1
    BUFF = 2
    ORECUBE = 3
    SNIPE = 4
    LIGHT = 5


class Arm(Enum):
    UNKNOWN = 0
    INFANTRY = 1
    HERO = 2
    ENGINEER = 3
    DRONE = 4
    SENTRY = 5
    DART = 6
    RADAR = 7


class BuffState(Enum):
    UNKNOWN = 0
    SMALL = 1
    BIG = 2
    INVINCIBLE = 3


class Model(Enum):
    UNKNOWN = 0
    INFANTRY = 1
    HERO = 2
    ENGINEER = 3
    DRONE = 4
    SENTRY = 5
    BASE = 6
    OUTPOST = 7
    BUFF = 8


class Race(Enum):
    UNKNOWN = 0
    RMUC = 1
    RMUT = 2
    RMUL1V1 = 3
    RMUL3V3 = 4


class RFID(Enum):
    UNKNOWN = 0
    BUFF = 1
    SNIPE = 2


class Team(Enum):
    UNKNOWN = 0
    DEAD = 1
    BLUE = 2
    RED = 3


_LABELS: dict[Enum, str] = {
    Direction.UNKNOWN: "Unknown",
    Direction.CW: "Clockwise",
    Direction.CCW: "Counterclockwise",
    FilterMethod.UNKNOWN: "Unknown",
    FilterMethod.EKF: "Extend kalman filter",
    FilterMethod.KF: "Kalman filter",
    AimMethod.UNKNOWN: "Unknown",
    AimMethod.ARMOR: "Use Armor Detector",
    AimMethod.BUFF: "Use Buff Detector",
    AimMethod.ORECUBE: "Use OreCube Detector",
    AimMethod.SNIPE: "Use Snipe Detector",
    AimMethod.LIGHT: "Use GuidingLight Detector",
    Arm.UNKNOWN: "Unknown",
    Arm.INFANTRY: "Infantry",
    Arm.HERO: "Hero",
    Arm.ENGINEER: "Engineer",
    Arm.DRONE: "Drone",
    Arm.SENTRY: "Sentry",
    Arm.DART: "Dart",
    Arm.RADAR: "Radar",
    BuffState.UNKNOWN: "Unknown",
    BuffState.SMALL: "Small Buff",
    BuffState.BIG: "Big Buff",
    BuffState.INVINCIBLE: "Can't be hit",
    Model.UNKNOWN: "Unknown",
    Model.INFANTRY: "Infantry",
    Model.HERO: "Hero",
    Model.ENGINEER: "Engineer",
    Model.DRONE: "Drone",
    Model.SENTRY: "Sentry",
    Model.BASE: "Base",
    Model.OUTPOST: "Outpost",
    Model.BUFF: "Buff",
    Race.UNKNOWN: "Unknown",
    Race.RMUC: "RMUC",
    Race.RMUT: "RMUT",
    Race.RMUL1V1: "RMUL 1v1",
    Race.RMUL3V3: "RMUL 3v3",
    RFID.UNKNOWN: "Unknown",
    RFID.BUFF: "Buff activation point",
    RFID.SNIPE: "Snipe point",
    Team.UNKNOWN: "Unknown",
    Team.DEAD: "Dead",
    Team.BLUE: "Blue",
    Team.RED: "Red",
}


def to_string(value: Euler | Enum) -> str:
    """Return the human-readable description of an Euler angle or game enum."""
    if isinstance(value, Euler):
        return str(value)
    if isinstance(value, Enum):
        try:
            return _LABELS[value]
        except KeyError:
            return "Unknown"
    raise TypeError(f"no string form for {type(value).__name__}")


_AIM_METHOD_NAMES: dict[str, AimMethod] = {
    **dict.fromkeys(("armor", "autoaim", "auto_aim", "auto-aim", "1"), AimMethod.ARMOR),
    **dict.fromkeys(("buff", "2"), AimMethod.BUFF),
    **dict.fromkeys(("orecube", "cube", "ore", "3"), AimMethod.ORECUBE),
    **dict.fromkeys(("snipe", "4"), AimMethod.SNIPE),
    **dict.fromkeys(
        ("light", "guidinglight", "guiding-light", "guiding_light", "5"),
        AimMethod.LIGHT,
    ),
}

_MODEL_NAMES: dict[str, Model] = {
    **dict.fromkeys(("infantry", "3", "4", "5"), Model.INFANTRY),
    **dict.fromkeys(("hero", "1"), Model.HERO),
    **dict.fromkeys(("engineer", "2"), Model.ENGINEER),
    "drone": Model.DRONE,
    "sentry": Model.SENTRY,
    "base": Model.BASE,
    "outpost": Model.OUTPOST,
    "buff": Model.BUFF,
}


def string_to_aim_method(name: str) -> AimMethod:
    """Parse an aim method name, case-insensitively; unknown names give UNKNOWN."""
    return _AIM_METHOD_NAMES.get(name.lower(), AimMethod.UNKNOWN)


def string_to_model(name: str) -> Model:
    """Parse a robot model name or number, case-insensitively."""
    return _MODEL_NAMES.get(name.lower(), Model.UNKNOWN)


def has_big_armor(model: Model) -> bool:
    """Whether a robot model carries the large armor plates."""
    return model in (Model.HERO, Model.SENTRY)


def relative_difference(a: float, b: float) -> float:
    """|a - b| divided by the larger magnitude; NaN when both are zero."""
    diff = abs(a - b)
    base = max(abs(a), abs(b))
    if base == 0:
        return math.nan
    return diff / base


def get_int_random_value(min_value: int = 0, max_value: int = 10) -> int:
    """A uniform random integer in the closed range; bounds may come in either order."""
    low, high = sorted((min_value, max_value))
    return random.randint(low, high)


def get_real_random_value(min_value: float = 0.0, max_value: float = 1.0) -> float:
    """A uniform random float in [low, high); bounds may come in either order."""
    low, high = sorted((min_value, max_value))
    return low + (high - low) * random.random()


def file_exist(file_name: str | os.PathLike) -> bool:
    """Whether the path exists; logs an error when it does not."""
    if not os.path.exists(file_name):
        logger.error("[%s] doesn't exist.", file_name)
        return False
    return True