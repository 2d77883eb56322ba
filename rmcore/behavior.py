"""Decision-making for aiming and chassis movement, producing downlink data."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from enum import IntFlag

from rmcore.common import Alert, Euler, get_real_random_value

logger = logging.getLogger(__name__)

_LOW_HP_LIMIT = 100
_INITIAL_BASE_HP = 3000
_M_2_PI = 2 / math.pi


@dataclass
class NodeState:
    """What the robot currently knows about itself."""

    low_hp: bool = False
    under_attack: bool = False
    bullet_empty: bool = False


class Notice(IntFlag):
    """Bits of the notice field sent to the controller."""

    FIRE = 1 << 0
    BUFF = 1 << 1
    SNIPE = 1 << 2
    SLOPE = 1 << 3
    OUTPOST = 1 << 4
    SENTRY = 1 << 5
    BASE = 1 << 6


@dataclass
class Gimbal:
    pit: float = 0.0
    yaw: float = 0.0
    rol: float = 0.0


@dataclass
class ChassisMove:
    vx: float = 0.0
    vy: float = 0.0
    wz: float = 0.0


@dataclass
class DownData:
    """Command sent down to the controller."""

    notice: Notice = Notice(0)
    gimbal: Gimbal = field(default_factory=Gimbal)
    chassis_move_vec: ChassisMove = field(default_factory=ChassisMove)


_ALERT_BITS = (
    ("enemy_buff", Notice.BUFF),
    ("enemy_snipe", Notice.SNIPE),
    ("enemy_slope", Notice.SLOPE),
    ("self_outpost", Notice.OUTPOST),
    ("self_sentry", Notice.SENTRY),
    ("self_base", Notice.BASE),
)


class Behavior:
    """Turns game state and aiming results into a DownData command.

    Without an explicit state the last base HP starts at full (3000);
    given a state, it starts at zero.
    """

    def __init__(self, status: NodeState | None = None) -> None:
        if status is None:
            self.status = NodeState()
            self._last_base_hp = _INITIAL_BASE_HP
        else:
            self.status = replace(status)
            self._last_base_hp = 0
        self.data = DownData()
        logger.log(5, "Constructed.")

    def update(self, base_hp: int, sentry_hp: int, bullet_num: int) -> None:
        """Refresh the state from the referee figures."""
        self.status.low_hp = sentry_hp < _LOW_HP_LIMIT
        self.status.under_attack = base_hp < self._last_base_hp
        self._last_base_hp = base_hp
        self.status.bullet_empty = bullet_num == 0

    def aim(self, aiming_euler: Euler) -> None:
        """Clear the command and point the gimbal, unless out of ammunition."""
        self.data.notice = Notice(0)
        self.data.gimbal = Gimbal()
        self.data.chassis_move_vec = ChassisMove()
        if not self.status.bullet_empty:
            self.data.gimbal = Gimbal(
                pit=aiming_euler.pitch, yaw=aiming_euler.yaw, rol=aiming_euler.roll
            )

    def move(self, v: float) -> None:
        """Pick a random strafing speed in the direction of v and a spin rate."""
        direction = 1.0 if v == 0 else v / abs(v)
        vy = direction * get_real_random_value(3, 5)
        if self.status.low_hp or self.status.bullet_empty:
            vy *= 2
        self.data.chassis_move_vec.vy = vy
        self.data.chassis_move_vec.wz = (
            _M_2_PI / 3 if self.status.under_attack else math.pi / 3
        )

    def set_notice(self, alert: Alert) -> None:
        """Raise the notice bits for every alert flag that is set."""
        for attribute, bit in _ALERT_BITS:
            if getattr(alert, attribute):
                self.data.notice |= bit
        logger.debug("Notice has been set.")