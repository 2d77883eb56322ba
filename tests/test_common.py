import math

import pytest

from rmcore.common import (
    RFID,
    AimMethod,
    Alert,
    Arm,
    BuffState,
    Direction,
    Euler,
    FilterMethod,
    Model,
    Race,
    Team,
    file_exist,
    get_int_random_value,
    get_real_random_value,
    has_big_armor,
    relative_difference,
    string_to_aim_method,
    string_to_model,
    to_string,
)


def test_has_big_armor():
    assert has_big_armor(Model.HERO)
    assert has_big_armor(Model.SENTRY)
    assert not has_big_armor(Model.INFANTRY)
    assert not has_big_armor(Model.UNKNOWN)


def test_euler_to_string():
    e = Euler(1, 1, 1)
    assert to_string(e) == "pitch : 1, roll : 1， yaw : 1"
    assert str(Euler(0.5, 0, 2.0)) == "pitch : 0.5, roll : 0， yaw : 2"


def test_euler_defaults():
    e = Euler()
    assert (e.pitch, e.roll, e.yaw) == (0, 0, 0)


@pytest.mark.parametrize(
    "value, text",
    [
        (RFID.SNIPE, "Snipe point"),
        (Team.RED, "Red"),
        (Team.BLUE, "Blue"),
        (Direction.CCW, "Counterclockwise"),
        (FilterMethod.EKF, "Extend kalman filter"),
        (AimMethod.LIGHT, "Use GuidingLight Detector"),
        (Arm.RADAR, "Radar"),
        (BuffState.INVINCIBLE, "Can't be hit"),
        (Model.OUTPOST, "Outpost"),
        (Race.RMUL3V3, "RMUL 3v3"),
        (Model.UNKNOWN, "Unknown"),
    ],
)
def test_enum_to_string(value, text):
    assert to_string(value) == text


def test_to_string_rejects_other_types():
    with pytest.raises(TypeError):
        to_string(42)


def test_random_values_in_range():
    for _ in range(50):
        assert 0 <= get_real_random_value(0, 3) < 3
        assert 0 <= get_int_random_value(0, 3) <= 3
        assert 3 <= get_int_random_value(6, 3) <= 6
        assert 3 <= get_real_random_value(5, 3) < 5


def test_random_defaults():
    for _ in range(50):
        assert 0 <= get_int_random_value() <= 10
        assert 0 <= get_real_random_value() < 1


@pytest.mark.parametrize(
    "name, method",
    [
        ("ARMOR", AimMethod.ARMOR),
        ("auto-aim", AimMethod.ARMOR),
        ("2", AimMethod.BUFF),
        ("Cube", AimMethod.ORECUBE),
        ("snipe", AimMethod.SNIPE),
        ("Guiding_Light", AimMethod.LIGHT),
        ("nothing", AimMethod.UNKNOWN),
    ],
)
def test_string_to_aim_method(name, method):
    assert string_to_aim_method(name) is method


@pytest.mark.parametrize(
    "name, model",
    [
        ("Infantry", Model.INFANTRY),
        ("4", Model.INFANTRY),
        ("HERO", Model.HERO),
        ("1", Model.HERO),
        ("2", Model.ENGINEER),
        ("drone", Model.DRONE),
        ("sentry", Model.SENTRY),
        ("base", Model.BASE),
        ("outpost", Model.OUTPOST),
        ("buff", Model.BUFF),
        ("6", Model.UNKNOWN),
    ],
)
def test_string_to_model(name, model):
    assert string_to_model(name) is model


def test_relative_difference():
    assert relative_difference(1, 2) == pytest.approx(0.5)
    assert relative_difference(-2, 2) == pytest.approx(2.0)
    assert relative_difference(3, 3) == 0
    assert math.isnan(relative_difference(0, 0))


def test_alert_defaults_false():
    alert = Alert()
    flags = (
        alert.enemy_buff,
        alert.enemy_snipe,
        alert.enemy_slope,
        alert.self_outpost,
        alert.self_sentry,
        alert.self_base,
    )
    assert flags == (False, False, False, False, False, False)


def test_file_exist(tmp_path):
    path = tmp_path / "present.txt"
    path.write_text("x")
    assert file_exist(path) is True
    assert file_exist(tmp_path / "absent.txt") is False