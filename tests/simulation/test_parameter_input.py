import pytest

from stabilizer.simulation import apply_parameter_text, parse_parameter


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5.5", 5.5),
        (" 2.5 ", 2.5),
        ("-0.75", -0.75),
        ("1e-3", 0.001),
        ("19", 19.0),
    ],
)
def test_parse_valid(text, expected):
    assert parse_parameter(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["abc", "", "   ", "1.2.3", "nan", "inf", "-Infinity", "1_000", "2_5.0", None])
def test_parse_invalid(text):
    assert parse_parameter(text) is None


def test_apply_valid_text_sets_kp(controller):
    assert apply_parameter_text(controller, "kp", "5.5") is True
    assert controller.config.kp == 5.5


def test_apply_invalid_text_keeps_kp(controller):
    assert apply_parameter_text(controller, "kp", "abc") is False
    assert controller.config.kp == 19.1


@pytest.mark.parametrize(
    "name, text, expected",
    [
        ("kd", "4", 4.0),
        ("ki", "0.05", 0.05),
        ("target_angular_velocity", "1.5", 1.5),
    ],
)
def test_apply_other_parameters(controller, name, text, expected):
    assert apply_parameter_text(controller, name, text) is True
    assert getattr(controller.config, name) == expected


def test_non_finite_text_ignored(controller):
    assert apply_parameter_text(controller, "kd", "NaN") is False
    assert controller.config.kd == 9.5


def test_unknown_parameter(controller):
    with pytest.raises(KeyError):
        apply_parameter_text(controller, "max_torque", "1.0")


def test_underscore_grouping_ignored(controller):
    assert apply_parameter_text(controller, "kp", "1_000") is False
    assert controller.config.kp == 19.1
