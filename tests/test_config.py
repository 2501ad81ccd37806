from fractions import Fraction

import pytest

from lininterp import (
    BinarySearchInterpolator,
    ExactPolicy,
    InterpConfig,
    LinearScanInterpolator,
    Point,
    SearchMethod,
    create_interpolator,
)


def test_defaults():
    config = InterpConfig()
    assert config.method is SearchMethod.LINEAR
    assert config.validate
    assert not config.strict


def test_method_name_is_case_insensitive():
    assert InterpConfig(method="binary").method is SearchMethod.BINARY


def test_unknown_method_lists_available():
    with pytest.raises(ValueError, match="Available: LINEAR, BINARY"):
        InterpConfig(method="cubic")


def test_from_env():
    config = InterpConfig.from_env(
        {"LININTERP_METHOD": "Binary", "LININTERP_VALIDATE": "0", "LININTERP_STRICT": "yes"}
    )
    assert config.method is SearchMethod.BINARY
    assert not config.validate
    assert config.strict


def test_from_env_empty_uses_defaults():
    config = InterpConfig.from_env({})
    assert config.method is SearchMethod.LINEAR
    assert config.validate
    assert not config.strict


def test_from_env_rejects_bad_flag():
    with pytest.raises(ValueError, match="LININTERP_STRICT"):
        InterpConfig.from_env({"LININTERP_STRICT": "maybe"})


def test_factory_uses_config_method(unit_ramp):
    interp = create_interpolator(unit_ramp, config=InterpConfig(method=SearchMethod.BINARY))
    assert isinstance(interp, BinarySearchInterpolator)


def test_factory_method_overrides_config(unit_ramp):
    config = InterpConfig(method=SearchMethod.BINARY)
    interp = create_interpolator(unit_ramp, method="linear", config=config)

    assert isinstance(interp, LinearScanInterpolator)
    assert interp.config.method is SearchMethod.LINEAR
    assert config.method is SearchMethod.BINARY


def test_custom_policy_is_used():
    config = InterpConfig(policy=ExactPolicy())
    interp = create_interpolator([Point(0, Fraction(0)), Point(3, Fraction(1))], config=config)
    assert interp.interp(2).value == Fraction(2, 3)
