import pytest

from propinspect._utils import _stable_config_key


def test_stable_config_key_ignores_key_order():
    assert _stable_config_key("length", {"min": 1, "max": 3}) == _stable_config_key(
        "length", {"max": 3, "min": 1}
    )


def test_stable_config_key_distinguishes_configurations():
    assert _stable_config_key("length", {"max": 3}) != _stable_config_key(
        "length", {"max": 10}
    )
    assert _stable_config_key("length", {1: "x"}) != _stable_config_key(
        "length", {"1": "x"}
    )


@pytest.mark.parametrize(
    "config",
    [
        {"max": 3, 1: "x"},
        {"nested": {"a": 1, 2: "b"}},
        {("tuple", "key"): [{"x": 1, 0: None}]},
        {"pattern": object()},
    ],
)
def test_stable_config_key_accepts_any_key_types(config):
    name, serialized = _stable_config_key("length", config)

    assert name == "length"
    assert serialized == _stable_config_key("length", dict(config))[1]


def test_stable_config_key_requires_mapping():
    with pytest.raises(TypeError, match="must be a mapping"):
        _stable_config_key("length", ["max", 3])
