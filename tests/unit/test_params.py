"""Unit tests for GenerationParameters validation."""

import dataclasses
import json
import math

import numpy as np
import pytest

from pyflowtex import GenerationParameters, ParameterValidationError
from pyflowtex import constants as cte


def test_defaults_are_valid():
    params = GenerationParameters()
    assert params.shape == (cte.HEIGHT, cte.WIDTH)
    assert params.octaves == 4
    assert params.apply_blur is True


@pytest.mark.parametrize(
    "changes",
    [
        {"width": 0},
        {"height": -3},
        {"width": 12.0},
        {"width": True},
        {"octaves": 0},
        {"octaves": -1},
        {"octaves": 2.5},
        {"blur_strength": -1},
        {"blur_strength": 1.0},
        {"gain": -0.5},
        {"scale_x": math.nan},
        {"offset_y": math.inf},
        {"lacunarity": "2"},
        {"blur_angle_degrees": None},
        {"apply_blur": 1},
        {"seed": -7},
        {"blur_strength": 2**31 - 1},
        {"width": np.bool_(True)},
        {"scale_x": np.float64("nan")},
    ],
)
def test_invalid_values_raise(changes):
    with pytest.raises(ParameterValidationError):
        GenerationParameters(**changes)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        GenerationParameters(octaves=0)


def test_zero_blur_strength_is_valid():
    assert GenerationParameters(blur_strength=0).blur_strength == 0


def test_integer_floats_accepted():
    params = GenerationParameters(scale_x=8, gain=0)
    assert params.scale_x == 8
    assert params.gain == 0


def test_frozen():
    params = GenerationParameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.width = 10


def test_replace_validates():
    params = GenerationParameters(width=32, height=16)
    wider = params.replace(width=64)
    assert wider.width == 64 and wider.height == 16
    assert params.width == 32
    with pytest.raises(ParameterValidationError):
        params.replace(octaves=0)


def test_from_dict_fills_defaults():
    params = GenerationParameters.from_dict({"width": 10, "height": 20, "blur_strength": 5})
    assert params.shape == (20, 10)
    assert params.blur_strength == 5
    assert params.lacunarity == cte.LACUNARITY


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ParameterValidationError, match="blurStrength"):
        GenerationParameters.from_dict({"blurStrength": 3})


def test_to_dict_feeds_from_dict():
    params = GenerationParameters(width=7, height=9, blur_angle_degrees=12.5, seed=11)
    assert GenerationParameters.from_dict(params.to_dict()) == params


@pytest.mark.parametrize(
    "name, value, expected_type",
    [
        ("width", np.int64(16), int),
        ("height", np.uint16(8), int),
        ("octaves", np.int32(3), int),
        ("blur_strength", np.int32(2), int),
        ("seed", np.int64(7), int),
        ("scale_x", np.float32(8.0), float),
        ("gain", np.float64(0.25), float),
        ("blur_angle_degrees", np.int16(45), float),
        ("apply_blur", np.bool_(False), bool),
    ],
)
def test_numpy_scalars_accepted_and_normalized(name, value, expected_type):
    params = GenerationParameters(**{name: value})
    stored = getattr(params, name)
    assert type(stored) is expected_type
    assert stored == value


def test_numpy_scalars_keep_to_dict_json_serializable():
    field = np.zeros((12, 20))
    params = GenerationParameters(width=field.shape[1], height=np.int64(field.shape[0]),
                                  scale_y=np.float32(1.5), blur_strength=np.int32(4))
    decoded = json.loads(json.dumps(params.to_dict()))
    assert GenerationParameters.from_dict(decoded) == params
