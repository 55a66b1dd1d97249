import pytest

from polychannel.config import BuildConfig, sequence_from_mapping, sequence_from_yaml
from polychannel.errors import InvalidShapeKind
from polychannel.placement import Representation, Rotation, ShapeKind
from polychannel.resolve import final_absolute_position


def test_defaults():
    cfg = BuildConfig()
    assert cfg.sphere_subdivisions == 2
    assert cfg.center is True
    assert cfg.color is None
    assert BuildConfig.from_mapping(None) == cfg
    assert BuildConfig.from_yaml("") == cfg


def test_from_yaml():
    cfg = BuildConfig.from_yaml("""
sphere_subdivisions: 3
center: false
color: [0.2, 0.4, 1.0, 0.8]
""")
    assert cfg.sphere_subdivisions == 3
    assert cfg.center is False
    assert cfg.color == (0.2, 0.4, 1.0, 0.8)


def test_to_mapping_round_trip():
    cfg = BuildConfig(color=(255, 0, 0), sphere_subdivisions=4)
    assert BuildConfig.from_mapping(cfg.to_mapping()) == cfg


@pytest.mark.parametrize("data", [
    {"bogus": 1},
    {"sphere_subdivisions": -1},
    {"sphere_subdivisions": 1.5},
    {"sphere_subdivisions": True},
    {"center": "yes"},
    {"color": [1, 0]},
    {"color": ["red", 0, 0]},
])
def test_rejects_bad_values(data):
    with pytest.raises(ValueError):
        BuildConfig.from_mapping(data)


def test_non_mapping_yaml():
    with pytest.raises(ValueError):
        BuildConfig.from_yaml("- 1\n- 2\n")


def test_sequence_from_yaml():
    seq = sequence_from_yaml("""
representation: relative
placements:
  - [sphr, [1, 1, 1], [0, 0, 0], [0, [0, 0, 1]]]
  - [sphr, [1, 1, 1], [7, 0, 0]]
  - {shape: cube, size: [1, 1, 1], position: [3, 0, 0], rotation: [45, [0, 0, 1]]}
  - {shape: cube, size: [1, 1, 1], position: [5, 4, 0]}
""")
    assert seq.representation is Representation.RELATIVE
    assert [p.shape for p in seq] == [ShapeKind.SPHERE, ShapeKind.SPHERE,
                                      ShapeKind.CUBE, ShapeKind.CUBE]
    assert seq[2].rotation == Rotation(45, (0, 0, 1))
    assert final_absolute_position(seq) == (15, 4, 0)


def test_sequence_from_mapping():
    seq = sequence_from_mapping({
        "representation": "absolute",
        "placements": [("cube", (1, 1, 1), (1, 1, 1))],
    })
    assert seq.representation is Representation.ABSOLUTE
    assert sequence_from_mapping({"placements": []}).is_relative
    with pytest.raises(ValueError):
        sequence_from_mapping({"representation": "relative"})
    with pytest.raises(ValueError):
        sequence_from_mapping({"placements": "cube"})
    with pytest.raises(InvalidShapeKind):
        sequence_from_mapping({"placements": [("pyramid", (1, 1, 1), (0, 0, 0))]})
