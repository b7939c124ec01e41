import pytest

from teambuilder.grouping import build_preference_graph
from teambuilder.testing import (
    FieldConfig,
    PreferenceStyle,
    RandomFieldGenerator,
    generate_field,
)


def test_same_seed_gives_same_field():
    assert generate_field(num_golfers=40, seed=9) == generate_field(
        num_golfers=40, seed=9
    )


def test_field_has_requested_size_and_unique_ids():
    golfers = generate_field(num_golfers=700, seed=1)

    assert len(golfers) == 700
    assert len({g.id for g in golfers}) == 700
    assert len({g.full_name for g in golfers}) == 700


def test_group_sizes_follow_weights():
    config = FieldConfig(num_golfers=30, group_size_weights={4: 1.0}, seed=4)

    golfers = RandomFieldGenerator(config).generate()

    groups = {}
    for golfer in golfers:
        groups.setdefault(golfer.registration_group_id, []).append(golfer)
    assert None not in groups
    # the last group is cut short by the field size
    assert sorted(len(members) for members in groups.values()) == [2] + [4] * 7


def test_full_name_preferences_link_to_someone():
    config = FieldConfig(
        num_golfers=30,
        preference_rate=1.0,
        style_weights={PreferenceStyle.FULL_NAME: 1.0},
        seed=6,
    )

    golfers = RandomFieldGenerator(config).generate()
    graph = build_preference_graph(golfers)

    assert all(g.preferred_teammates for g in golfers)
    assert len(graph) == 30


def test_unknown_style_names_nobody():
    config = FieldConfig(
        num_golfers=10,
        preference_rate=1.0,
        style_weights={PreferenceStyle.UNKNOWN: 1.0},
        seed=2,
    )

    golfers = RandomFieldGenerator(config).generate()

    assert len(build_preference_graph(golfers)) == 0


def test_missing_handicaps():
    config = FieldConfig(num_golfers=20, missing_handicap_rate=1.0, seed=3)

    assert all(g.handicap is None for g in RandomFieldGenerator(config).generate())


def test_invalid_config_is_rejected():
    with pytest.raises(ValueError):
        FieldConfig(num_golfers=-1)
    with pytest.raises(ValueError):
        FieldConfig(group_size_weights={0: 1.0})
