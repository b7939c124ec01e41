from teambuilder.golfer import Golfer
from teambuilder.grouping.clusters import (
    assemble_clusters,
    build_cluster,
    grow_cluster,
    leftover_pool,
    pick_seed,
)
from teambuilder.grouping.preferences import PreferenceGraph
from teambuilder.grouping.state import BuildState
from teambuilder.grouping.team_builder import build_context


def _golfer(golfer_id, first_name="", last_name="", group=None, prefs=None):
    return Golfer(
        id=golfer_id,
        first_name=first_name,
        last_name=last_name,
        registration_group_id=group,
        preferred_teammates=prefs,
    )


def _pool(*ids):
    return [_golfer(golfer_id) for golfer_id in ids]


def test_seed_is_none_without_links():
    assert pick_seed(_pool("a", "b", "c"), PreferenceGraph()) is None


def test_seed_counts_incoming_preferences():
    pool = _pool("b", "a", "c")
    graph = PreferenceGraph({"a": ["b"]})

    # b and a tie on one link each; b comes first
    assert pick_seed(pool, graph).id == "b"


def test_seed_is_best_linked_golfer():
    pool = _pool("a", "b", "c", "d")
    graph = PreferenceGraph({"a": ["b"], "c": ["b", "d"], "d": ["c"]})

    assert pick_seed(pool, graph).id == "c"


def test_cluster_grows_while_linked():
    pool = _pool("a", "b", "c", "d")
    graph = PreferenceGraph({"a": ["b"], "b": ["a"]})

    cluster = grow_cluster(pool[0], pool, graph)

    assert [g.id for g in cluster] == ["a", "b"]


def test_cluster_is_capped_at_team_size():
    pool = _pool("a", "b", "c", "d", "e")
    graph = PreferenceGraph({g.id: [o.id for o in pool if o is not g] for g in pool})

    assert len(build_cluster(pool, graph)) == 4


def test_cluster_without_links_is_first_golfer():
    pool = _pool("a", "b")

    assert [g.id for g in build_cluster(pool, PreferenceGraph())] == ["a"]
    assert build_cluster([], PreferenceGraph()) == []


def test_leftover_pool_lists_ungrouped_first():
    golfers = [
        _golfer("g1", "Amos", "Abel", group="x"),
        _golfer("u1", "Bria", "Bond"),
        _golfer("g2", "Cy", "Crane", group="y"),
        _golfer("u2", "Dot", "Dunn"),
    ]
    context = build_context(golfers)

    pool = leftover_pool(context, BuildState())

    assert [g.id for g in pool] == ["u1", "u2", "g1", "g2"]


def test_small_cluster_is_padded_in_pool_order():
    golfers = [
        _golfer("a", "Amos", "Abel", prefs="Bria Bond"),
        _golfer("b", "Bria", "Bond"),
        _golfer("c", "Cy", "Crane"),
        _golfer("d", "Dot", "Dunn"),
        _golfer("e", "Eve", "Evans"),
    ]
    context = build_context(golfers)

    state = assemble_clusters(context, BuildState())

    assert len(state.teams) == 1
    team = state.teams[0]
    assert team.member_ids == ["a", "b", "c", "d"]
    assert team.reasons_for("b") == ["Preferred by Amos"]
    assert team.reasons_for("a") == []
    assert not state.is_assigned("e")


def test_pool_below_team_size_is_left_alone():
    golfers = [
        _golfer("a", "Amos", "Abel", prefs="Bria Bond"),
        _golfer("b", "Bria", "Bond", prefs="Amos Abel"),
        _golfer("c", "Cy", "Crane"),
    ]
    context = build_context(golfers)

    assert assemble_clusters(context, BuildState()).teams == ()
