from teambuilder.golfer import Golfer
from teambuilder.grouping.preferences import (
    PreferenceGraph,
    build_preference_graph,
    match_token,
    name_matches,
)


def _golfer(golfer_id, first_name, last_name, prefs=None):
    return Golfer(
        id=golfer_id,
        first_name=first_name,
        last_name=last_name,
        preferred_teammates=prefs,
    )


def test_token_inside_full_name_matches():
    assert name_matches("anne smi", _golfer("1", "Joanne", "Smith"))


def test_token_containing_last_name_matches():
    assert name_matches("mr smith", _golfer("1", "Joanne", "Smith"))


def test_token_containing_first_name_matches():
    assert name_matches("joanne s.", _golfer("1", "Joanne", "Smith"))


def test_name_prefix_matches():
    assert name_matches("jo", _golfer("1", "Joanne", "Smith"))
    assert name_matches("smi", _golfer("1", "Joanne", "Smith"))


def test_unrelated_token_does_not_match():
    assert not name_matches("bob", _golfer("1", "Joanne", "Smith"))


def test_empty_name_part_does_not_match_everything():
    assert not name_matches("zed", _golfer("1", "Kim", ""))
    assert not name_matches("zed", _golfer("2", "", "Park"))


def test_first_candidate_in_order_wins():
    golfer = _golfer("1", "Ava", "Stone", prefs="Lee")
    sam = _golfer("2", "Sam", "Lee")
    samantha = _golfer("3", "Samantha", "Lee")

    assert match_token("lee", golfer, [golfer, sam, samantha]) is sam
    assert match_token("lee", golfer, [golfer, samantha, sam]) is samantha


def test_golfer_never_matches_self():
    golfer = _golfer("1", "Ava", "Stone", prefs="Ava Stone")

    graph = build_preference_graph([golfer])

    assert len(graph) == 0
    assert graph.preferences_of("1") == []


def test_graph_links_names_in_text_order():
    ava = _golfer("1", "Ava", "Stone", prefs="Reyes, Cho, Nobody Known")
    ben = _golfer("2", "Ben", "Cho")
    cara = _golfer("3", "Cara", "Reyes")

    graph = build_preference_graph([ava, ben, cara])

    assert graph.preferences_of("1") == ["3", "2"]
    assert graph.referrers() == ["1"]


def test_graph_is_directed():
    ava = _golfer("1", "Ava", "Stone", prefs="Ben Cho")
    ben = _golfer("2", "Ben", "Cho")

    graph = build_preference_graph([ava, ben])

    assert graph.prefers("1", "2")
    assert not graph.prefers("2", "1")
    assert graph.edge_count("1", "2") == 1
    assert graph.edge_count("2", "1") == 1


def test_repeated_names_give_one_edge():
    ava = _golfer("1", "Ava", "Stone", prefs="Cho, ben cho ,  CHO")
    ben = _golfer("2", "Ben", "Cho")

    graph = build_preference_graph([ava, ben])

    assert graph.referrers() == ["1"]
    assert graph.preferences_of("1") == ["2"]


def test_blank_and_missing_text_add_no_edges():
    golfers = [
        _golfer("1", "Ava", "Stone", prefs=" , ,"),
        _golfer("2", "Ben", "Cho", prefs=None),
    ]

    assert len(build_preference_graph(golfers)) == 0


def test_mutual_preferences_count_twice():
    graph = PreferenceGraph({"a": ["b"], "b": ["a"]})

    assert graph.edge_count("a", "b") == 2
    assert graph.preferences_of("c") == []
    assert graph.referrers() == ["a", "b"]
    assert repr(graph) == "PreferenceGraph(referrers=2, edges=2)"


def test_graph_ignores_self_edges():
    graph = PreferenceGraph()
    graph.add_edge("a", "a")

    assert len(graph) == 0
