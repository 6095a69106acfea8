from services import hazard_list

from conftest import make_hazard


def test_add_prepends_without_touching_input():
    original = [make_hazard("a")]
    result = hazard_list.add(original, make_hazard("b"))
    assert [h.id for h in result] == ["b", "a"]
    assert [h.id for h in original] == ["a"]


def test_update_by_id_merges_fields():
    hazards = [make_hazard("a"), make_hazard("b", title="Keep")]
    result = hazard_list.update_by_id(hazards, "a", lambda h: {"title": "Changed"})
    assert result[0].title == "Changed"
    assert result[0].createdAt == hazards[0].createdAt
    assert result[1] is hazards[1]
    assert hazards[0].title == "Hazard a"


def test_update_by_id_missing_is_noop():
    hazards = [make_hazard("a")]
    assert hazard_list.update_by_id(hazards, "zzz", hazard_list.vote) is hazards


def test_vote_n_times_only_affects_target():
    hazards = [make_hazard("a"), make_hazard("b", votes=4)]
    for _ in range(5):
        hazards = hazard_list.update_by_id(hazards, "a", hazard_list.vote)
    assert hazards[0].votes == 5
    assert hazards[1].votes == 4


def test_toggle_resolved_flips():
    hazards = [make_hazard("a")]
    hazards = hazard_list.update_by_id(hazards, "a", hazard_list.toggle_resolved)
    assert hazards[0].resolved is True
    hazards = hazard_list.update_by_id(hazards, "a", hazard_list.toggle_resolved)
    assert hazards[0].resolved is False


def test_remove_by_id():
    hazards = [make_hazard("a"), make_hazard("b")]
    assert [h.id for h in hazard_list.remove_by_id(hazards, "a")] == ["b"]


def test_merge_prefers_existing_records():
    local = [make_hazard("a", title="Local A", votes=3), make_hazard("c")]
    incoming = [make_hazard("a", title="Remote A", votes=99), make_hazard("b")]
    merged = hazard_list.merge_by_id_prefer_existing(local, incoming)

    assert [h.id for h in merged] == ["b", "a", "c"]
    by_id = {h.id: h for h in merged}
    assert by_id["a"] == local[0]


def test_merge_keeps_incoming_order_and_skips_repeats():
    incoming = [make_hazard("x"), make_hazard("y"), make_hazard("x", title="dup")]
    merged = hazard_list.merge_by_id_prefer_existing([make_hazard("a")], incoming)
    assert [h.id for h in merged] == ["x", "y", "a"]
    assert merged[0].title == "Hazard x"


def test_concat_does_not_dedup():
    local = [make_hazard("a"), make_hazard("b"), make_hazard("c")]
    incoming = [make_hazard("a"), make_hazard("d")]
    result = hazard_list.concat(incoming, local)
    assert [h.id for h in result] == ["a", "d", "a", "b", "c"]
