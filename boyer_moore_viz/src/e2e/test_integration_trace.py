from boyer_moore import Matcher, Scanner, ShiftRule, scan


def test_trace_off_by_default():
    assert scan("ABC", "ABCABC").steps is None


def test_full_match_steps_use_match_skip():
    res = scan("ABC", "ABCABC", trace=True)
    assert [s.window_start for s in res.steps] == [0, 3]
    for s in res.steps:
        assert s.is_match and s.rule is ShiftRule.MATCH
        assert s.mismatch_index is None and s.text_char is None
        assert s.matched == 3 and s.comparisons == 3 and s.shift == 3
    assert res.alignments == 2 and res.comparisons == 6


def test_bad_character_shift_wins():
    first, second = scan("ABC", "XXABC", trace=True).steps
    assert first.mismatch_index == 2 and first.text_char == "A"
    assert first.comparisons == 1 and first.matched == 0
    assert first.bad_character_shift == 2 and first.good_suffix_shift == 1
    assert first.shift == 2 and first.rule is ShiftRule.BAD_CHARACTER
    assert second.is_match and second.window_start == 2


def test_good_suffix_shift_wins():
    res = scan("ABC", "ZBCABC", trace=True)
    first = res.steps[0]
    assert first.mismatch_index == 0 and first.matched == 2 and first.comparisons == 3
    assert first.bad_character_shift == 1 and first.good_suffix_shift == 3
    assert first.rule is ShiftRule.GOOD_SUFFIX
    assert res.matches == (3,)


def test_equal_candidates_reported_as_both():
    (step,) = scan("AB", "AA", trace=True).steps
    assert step.bad_character_shift == step.good_suffix_shift == 1
    assert step.rule is ShiftRule.BOTH


def test_overlapping_trace_counters():
    res = scan("AAA", "AAAAA", trace=True)
    assert res.matches == (0, 1, 2)
    assert [s.shift for s in res.steps] == [1, 1, 1]
    assert res.comparisons == 9


def test_step_to_dict_is_json_friendly():
    d = scan("AB", "AA", trace=True).steps[0].to_dict()
    assert d["rule"] == "both"
    assert d["window_start"] == 0 and d["text_char"] == "A"


def test_scan_result_to_dict():
    d = scan("AAA", "AAAAA").to_dict()
    assert d["matches"] == [0, 1, 2]
    assert "steps" not in d
    assert scan("AAA", "AAAAA", trace=True).to_dict()["steps"][0]["is_match"] is True


# -- resumable scanning --

def test_scanner_advances_one_alignment_at_a_time():
    sc = Scanner("ABC", "XXABC")
    assert not sc.done and sc.window_start == 0
    first = sc.advance()
    assert first.window_start == 0 and sc.window_start == 2
    assert sc.matches == []
    second = sc.advance()
    assert second.is_match and sc.matches == [2]
    assert sc.done
    assert sc.advance() is None
    assert sc.alignments == 2 and sc.comparisons == 4


def test_scanner_matches_full_scan():
    text = "GCTAGCTCTACGAGTCTA"
    m = Matcher("TCTA")
    stepped = list(m.scanner(text))
    assert tuple(stepped) == m.search(text, trace=True).steps


def test_scanner_pattern_longer_than_text_is_done_immediately():
    sc = Scanner("ABCDE", "AB")
    assert sc.done
    assert list(sc) == []


def test_scanner_result_snapshot_equals_scan():
    sc = Scanner("TCTA", "GCTAGCTCTACGAGTCTA")
    for _ in sc:
        pass
    assert sc.to_result() == scan("TCTA", "GCTAGCTCTACGAGTCTA")
