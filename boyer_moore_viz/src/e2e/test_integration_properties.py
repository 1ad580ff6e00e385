from hypothesis import given, strategies as st

from boyer_moore import find_all, preprocess, scan


def _naive(text, pattern):
    m = len(pattern)
    return [i for i in range(len(text) - m + 1) if text[i:i + m] == pattern]


# small alphabets make repeats (and overlaps) common
texts = st.text(alphabet="abc", max_size=60)
patterns = st.text(alphabet="abc", min_size=1, max_size=6)


@given(texts, patterns)
def test_matches_equal_brute_force(text, pattern):
    assert find_all(pattern, text) == _naive(text, pattern)


@given(st.text(), st.text(min_size=1))
def test_arbitrary_unicode_matches_builtin_find(text, pattern):
    builtin = set()
    start = 0
    while True:
        pos = text.find(pattern, start)
        if pos == -1:
            break
        builtin.add(pos)
        start = pos + 1
    assert set(find_all(pattern, text)) == builtin


@given(texts, patterns)
def test_every_match_is_sound_and_ascending(text, pattern):
    res = scan(pattern, text)
    for i in res.matches:
        assert text[i:i + len(pattern)] == pattern
    assert list(res.matches) == sorted(set(res.matches))


@given(texts, patterns)
def test_trace_accounts_for_every_alignment(text, pattern):
    res = scan(pattern, text, trace=True)
    assert len(res.steps) == res.alignments
    assert sum(s.comparisons for s in res.steps) == res.comparisons
    assert [s.window_start for s in res.steps if s.is_match] == list(res.matches)
    for step in res.steps:
        assert step.shift >= 1
        assert step.shift == max(step.bad_character_shift, step.good_suffix_shift, 1)


@given(st.binary(max_size=40), st.binary(min_size=1, max_size=4))
def test_bytes_match_brute_force(text, pattern):
    assert find_all(pattern, text) == _naive(text, pattern)


@given(patterns)
def test_preprocess_deterministic(pattern):
    assert preprocess(pattern) == preprocess(pattern)
