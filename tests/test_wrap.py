from commentflow.convert.wrap import wrap_words


def test_wrap_packs_greedily():
    assert wrap_words("a bb ccc".split(), 6) == ["a bb", "ccc"]
    assert wrap_words(["a", "", "b"], 10) == ["a b"]
    assert wrap_words([], 10) == []


def test_long_word_is_never_split():
    out = wrap_words(["short", "extraordinarily", "x"], 8)
    assert out == ["short", "extraordinarily", "x"]


def test_degenerate_width_puts_each_word_alone():
    assert wrap_words(["a", "b", "c"], 0) == ["a", "b", "c"]
    assert wrap_words(["a", "b", "c"], -5) == ["a", "b", "c"]


def test_lead_in_occupies_first_line_only():
    out = wrap_words(["one", "two", "three"], 14, lead_in="@param x", indent="  ")
    assert out == ["@param x one", "  two three"]
    assert wrap_words([], 10, lead_in="@return") == ["@return"]


def test_lead_in_alone_when_first_word_does_not_fit():
    out = wrap_words(["enormous"], 10, lead_in="@param x", indent="  ")
    assert out == ["@param x", "  enormous"]
