import pytest

from katabox.strings import (
    clear_stars,
    concatenated_words,
    generate_tag,
    largest_box_string,
    max_parity_difference,
    smallest_equivalent_string,
    word_break,
)


def test_word_break_joined_words():
    words = ["apple", "pen"]
    assert word_break("apple" + "pen" + "apple", words) is True


def test_word_break_unknown_letter():
    assert word_break("catsz", ["cats", "cat", "s"]) is False


def test_word_break_empty_string():
    assert word_break("", ["a"]) is True


def test_word_break_needs_full_cover():
    assert word_break("cars", ["car", "ca", "rs"]) is True
    assert word_break("carx", ["car", "ca", "rs"]) is False


def test_concatenated_words_simple():
    assert concatenated_words(["cat", "dog", "catdog"]) == ["catdog"]


def test_concatenated_words_invariant():
    words = ["cat", "cats", "catsdogcats", "dog", "dogcatsdog", "hippopotamuses", "rat", "ratcatdogcat"]
    found = concatenated_words(words)
    assert "hippopotamuses" not in found
    for word in found:
        others = [other for other in words if other != word]
        assert word_break(word, others)
    assert set(found) == {"catsdogcats", "dogcatsdog", "ratcatdogcat"}


def test_concatenated_words_preserves_order():
    words = ["ab", "a", "b", "ba"]
    assert concatenated_words(words) == ["ab", "ba"]


def test_concatenated_words_word_cannot_use_itself():
    assert concatenated_words(["a", "a"]) == []


def test_concatenated_words_empty_word():
    assert concatenated_words([""]) == [""]


def test_smallest_equivalent_example():
    assert smallest_equivalent_string("parker", "morris", "parser") == "makkek"


def test_smallest_equivalent_no_pairs_is_identity():
    assert smallest_equivalent_string("", "", "hello") == "hello"


def test_smallest_equivalent_invariants():
    s1, s2 = "leetcode", "programs"
    left = smallest_equivalent_string(s1, s2, s1)
    right = smallest_equivalent_string(s1, s2, s2)
    assert left == right
    for mapped, original in zip(left, s1):
        assert mapped <= original
    assert smallest_equivalent_string(s1, s2, left) == left


def test_smallest_equivalent_length_mismatch():
    with pytest.raises(ValueError):
        smallest_equivalent_string("ab", "a", "ab")


def test_smallest_equivalent_rejects_non_letters():
    with pytest.raises(ValueError):
        smallest_equivalent_string("A", "b", "c")


def test_clear_stars_without_stars():
    assert clear_stars("abc") == "abc"


def test_clear_stars_removes_smallest():
    word = "dcab"
    assert clear_stars(word + "*") == word.replace("a", "")


def test_clear_stars_removes_rightmost_of_ties():
    assert clear_stars("ab" + "a" + "*") == "ab"


def test_clear_stars_length():
    s = "zxyabc*de**f*"
    assert len(clear_stars(s)) == len(s) - 2 * s.count("*")
    assert "*" not in clear_stars(s)


def test_clear_stars_without_character_raises():
    with pytest.raises(ValueError):
        clear_stars("*a")


def test_largest_box_single_friend():
    assert largest_box_string("gggg", 1) == "gggg"


def test_largest_box_example():
    assert largest_box_string("dbca", 2) == "dbc"


def test_largest_box_each_friend_one_letter():
    word = "bcdeaz"
    assert largest_box_string(word, len(word)) == max(word)


def test_largest_box_is_piece_of_word():
    word = "abzzcazd"
    friends = 3
    result = largest_box_string(word, friends)
    assert result in word
    assert 1 <= len(result) <= len(word) - friends + 1
    assert result[0] == max(word)


def test_largest_box_rejects_bad_friend_count():
    with pytest.raises(ValueError):
        largest_box_string("abc", 0)
    with pytest.raises(ValueError):
        largest_box_string("abc", 4)


def test_max_parity_difference():
    odd, even = 5, 2
    assert max_parity_difference("a" * odd + "b" * even + "c") == odd - 1 + 1 - even


def test_max_parity_difference_picks_extremes():
    text = "x" * 7 + "y" * 3 + "z" * 4 + "w" * 6
    assert max_parity_difference(text) == 7 - 4


@pytest.mark.parametrize("text", ["", "aa", "abc"])
def test_max_parity_difference_missing_parity(text):
    with pytest.raises(ValueError):
        max_parity_difference(text)


def test_generate_tag_example():
    assert generate_tag("Leetcode daily streak achieved") == "#leetcodeDailyStreakAchieved"


def test_generate_tag_drops_non_letters():
    tag = generate_tag("  can I go 2 there?")
    assert tag.startswith("#")
    assert tag[1:].isalpha()
    assert tag[1].islower()


def test_generate_tag_truncates():
    tag = generate_tag("word " * 60)
    assert len(tag) == 100
    assert tag.startswith("#word")


def test_generate_tag_empty():
    assert generate_tag("") == "#"