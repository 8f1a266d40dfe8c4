import pytest

from algoshelf.strings import BoundedStack, is_match, is_scramble, reverse_with_stack


def test_stack_lifo_order():
    stack = BoundedStack(3)
    for item in "abc":
        stack.push(item)
    assert [stack.pop(), stack.pop(), stack.pop()] == ["c", "b", "a"]


def test_stack_full_drops_item():
    stack = BoundedStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    stack.push(3)
    assert len(stack) == 2
    assert stack.pop() == 2


def test_stack_empty_pop_raises():
    stack = BoundedStack(1)
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.pop()


def test_stack_negative_capacity():
    with pytest.raises(ValueError):
        BoundedStack(-1)


@pytest.mark.parametrize("text", ["", "a", "Akhilesh", "racecar!"])
def test_reverse_with_stack(text):
    assert reverse_with_stack(text) == text[::-1]


def test_reverse_twice_is_identity():
    assert reverse_with_stack(reverse_with_stack("Akhilesh")) == "Akhilesh"


def test_scramble_identical():
    assert is_scramble("abcde", "abcde") is True


def test_scramble_length_mismatch():
    assert is_scramble("abc", "ab") is False


@pytest.mark.parametrize("word", ["great", "abcdefg", "ab"])
def test_scramble_reversal(word):
    assert is_scramble(word, word[::-1]) is True


def test_scramble_leetcode_examples():
    assert is_scramble("great", "rgeat") is True
    assert is_scramble("abcde", "caebd") is False


def test_scramble_different_letters():
    assert is_scramble("abc", "abd") is False


@pytest.mark.parametrize("text", ["", "a", "hello world"])
def test_star_matches_anything(text):
    assert is_match(text, "*") is True


def test_literal_pattern_matches_itself():
    assert is_match("adceb", "adceb") is True
    assert is_match("adceb", "adcex") is False


def test_question_mark_needs_exactly_one_char():
    assert is_match("a", "?") is True
    assert is_match("", "?") is False
    assert is_match("ab", "?") is False


def test_wildcard_mixed():
    assert is_match("adceb", "*a*b") is True
    assert is_match("acdcb", "a*c?b") is False


def test_empty_string_only_matches_stars():
    assert is_match("", "***") is True
    assert is_match("", "*a") is False