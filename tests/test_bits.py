import pytest

from matrixdrills.bits import contains_bits, duplicated_letters, main


def test_contains_bits_false_for_unrelated_letters():
    assert contains_bits(ord("z"), ord("f")) is False


def test_contains_bits_true_after_union():
    repository = ord("z") | ord("f")
    assert contains_bits(repository, ord("f")) is True
    assert contains_bits(repository, ord("z")) is True


def test_contains_bits_accepts_characters():
    assert contains_bits("z", "z") is True
    assert contains_bits("z", "f") is False


def test_contains_bits_rejects_long_strings():
    with pytest.raises(ValueError):
        contains_bits("zz", "f")


def test_duplicated_letters_source_example():
    assert duplicated_letters("finding") == ["i", "n"]


def test_duplicated_letters_unique_word_is_empty():
    assert duplicated_letters("abcdefghijklmnopqrstuvwxyz") == []


def test_duplicated_letters_reports_every_repeat():
    text = "aaaa"
    assert duplicated_letters(text) == list(text[1:])


def test_duplicated_letters_count_matches_length_minus_distinct():
    text = "mississippi"
    assert len(duplicated_letters(text)) == len(text) - len(set(text))


@pytest.mark.parametrize("text", ["Apple", "a b", "x1"])
def test_duplicated_letters_rejects_other_characters(text):
    with pytest.raises(ValueError):
        duplicated_letters(text)


def test_main_prints_demo_and_duplicates(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Letter is not duplicated!" in out
    assert "Letter i is duplicated" in out
    assert "Letter n is duplicated" in out


def test_main_rejects_bad_word(capsys):
    assert main(["Hello"]) == 1
    assert capsys.readouterr().err != ""