import io
import tempfile
import warnings

from os.path import dirname, join
from collections import Counter

import pytest

from persistent_tst import ENGLISH_LOWER
from persistent_tst import extract_words, build_tree, load_tree
from persistent_tst import random_string, random_strings
from persistent_tst import verbose_generator, memory_usage
from persistent_tst import exists, size, word_count


top = join(dirname(__file__), "data")

WORDS = join(top, "words.txt")
EXPECTED = ["category", "functor", "theory", "cat",
            "catamorphism", "malformed", "functional"]


def test_extract_words():
    with open(WORDS) as wordlist:
        words = list(extract_words(wordlist, delimiter="\t"))
    assert words == EXPECTED


def test_extract_words_keep_comments():
    with open(WORDS) as wordlist:
        words = list(extract_words(wordlist, comment=None))
    assert words[0] == "#"
    assert len(words) == len(EXPECTED) + 1


def test_extract_words_lower():
    lines = ["Functor\n", "THEORY\n"]
    assert list(extract_words(lines, lower=True)) == ["functor", "theory"]


def test_extract_words_warns_on_missing_field():
    with open(WORDS) as wordlist:
        with pytest.warns(UserWarning):
            frequencies = list(extract_words(wordlist, delimiter="\t",
                                             field=1))
    assert frequencies == ["12", "7", "30", "50", "1", "9"]


def test_build_tree():
    tree = build_tree(EXPECTED)
    for word in EXPECTED:
        assert exists(tree, word)
    assert not exists(tree, "cate")
    assert word_count(tree) == len(EXPECTED)


def test_build_tree_does_not_modify_tree():
    base = build_tree(["cat"])
    extended = build_tree(["category"], tree=base)
    assert exists(extended, "cat") and exists(extended, "category")
    assert not exists(base, "category")


def test_build_tree_balanced():
    words = list(random_strings(200, symbols=ENGLISH_LOWER, seed=5))
    balanced = build_tree(words, balanced=True)
    unbalanced = build_tree(words)
    for word in words:
        assert exists(balanced, word)
    assert size(balanced) == size(unbalanced)


def test_build_tree_balanced_sorted_input_is_shallow():
    words = [ENGLISH_LOWER[idx] for idx in range(26)]
    balanced = build_tree(words, balanced=True)

    def depth(tree):
        if tree.empty:
            return 0
        return 1 + max(depth(tree.left), depth(tree.right))

    assert depth(build_tree(words)) == 26
    assert depth(balanced) <= 6


def test_build_tree_counter_weights():
    frequencies = Counter({"ant": 1, "bee": 1, "cat": 20, "dog": 1})
    tree = build_tree(frequencies, balanced=True)
    assert tree.value == "c"
    assert word_count(tree) == 4


def test_load_tree():
    tree = load_tree(WORDS, delimiter="\t")
    for word in EXPECTED:
        assert exists(tree, word)
    assert word_count(tree) == len(EXPECTED)


def test_load_tree_balanced_verbose():
    buffer = io.StringIO()
    tree = load_tree(WORDS, balanced=True, verbose=True, every_n=2,
                     text_buffer=buffer, delimiter="\t")
    assert word_count(tree) == len(EXPECTED)
    assert f"Inserted {len(EXPECTED)} words" in buffer.getvalue()


def test_load_tree_missing_file():
    with pytest.raises(OSError):
        load_tree(join(top, "no_such_file.txt"))


def test_verbose_generator():
    buffer = io.StringIO()
    elements = list(verbose_generator(range(5), every_n=2, total=5,
                                      text_buffer=buffer))
    assert elements == list(range(5))
    assert buffer.getvalue().count("Consumed") == 3
    assert "Consumed 5 out of 5." in buffer.getvalue()


def test_memory_usage():
    assert memory_usage() > 0


def test_random_strings_seeded():
    first = list(random_strings(20, symbols="ab", min_len=2, max_len=4,
                                seed=1))
    second = list(random_strings(20, symbols="ab", min_len=2, max_len=4,
                                 seed=1))
    assert first == second
    assert all(2 <= len(string) <= 4 for string in first)
    assert all(set(string) <= {"a", "b"} for string in first)


def test_random_string():
    assert len(random_string(10, seed=2)) == 10
    assert random_string(10, seed=2) == random_string(10, seed=2)


def test_no_warnings_for_clean_wordlist():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        list(extract_words(["cat\n", "dog\n"]))


def test_load_tree_balanced_verbose_counts_insertions():
    with tempfile.NamedTemporaryFile("wt", suffix=".txt") as tmp:
        tmp.write("cat\ndog\ncat\nant\ndog\n")
        tmp.flush()

        buffer = io.StringIO()
        tree = load_tree(tmp.name, balanced=True, verbose=True,
                         every_n=1, text_buffer=buffer)

    assert word_count(tree) == 3
    reports = buffer.getvalue()
    assert "Inserted 3 words" in reports
    assert "Inserted 5 words" not in reports
    assert tree.value == "c"
