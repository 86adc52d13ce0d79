import os

import pytest
from anagrammer import DictionaryIndex, load_dictionary
from anagrammer.occurrences import word_occurrences

VOCAB = ["eat", "ate", "tea", "tan", "ten", "net"]


@pytest.fixture
def temp_dictionary():
    path = "test_anagrammer_words.txt"
    with open(path, "w", encoding="utf-8") as f:
        f.write("eat\n  ate\n\ntea \n\n   \nSean\n")
    yield path
    os.remove(path)


class TestLoadDictionary:
    def test_load(self, temp_dictionary):
        assert load_dictionary(temp_dictionary) == ["eat", "ate", "tea", "Sean"]

    def test_missing(self):
        with pytest.raises(OSError):
            load_dictionary("no_such_dictionary.txt")


class TestDictionaryIndex:
    def test_init(self):
        index = DictionaryIndex(VOCAB)
        assert len(index) == 3
        assert index.word_count == 6
        assert word_occurrences("eat") in index
        assert word_occurrences("zoo") not in index

    def test_get(self):
        index = DictionaryIndex(VOCAB)
        assert index.get(word_occurrences("ten")) == ("ten", "net")
        assert index.get(word_occurrences("zoo")) == ()

    def test_word_anagrams(self):
        index = DictionaryIndex(VOCAB)
        assert index.word_anagrams("eat") == ["eat", "ate", "tea"]
        # the word does not need to be in the dictionary
        assert index.word_anagrams("aet") == ["eat", "ate", "tea"]
        assert index.word_anagrams("TEA") == ["eat", "ate", "tea"]
        assert index.word_anagrams("married") == []

    def test_case_preserved(self):
        index = DictionaryIndex(["sane", "Sean", "my"])
        assert index.word_anagrams("Easn") == ["sane", "Sean"]

    def test_duplicates_kept(self):
        index = DictionaryIndex(["tea", "eat", "tea"])
        assert index.word_anagrams("ate") == ["tea", "eat", "tea"]

    def test_word_anagrams_returns_a_copy(self):
        index = DictionaryIndex(VOCAB)
        found = index.word_anagrams("eat")
        found.append("eta")
        assert index.word_anagrams("eat") == ["eat", "ate", "tea"]

    def test_from_loaded_dictionary(self, temp_dictionary):
        index = DictionaryIndex(load_dictionary(temp_dictionary))
        assert index.word_anagrams("sane") == ["Sean"]
