from algolab.trie import Trie

DEMO_WORDS = ["cat", "catapillar", "dog", "lizard", "camera"]


def test_demo_prefix_is_found():
    trie = Trie()
    for word in DEMO_WORDS:
        trie.insert(word)
    assert trie.contains("cata") is True


def test_whole_words_are_found():
    trie = Trie(DEMO_WORDS)
    assert all(trie.contains(word) for word in DEMO_WORDS)
    assert all(word in trie for word in DEMO_WORDS)


def test_absent_words():
    trie = Trie(DEMO_WORDS)
    assert trie.contains("cow") is False
    assert "doge" not in trie
    assert "catapillars" not in trie


def test_empty_trie_contains_nothing():
    trie = Trie()
    assert trie.contains("") is False
    assert "a" not in trie


def test_empty_string_after_insert():
    trie = Trie(["x"])
    assert trie.contains("") is True


def test_non_string_not_contained():
    trie = Trie(DEMO_WORDS)
    assert 3 not in trie