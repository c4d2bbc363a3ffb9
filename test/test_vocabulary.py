import pytest

from termstats.corpus import Document
from termstats.errors import TokenNotFound
from termstats.vocabulary import Vocabulary


def test_first_seen_order_and_frequencies():
    v = Vocabulary(["run", "run", "ran"])
    assert v.words == ["run", "ran"]
    assert list(v) == ["run", "ran"]
    assert v.frequency("run") == 2
    assert v.frequency("ran") == 1
    assert v.total_count() == 3


def test_extend_keeps_first_seen_order_across_calls():
    v = Vocabulary()
    v.extend(["b", "a"])
    v.extend(["c", "a", "b", "d"])
    assert v.words == ["b", "a", "c", "d"]
    assert v.counts == {"b": 2, "a": 2, "c": 1, "d": 1}
    assert v.total_count() == 6


def test_frequency_of_unknown_token():
    v = Vocabulary(["cat"])
    with pytest.raises(TokenNotFound) as exc:
        v.frequency("dog")
    assert exc.value.token == "dog"
    # reste un KeyError pour les appelants qui l'attendent
    assert isinstance(exc.value, KeyError)


def test_empty_vocabulary():
    v = Vocabulary([])
    assert len(v) == 0
    assert v.total_count() == 0
    assert v.most_common() == []


def test_counts_sum_to_total_and_no_duplicates():
    tokens = "the hobbit went to the hill and the hobbit slept".split()
    v = Vocabulary(tokens)
    assert len(v.words) == len(set(v.words))
    assert all(v.frequency(w) >= 1 for w in v)
    assert sum(v.frequency(w) for w in v) == v.total_count() == len(tokens)


def test_contains():
    v = Vocabulary(["cat"])
    assert "cat" in v
    assert "dog" not in v


def test_most_common_ties_keep_first_seen_order():
    v = Vocabulary(["x", "y", "z", "y", "z", "w"])
    assert v.most_common() == [("y", 2), ("z", 2), ("x", 1), ("w", 1)]
    assert v.most_common(1) == [("y", 2)]


def test_from_documents_folds_in_corpus_order():
    docs = [
        Document("1_1.txt", 0, ("dragon", "gold")),
        Document("1_2.txt", 0, ("ring", "dragon")),
    ]
    v = Vocabulary.from_documents(docs)
    assert v.words == ["dragon", "gold", "ring"]
    assert v.frequency("dragon") == 2
    assert v.total_count() == 4
