from termstats.preprocess import DEFAULT_STOP_WORDS, TextPreprocessor

FAKE_STEMS = {"running": "run", "runs": "run", "ran": "ran"}


def fake_stem(word):
    return FAKE_STEMS.get(word, word)


def test_stop_words_removed_without_stemming():
    tp = TextPreprocessor(use_stemming=False, stop_words={"the", "and"})
    assert tp.process("The cat and the hat") == ["cat", "hat"]


def test_injected_stemmer():
    tp = TextPreprocessor(use_stemming=True, stop_words=(), stemmer=fake_stem)
    assert tp.process("Running runs ran") == ["run", "run", "ran"]


def test_no_alphabetic_characters():
    tp = TextPreprocessor(use_stemming=False)
    assert tp.process("") == []
    assert tp.process("123 !!! ---") == []


def test_split_on_digits_and_punctuation():
    tp = TextPreprocessor(use_stemming=False, stop_words=())
    assert tp.process("abc123def, snake_case!HELLO") == ["abc", "def", "snake", "case", "hello"]


def test_stop_word_check_happens_before_stemming():
    # "running" est un stop word, sa racine "run" n'en est pas un
    tp = TextPreprocessor(stop_words={"running"}, stemmer=fake_stem)
    assert tp.process("running run") == ["run"]
    # "run" est un stop word, mais "running" n'est comparé qu'avant stemming
    tp = TextPreprocessor(stop_words={"run"}, stemmer=fake_stem)
    assert tp.process("running") == ["run"]


def test_stop_words_case_insensitive():
    tp = TextPreprocessor(use_stemming=False, stop_words={"THE"})
    assert tp.process("The THE the tHe cat") == ["cat"]


def test_default_stop_words():
    assert len(DEFAULT_STOP_WORDS) == 16
    tp = TextPreprocessor(use_stemming=False)
    assert tp.process("The lexer is a part of the compiler") == ["lexer", "part", "compiler"]


def test_empty_stop_word_list_disables_filtering():
    tp = TextPreprocessor(use_stemming=False, stop_words=[])
    assert tp.process("the cat") == ["the", "cat"]


def test_stemmer_applied_to_whole_run():
    seen = []

    def spy(word):
        seen.append(word)
        return word

    TextPreprocessor(stop_words=(), stemmer=spy).process("Hobbit-holes, and dragons")
    assert seen == ["hobbit", "holes", "and", "dragons"]


def test_empty_stem_keeps_unstemmed_word():
    tp = TextPreprocessor(stop_words=(), stemmer=lambda w: "" if w == "x" else w)
    assert tp.process("a x b") == ["a", "x", "b"]


def test_use_stemming_false_ignores_stemmer():
    tp = TextPreprocessor(use_stemming=False, stop_words=(), stemmer=lambda w: "zzz")
    assert tp.process("cats") == ["cats"]


def test_default_porter_stemmer():
    tp = TextPreprocessor(use_stemming=True, stop_words=())
    assert tp.process("Running runs cats") == ["run", "run", "cat"]


def test_unicode_letters():
    tp = TextPreprocessor(use_stemming=False, stop_words=())
    assert tp.process("Café déjà-vu") == ["café", "déjà", "vu"]
    # minuscule sur plusieurs caractères : on ne garde que la lettre de base
    assert tp.process("İstanbul") == ["istanbul"]


def test_strip_accents():
    tp = TextPreprocessor(use_stemming=False, stop_words=(), strip_accents=True)
    assert tp.process("Café déjà-vu") == ["cafe", "deja", "vu"]


def test_tokens_are_lowercase_alphabetic_and_deterministic():
    tp = TextPreprocessor(use_stemming=False, stop_words=())
    text = "In a hole in the ground there lived a Hobbit. 42 times!"
    first = tp.process(text)
    assert first == tp.process(text)
    assert all(t and t.isalpha() and t == t.lower() for t in first)


def test_porter_keeps_short_words():
    tp = TextPreprocessor(use_stemming=True)
    assert tp.process("The hobbit's hole") == ["hobbit", "s", "hole"]
    tp = TextPreprocessor(use_stemming=True, stop_words=())
    tokens = tp.process("The hobbit's hole, s us. It's Bilbo's")
    assert tokens.count("s") == 4
    assert "us" in tokens
    assert len(tokens) == 10
