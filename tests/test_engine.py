import pytest
from wordscramble.engine import (Accepted, Rules, WordSetOracle, WordListOracle, WordfreqOracle,
                                 create_oracle, get_oracle_ids, is_original, is_possible,
                                 is_real, new_session, normalize, submit)

WORDS = WordSetOracle(["cat", "act", "tic", "tact", "attic", "tactic"])


# --- letter feasibility (multiset subset) ---
@pytest.mark.parametrize("candidate,root,expected", [
    ("cat", "tactic", True),
    ("cats", "tactic", False),   # no 's' available
    ("tt", "tactic", True),      # two 't's available
    ("ttt", "tactic", False),    # only two available
    ("tactic", "tactic", True),
    ("", "tactic", True),
    ("worm", "silkworm", True),
    ("silks", "silkworm", False),
])
def test_is_possible_golden(candidate, root, expected):
    assert is_possible(candidate, root) is expected


def test_is_possible_does_not_mutate_root():
    root = "tactic"
    is_possible("tact", root)
    assert root == "tactic"


def test_is_original():
    guesses = ["tact", "cat"]
    assert is_original("act", guesses) is True
    assert is_original("cat", guesses) is False
    assert guesses == ["tact", "cat"]


@pytest.mark.parametrize("raw,expected", [
    ("  Cat ", "cat"),
    ("CAT\n", "cat"),
    ("\t\n ", ""),
    (None, ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_normalized_input_checks_like_clean_input():
    raw = normalize("  Cat ")
    assert is_original(raw, ["act"]) == is_original("cat", ["act"])
    assert is_possible(raw, "tactic") == is_possible("cat", "tactic")


# --- dictionary membership + degenerate candidates ---
def test_is_real_basic():
    assert is_real("cat", WORDS) is True
    assert is_real("tca", WORDS) is False
    assert is_real("", WORDS) is False


def test_is_real_root_word_policy():
    assert is_real("tactic", WORDS, root_word="tactic") is False
    assert is_real("tactic", WORDS, root_word="tactic",
                   rules=Rules(allow_root_word=True)) is True


def test_is_real_min_length():
    rules = Rules(min_length=4)
    assert is_real("cat", WORDS, rules=rules) is False
    assert is_real("tact", WORDS, rules=rules) is True


# --- oracles ---
def test_check_spelling_reports_first_misspelled_range():
    assert WORDS.check_spelling("cat") is None
    assert WORDS.check_spelling("cat tca act") == (4, 3)
    assert WORDS.check_spelling("") is None


def test_wordlist_oracle(tmp_path):
    p = tmp_path / "dict.txt"
    p.write_text("Cat\nact\n\n", encoding="utf-8")
    oracle = WordListOracle(p)
    assert oracle.check_spelling("cat") is None
    assert oracle.check_spelling("tca") == (0, 3)


def test_wordfreq_oracle():
    oracle = WordfreqOracle()
    assert is_real("the", oracle) is True
    assert is_real("qzxvbnq", oracle) is False


def test_oracle_registry():
    assert {"wordset", "wordlist", "wordfreq"} <= set(get_oracle_ids())
    oracle = create_oracle("wordset", words=["cat"])
    assert oracle.check_spelling("cat") is None
    with pytest.raises(ValueError, match="Unknown oracle id"):
        create_oracle("nope")


class _RecordingOracle(WordSetOracle):
    def __init__(self, words):
        super().__init__(words)
        self.languages = []

    def check_spelling(self, text, language="en"):
        self.languages.append(language)
        return super().check_spelling(text, language)


def test_language_reaches_oracle():
    oracle = _RecordingOracle(["chat"])
    assert is_real("chat", oracle, language="fr") is True
    assert submit(new_session("chateau"), "chat", oracle=oracle, language="fr") == Accepted("chat")
    assert oracle.languages == ["fr", "fr"]
