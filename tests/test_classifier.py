# tests/test_classifier.py
import pytest

from emoji_registry import fully_qualify, is_unicode_emoji
from emoji_registry.core.classifier import EmojiClassifier, default_classifier
from emoji_registry.core.qualification import VS16, unqualified_variants
from emoji_registry.core.reference_table import regional_indicators

SMILING = "\u263a\ufe0f"
HEART_ON_FIRE = "\u2764\ufe0f\u200d\U0001F525"
EYE_BUBBLE = "\U0001F441\ufe0f\u200d\U0001F5E8\ufe0f"
KEYCAP_HASH = "#\ufe0f\u20e3"


@pytest.fixture(scope="module")
def clf():
    return default_classifier()


def test_default_classifier_is_built_once():
    assert default_classifier() is default_classifier()


def test_table_sizes(clf):
    assert len(clf) == 3799
    # 1114 sequences with one selector, 46 with two (3 variants each)
    assert len(clf.qualification_map) == 1114 + 46 * 3


def test_every_canonical_sequence_is_emoji(clf):
    for seq in clf.canonical:
        assert clf.is_unicode_emoji(seq)


@pytest.mark.parametrize("text", [
    "abc",
    "",
    "\u263a",                      # unqualified smiling face
    "\U0001F600\U0001F600",        # two emoji are not one
    "\U0001F600x",                 # no prefix matching
    VS16,
])
def test_not_emoji(clf, text):
    assert not clf.is_unicode_emoji(text)


def test_regional_indicators_are_emoji(clf):
    for ri in regional_indicators():
        assert clf.is_unicode_emoji(ri)


def test_module_level_helpers():
    assert is_unicode_emoji("\U0001F600")
    assert not is_unicode_emoji("abc")
    assert fully_qualify("\u263a") == SMILING


@pytest.mark.parametrize("canonical", [SMILING, HEART_ON_FIRE, EYE_BUBBLE, KEYCAP_HASH])
def test_every_variant_qualifies_to_canonical(clf, canonical):
    assert clf.is_unicode_emoji(canonical)
    for variant in unqualified_variants(canonical):
        assert clf.fully_qualify(variant) == canonical


def test_unknown_and_canonical_are_returned_unchanged(clf):
    assert clf.fully_qualify("abc") == "abc"
    assert clf.fully_qualify("") == ""
    assert clf.fully_qualify(SMILING) == SMILING
    assert clf.fully_qualify("\U0001F600") == "\U0001F600"


def test_fully_qualify_is_idempotent(clf):
    samples = list(clf.qualification_map) + list(clf.canonical) + ["abc", "\u263a\u263a"]
    for text in samples:
        once = clf.fully_qualify(text)
        assert clf.fully_qualify(once) == once


def test_qualified_forms_are_emoji(clf):
    for variant, canonical in clf.qualification_map.items():
        assert clf.is_unicode_emoji(canonical)
        assert variant != canonical


def test_tables_are_read_only(clf):
    with pytest.raises(TypeError):
        clf.qualification_map["x"] = "y"
    with pytest.raises(AttributeError):
        clf.canonical.add("x")


def test_from_lines_small_table():
    clf = EmojiClassifier.from_lines([
        "# tiny",
        "263A FE0F ; fully-qualified # smiling face",
        "263A ; unqualified # smiling face",
    ])
    assert len(clf) == 1 + 26
    assert SMILING in clf
    assert clf.fully_qualify("\u263a") == SMILING
    assert not clf.is_unicode_emoji("\u263a")
    assert "canonical=27" in repr(clf)


def test_from_file(tmp_path):
    p = tmp_path / "emoji-test.txt"
    p.write_text("2764 FE0F 200D 1F525 ; fully-qualified # heart on fire\n", encoding="utf-8")
    clf = EmojiClassifier.from_file(str(p))
    assert clf.fully_qualify("\u2764\u200d\U0001F525") == HEART_ON_FIRE


def test_all_variants_of_bundled_data_qualify(clf):
    checked = 0
    for canonical in clf.canonical:
        if VS16 not in canonical:
            continue
        for variant in unqualified_variants(canonical):
            assert clf.fully_qualify(variant) == canonical
            checked += 1
    assert checked == 1114 * 2 + 46 * 4
