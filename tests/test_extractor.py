"""Tests for phrase extraction."""

from prompt_builder.categorization.extractor import LONG_PHRASE_THRESHOLD, extract_phrases

LONG_PHRASE = (
    "a glowing dancer twirls slowly with bright fiery poi chains and "
    "shimmering golden sparks drifting across the midnight sky"
)

FIRE_DANCER_PROMPT = (
    "Dynamic fire dancer in mid-spin captured from input photo, twirling fire poi with intense "
    "motion blur and glowing trails forming insane recursive fractals and intricate mandala "
    "patterns in the air, hyper-psychedelic acid-trip background with mandalas materializing "
    "from solid areas, liquid chrome features melting into rainbow fractals, neon plasma "
    "dripping from swirling patterns, bioluminescent smoke and embers creating explosive light "
    "streaks, infinite recursive designs emerging from the fire's path, warped Salvador Dali "
    "proportions on the dancer's body, explosive cyan-magenta-yellow color bursts from the "
    "spinning flames, holographic HUD elements floating amid the chaos, ethereal mandalas "
    "overlaying the motion trails, high gloss metallic reflections on melting forms, 8k "
    "cinematic neon lighting, ultra-detailed, surreal dreamscape"
)


def test_split_on_commas_preserves_order():
    """Test comma-separated phrases are trimmed and kept in order."""
    phrases = extract_phrases("  neon glow ,fractal geometry,   surreal dreamscape ")

    assert phrases == ["neon glow", "fractal geometry", "surreal dreamscape"]


def test_empty_segments_dropped():
    """Test empty pieces between commas are dropped."""
    text = "neon glow,, ,fractal geometry,"

    phrases = extract_phrases(text)

    assert phrases == ["neon glow", "fractal geometry"]
    assert len(phrases) == len([p for p in text.split(",") if p.strip()])


def test_no_commas_single_phrase():
    """Test text without commas yields one phrase."""
    assert extract_phrases("spinning fire poi") == ["spinning fire poi"]


def test_empty_and_whitespace_input():
    """Test empty input yields no phrases."""
    assert extract_phrases("") == []
    assert extract_phrases("   ") == []
    assert extract_phrases(" , ,, ") == []


def test_short_phrase_with_connectors_not_split():
    """Test phrases under the threshold are not split on connectors."""
    phrases = extract_phrases("bigfoot in misty forest, sasquatch among trees")

    assert phrases == ["bigfoot in misty forest", "sasquatch among trees"]


def test_long_phrase_fragments_appended():
    """Test long phrases are split and fragments appended after primary phrases."""
    assert len(LONG_PHRASE) > LONG_PHRASE_THRESHOLD

    phrases = extract_phrases(f"neon glow, {LONG_PHRASE}, surreal dreamscape")

    assert phrases == [
        "neon glow",
        LONG_PHRASE,
        "surreal dreamscape",
        "a glowing dancer twirls slowly",
        "bright fiery poi chains",
        "shimmering golden sparks drifting across the midnight sky",
    ]
    assert phrases.count(LONG_PHRASE) == 1


def test_short_fragments_dropped():
    """Test fragments of five characters or fewer are discarded."""
    long_phrase = (
        "a glowing dancer twirls slowly with fog and shimmering golden sparks "
        "drifting across the midnight sky above quiet hills"
    )
    assert len(long_phrase) > LONG_PHRASE_THRESHOLD

    phrases = extract_phrases(long_phrase)

    assert phrases == [
        long_phrase,
        "a glowing dancer twirls slowly",
        "shimmering golden sparks drifting across the midnight sky above quiet hills",
    ]


def test_long_phrase_without_connectors_not_duplicated():
    """Test a long phrase with nothing to split on appears only once."""
    long_phrase = (
        "an extremely long descriptive phrase about a luminous cathedral of shimmering "
        "glass towers stretching endlessly toward clouds"
    )
    assert len(long_phrase) > LONG_PHRASE_THRESHOLD

    assert extract_phrases(long_phrase) == [long_phrase]


def test_connector_inside_word_not_split():
    """Test connector words only split when surrounded by whitespace."""
    long_phrase = "spinning " * 12 + "forming"
    assert len(long_phrase) > LONG_PHRASE_THRESHOLD

    assert extract_phrases(long_phrase) == [long_phrase]


def test_fire_dancer_prompt():
    """Test extraction of a full generated prompt."""
    phrases = extract_phrases(FIRE_DANCER_PROMPT)

    # 15 comma-separated phrases plus 6 fragments from the one long phrase
    assert len(phrases) == 21
    assert phrases[0] == "Dynamic fire dancer in mid-spin captured from input photo"
    assert phrases[14] == "surreal dreamscape"
    assert phrases[15:] == [
        "twirling fire poi",
        "intense motion blur",
        "glowing trails",
        "insane recursive fractals",
        "intricate mandala patterns",
        "the air",
    ]


def test_every_phrase_non_empty():
    """Test every extracted phrase is trimmed and non-empty."""
    for text in [FIRE_DANCER_PROMPT, ",,a,, b ,", LONG_PHRASE]:
        for phrase in extract_phrases(text):
            assert phrase
            assert phrase == phrase.strip()


def test_length_counted_in_code_points():
    """Test the long-phrase threshold counts characters, not UTF-16 units."""
    text = "🔥" * 60 + " with glowing embers"
    assert len(text) <= LONG_PHRASE_THRESHOLD

    assert extract_phrases(text) == [text]
