import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("gray100", 0xFFFFFF),
        ("navy", 0x80),
        ("lightgoldenrodyellow", 0xFAFAD2),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_ascii_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_entry_of_repeated_name_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == lookup_color("lightslategray")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_spaced_and_joined_spellings_agree():
    pairs = [
        ("white smoke", "whitesmoke"),
        ("misty rose", "mistyrose"),
        ("dodger blue", "dodgerblue"),
        ("light green", "lightgreen"),
    ]
    for spaced, joined in pairs:
        assert lookup_color(spaced) == lookup_color(joined)


def test_all_values_fit_in_rgb():
    names = ["snow", "red", "blue4", "gray50", "thistle4", "darkred"]
    for name in names:
        assert 0 <= lookup_color(name) <= 0xFFFFFF


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        lookup_color("")


def test_non_ascii_case_folding_is_not_applied():
    # KELVIN SIGN lowercases to "k" under full Unicode rules; only ASCII folds.
    with pytest.raises(KeyError):
        lookup_color("\u212ahaki")