import textwrap

import pytest

from playing_cards.card_supplier import ImageCardSupplier, SVGCardsCardSupplier
from playing_cards.config import DEFAULT_SETTINGS, Settings, build_game, load_game, load_settings
from playing_cards.errors import ConfigurationError
from playing_cards.view import FanStyle


def write(path, text):
    path.write_text(textwrap.dedent(text))
    return path


def test_missing_config_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("PLAYING_CARDS_SVG_URL", raising=False)
    assert load_settings(tmp_path / "nope.yaml") == DEFAULT_SETTINGS


def test_malformed_config_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("PLAYING_CARDS_SVG_URL", raising=False)
    path = write(tmp_path / "config.yaml", "table: [unclosed\n")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_settings_from_file(tmp_path, monkeypatch):
    monkeypatch.delenv("PLAYING_CARDS_SVG_URL", raising=False)
    path = write(
        tmp_path / "config.yaml",
        """
        table:
          width: 640
          height: 480
        cards:
          url: /static/cards.svg
        """,
    )
    settings = load_settings(path)
    assert (settings.width, settings.height) == (640, 480)
    assert settings.cards_url == "/static/cards.svg"
    supplier = settings.make_supplier()
    assert isinstance(supplier, SVGCardsCardSupplier)
    assert supplier.url == "/static/cards.svg"


def test_environment_overrides_cards_url(tmp_path, monkeypatch):
    monkeypatch.setenv("PLAYING_CARDS_SVG_URL", "/env.svg")
    path = write(tmp_path / "config.yaml", "cards:\n  url: /file.svg\n")
    assert load_settings(path).cards_url == "/env.svg"


def test_image_supplier_from_settings(tmp_path):
    settings = Settings(supplier="images", supplier_options={"directory": str(tmp_path)})
    assert isinstance(settings.make_supplier(), ImageCardSupplier)


def test_load_game(tmp_path, monkeypatch):
    monkeypatch.delenv("PLAYING_CARDS_SVG_URL", raising=False)
    path = write(
        tmp_path / "config.yaml",
        """
        game:
          name: klondike
        decks:
          main:
            back_color: maroon
            jokers: 1
        piles:
          - name: stock
            deck: main
            invariant: face_down
            position: {x: 100, y: 100}
          - name: foundation
            invariant: "max_size:13"
            fanning: none
          - name: tableau
            fanning: down
            rotation: 0
        """,
    )
    game = load_game(path)
    assert game.name == "klondike"
    assert sorted(game.piles) == ["foundation", "stock", "tableau"]
    assert game.pile("stock").model.count == 53
    assert game.pile("tableau").fanning is FanStyle.DOWN
    assert all(card.back_color == "maroon" for card in game.pile("stock").model.each())


def test_pile_without_name_in_config_fails():
    with pytest.raises(ConfigurationError):
        build_game({"piles": [{"fanning": "arc", "position": {"x": 10, "y": 20}}]})


def test_piles_must_be_a_list():
    with pytest.raises(ConfigurationError, match="piles"):
        build_game({"piles": {"name": "stock"}})


@pytest.mark.parametrize(
    "data, message",
    [
        ({"decks": {"red": "maroon"}}, "Deck 'red'"),
        ({"decks": {"red": {"jokers": "two"}}}, "Deck 'red'"),
        ({"decks": {"red": {"jokers": 5}}}, "Deck 'red'"),
        ({"game": "solitaire"}, "'game'"),
        ({"piles": ["stock"]}, "Pile #0"),
        ({"piles": [{"name": "stock"}, 3]}, "Pile #1"),
    ],
)
def test_malformed_entries_name_the_culprit(data, message):
    with pytest.raises(ConfigurationError, match=message):
        build_game(data)


def test_empty_deck_entry_uses_defaults():
    game = build_game({"decks": {"main": None}})
    assert len(game.deck("main")) == 52


def test_non_numeric_table_size_fails(tmp_path):
    path = write(tmp_path / "config.yaml", "table:\n  width: wide\n")
    with pytest.raises(ConfigurationError, match="width"):
        load_settings(path)
