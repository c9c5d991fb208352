import sys
import argparse
import logging
from pathlib import Path

# Ensure we can import playing_cards/
root = Path(__file__).parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

logger = logging.getLogger("play")


def default_game():
    from playing_cards.config import build_game

    return build_game(
        {
            "game": {"name": "two piles"},
            "decks": {"maroon": {"back_color": "maroon"}},
            "piles": [
                {"name": "stock", "deck": "maroon", "position": {"x": 150, "y": 200}},
                {"name": "waste", "fanning": "right", "position": {"x": 400, "y": 200}},
            ],
        }
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Lay out a card table and write it as SVG")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=Path, help="YAML file describing decks and piles")
    parser.add_argument("--output", type=Path, default=Path("table.svg"), help="Where to write the SVG")
    args = parser.parse_args()

    from playing_cards import setup_logging

    setup_logging(debug=args.debug)

    from playing_cards.config import load_game
    from playing_cards.pile import move

    game = load_game(args.config) if args.config else default_game()
    piles = list(game.piles.values())
    if len(piles) >= 2:
        source, destination = piles[0], piles[1]
        source.model.shuffle()
        for card in source.model.each():
            card.turn_face_up()
        move(source.model, destination.model)
        logger.info("Moved a card from '%s' to '%s'", source.name, destination.name)

    args.output.write_text(game.to_svg())
    logger.info("Wrote %s", args.output)
