from playing_cards.errors import ConfigurationError
from playing_cards.model.model import Model
from playing_cards.model.pile_model import PileModel


class TableModel(Model):
    """The playing surface: the named piles of one game."""

    def __init__(self):
        super().__init__()
        self._piles: dict[str, PileModel] = {}

    def __len__(self) -> int:
        return len(self._piles)

    @property
    def piles(self) -> dict[str, PileModel]:
        return dict(self._piles)

    def pile(self, name: str) -> PileModel | None:
        return self._piles.get(name)

    def add_pile(self, name: str, pile: PileModel) -> None:
        if name in self._piles:
            raise ConfigurationError(f"A pile named '{name}' is already on the table")
        self._piles[name] = pile
        self.changed()

    def remove_pile(self, name: str) -> PileModel | None:
        pile = self._piles.pop(name, None)
        if pile is not None:
            self.changed()
        return pile

    def __repr__(self) -> str:
        return f"TableModel({sorted(self._piles)})"
