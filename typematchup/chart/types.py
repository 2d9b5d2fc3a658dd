# ABOUTME: Closed enumeration of the 18 Pokemon types (Gen 6+, Fairy included).
# ABOUTME: Member order is the canonical order used for every ordered output.

from enum import Enum

from typematchup.errors import UnknownTypeError


class PokemonType(str, Enum):
    """One of the 18 elemental types."""

    NORMAL = "Normal"
    FIRE = "Fire"
    WATER = "Water"
    ELECTRIC = "Electric"
    GRASS = "Grass"
    ICE = "Ice"
    FIGHTING = "Fighting"
    POISON = "Poison"
    GROUND = "Ground"
    FLYING = "Flying"
    PSYCHIC = "Psychic"
    BUG = "Bug"
    ROCK = "Rock"
    GHOST = "Ghost"
    DRAGON = "Dragon"
    DARK = "Dark"
    STEEL = "Steel"
    FAIRY = "Fairy"

    def __str__(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        """Position of this type in canonical order."""
        return _INDEX[self]

    @classmethod
    def parse(cls, value: "PokemonType | str") -> "PokemonType":
        """Convert a member or a case-insensitive type name to a PokemonType.

        Args:
            value: A PokemonType, or a name such as "fire" or " Fire ".

        Returns:
            The matching PokemonType.

        Raises:
            UnknownTypeError: If value does not name one of the 18 types.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = _BY_NAME.get(value.strip().lower())
            if member is not None:
                return member
        raise UnknownTypeError(value)


_INDEX: dict[PokemonType, int] = {t: i for i, t in enumerate(PokemonType)}
_BY_NAME: dict[str, PokemonType] = {t.value.lower(): t for t in PokemonType}

TYPES: tuple[PokemonType, ...] = tuple(PokemonType)
