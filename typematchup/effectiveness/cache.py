"""ABOUTME: Caller-side memoization of effectiveness results.
ABOUTME: Keys on the canonical type tuple so [A, B] and [B, A] share one entry."""

import logging
import threading
from collections import OrderedDict
from collections.abc import Sequence
from dataclasses import replace

from typematchup.chart.types import PokemonType
from typematchup.effectiveness.combinator import combine, validate_defender_types
from typematchup.effectiveness.dataclasses import TypeEffectivenessResult

logger = logging.getLogger(__name__)


def cache_key(defender_types: Sequence[PokemonType | str]) -> tuple[PokemonType, ...]:
    """Validate a typing and return it sorted into canonical order."""
    return tuple(sorted(validate_defender_types(defender_types), key=lambda t: t.index))


class EffectivenessCache:
    """Bounded, thread-safe cache of combine() results.

    [A, B] and [B, A] share one entry keyed by canonical order; each caller
    gets back its own type order in defender_types.
    """

    def __init__(self, max_entries: int = 171) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[tuple[PokemonType, ...], TypeEffectivenessResult] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, defender_types: Sequence[PokemonType | str]) -> TypeEffectivenessResult:
        """Return the result for a typing, computing it on first use.

        The returned result equals combine(defender_types), including the
        caller's type order, whichever order the entry was first stored under.

        Raises:
            InvalidDefenderTypesError: If the typing is invalid. Nothing is cached.
        """
        validated = validate_defender_types(defender_types)
        key = tuple(sorted(validated, key=lambda t: t.index))

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
            else:
                self.misses += 1

        if cached is not None:
            if cached.defender_types == validated:
                return cached
            return replace(cached, defender_types=validated)

        result = combine(validated)

        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cached effectiveness for %s", "/".join(map(str, evicted)))
        return result

    def clear(self) -> None:
        """Drop all cached results and reset counters."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, defender_types: object) -> bool:
        if not isinstance(defender_types, Sequence) or isinstance(defender_types, str):
            return False
        try:
            key = cache_key(defender_types)
        except ValueError:
            return False
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
