# discretionary libraries
from sealife.agents.species import Species, PREDATOR_SPECIES, PREY_SPECIES
from sealife.utils.random_source import RandomSource, default_random_source

# external libraries
from typing import Dict, List, NamedTuple, Optional


class Coordinate(NamedTuple):
    row: int
    col: int


class Field:
    """
    A rectangular grid of depth x width cells. Each cell holds at most one
    organism. The roster keeps every organism placed into this field in
    placement order; the simulator iterates it to decide who acts first.
    """

    def __init__(self, depth: int, width: int, random_source: Optional[RandomSource] = None):
        self.depth = depth
        self.width = width
        self.random_source = random_source or default_random_source()
        self._occupancy: Dict[Coordinate, "Organism"] = {}
        self._roster: List["Organism"] = []

    def place(self, organism: "Organism", coordinate: Coordinate) -> None:
        """
        Places the organism at the coordinate. A different organism already at
        that coordinate is evicted from the roster (it is not killed).
        """
        other = self._occupancy.get(coordinate)
        if other is organism:
            return
        if other is not None:
            self._roster.remove(other)
        self._occupancy[coordinate] = organism
        self._roster.append(organism)

    def occupant_at(self, coordinate: Coordinate) -> Optional["Organism"]:
        return self._occupancy.get(coordinate)

    def adjacent_coordinates(self, coordinate: Coordinate) -> List[Coordinate]:
        """
        Returns the Moore neighborhood of the coordinate clipped to the grid,
        excluding the coordinate itself, in random order. Callers pick the
        first suitable cell, so the shuffle is what keeps choices fair.
        """
        row, col = coordinate
        coordinates = [
            Coordinate(row + row_offset, col + col_offset)
            for row_offset in (-1, 0, 1)
            for col_offset in (-1, 0, 1)
            if (row_offset, col_offset) != (0, 0)
            and 0 <= row + row_offset < self.depth
            and 0 <= col + col_offset < self.width
        ]
        return self.random_source.shuffled(coordinates)

    def free_adjacent_coordinates(self, coordinate: Coordinate) -> List[Coordinate]:
        """
        Adjacent coordinates that are empty or hold a dead organism, in random order.
        """
        free = []
        for adjacent in self.adjacent_coordinates(coordinate):
            occupant = self._occupancy.get(adjacent)
            if occupant is None or not occupant.alive:
                free.append(adjacent)
        return free

    def is_viable(self) -> bool:
        """
        True if at least one living predator and one living prey are in the field.
        """
        predator_found = False
        prey_found = False
        for organism in self._roster:
            if organism.alive:
                if organism.species in PREDATOR_SPECIES:
                    predator_found = True
                elif organism.species in PREY_SPECIES:
                    prey_found = True
            if predator_found and prey_found:
                return True
        return False

    def population_counts(self) -> Dict[Species, int]:
        counts = {species: 0 for species in Species}
        for organism in self._roster:
            if organism.alive:
                counts[organism.species] += 1
        return counts

    def clear(self) -> None:
        self._occupancy.clear()
        self._roster.clear()

    @property
    def organisms(self) -> List["Organism"]:
        # copy, so the roster can't change under an iterating simulator
        return list(self._roster)

    def __len__(self) -> int:
        return len(self._roster)

    def __repr__(self) -> str:
        return f"Field(depth={self.depth}, width={self.width}, organisms={len(self._roster)})"
