# discretionary libraries
from sealife.agents.species import (
    Species,
    SEX_MATCHED_SPECIES,
    IMMORTAL_SPECIES,
    AGE,
    STARVATION,
    PREDATION,
    species_from_name,
)
from sealife.agents.behaviors import BEHAVIOR_BY_SPECIES

# external libraries
import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class Organism:
    """
    A single inhabitant of the field. All species share this class; the species
    tag selects the per-tick behavior and which of the optional attributes
    (age, food_level, is_male) are in use.
    """

    def __init__(
        self,
        species: Species,
        location: "Coordinate",
        traits: Dict,
        age: Optional[int] = 0,
        food_level: Optional[int] = None,
        is_male: Optional[bool] = None,
    ):
        self.species: Species = species
        self.traits: Dict = traits
        self.alive: bool = True
        self.location: Optional["Coordinate"] = location
        self.age: Optional[int] = None if species in IMMORTAL_SPECIES else age
        self.food_level: Optional[int] = food_level
        self.is_male: Optional[bool] = is_male
        self.cause_of_death: Optional[str] = None
        if traits.get("diet") and food_level is None:
            raise ValueError(f"{species} needs a food_level")
        if species in SEX_MATCHED_SPECIES and is_male is None:
            raise ValueError(f"{species} needs a sex (is_male)")

    @classmethod
    def create(
        cls,
        species: Species,
        location: "Coordinate",
        traits: Dict,
        random_source: "RandomSource",
        random_age: bool = False,
    ) -> "Organism":
        """
        Creates an organism with randomized individual characteristics. Seeded
        organisms get a random age, newborns start at age zero.
        """
        if species in IMMORTAL_SPECIES:
            return cls(species, location, traits)
        age = random_source.integer(traits["max_age"]) if random_age else 0
        food_level = None
        if traits.get("diet"):
            food_level = random_source.integer(traits["initial_food_value"])
        is_male = random_source.boolean() if species in SEX_MATCHED_SPECIES else None
        return cls(species, location, traits, age=age, food_level=food_level, is_male=is_male)

    def spawn(self, location: "Coordinate", random_source: "RandomSource") -> "Organism":
        return Organism.create(self.species, location, self.traits, random_source)

    def act(self, current_field: "Field", next_field: "Field", is_day: bool, random_source: "RandomSource") -> None:
        """
        Performs one tick: senses current_field and writes itself (and any
        offspring) into next_field. An organism that is not placed into
        next_field is absent from the next generation.
        """
        if not self.alive:
            return
        BEHAVIOR_BY_SPECIES[self.species](self, current_field, next_field, is_day, random_source)

    def set_dead(self, cause: str) -> None:
        if not self.alive:
            return
        self.alive = False
        self.location = None
        self.cause_of_death = cause
        logger.debug("%s died of %s", self.species, cause)

    def increment_age(self) -> None:
        self.age += 1
        if self.age > self.traits["max_age"]:
            self.set_dead(AGE)

    def increment_hunger(self) -> None:
        self.food_level -= 1
        if self.food_level <= 0:
            self.set_dead(STARVATION)

    def can_breed(self) -> bool:
        if self.species in IMMORTAL_SPECIES:
            return True
        return self.age >= self.traits["breeding_age"]

    def find_mate(self, field: "Field") -> Optional["Organism"]:
        """
        Returns a living adjacent organism of the same species and the
        opposite sex, or None.
        """
        for coordinate in field.adjacent_coordinates(self.location):
            other = field.occupant_at(coordinate)
            if (
                other is not None
                and other.species is self.species
                and other.alive
                and other.is_male != self.is_male
            ):
                return other
        return None

    def find_food(self, field: "Field") -> Optional["Coordinate"]:
        """
        Eats the first living adjacent prey, scanning the whole neighborhood
        for each entry of the diet in order of preference. Returns the prey's
        coordinate, or None if nothing edible is adjacent.
        """
        adjacent = field.adjacent_coordinates(self.location)
        for prey_name, food_value in self.traits["diet"].items():
            prey_species = species_from_name(prey_name)
            for coordinate in adjacent:
                prey = field.occupant_at(coordinate)
                if prey is not None and prey.alive and prey.species is prey_species:
                    prey.set_dead(PREDATION)
                    self.food_level = food_value
                    return coordinate
        return None

    def can_eat(self, other: Optional["Organism"]) -> bool:
        if other is None or not other.alive:
            return False
        return any(species_from_name(name) is other.species for name in self.traits.get("diet", {}))

    def litter_size(self, current_field: "Field", random_source: "RandomSource") -> int:
        if not self.can_breed():
            return 0
        if random_source.uniform() >= self.traits["breeding_probability"]:
            return 0
        if self.species in SEX_MATCHED_SPECIES and self.find_mate(current_field) is None:
            return 0
        return random_source.integer(self.traits["max_litter_size"]) + 1

    def give_birth(
        self,
        current_field: "Field",
        next_field: "Field",
        free_coordinates: List["Coordinate"],
        random_source: "RandomSource",
    ) -> int:
        """
        Places a litter into the free coordinates, consuming them. Births that
        find no free coordinate are lost. Returns the number of newborns placed.
        """
        births = self.litter_size(current_field, random_source)
        born = 0
        while born < births and free_coordinates:
            coordinate = free_coordinates.pop(0)
            next_field.place(self.spawn(coordinate, random_source), coordinate)
            born += 1
        return born

    def move_to(self, next_field: "Field", coordinate: "Coordinate") -> None:
        self.location = coordinate
        next_field.place(self, coordinate)

    def __repr__(self) -> str:
        state = "alive" if self.alive else f"dead ({self.cause_of_death})"
        return f"{self.species.value}(location={self.location}, age={self.age}, {state})"
