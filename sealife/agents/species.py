from enum import Enum
from typing import FrozenSet


class Species(Enum):
    """
    The closed set of organism kinds living in the sea. The declaration order
    is also the order of the seeding probability bands.
    """
    SHARK = "Shark"
    BARRACUDA = "Barracuda"
    TUNA = "Tuna"
    SARDINE = "Sardine"
    JELLYFISH = "Jellyfish"
    ALGAE = "Algae"

    def __str__(self) -> str:
        return self.value


PREDATOR_SPECIES: FrozenSet[Species] = frozenset({Species.SHARK, Species.BARRACUDA})
PREY_SPECIES: FrozenSet[Species] = frozenset({Species.TUNA, Species.SARDINE})
# breeding requires an adjacent partner of the opposite sex
SEX_MATCHED_SPECIES: FrozenSet[Species] = frozenset({Species.SHARK, Species.TUNA})
# never age, starve or catch a disease
IMMORTAL_SPECIES: FrozenSet[Species] = frozenset({Species.ALGAE})


def species_from_name(name) -> Species:
    """
    Resolves a config key like "shark", "Shark" or Species.SHARK to a Species.
    """
    if isinstance(name, Species):
        return name
    if not isinstance(name, str):
        raise ValueError(f"Unknown species: {name!r}")
    for species in Species:
        if name.lower() in (species.value.lower(), species.name.lower()):
            return species
    raise ValueError(f"Unknown species: {name!r}")


# causes of death
AGE = "age"
STARVATION = "starvation"
PREDATION = "predation"
DISEASE = "disease"
OVERCROWDING = "overcrowding"
CAUSES_OF_DEATH = (AGE, STARVATION, PREDATION, DISEASE, OVERCROWDING)
