from sealife.agents.organism import Organism
from sealife.agents.species import Species, PREDATOR_SPECIES, PREY_SPECIES
from sealife.envs.field import Coordinate, Field
from sealife.envs.simulator import Simulator, SimulationStatistics, StepResult
from sealife.utils.random_source import RandomSource

__all__ = [
    "Coordinate",
    "Field",
    "Organism",
    "PREDATOR_SPECIES",
    "PREY_SPECIES",
    "RandomSource",
    "SimulationStatistics",
    "Simulator",
    "Species",
    "StepResult",
]
