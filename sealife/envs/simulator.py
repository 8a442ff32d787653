# discretionary libraries
from sealife.agents.organism import Organism
from sealife.agents.species import Species, IMMORTAL_SPECIES, DISEASE, species_from_name
from sealife.config.config_sealife import (
    DEFAULT_DEPTH,
    DEFAULT_WIDTH,
    simulator_kwargs,
    species_traits,
)
from sealife.envs.field import Coordinate, Field
from sealife.utils.random_source import RandomSource, default_random_source

# external libraries
import copy
import logging
from collections import Counter
from dataclasses import dataclass, field as dataclass_field
from typing import Dict, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class StepResult(NamedTuple):
    tick: int
    population_counts: Dict[Species, int]
    is_viable: bool


@dataclass
class SimulationStatistics:
    tick: int
    is_day: bool
    weather: str
    population_counts: Dict[Species, int]
    births: int = 0
    deaths: Dict[str, int] = dataclass_field(default_factory=dict)
    # alive, but displaced from their cell by a later arrival
    evicted: int = 0

    @property
    def total_population(self) -> int:
        return sum(self.population_counts.values())


def build_settings(overrides: Optional[Dict] = None) -> Dict:
    """
    Merges keyword overrides into deep copies of the default simulator and
    species configuration. Species names are resolved to Species members.
    """
    overrides = dict(overrides or {})
    settings = copy.deepcopy(simulator_kwargs)
    traits = copy.deepcopy(species_traits)

    trait_overrides = overrides.pop("species_traits", {}) or {}
    creation_overrides = overrides.pop("creation_probabilities", {}) or {}
    unknown = set(overrides) - set(settings)
    if unknown:
        raise ValueError(f"Unknown simulator settings: {sorted(unknown)}")
    settings.update(overrides)

    creation_probabilities = {
        species_from_name(name): probability
        for name, probability in settings["creation_probabilities"].items()
    }
    for name, probability in creation_overrides.items():
        creation_probabilities[species_from_name(name)] = probability
    settings["creation_probabilities"] = {
        species: creation_probabilities.get(species, 0.0) for species in Species
    }

    resolved_traits = {species_from_name(name): value for name, value in traits.items()}
    for name, value in trait_overrides.items():
        resolved_traits[species_from_name(name)].update(value)
    settings["species_traits"] = resolved_traits

    _validate_settings(settings)
    return settings


def _validate_settings(settings: Dict) -> None:
    probabilities = settings["creation_probabilities"]
    if any(probability < 0 for probability in probabilities.values()):
        raise ValueError("Creation probabilities must not be negative")
    if sum(probabilities.values()) > 1.0:
        raise ValueError(
            f"Creation probabilities sum to {sum(probabilities.values()):.3f}, must be at most 1"
        )
    if not 0.0 <= settings["disease_probability"] <= 1.0:
        raise ValueError("disease_probability must be within [0, 1]")
    for species, traits in settings["species_traits"].items():
        if not 0.0 <= traits["breeding_probability"] <= 1.0:
            raise ValueError(f"{species} breeding_probability must be within [0, 1]")


class Simulator:
    """
    Sea life predator-prey simulator on a rectangular field of sharks,
    barracudas, tuna, sardines, jellyfish and algae. Each step builds the next
    generation of the field from the current one while day and night alternate.

    Optional collaborators are informed after every reset and step:
    display_sink.notify(tick, field) and
    statistics_sink.report(tick, weather, population_counts).
    """

    def __init__(
        self,
        depth: Optional[int] = None,
        width: Optional[int] = None,
        seed: Optional[int] = None,
        random_source: Optional[RandomSource] = None,
        display_sink=None,
        statistics_sink=None,
        **overrides,
    ):
        self.settings = build_settings(overrides)
        depth = self.settings["depth"] if depth is None else depth
        width = self.settings["width"] if width is None else width
        if depth <= 0 or width <= 0:
            logger.warning(
                "The dimensions must be greater than zero (got %sx%s), using default values %sx%s.",
                depth, width, DEFAULT_DEPTH, DEFAULT_WIDTH,
            )
            depth, width = DEFAULT_DEPTH, DEFAULT_WIDTH

        if random_source is None:
            random_source = RandomSource(seed) if seed is not None else default_random_source()
        self.random_source = random_source
        self.species_traits: Dict[Species, Dict] = self.settings["species_traits"]
        self.disease_probability: float = self.settings["disease_probability"]
        self.display_sink = display_sink
        self.statistics_sink = statistics_sink

        self.field = Field(depth, width, self.random_source)
        self.tick = 0
        self.is_day = True
        self.weather = self.settings["initial_weather"]
        self._statistics: Optional[SimulationStatistics] = None

        self.reset()

    @property
    def depth(self) -> int:
        return self.field.depth

    @property
    def width(self) -> int:
        return self.field.width

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reseeds the population and returns to tick 0. Passing a seed also
        reseeds the random stream.
        """
        if seed is not None:
            self.random_source.reseed(seed)
        self.tick = 0
        self.is_day = True
        self.weather = self.settings["initial_weather"]
        self.populate()
        self._statistics = SimulationStatistics(
            tick=self.tick,
            is_day=self.is_day,
            weather=self.weather,
            population_counts=self.field.population_counts(),
        )
        logger.info("Simulation reset on a %sx%s field with %s organisms", self.depth, self.width, len(self.field))
        self._notify_sinks()

    def populate(self) -> None:
        """
        Assigns every cell independently to at most one species, using one
        uniform draw against the cumulative creation probability bands.
        """
        probabilities = self.settings["creation_probabilities"]
        self.field.clear()
        for row in range(self.depth):
            for col in range(self.width):
                draw = self.random_source.uniform()
                cumulative = 0.0
                for species in Species:
                    cumulative += probabilities[species]
                    if draw < cumulative:
                        coordinate = Coordinate(row, col)
                        organism = Organism.create(
                            species,
                            coordinate,
                            self.species_traits[species],
                            self.random_source,
                            random_age=True,
                        )
                        self.field.place(organism, coordinate)
                        break

    def step(self) -> StepResult:
        """
        Advances the simulation one tick: flips day and night, lets every
        living organism act in placement order and swaps in the new generation.
        """
        self.tick += 1
        self.is_day = not self.is_day
        self._update_weather()
        next_field = Field(self.depth, self.width, self.random_source)

        organisms = self.field.organisms
        alive_at_start = [organism for organism in organisms if organism.alive]
        for organism in alive_at_start:
            if not organism.alive:
                # eaten earlier in this tick
                continue
            if self._catches_disease(organism):
                organism.set_dead(DISEASE)
                continue
            organism.act(self.field, next_field, self.is_day, self.random_source)

        self.field = next_field
        self._statistics = self._collect_statistics(alive_at_start)
        is_viable = self.field.is_viable()
        if not is_viable:
            logger.info("Simulation no longer viable at tick %s", self.tick)
        self._notify_sinks()
        return StepResult(self.tick, self._statistics.population_counts, is_viable)

    def run_for(self, steps: int) -> List[StepResult]:
        """
        Runs up to the given number of steps, stopping early once the field is
        no longer viable.
        """
        results = []
        for _ in range(steps):
            if not self.field.is_viable():
                break
            results.append(self.step())
        return results

    def run_long_simulation(self) -> List[StepResult]:
        return self.run_for(self.settings["long_run_steps"])

    def population_counts(self) -> Dict[Species, int]:
        return self.field.population_counts()

    def is_viable(self) -> bool:
        return self.field.is_viable()

    def statistics(self) -> SimulationStatistics:
        return self._statistics

    def _catches_disease(self, organism: Organism) -> bool:
        if organism.species in IMMORTAL_SPECIES:
            return False
        return self.random_source.uniform() < self.disease_probability

    def _update_weather(self) -> None:
        self.weather = self.random_source.choice(self.settings["weather_conditions"])

    def _collect_statistics(self, alive_at_start: List[Organism]) -> SimulationStatistics:
        previous_ids = {id(organism) for organism in alive_at_start}
        next_ids = {id(organism) for organism in self.field.organisms}
        births = sum(1 for organism in self.field.organisms if id(organism) not in previous_ids)
        deaths = Counter(organism.cause_of_death for organism in alive_at_start if not organism.alive)
        evicted = sum(
            1 for organism in alive_at_start
            if organism.alive and id(organism) not in next_ids
        )
        return SimulationStatistics(
            tick=self.tick,
            is_day=self.is_day,
            weather=self.weather,
            population_counts=self.field.population_counts(),
            births=births,
            deaths=dict(deaths),
            evicted=evicted,
        )

    def _notify_sinks(self) -> None:
        if self.display_sink is not None:
            self.display_sink.notify(self.tick, self.field)
        if self.statistics_sink is not None:
            self.statistics_sink.report(self.tick, self.weather, self._statistics.population_counts)
