from sealife.agents.organism import Organism
from sealife.agents.species import Species, species_from_name, STARVATION, AGE
from sealife.envs.field import Coordinate, Field
from sealife.envs.simulator import build_settings
from sealife.utils.random_source import RandomSource

import pytest


def _traits(species, **overrides):
    settings = build_settings({"species_traits": {species.value: overrides}} if overrides else None)
    return settings["species_traits"][species]


def test_species_from_name_accepts_config_keys():
    assert species_from_name("shark") is Species.SHARK
    assert species_from_name("Barracuda") is Species.BARRACUDA
    assert species_from_name("JELLYFISH") is Species.JELLYFISH
    assert species_from_name(Species.ALGAE) is Species.ALGAE
    with pytest.raises(ValueError):
        species_from_name("octopus")


@pytest.mark.parametrize("seed", range(5))
def test_seeded_shark_gets_random_age_food_and_sex(seed):
    traits = _traits(Species.SHARK)
    shark = Organism.create(Species.SHARK, Coordinate(0, 0), traits, RandomSource(seed), random_age=True)

    assert shark.alive
    assert 0 <= shark.age < traits["max_age"]
    assert 0 <= shark.food_level < traits["initial_food_value"]
    assert shark.is_male in (True, False)


def test_newborns_start_at_age_zero():
    random_source = RandomSource(3)
    for species in (Species.SHARK, Species.BARRACUDA, Species.TUNA, Species.SARDINE, Species.JELLYFISH):
        newborn = Organism.create(species, Coordinate(1, 1), _traits(species), random_source)
        assert newborn.age == 0


def test_species_payloads():
    random_source = RandomSource(0)
    barracuda = Organism.create(Species.BARRACUDA, Coordinate(0, 0), _traits(Species.BARRACUDA), random_source)
    sardine = Organism.create(Species.SARDINE, Coordinate(0, 0), _traits(Species.SARDINE), random_source)
    tuna = Organism.create(Species.TUNA, Coordinate(0, 0), _traits(Species.TUNA), random_source)
    algae = Organism.create(Species.ALGAE, Coordinate(0, 0), _traits(Species.ALGAE), random_source, random_age=True)

    assert barracuda.food_level is not None and barracuda.is_male is None
    assert sardine.food_level is None and sardine.is_male is None
    assert tuna.food_level is None and tuna.is_male is not None
    assert algae.age is None and algae.food_level is None


def test_spawn_keeps_species_and_traits():
    traits = _traits(Species.JELLYFISH)
    parent = Organism(Species.JELLYFISH, Coordinate(1, 1), traits, age=10)

    child = parent.spawn(Coordinate(0, 1), RandomSource(0))

    assert child.species is Species.JELLYFISH
    assert child.traits is traits
    assert child.location == Coordinate(0, 1)
    assert child.age == 0


def test_set_dead_is_terminal_and_clears_location():
    sardine = Organism(Species.SARDINE, Coordinate(1, 1), _traits(Species.SARDINE))

    sardine.set_dead("disease")
    sardine.set_dead("predation")

    assert not sardine.alive
    assert sardine.location is None
    assert sardine.cause_of_death == "disease"


def test_dead_organism_does_not_act():
    random_source = RandomSource(0)
    current_field = Field(3, 3, random_source)
    next_field = Field(3, 3, random_source)
    tuna = Organism(Species.TUNA, Coordinate(1, 1), _traits(Species.TUNA), age=20, is_male=True)
    current_field.place(tuna, Coordinate(1, 1))
    tuna.set_dead("disease")

    tuna.act(current_field, next_field, True, random_source)

    assert len(next_field) == 0
    assert tuna.age == 20


@pytest.mark.parametrize("food_level, survives", [(1, False), (0, False), (2, True), (10, True)])
def test_hunger_kills_at_zero_food(food_level, survives):
    shark = Organism(Species.SHARK, Coordinate(0, 0), _traits(Species.SHARK), food_level=food_level, is_male=True)

    shark.increment_hunger()

    assert shark.alive is survives
    if not survives:
        assert shark.cause_of_death == STARVATION


def test_aging_past_max_age_kills():
    traits = _traits(Species.SARDINE)
    sardine = Organism(Species.SARDINE, Coordinate(0, 0), traits, age=traits["max_age"])

    sardine.increment_age()

    assert not sardine.alive
    assert sardine.cause_of_death == AGE


def test_reaching_max_age_is_still_alive():
    traits = _traits(Species.SARDINE)
    sardine = Organism(Species.SARDINE, Coordinate(0, 0), traits, age=traits["max_age"] - 1)

    sardine.increment_age()

    assert sardine.alive


def test_young_organisms_cannot_breed():
    traits = _traits(Species.SARDINE, breeding_probability=1.0)
    random_source = RandomSource(0)
    field = Field(3, 3, random_source)
    sardine = Organism(Species.SARDINE, Coordinate(1, 1), traits, age=traits["breeding_age"] - 1)

    assert sardine.litter_size(field, random_source) == 0


def test_litter_size_is_within_bounds():
    traits = _traits(Species.JELLYFISH, breeding_probability=1.0)
    random_source = RandomSource(5)
    field = Field(3, 3, random_source)
    jellyfish = Organism(Species.JELLYFISH, Coordinate(1, 1), traits, age=5)

    sizes = {jellyfish.litter_size(field, random_source) for _ in range(200)}

    assert min(sizes) >= 1
    assert max(sizes) <= traits["max_litter_size"]


def test_find_mate_requires_opposite_sex_of_same_species():
    random_source = RandomSource(0)
    field = Field(3, 3, random_source)
    traits = _traits(Species.TUNA)
    tuna = Organism(Species.TUNA, Coordinate(1, 1), traits, age=20, is_male=True)
    same_sex = Organism(Species.TUNA, Coordinate(0, 0), traits, age=20, is_male=True)
    shark = Organism(Species.SHARK, Coordinate(0, 1), _traits(Species.SHARK), food_level=5, is_male=False)
    for organism in (tuna, same_sex, shark):
        field.place(organism, organism.location)

    assert tuna.find_mate(field) is None

    partner = Organism(Species.TUNA, Coordinate(2, 2), traits, age=20, is_male=False)
    field.place(partner, partner.location)

    assert tuna.find_mate(field) is partner


def test_find_food_returns_none_without_prey():
    random_source = RandomSource(0)
    field = Field(3, 3, random_source)
    shark = Organism(Species.SHARK, Coordinate(1, 1), _traits(Species.SHARK), food_level=5, is_male=True)
    sardine = Organism(Species.SARDINE, Coordinate(0, 0), _traits(Species.SARDINE))
    field.place(shark, shark.location)
    field.place(sardine, sardine.location)

    # sharks only eat tuna
    assert shark.find_food(field) is None
    assert sardine.alive
    assert shark.food_level == 5


@pytest.mark.parametrize("name", [5, None, 1.5])
def test_species_from_name_rejects_non_string_keys(name):
    with pytest.raises(ValueError):
        species_from_name(name)


@pytest.mark.parametrize("species", [Species.SHARK, Species.BARRACUDA])
def test_predator_without_food_level_is_rejected(species):
    with pytest.raises(ValueError):
        Organism(species, Coordinate(1, 1), _traits(species), is_male=True)


@pytest.mark.parametrize("species", [Species.SHARK, Species.TUNA])
def test_sex_matched_organism_without_sex_is_rejected(species):
    with pytest.raises(ValueError):
        Organism(species, Coordinate(1, 1), _traits(species), food_level=5)


def test_created_organisms_always_act():
    random_source = RandomSource(1)
    current_field = Field(3, 3, random_source)
    next_field = Field(3, 3, random_source)
    for species in (Species.SHARK, Species.BARRACUDA, Species.TUNA):
        organism = Organism.create(species, Coordinate(1, 1), _traits(species), random_source)
        assert organism.food_level is not None or species is Species.TUNA
        assert organism.is_male is not None or species is Species.BARRACUDA
        organism.act(current_field, next_field, True, random_source)
