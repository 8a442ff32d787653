"""
Per-tick behavior of each species.

Every behavior senses the current field (frozen for the tick) and writes the
acting organism, and its offspring, into the next field. Free cells are always
taken from the next field, so organisms that acted earlier in the tick have
already claimed theirs.
"""
# discretionary libraries
from sealife.agents.species import Species, OVERCROWDING

# external libraries
from typing import Callable, Dict


def act_shark(shark, current_field, next_field, is_day, random_source):
    """
    Sharks hunt tuna day and night. At night they also try to breed whenever
    there is room; by day a shark that found no prey wanders off to a free
    cell half of the time. A shark that does not move stays where it is.
    """
    shark.increment_age()
    shark.increment_hunger()
    if not shark.alive:
        return

    free_coordinates = next_field.free_adjacent_coordinates(shark.location)
    next_location = shark.find_food(current_field)
    if next_location in free_coordinates:
        free_coordinates.remove(next_location)

    if not is_day:
        if free_coordinates:
            shark.give_birth(current_field, next_field, free_coordinates, random_source)
    elif (
        next_location is None
        and free_coordinates
        and random_source.uniform() < shark.traits["day_move_probability"]
    ):
        next_location = free_coordinates.pop(0)

    if next_location is None:
        next_location = shark.location
    shark.move_to(next_field, next_location)


def act_barracuda(barracuda, current_field, next_field, is_day, random_source):
    """
    Barracudas breed by day before they hunt, and prefer tuna over sardines.
    Cells holding edible prey are kept out of the litter, since the barracuda
    may move there once it has eaten. They must keep moving: with neither
    prey nor a free cell around they die.
    """
    barracuda.increment_age()
    barracuda.increment_hunger()
    if not barracuda.alive:
        return

    free_coordinates = [
        coordinate for coordinate in next_field.free_adjacent_coordinates(barracuda.location)
        if not barracuda.can_eat(current_field.occupant_at(coordinate))
    ]
    if is_day and free_coordinates:
        barracuda.give_birth(current_field, next_field, free_coordinates, random_source)

    next_location = barracuda.find_food(current_field)
    if next_location is None and free_coordinates:
        next_location = free_coordinates.pop(0)
    if next_location is None:
        barracuda.set_dead(OVERCROWDING)
        return
    barracuda.move_to(next_field, next_location)


def act_schooling_fish(fish, current_field, next_field, is_day, random_source):
    """
    Tuna and sardines breed and then swim on by day; without a free cell left
    they die of overcrowding. At night they mostly rest in place.
    Tuna need an adjacent partner of the opposite sex to breed.
    """
    fish.increment_age()
    if not fish.alive:
        return

    free_coordinates = next_field.free_adjacent_coordinates(fish.location)
    if is_day:
        if free_coordinates:
            fish.give_birth(current_field, next_field, free_coordinates, random_source)
        if not free_coordinates:
            fish.set_dead(OVERCROWDING)
            return
        next_location = free_coordinates.pop(0)
    else:
        next_location = fish.location
        if free_coordinates and random_source.uniform() < fish.traits["night_move_probability"]:
            next_location = free_coordinates.pop(0)
    fish.move_to(next_field, next_location)


def act_jellyfish(jellyfish, current_field, next_field, is_day, random_source):
    """
    Jellyfish drift to a free cell by day and die when boxed in. At night they
    rise towards the surface (a smaller row index) and breed on the way up;
    if there is no room above they stay put.
    """
    jellyfish.increment_age()
    if not jellyfish.alive:
        return

    free_coordinates = next_field.free_adjacent_coordinates(jellyfish.location)
    if is_day:
        if not free_coordinates:
            jellyfish.set_dead(OVERCROWDING)
            return
        next_location = free_coordinates.pop(0)
    else:
        next_location = jellyfish.location
        upward_coordinates = [
            coordinate for coordinate in free_coordinates
            if coordinate.row < jellyfish.location.row
        ]
        if upward_coordinates:
            next_location = upward_coordinates[0]
            free_coordinates.remove(next_location)
            jellyfish.give_birth(current_field, next_field, free_coordinates, random_source)
    jellyfish.move_to(next_field, next_location)


def act_algae(algae, current_field, next_field, is_day, random_source):
    """
    Algae never move, age or die. Each tick they may seed one free adjacent
    cell, regardless of the time of day.
    """
    free_coordinates = [
        coordinate for coordinate in next_field.free_adjacent_coordinates(algae.location)
        if _is_vacant(current_field, coordinate)
    ]
    if free_coordinates:
        algae.give_birth(current_field, next_field, free_coordinates, random_source)
    next_field.place(algae, algae.location)


def _is_vacant(field, coordinate) -> bool:
    # a cell nobody alive will claim by staying put or by being eaten there
    occupant = field.occupant_at(coordinate)
    return occupant is None or not occupant.alive


BEHAVIOR_BY_SPECIES: Dict[Species, Callable] = {
    Species.SHARK: act_shark,
    Species.BARRACUDA: act_barracuda,
    Species.TUNA: act_schooling_fish,
    Species.SARDINE: act_schooling_fish,
    Species.JELLYFISH: act_jellyfish,
    Species.ALGAE: act_algae,
}
