DEFAULT_DEPTH, DEFAULT_WIDTH = 80, 120

simulator_kwargs = dict(
    # environment parameters
    depth=DEFAULT_DEPTH,
    width=DEFAULT_WIDTH,
    # per organism per tick; algae are immune
    disease_probability=0.005,
    # seeding: cumulative bands per grid cell, remainder stays empty
    creation_probabilities=dict(
        shark=0.02,
        barracuda=0.02,
        tuna=0.08,
        sardine=0.1,
        jellyfish=0.05,
        algae=0.05,
    ),
    # cosmetic only, reported but never read by any species
    weather_conditions=["Sunny", "Rainy", "Cloudy", "Windy", "Stormy"],
    initial_weather="Sunny",
    # run parameters
    long_run_steps=700,
    delay_ms=50,
)

species_traits = dict(
    shark=dict(
        max_age=200,
        breeding_age=20,
        breeding_probability=0.05,
        max_litter_size=3,
        diet=dict(tuna=15),  # prey -> food value, in order of preference
        initial_food_value=15,
        day_move_probability=0.5,
    ),
    barracuda=dict(
        max_age=150,
        breeding_age=15,
        breeding_probability=0.1,
        max_litter_size=4,
        diet=dict(tuna=15, sardine=10),
        initial_food_value=10,
    ),
    tuna=dict(
        max_age=100,
        breeding_age=10,
        breeding_probability=0.15,
        max_litter_size=5,
        night_move_probability=0.3,
    ),
    sardine=dict(
        max_age=50,
        breeding_age=5,
        breeding_probability=0.2,
        max_litter_size=8,
        night_move_probability=0.3,
    ),
    jellyfish=dict(
        max_age=30,
        breeding_age=1,
        breeding_probability=0.3,
        max_litter_size=12,
    ),
    algae=dict(
        breeding_probability=0.1,
        max_litter_size=1,
    ),
)
