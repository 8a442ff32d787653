class ConsoleReporter:
    """
    Statistics sink printing a banner per tick:

    --------------------------------------------------
    Step: 3 | Weather: Rainy
    Population: Shark: 12 Tuna: 40 ...
    --------------------------------------------------
    """

    separator = "-" * 50

    def __init__(self, report_every=1, show_extinct=False):
        self.report_every = report_every
        self.show_extinct = show_extinct

    def report(self, tick, weather, population_counts):
        if tick % self.report_every:
            return
        print(self.format(tick, weather, population_counts))

    def format(self, tick, weather, population_counts):
        population_details = " ".join(
            f"{species}: {count}"
            for species, count in population_counts.items()
            if count > 0 or self.show_extinct
        )
        return "\n".join(
            [
                self.separator,
                f"Step: {tick} | Weather: {weather}",
                f"Population: {population_details}",
                self.separator,
            ]
        )
