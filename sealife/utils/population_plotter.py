import csv
import os

import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator

from sealife.agents.species import Species

SPECIES_PLOT_COLORS = {
    Species.SHARK: "red",
    Species.BARRACUDA: "orange",
    Species.TUNA: "blue",
    Species.SARDINE: "deepskyblue",
    Species.JELLYFISH: "purple",
    Species.ALGAE: "green",
}


class PopulationPlotter:
    """
    Statistics sink that records the population of every species per tick,
    to be plotted or saved once the run is over.
    """

    def __init__(self):
        self.ticks = []
        self.population = {species: [] for species in Species}

    def report(self, tick, weather, population_counts):
        self.ticks.append(tick)
        for species in Species:
            self.population[species].append(population_counts.get(species, 0))

    def plot(self, title="Sea Life Population Over Time", file_path=None, show=True):
        fig = plt.figure(figsize=(10, 6))
        for species in Species:
            plt.plot(
                self.ticks,
                self.population[species],
                label=f"{species} Population",
                color=SPECIES_PLOT_COLORS[species],
            )
        plt.xlabel("Time Steps")
        plt.ylabel("Population")
        plt.title(title)
        plt.legend()
        plt.grid(True)
        if self.ticks:
            plt.xlim([self.ticks[0], max(self.ticks[-1], self.ticks[0] + 1)])
        plt.gca().yaxis.set_major_locator(MaxNLocator(integer=True))
        if file_path is not None:
            os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)
            plt.savefig(file_path)
        if show:
            plt.show()
        plt.close(fig)

    def save_population_data(self, file_path):
        """
        Save the population of every species per tick to a CSV file.

        Parameters:
        - file_path: destination of the CSV file, directories are created as needed.
        """
        os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)

        with open(file_path, "w", newline="") as csvfile:
            writer = csv.writer(csvfile)
            writer.writerow(["Step"] + [f"{species} Population" for species in Species])
            for index, tick in enumerate(self.ticks):
                writer.writerow([tick] + [self.population[species][index] for species in Species])
