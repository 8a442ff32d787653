import pygame
import numpy as np
import os

from sealife.agents.species import Species

SPECIES_COLORS = {
    Species.SHARK: (255, 0, 0),
    Species.BARRACUDA: (255, 152, 72),
    Species.TUNA: (0, 0, 255),
    Species.SARDINE: (72, 152, 255),
    Species.JELLYFISH: (200, 0, 200),
    Species.ALGAE: (0, 128, 0),
}
EMPTY_COLOR = (255, 255, 255)
GRID_COLOR = (192, 192, 192)


class FieldRenderer:
    """
    Display sink drawing the field with pygame, one colored cell per organism.
    Columns run along the x axis and rows along the y axis.
    """

    def __init__(
        self,
        depth,
        width,
        cell_scale=6,
        render_mode="human",
        x_pygame_window=0,
        y_pygame_window=0,
        save_image_steps=False,
        image_directory="./assets/images",
    ):
        self.depth = depth
        self.width = width
        self.cell_scale = cell_scale
        self.render_mode = render_mode
        self.save_image_steps = save_image_steps
        self.image_directory = image_directory
        self.last_frame = None

        # Initialize the Pygame window position
        os.environ["SDL_VIDEO_WINDOW_POS"] = "%d,%d" % (x_pygame_window, y_pygame_window)

        self.screen_width = width * self.cell_scale
        self.screen_height = depth * self.cell_scale

        pygame.init()
        if render_mode == "human":
            pygame.display.init()
            self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
            pygame.display.set_caption("SeaLife")
        else:
            self.screen = pygame.Surface((self.screen_width, self.screen_height))

    def notify(self, tick, field):
        self.last_frame = self.render(tick, field)

    def render(self, tick, field):
        if self.screen is None:
            return None

        self._draw_grid()
        self._draw_organisms(field)

        if self.render_mode == "human":
            pygame.display.set_caption(f"SeaLife - step {tick}")
            pygame.event.pump()
            pygame.display.update()
        if self.save_image_steps:
            self._save_image(tick)

        if self.render_mode == "rgb_array":
            observation = pygame.surfarray.pixels3d(self.screen)
            frame = np.copy(observation)
            del observation
            return np.transpose(frame, axes=(1, 0, 2))
        return None

    def _draw_grid(self):
        self.screen.fill(EMPTY_COLOR)
        if self.cell_scale < 4:
            return
        for col in range(self.width):
            for row in range(self.depth):
                cell_rect = pygame.Rect(
                    self.cell_scale * col, self.cell_scale * row, self.cell_scale, self.cell_scale
                )
                pygame.draw.rect(self.screen, GRID_COLOR, cell_rect, 1)

    def _draw_organisms(self, field):
        for organism in field.organisms:
            if not organism.alive:
                continue
            row, col = organism.location
            cell_rect = pygame.Rect(
                self.cell_scale * col, self.cell_scale * row, self.cell_scale, self.cell_scale
            )
            pygame.draw.rect(self.screen, SPECIES_COLORS[organism.species], cell_rect)

    def _save_image(self, tick):
        os.makedirs(self.image_directory, exist_ok=True)
        pygame.image.save(self.screen, os.path.join(self.image_directory, f"{tick}.png"))

    def close(self):
        if self.screen is not None:
            pygame.quit()
            self.screen = None
