import logging
import time
from typing import Dict, List, Optional, Tuple

import pygame

from .color import RGB, parse_color
from .config import BounceConfig
from .driver import AnimationDriver
from .layout import LayoutTracker
from .sprite import Size, Sprite

logger = logging.getLogger(__name__)

LOGO_COLOR = (255, 255, 255, 255)
# left, middle, right; 4 and 5 are wheel notches
CLICK_BUTTONS = (1, 2, 3)


def generate_logo(height: int) -> pygame.Surface:
    """White "DVD" text over a disc, on a transparent background."""
    font = pygame.font.Font(None, height)
    text = font.render("DVD", True, LOGO_COLOR)
    disc_height = max(2, height // 4)
    width = text.get_width()
    logo = pygame.Surface((width, text.get_height() + disc_height), pygame.SRCALPHA)
    logo.blit(text, (0, 0))
    pygame.draw.ellipse(logo, LOGO_COLOR, (0, text.get_height(), width, disc_height))
    return logo


def load_logo(config: BounceConfig) -> pygame.Surface:
    if config.logo_path is None:
        return generate_logo(config.logo_height)
    # Needs a display mode; raises pygame.error when the file can't be read
    return pygame.image.load(config.logo_path).convert_alpha()


def tint_image(image: pygame.Surface, tint: RGB) -> pygame.Surface:
    """Template rendering: keep the alpha mask, replace the color."""
    tinted = image.copy()
    tinted.fill((0, 0, 0, 255), special_flags=pygame.BLEND_RGBA_MULT)
    tinted.fill(tuple(tint) + (0,), special_flags=pygame.BLEND_RGBA_ADD)
    return tinted


class BounceScene:
    def __init__(self, config: BounceConfig, logo: pygame.Surface, rng=None):
        self.config = config
        self.logo = logo
        self.background = parse_color(config.background_color)
        self.default_tint = parse_color(config.default_tint)
        self.elements: List[Sprite] = []
        self.tracker = LayoutTracker(config.speed, self.default_tint)
        self.driver = AnimationDriver(self.tracker, rng)
        self._tinted: Dict[RGB, pygame.Surface] = {}

    def tap(self) -> Sprite:
        sprite = Sprite(self.logo)
        self.elements.append(sprite)
        logger.info("Spawned sprite %s (%d on screen)", sprite.id, len(self.elements))
        return sprite

    def layout(self, surface_size: Tuple[int, int]) -> None:
        self.tracker.capture_surface(Size(*surface_size))
        self.tracker.report((sprite.id, sprite.measure()) for sprite in self.elements)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns False once the window has been closed."""
        if event.type == pygame.QUIT:
            return False
        if (event.type == pygame.MOUSEBUTTONDOWN and event.button in CLICK_BUTTONS
                and not getattr(event, "touch", False)):
            self.tap()
        elif event.type == pygame.FINGERDOWN:
            self.tap()
        elif event.type in (pygame.WINDOWHIDDEN, pygame.WINDOWMINIMIZED):
            self.driver.stop()
        elif event.type in (pygame.WINDOWSHOWN, pygame.WINDOWRESTORED):
            self.driver.start()
        return True

    def _image_for(self, tint: RGB) -> pygame.Surface:
        image = self._tinted.get(tint)
        if image is None:
            image = tint_image(self.logo, tint)
            self._tinted[tint] = image
        return image

    def draw(self, screen: pygame.Surface) -> None:
        screen.fill(self.background)
        for sprite in self.elements:
            record = self.tracker.get(sprite.id)
            if record is None:
                position, tint = (0, 0), self.default_tint
            else:
                position, tint = record.position, record.tint
            screen.blit(self._image_for(tint), (int(position[0]), int(position[1])))


def run_game(config: BounceConfig, rng=None, max_frames: Optional[int] = None) -> BounceScene:
    pygame.init()
    screen = pygame.display.set_mode((config.screen_width, config.screen_height))
    pygame.display.set_caption(config.window_title)
    clock = pygame.time.Clock()

    try:
        scene = BounceScene(config, load_logo(config), rng)
        scene.driver.start()

        frames = 0
        start_time = time.time()
        running = True
        while running:
            if config.duration is not None and (time.time() - start_time) >= config.duration:
                break
            if max_frames is not None and frames >= max_frames:
                break

            for event in pygame.event.get():
                if not scene.handle_event(event):
                    running = False

            scene.layout(screen.get_size())
            scene.driver.tick()
            scene.draw(screen)

            pygame.display.flip()
            clock.tick(config.fps)
            frames += 1

        scene.driver.stop()
    finally:
        pygame.quit()

    print(f"[+] Done!\n[+] Sprites spawned: {len(scene.elements)}\n[+] Frames: {frames}")
    return scene
