"""Game setup, a top-down view of the world and the interactive loop."""

from __future__ import annotations

import pygame

from . import util
from .components import (
    Animation,
    Bounce,
    Camera,
    CameraFollow,
    Color,
    Consumable,
    Consumer,
    InterpolationState,
    ModelAnimation,
    MoveTo,
    Particle,
    Pointer,
    ShadowCaster,
    Spin,
    Vector3,
    WorldCamera,
    WorldGround,
    WorldModel,
    WorldTransform,
)
from .ecs import World
from .render import compute_shadows
from .world import create_world

TITLE = "Bix's Bundle Bash"
TARGET_FPS = 60
DEFAULT_FRUIT_COUNT = 200
GROUND_SIZE = 50.0
FRUIT_SPREAD = 15.0

PLAYER_NAME = "Bix"
PLAYER_MODEL = "bix"
BANANA_MODEL = "banana"
APPLE_MODEL = "apple"
GROUND_MODEL = "ground"

PLAYER_ANIMATIONS = {
    "Idle": ModelAnimation("Idle", 240),
    "Run": ModelAnimation("Run", 120),
    "Eat": ModelAnimation("Eat", 120),
}

BANANA_COLORS = [
    Color(255, 235, 59, 255),  # bright banana yellow
    Color(255, 180, 15, 255),  # vibrant orange-gold
    Color(240, 220, 80, 255),  # creamy yellow
    Color(180, 140, 35, 255),  # rich golden brown
    Color(100, 160, 60, 255),  # banana leaf green
    Color(130, 80, 40, 255),  # dark brown
]

APPLE_COLORS = [
    Color(220, 50, 47, 255),  # deep red
    Color(255, 80, 70, 255),  # bright red
    Color(180, 35, 30, 255),  # dark red
    Color(255, 140, 60, 255),  # orange-red
    Color(255, 200, 80, 255),  # golden yellow
    Color(101, 67, 33, 255),  # brown stem
]

BACKGROUND_COLOR = (245, 245, 245)
GROUND_COLOR = (120, 170, 90)
SHADOW_COLOR = (70, 100, 55)
PLAYER_COLOR = (150, 95, 50)
MODEL_COLORS = {
    PLAYER_MODEL: PLAYER_COLOR,
    BANANA_MODEL: (BANANA_COLORS[0].r, BANANA_COLORS[0].g, BANANA_COLORS[0].b),
    APPLE_MODEL: (APPLE_COLORS[0].r, APPLE_COLORS[0].g, APPLE_COLORS[0].b),
}
MODEL_RADII = {PLAYER_MODEL: 0.4, BANANA_MODEL: 0.25, APPLE_MODEL: 0.25}
DEFAULT_MODEL_COLOR = (90, 90, 90)
DEFAULT_MODEL_RADIUS = 0.25


def _spawn_fruit(world: World) -> int:
    banana = util.get_random_int(0, 1) == 1
    return world.spawn(
        WorldModel(model=BANANA_MODEL if banana else APPLE_MODEL),
        Spin(speed=1.0),
        Bounce(
            speed=0.05,
            height=0.2,
            center_y=1.0,
            elapsed=util.get_random_float(-1.0, 1.0),
        ),
        ShadowCaster(radius=0.4),
        WorldTransform(
            pos=Vector3(
                util.get_random_float(-FRUIT_SPREAD, FRUIT_SPREAD),
                2.0,
                util.get_random_float(-FRUIT_SPREAD, FRUIT_SPREAD),
            ),
            rot=Vector3(0.0, util.get_random_float(0.0, 360.0), 0.0),
        ),
        Consumable(
            colors=list(BANANA_COLORS if banana else APPLE_COLORS),
            particles=25,
        ),
    )


def populate(world: World, fruit_count: int = DEFAULT_FRUIT_COUNT) -> int:
    """Set up camera, ground, the player and scattered fruit; return the player."""
    if fruit_count < 0:
        raise ValueError(f"fruit count must not be negative: {fruit_count}")

    world.set_singleton(
        WorldCamera(
            camera=Camera(
                target=Vector3(0.0, 0.0, 0.0),
                up=Vector3(0.0, 1.0, 0.0),
                fovy=45.0,
            ),
            distance=3.0,
        )
    )
    world.set_singleton(WorldGround(model=GROUND_MODEL, size=GROUND_SIZE))
    world.set_singleton(Pointer())

    player = world.spawn(
        CameraFollow(),
        WorldModel(model=PLAYER_MODEL, animations=dict(PLAYER_ANIMATIONS), textured=True),
        Animation(name="Idle"),
        WorldTransform(),
        Consumer(range=0.5),
        ShadowCaster(radius=0.6),
        MoveTo(target=Vector3(0.0, 0.0, 0.0), speed=0.05),
        name=PLAYER_NAME,
    )

    for _ in range(fruit_count):
        _spawn_fruit(world)
    return player


class TopDownView:
    """Draws the world seen from above, centred on the camera target."""

    def __init__(self, surface: pygame.Surface, scale: float = 20.0) -> None:
        if scale <= 0.0:
            raise ValueError(f"scale must be positive: {scale}")
        self.surface = surface
        self.scale = scale
        self.center = Vector3()

    def _screen_center(self) -> tuple[float, float]:
        width, height = self.surface.get_size()
        return width / 2.0, height / 2.0

    def _to_screen(self, pos: Vector3) -> tuple[int, int]:
        cx, cy = self._screen_center()
        return (
            round(cx + (pos.x - self.center.x) * self.scale),
            round(cy + (pos.z - self.center.z) * self.scale),
        )

    def screen_to_ground(self, x: float, y: float) -> Vector3:
        """Ground-plane point under a screen pixel."""
        cx, cy = self._screen_center()
        return Vector3(
            self.center.x + (x - cx) / self.scale,
            0.0,
            self.center.z + (y - cy) / self.scale,
        )

    def draw(self, world: World) -> None:
        """Draw ground, shadows, models and particles onto the surface."""
        try:
            self.center = Vector3(*world.singleton(WorldCamera).camera.target)
            has_camera = True
        except KeyError:
            has_camera = False

        self.surface.fill(BACKGROUND_COLOR)

        try:
            ground = world.singleton(WorldGround)
        except KeyError:
            ground = None
        if ground is not None and ground.size > 0.0:
            half = ground.size / 2.0
            left, top = self._to_screen(Vector3(-half, 0.0, -half))
            right, bottom = self._to_screen(Vector3(half, 0.0, half))
            pygame.draw.rect(self.surface, GROUND_COLOR, (left, top, right - left, bottom - top))

        if has_camera:
            for pos, radius in compute_shadows(world):
                pygame.draw.circle(
                    self.surface,
                    SHADOW_COLOR,
                    self._to_screen(pos),
                    max(1, round(radius * self.scale)),
                )

        for _, model, state in world.query(WorldModel, InterpolationState):
            color = MODEL_COLORS.get(model.model, DEFAULT_MODEL_COLOR)
            radius = MODEL_RADII.get(model.model, DEFAULT_MODEL_RADIUS)
            pygame.draw.circle(
                self.surface,
                color,
                self._to_screen(state.render_pos),
                max(1, round(radius * self.scale)),
            )

        for _, particle, state in world.query(Particle, InterpolationState):
            size = max(1, round(0.1 * particle.lifetime * self.scale))
            x, y = self._to_screen(state.render_pos)
            color = (particle.color.r, particle.color.g, particle.color.b)
            pygame.draw.rect(self.surface, color, (x - size // 2, y - size // 2, size, size))


def _pointer(view: TopDownView, x: float, y: float, down: bool) -> Pointer:
    ground = view.screen_to_ground(x, y)
    return Pointer(
        down=down,
        position=Vector3(ground.x, 1.0, ground.z),
        direction=Vector3(0.0, -1.0, 0.0),
    )


def run_game(
    width: int = 1280,
    height: int = 720,
    title: str = TITLE,
    max_frames: int | None = None,
) -> int:
    """Open a window and play until it closes or ``max_frames`` have been drawn.

    Returns the number of frames drawn.
    """
    pygame.display.init()
    try:
        pygame.display.set_caption(title)
        surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        world = create_world()
        populate(world)
        view = TopDownView(surface)
        clock = pygame.time.Clock()

        frames = 0
        while max_frames is None or frames < max_frames:
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                break
            view.surface = pygame.display.get_surface()
            x, y = pygame.mouse.get_pos()
            world.set_singleton(_pointer(view, x, y, pygame.mouse.get_pressed()[0]))
            world.update(clock.tick(TARGET_FPS) / 1000.0)
            view.draw(world)
            pygame.display.flip()
            frames += 1
        return frames
    finally:
        pygame.display.quit()