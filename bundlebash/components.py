"""Math types and the component data attached to entities."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator

_EPSILON = 0.000001


@dataclass
class Vector3:
    """A mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vector3()
        return self * (1.0 / size)

    def distance(self, other: Vector3) -> float:
        """Distance between two points."""
        return (self - other).length()

    def lerp(self, other: Vector3, amount: float) -> Vector3:
        """Linear interpolation from this vector towards ``other``."""
        return Vector3(
            self.x + amount * (other.x - self.x),
            self.y + amount * (other.y - self.y),
            self.z + amount * (other.z - self.z),
        )


@dataclass
class Quaternion:
    """A rotation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __add__(self, other: Quaternion) -> Quaternion:
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __mul__(self, scalar: float) -> Quaternion:
        return Quaternion(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def _dot(self, other: Quaternion) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def _normalized(self) -> Quaternion:
        size = math.sqrt(self._dot(self))
        if size == 0.0:
            size = 1.0
        return self * (1.0 / size)

    @classmethod
    def from_euler(cls, pitch: float, yaw: float, roll: float) -> Quaternion:
        """Build a rotation from Euler angles in radians."""
        x0, x1 = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        y0, y1 = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        z0, z1 = math.cos(roll * 0.5), math.sin(roll * 0.5)
        return cls(
            x1 * y0 * z0 - x0 * y1 * z1,
            x0 * y1 * z0 + x1 * y0 * z1,
            x0 * y0 * z1 - x1 * y1 * z0,
            x0 * y0 * z0 + x1 * y1 * z1,
        )

    def slerp(self, other: Quaternion, amount: float) -> Quaternion:
        """Spherical interpolation along the shortest arc towards ``other``."""
        cos_half = self._dot(other)
        if cos_half < 0.0:
            other = -other
            cos_half = -cos_half

        if abs(cos_half) >= 1.0:
            return Quaternion(self.x, self.y, self.z, self.w)
        if cos_half > 0.95:
            blended = self + (other + -self) * amount
            return blended._normalized()

        half_theta = math.acos(cos_half)
        sin_half = math.sqrt(1.0 - cos_half * cos_half)
        if abs(sin_half) < _EPSILON:
            return self * 0.5 + other * 0.5
        ratio_a = math.sin((1.0 - amount) * half_theta) / sin_half
        ratio_b = math.sin(amount * half_theta) / sin_half
        return self * ratio_a + other * ratio_b


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255


@dataclass
class Camera:
    """A perspective camera looking from ``position`` at ``target``."""

    position: Vector3 = field(default_factory=Vector3)
    target: Vector3 = field(default_factory=Vector3)
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    fovy: float = 45.0


@dataclass
class Pointer:
    """Pointer input: whether the primary button is held and the ray under the cursor."""

    down: bool = False
    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)


@dataclass
class MoveTo:
    target: Vector3 = field(default_factory=Vector3)
    speed: float = 0.0


@dataclass
class Spin:
    speed: float = 0.0


@dataclass
class Bounce:
    speed: float = 0.0
    height: float = 0.0
    elapsed: float = 0.0
    center_y: float = 0.0


@dataclass
class Consumer:
    range: float = 0.0


@dataclass
class Consumable:
    colors: list[Color] = field(default_factory=list)
    particles: int = 25


@dataclass
class InterpolationState:
    prev_pos: Vector3 = field(default_factory=Vector3)
    render_pos: Vector3 = field(default_factory=Vector3)
    prev_rot: Vector3 = field(default_factory=Vector3)
    render_rot: Quaternion = field(default_factory=Quaternion)


@dataclass
class Explosion:
    particles: int = 25
    min_speed: float = 0.01
    max_speed: float = 0.03
    min_lifetime: float = 0.8
    max_lifetime: float = 0.8
    colors: list[Color] = field(default_factory=list)


@dataclass
class Particle:
    lifetime: float = 0.0
    variation: float = 1.0
    color: Color = field(default_factory=lambda: Color(0, 0, 0, 255))
    velocity: Vector3 = field(default_factory=Vector3)
    rot_velocity: Vector3 = field(default_factory=Vector3)


@dataclass
class WorldCamera:
    camera: Camera = field(default_factory=Camera)
    distance: float = 0.0


@dataclass
class CameraFollow:
    """Marks the entity the camera keeps centred."""


@dataclass
class ModelAnimation:
    name: str
    frame_count: int


@dataclass
class WorldModel:
    animations: dict[str, ModelAnimation] = field(default_factory=dict)
    model: Any = None
    textured: bool = False


@dataclass
class WorldGround:
    model: Any = None
    size: float = 0.0


@dataclass
class Animation:
    name: str = ""
    run_once: str | None = None
    frame_time: float = 0.0


@dataclass
class WorldTransform:
    """Position and Euler rotation in degrees."""

    pos: Vector3 = field(default_factory=Vector3)
    rot: Vector3 = field(default_factory=Vector3)


@dataclass
class ShadowCaster:
    radius: float