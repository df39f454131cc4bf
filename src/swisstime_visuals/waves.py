"""
Transient ripple simulation feeding the water-distortion shader.

This module holds a bounded set of exponentially decaying point waves driven
by pointer input, and snapshots them each frame into a fixed-arity parameter
block (the shader's uniform layout is positional, so the slot count is static).
"""
from dataclasses import dataclass
import logging
import math

from swisstime_visuals import constants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wave:
    """
    A single ripple source. Never mutated after creation; aging is a function of time.

    Attributes:
        origin_x, origin_y: Emission point in view-local coordinates
        start_time: Simulation-clock seconds at creation
        amplitude: Initial amplitude
        frequency: Ring frequency
        speed: Wavefront speed (units per second)
    """
    origin_x: float
    origin_y: float
    start_time: float
    amplitude: float
    frequency: float
    speed: float

    def current_amplitude(self, now, damping):
        """Decayed amplitude at simulation time `now`."""
        return self.amplitude * math.pow(damping, now - self.start_time)


@dataclass(frozen=True)
class WaveParams:
    """
    One shader slot.
    """
    origin: tuple
    amplitude: float
    frequency: float
    speed: float
    start_time: float

    def flatten(self):
        """Positional uniform values for this slot."""
        return (float(self.origin[0]), float(self.origin[1]), self.amplitude,
                self.frequency, self.speed, self.start_time)


WaveParams.EMPTY = WaveParams(origin=(0.0, 0.0), amplitude=0.0, frequency=0.0,
                              speed=0.0, start_time=0.0)


@dataclass(frozen=True)
class WaveShaderParams:
    """
    Fixed-arity parameter block consumed by the water shader.

    Attributes:
        num_waves: Count of genuinely live waves (<= MAX_WAVES)
        waves: Exactly MAX_WAVES slots; unused slots hold WaveParams.EMPTY
        global_damping: Per-second decay factor
        min_amplitude_threshold: Amplitude below which the shader skips a wave
    """
    num_waves: int
    waves: tuple
    global_damping: float
    min_amplitude_threshold: float

    def __post_init__(self):
        """Validate the slot layout."""
        if len(self.waves) != constants.MAX_WAVES:
            raise ValueError(f"waves must have exactly {constants.MAX_WAVES} slots, got {len(self.waves)}")
        if not 0 <= self.num_waves <= constants.MAX_WAVES:
            raise ValueError(f"num_waves must be in [0, {constants.MAX_WAVES}], got {self.num_waves}")

    def as_uniforms(self):
        """
        Flatten to the shader's positional uniform order.

        Returns:
            tuple: (damping, threshold, num_waves, then x, y, amplitude, frequency,
            speed, start_time for each of the slots)
        """
        values = [self.global_damping, self.min_amplitude_threshold, float(self.num_waves)]
        for slot in self.waves:
            values.extend(slot.flatten())
        return tuple(values)


class WaveField:
    """
    Bounded collection of decaying ripple sources.

    Single-threaded: intended to be driven from one UI event/render loop.
    """

    def __init__(self, damping=None, initial_amplitude=None, frequency=None, speed=None,
                 min_amplitude_to_remove=None, min_amplitude_for_shader=None,
                 cooldown_seconds=None, min_distance=None, max_waves=None):
        """
        Initialize ripple parameters.

        Args:
            damping: Per-second amplitude multiplier (0 < damping < 1)
            initial_amplitude: Amplitude of every new wave
            frequency: Ring frequency of every new wave
            speed: Wavefront speed of every new wave
            min_amplitude_to_remove: Waves decayed below this are pruned by cleanup()
            min_amplitude_for_shader: Visibility threshold reported to the shader
            cooldown_seconds: Minimum time between emissions of one pointer
            min_distance: Minimum pointer travel between emissions
            max_waves: Capacity (cannot exceed the shader slot count); 0 disables emission
        """
        self.damping = damping if damping is not None else constants.WAVE_DAMPING
        self.initial_amplitude = (initial_amplitude if initial_amplitude is not None
                                  else constants.WAVE_INITIAL_AMPLITUDE)
        self.frequency = frequency if frequency is not None else constants.WAVE_FREQUENCY
        self.speed = speed if speed is not None else constants.WAVE_SPEED
        self.min_amplitude_to_remove = (min_amplitude_to_remove if min_amplitude_to_remove is not None
                                        else constants.WAVE_MIN_AMPLITUDE_TO_REMOVE)
        self.min_amplitude_for_shader = (min_amplitude_for_shader if min_amplitude_for_shader is not None
                                         else constants.WAVE_MIN_AMPLITUDE_FOR_SHADER)
        self.cooldown_seconds = (cooldown_seconds if cooldown_seconds is not None
                                 else constants.EMISSION_COOLDOWN_SECONDS)
        self.min_distance = min_distance if min_distance is not None else constants.EMISSION_MIN_DISTANCE
        max_waves = max_waves if max_waves is not None else constants.MAX_WAVES
        self.max_waves = max(0, min(max_waves, constants.MAX_WAVES))

        self._waves = []
        self._last_emission = {}
        self._last_position = {}

    @property
    def waves(self):
        """Live waves in insertion order."""
        return tuple(self._waves)

    def live_count(self):
        return len(self._waves)

    def _should_emit(self, position, pointer_id, now):
        last_emission = self._last_emission.get(pointer_id)
        if last_emission is not None and now - last_emission < self.cooldown_seconds:
            return False

        last_position = self._last_position.get(pointer_id)
        if last_position is None:
            return True
        distance = math.hypot(position[0] - last_position[0], position[1] - last_position[1])
        return distance > self.min_distance

    def add_wave(self, position, pointer_id, now):
        """
        Emit a wave at `position` if the pointer's rate and movement gates allow it.

        At capacity, the wave with the lowest decayed amplitude at `now` is evicted first.

        Args:
            position: (x, y) in view-local coordinates
            pointer_id: Integer identifying the touch/drag
            now: Simulation-clock seconds

        Returns:
            bool: True if a wave was added
        """
        if self.max_waves == 0:
            return False
        if not self._should_emit(position, pointer_id, now):
            return False

        new_wave = Wave(
            origin_x=float(position[0]),
            origin_y=float(position[1]),
            start_time=now,
            amplitude=self.initial_amplitude,
            frequency=self.frequency,
            speed=self.speed,
        )

        if len(self._waves) >= self.max_waves:
            # min() keeps the first of equal candidates
            weakest_index = min(range(len(self._waves)),
                                key=lambda i: self._waves[i].current_amplitude(now, self.damping))
            evicted = self._waves.pop(weakest_index)
            logger.debug("Evicted wave at (%.1f, %.1f) with amplitude %.3f",
                         evicted.origin_x, evicted.origin_y,
                         evicted.current_amplitude(now, self.damping))

        self._waves.append(new_wave)
        self._last_emission[pointer_id] = now
        self._last_position[pointer_id] = (float(position[0]), float(position[1]))
        return True

    def release_pointer(self, pointer_id):
        """Forget throttling state for a lifted pointer."""
        self._last_emission.pop(pointer_id, None)
        self._last_position.pop(pointer_id, None)

    def cleanup(self, now):
        """
        Remove every wave whose decayed amplitude fell below the removal threshold.

        Returns:
            int: Number of waves removed
        """
        before = len(self._waves)
        self._waves = [w for w in self._waves
                       if w.current_amplitude(now, self.damping) >= self.min_amplitude_to_remove]
        removed = before - len(self._waves)
        if removed:
            logger.debug("Cleanup removed %d decayed wave(s), %d live", removed, len(self._waves))
        return removed

    def shader_uniforms(self, now):
        """
        Snapshot live waves into the fixed-arity shader parameter block.

        Args:
            now: Simulation-clock seconds

        Returns:
            WaveShaderParams
        """
        live = self._waves[:constants.MAX_WAVES]
        slots = [
            WaveParams(
                origin=(w.origin_x, w.origin_y),
                amplitude=w.current_amplitude(now, self.damping),
                frequency=w.frequency,
                speed=w.speed,
                start_time=w.start_time,
            )
            for w in live
        ]
        slots.extend([WaveParams.EMPTY] * (constants.MAX_WAVES - len(slots)))

        return WaveShaderParams(
            num_waves=len(live),
            waves=tuple(slots),
            global_damping=self.damping,
            min_amplitude_threshold=self.min_amplitude_for_shader,
        )
