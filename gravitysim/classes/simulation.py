import threading

from gravitysim.classes.integrator import Integrator
from gravitysim.classes.lensing import LensingProjector
from gravitysim.classes.population import Population
from gravitysim.classes.snapshot import RenderPoint, Snapshot
from gravitysim.config import SANDBOX_PATTERNS
from gravitysim.utils.colors import classify_speed
from gravitysim.utils.plotting import plot_snapshot as plot_snapshot_util
from gravitysim.utils.plotting import plot_population, plot_energy as plot_energy_util


class Simulation:
    def __init__(self, config, attractor, spawner):
        self.config = config
        self.attractor = attractor
        self.spawner = spawner
        self.integrator = Integrator(config)
        self.population = Population(spawner, attractor)
        self.projector = None
        if config.has_lensing:
            self.projector = LensingProjector(config.lens_radius, config.tilt, config.shadow_radius)

        self.frame = 0
        self.pending = []  # Particles waiting to be injected at the start of the next frame
        self._pending_lock = threading.Lock()  # Injection may come from another thread
        self.history = []  # Per-frame counters for plotting
        self.energies = []  # Total energy per frame, when tracked
        self.track_energy = False
        self.last_snapshot = None

    # -------------------- Population --------------------
    def initialize_population(self, count=None, distribution=None):
        count = self.config.population if count is None else count
        self.population.initialize(count, distribution)

    def inject_particle(self, position, momentum=None):
        """Queue a single particle; it joins the population on the next frame."""
        particle = self.spawner.spawn_at(position, momentum)
        with self._pending_lock:
            self.pending.append(particle)

    def request_spawn(self, pattern, pointer):
        if pattern not in SANDBOX_PATTERNS:
            raise ValueError(f"Unknown spawn pattern '{pattern}'.")
        params = SANDBOX_PATTERNS[pattern]
        particles = self.spawner.spawn_pattern(
            pattern, pointer, count=params.get('count'), radius=params.get('radius', 50.0))
        with self._pending_lock:
            self.pending.extend(particles)

    # -------------------- Frame --------------------
    def advance_frame(self, attractor_position=None):
        """Inject, integrate, replace consumed particles and return the finished snapshot."""
        if attractor_position is not None:
            self.attractor.move_to(attractor_position)
        ax, ay = self.attractor.x, self.attractor.y

        with self._pending_lock:
            pending, self.pending = self.pending, []
        if pending:
            self.population.extend(pending)

        # Integration pass only marks; removal happens afterwards
        consumed = self.integrator.step_all(self.population.particles, ax, ay)
        active_count = len(self.population) - len(consumed)

        consumed_count = self.population.replace_consumed(consumed)

        self.frame += 1
        snapshot = Snapshot(
            frame=self.frame,
            points=self.build_points(ax, ay),
            active_count=active_count,
            consumed_count=consumed_count,
            total_consumed=self.population.total_consumed,
            attractor=(float(ax), float(ay)),
        )
        self.history.append({
            'frame': self.frame,
            'active': active_count,
            'consumed': consumed_count,
            'total_consumed': self.population.total_consumed,
        })
        if self.track_energy:
            self.energies.append(self.calculate_total_energy())
        self.last_snapshot = snapshot
        return snapshot

    def build_points(self, ax, ay):
        points = []
        for particle in self.population:
            speed = float(particle.speed)
            bucket = classify_speed(speed)
            if self.projector is None:
                points.append(RenderPoint(float(particle.x), float(particle.y), speed, bucket,
                                          False, particle.color))
                continue
            vz = float(self.projector.line_of_sight_velocity(particle.momentum))
            for offset_x, offset_y, is_secondary in self.projector.project(particle.x - ax, particle.y - ay):
                points.append(RenderPoint(float(ax + offset_x), float(ay + offset_y), speed, bucket,
                                          is_secondary, particle.color, vz))
        return tuple(points)

    # -------------------- Diagnostics --------------------
    def calculate_total_energy(self):
        ax, ay = self.attractor.x, self.attractor.y
        total = 0.0
        for particle in self.population:
            total += self.integrator.kinetic_energy(particle)
            total += self.integrator.potential_energy(particle, ax, ay)
        return total

    # -------------------- Headless loop --------------------
    def run(self, frames, log_interval=100):
        """Advance a fixed number of frames with the attractor where it is."""
        snapshot = self.last_snapshot
        for _ in range(frames):
            snapshot = self.advance_frame()

            if log_interval and self.frame % log_interval == 0:
                print(f"Frame: {self.frame}, Particles: {snapshot.active_count}, "
                      f"Consumed this frame: {snapshot.consumed_count}, "
                      f"Total consumed: {snapshot.total_consumed}")

        # -------------------- Final Summary --------------------
        print(f"Simulation completed after {self.frame} frames.")
        print(f"Population size: {len(self.population)}")
        if self.config.has_horizon:
            print(f"Total matter consumed: {self.population.total_consumed}")
        return snapshot

    def plot_snapshot(self):
        plot_snapshot_util(
            snapshot=self.last_snapshot,
            shadow_radius=self.config.shadow_radius if self.config.has_lensing else None,
            title=f"{self.config.variant.capitalize()} - frame {self.frame}"
        )

    def plot_population(self):
        plot_population(self.history)

    def plot_energy(self):
        """Plot the total energy of the population over time."""
        plot_energy_util(self.energies, self.config.dt)
