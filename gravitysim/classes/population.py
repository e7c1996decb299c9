# classes/population.py

from gravitysim.classes.spawner import check_distribution


class Population:
    def __init__(self, spawner, attractor):
        self.spawner = spawner
        self.attractor = attractor
        self.particles = []  # Order carries no meaning
        self.total_consumed = 0  # Matter swallowed since start
        self.distribution = None  # Distribution the population was started with
        self._respawn_checked = False

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def initialize(self, count, distribution=None):
        if count < 0:
            raise ValueError(f"Particle count must not be negative, got {count}.")
        distribution = distribution if distribution is not None else self.spawner.config.initial_distribution
        if count:
            check_distribution(distribution)
        self.distribution = distribution
        self._respawn_checked = False
        self.particles = [self.spawner.spawn_orbiting(self.attractor, distribution) for _ in range(count)]

    def extend(self, particles):
        self.particles.extend(particles)

    def replace_consumed(self, indices, distribution=None):
        """Remove the consumed particles and spawn exactly one replacement for each.

        Runs after the integration pass so the list is never modified while it
        is being iterated.
        """
        if not indices:
            return 0
        if distribution is None:
            distribution = self.respawn_distribution()
        removed = set(indices)
        self.particles = [p for i, p in enumerate(self.particles) if i not in removed]
        for _ in removed:
            self.particles.append(self.spawner.spawn_orbiting(self.attractor, distribution))
        self.total_consumed += len(removed)
        return len(removed)

    def respawn_distribution(self):
        """Replacement disk: the variant's respawn distribution, else the one used at start-up."""
        distribution = self.spawner.config.respawn_distribution or self.distribution or {}
        if not self._respawn_checked:
            check_distribution(distribution)
            self._respawn_checked = True
        return distribution
