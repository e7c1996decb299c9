# classes/integrator.py

import numpy as np


def distance_to(position, attractor_x, attractor_y):
    dx = position[0] - attractor_x
    dy = position[1] - attractor_y
    return np.sqrt(dx * dx + dy * dy)


def force_magnitude(G, particle_mass, M, r, force_law):
    if force_law == 'inverse_square':
        return (G * particle_mass * M) / r ** 2
    return (G * particle_mass * M) / r


class Integrator:
    """Semi-implicit Euler step of a particle toward a single attractor."""

    def __init__(self, config):
        self.config = config
        self.G = config.G
        self.M = config.M
        self.dt = config.dt
        self.force_law = config.force_law
        self.guard_radius = config.guard_radius
        self.consumes = config.has_horizon

    def step(self, particle, attractor_x, attractor_y):
        """Advance one particle by one time step.

        Returns True when the particle crossed the horizon during this step.
        """
        if particle.consumed:
            return False

        r = distance_to(particle.position, attractor_x, attractor_y)

        if r < self.guard_radius:
            if self.consumes:
                particle.consumed = True
                return True
            return False  # Too close to resolve, leave untouched

        force = force_magnitude(self.G, particle.mass, self.M, r, self.force_law)
        theta = np.arctan2(attractor_y - particle.position[1], attractor_x - particle.position[0])
        force_vector = np.array([force * np.cos(theta), force * np.sin(theta)])

        # Momentum first, then position with the updated momentum
        particle.momentum += force_vector * self.dt
        particle.position += (particle.momentum / particle.mass) * self.dt
        return False

    def step_all(self, particles, attractor_x, attractor_y):
        """Integrate every particle and return the indices consumed in this pass."""
        consumed = []
        for index, particle in enumerate(particles):
            if self.step(particle, attractor_x, attractor_y):
                consumed.append(index)
        return consumed

    def kinetic_energy(self, particle):
        return 0.5 * np.dot(particle.momentum, particle.momentum) / particle.mass

    def potential_energy(self, particle, attractor_x, attractor_y):
        r = distance_to(particle.position, attractor_x, attractor_y)
        r = max(r, self.guard_radius)
        if self.force_law == 'inverse_square':
            return -self.G * self.M * particle.mass / r
        # F = G*M*m/r integrates to a logarithmic potential
        return self.G * self.M * particle.mass * np.log(r)
