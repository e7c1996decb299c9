# classes/spawner.py

import numpy as np
from gravitysim.classes.particle import Particle

# Radial tint zones for galaxy stars: (upper bound of r / tint radius, rgb)
GALAXY_TINTS = [
    (0.2, (200, 220, 255)),  # Blue-white core
    (0.5, (255, 200, 100)),  # Yellowish
    (0.8, (255, 100, 50)),   # Red-orange
]
GALAXY_OUTER_TINT = (150, 50, 150)  # Purple outskirts


def orbital_speed(G, M, r, force_law):
    """Speed of a circular orbit at radius r under the given force law."""
    if force_law == 'inverse_square':
        return np.sqrt(G * M / r)
    # G*M*m/r = m*v^2/r  =>  v^2 = G*M, independent of r
    return np.sqrt(G * M)


def sample_radius(rng, r_min, r_max, exponent):
    return r_min + rng.random() ** exponent * (r_max - r_min)


def spiral_angle(r, arm_index, arms, spiral_tightness, jitter):
    """Base arm angle plus a logarithmic spiral term plus angular jitter."""
    return arm_index * (2 * np.pi) / arms + np.log(r) * spiral_tightness + jitter


def galaxy_tint(r, r_max, brightness_drop=0):
    dist_ratio = r / r_max
    color = GALAXY_OUTER_TINT
    for bound, rgb in GALAXY_TINTS:
        if dist_ratio < bound:
            color = rgb
            break
    return tuple(max(0, channel - brightness_drop) for channel in color)


def check_distribution(distribution):
    r_min = distribution.get('r_min', 0.0)
    r_max = distribution.get('r_max', 0.0)
    if r_min <= 0:
        raise ValueError(f"r_min must be positive, got {r_min}.")
    if r_max < r_min:
        raise ValueError(f"r_max ({r_max}) must not be smaller than r_min ({r_min}).")
    if distribution.get('exponent', 1.0) <= 0:
        raise ValueError(f"exponent must be positive, got {distribution.get('exponent')}.")
    arms = distribution.get('arms')
    if arms is not None and arms < 1:
        raise ValueError(f"arms must be at least 1, got {arms}.")


class Spawner:
    def __init__(self, config, seed=None, width=1500, height=800):
        self.config = config
        self.rng = np.random.default_rng(seed)
        self.width = width  # Extent used by the sandbox line patterns
        self.height = height

    def spawn_orbiting(self, attractor, distribution=None):
        """Create a particle launched tangentially so that it traces a near-circular orbit."""
        config = self.config
        distribution = distribution if distribution is not None else config.initial_distribution

        r = sample_radius(self.rng, distribution['r_min'], distribution['r_max'],
                          distribution.get('exponent', 1.0))

        arms = distribution.get('arms')
        if arms:
            arm_index = self.rng.integers(arms)
            jitter = (self.rng.random() - 0.5) * distribution.get('arm_spread', 0.0)
            angle = spiral_angle(r, arm_index, arms, distribution.get('spiral_tightness', 0.0), jitter)
        else:
            angle = self.rng.random() * 2 * np.pi

        position = attractor.position + np.array([np.cos(angle), np.sin(angle)]) * r

        speed = orbital_speed(attractor.G, attractor.mass, r, config.force_law)
        speed *= distribution.get('speed_factor', 1.0)
        vel_angle = angle + np.pi / 2  # Tangent to the position angle
        momentum = np.array([np.cos(vel_angle), np.sin(vel_angle)]) * speed * config.particle_mass

        # Each component is jittered separately so orbits are not perfectly circular
        jitter = distribution.get('jitter', 0.0)
        if jitter:
            momentum *= 1.0 - jitter + self.rng.random(2) * 2 * jitter

        color = None
        if distribution.get('tint'):
            tint_radius = distribution.get('tint_radius', distribution['r_max'])
            color = galaxy_tint(r, tint_radius, int(self.rng.integers(50)))

        return Particle(position, momentum, mass=config.particle_mass, color=color)

    def spawn_at(self, position, momentum=None):
        if momentum is None:
            momentum = self.config.initial_momentum
        return Particle(position, momentum, mass=self.config.particle_mass)

    def spawn_pattern(self, pattern, pointer, count=None, radius=50.0):
        """Particles for one sandbox spawn request at the pointer position."""
        px, py = pointer
        if pattern == 'single':
            return [self.spawn_at((px, py))]

        count = 100 if count is None else count
        particles = []
        if pattern == 'circle':
            for _ in range(count):
                ang = self.rng.random() * 2 * np.pi
                hyp = np.sqrt(self.rng.random()) * radius  # Uniform over the disk area
                particles.append(self.spawn_at((px + np.cos(ang) * hyp, py + np.sin(ang) * hyp)))
        elif pattern == 'hline':
            for x in self.rng.integers(self.width, size=count):
                particles.append(self.spawn_at((float(x), py)))
        elif pattern == 'vline':
            for y in self.rng.integers(self.height, size=count):
                particles.append(self.spawn_at((px, float(y))))
        else:
            raise ValueError(f"Unknown spawn pattern '{pattern}'.")
        return particles
