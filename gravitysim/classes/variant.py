# classes/variant.py

from gravitysim.classes.spawner import check_distribution

FORCE_LAWS = ('inverse_square', 'inverse_linear')
VARIANT_NAMES = ('sandbox', 'galaxy', 'blackhole')


class VariantConfig:
    """Physics constants for one variant of the engine.

    The three variants differ only in these values: the force law, whether
    particles can be consumed by a horizon, and whether the lensing projection
    is applied when building snapshots.
    """

    def __init__(self, variant, G, M, dt, particle_mass, force_law,
                 horizon_radius=None, lens_radius=None, tilt=None,
                 shadow_radius=None, min_distance=1.0, initial_momentum=(0.0, 0.0),
                 population=0, initial_distribution=None, respawn_distribution=None):
        self.variant = variant
        self.G = G
        self.M = M
        self.dt = dt
        self.particle_mass = particle_mass
        self.force_law = force_law
        self.horizon_radius = horizon_radius
        self.lens_radius = lens_radius
        self.tilt = tilt
        self.shadow_radius = shadow_radius
        self.min_distance = min_distance
        self.initial_momentum = tuple(initial_momentum)
        self.population = population
        self.initial_distribution = dict(initial_distribution or {})
        # Replacements reuse the start-up disk unless told otherwise
        self.respawn_distribution = dict(respawn_distribution or self.initial_distribution)

    @property
    def has_horizon(self):
        return self.horizon_radius is not None

    @property
    def has_lensing(self):
        return self.lens_radius is not None

    @property
    def guard_radius(self):
        """Distance below which a step either consumes or is skipped."""
        return self.horizon_radius if self.has_horizon else self.min_distance

    def validate(self):
        if self.variant not in VARIANT_NAMES:
            raise ValueError(f"Unknown variant '{self.variant}'. Expected one of {VARIANT_NAMES}.")
        if self.force_law not in FORCE_LAWS:
            raise ValueError(f"Unknown force law '{self.force_law}'. Expected one of {FORCE_LAWS}.")
        for name in ('G', 'M', 'dt', 'particle_mass'):
            value = getattr(self, name)
            if value is None or value <= 0:
                raise ValueError(f"{name} must be positive, got {value}.")
        if self.min_distance is None or self.min_distance <= 0:
            raise ValueError(f"min_distance must be positive, got {self.min_distance}.")
        if self.horizon_radius is not None and self.horizon_radius <= 0:
            raise ValueError(f"horizon_radius must be positive, got {self.horizon_radius}.")
        if self.lens_radius is not None:
            if self.lens_radius <= 0:
                raise ValueError(f"lens_radius must be positive, got {self.lens_radius}.")
            if self.tilt is None:
                raise ValueError("Lensing requires a disk tilt.")
            if self.shadow_radius is not None and self.shadow_radius < 0:
                raise ValueError(f"shadow_radius must not be negative, got {self.shadow_radius}.")
        if self.population < 0:
            raise ValueError(f"population must not be negative, got {self.population}.")
        for distribution in (self.initial_distribution, self.respawn_distribution):
            if distribution:
                check_distribution(distribution)
        return self

    @classmethod
    def from_dict(cls, params):
        """Build a validated configuration from one of the dictionaries in config.py."""
        return configure(**params)

    def __repr__(self):
        return (f"VariantConfig(variant={self.variant}, G={self.G}, M={self.M}, dt={self.dt}, "
                f"force_law={self.force_law}, horizon_radius={self.horizon_radius})")


def configure(variant, G, M, dt, particle_mass, force_law, horizon_radius=None,
              lens_radius=None, tilt=None, **options):
    """Create a VariantConfig, failing fast on values that would break the integrator."""
    config = VariantConfig(variant, G, M, dt, particle_mass, force_law,
                           horizon_radius=horizon_radius, lens_radius=lens_radius,
                           tilt=tilt, **options)
    return config.validate()
