# config.py

# Window / host parameters
WINDOW = {
    'width': 1500,
    'height': 800,
    'target_fps': 100
}

# Sandbox: empty screen, particles spawned on request, pulled toward a fixed centre
SANDBOX = {
    'variant': 'sandbox',
    'G': 0.1,                      # Gravitational constant
    'M': 10e7,                     # Central mass
    'dt': 0.001,                   # Time step
    'particle_mass': 2.0,
    'force_law': 'inverse_linear', # F = G*m*M / r
    'min_distance': 1.0,           # Below this the step is skipped
    'initial_momentum': (500.0, 500.0),
    'population': 0
}

# Spawn patterns for the sandbox (pointer-driven)
SANDBOX_PATTERNS = {
    'single': {'count': 1},
    'circle': {'count': 100, 'radius': 50.0},
    'hline': {'count': 100},
    'vline': {'count': 100}
}

# Spiral galaxy: auto-populated, same force law as the sandbox
GALAXY = {
    'variant': 'galaxy',
    'G': 0.1,
    'M': 10e7,
    'dt': 0.001,
    'particle_mass': 2.0,
    'force_law': 'inverse_linear',
    'min_distance': 1.0,
    'population': 8000,
    'initial_distribution': {
        'r_min': 10.0,
        'r_max': 360.0,            # r_min + min(width, height) / 2 - 50
        'exponent': 2.0,           # Squared distribution clusters stars in the core
        'jitter': 0.05,            # Momentum components scaled by 0.95..1.05
        'speed_factor': 1.0,
        'arms': 3,
        'arm_spread': 0.8,
        'spiral_tightness': 1.5,
        'tint': True,
        'tint_radius': 350.0       # Colour zones are fractions of this radius
    }
}

# Black hole: movable attractor with an event horizon and lensing
BLACKHOLE = {
    'variant': 'blackhole',
    'G': 1.0,
    'M': 5e6,                      # Tuned for stable 1/r^2 orbits
    'dt': 0.005,
    'particle_mass': 2.0,
    'force_law': 'inverse_square', # F = G*m*M / r^2
    'horizon_radius': 50.0,        # Event horizon
    'lens_radius': 68.0,           # Einstein radius RE
    'shadow_radius': 50.0,         # Secondary images inside this are occluded
    'tilt': 0.15,                  # Disk tilt in radians
    'population': 5000,
    'initial_distribution': {
        'r_min': 70.0,
        'r_max': 800.0,
        'exponent': 1.5,           # Concentrate particles near the centre
        'jitter': 0.02,            # Momentum components scaled by 0.98..1.02
        'speed_factor': 1.0
    },
    'respawn_distribution': {
        'r_min': 70.0,
        'r_max': 800.0,
        'exponent': 1.5,
        'jitter': 0.02,
        'speed_factor': 1.0
    }
}

# Alternative black-hole start: particles scattered across the whole screen,
# launched slower than circular so they sweep inward
SCATTER_DISTRIBUTION = {
    'r_min': 100.0,
    'r_max': 1500.0,
    'exponent': 1.0,
    'jitter': 0.02,
    'speed_factor': 0.7
}

VARIANTS = {
    'sandbox': SANDBOX,
    'galaxy': GALAXY,
    'blackhole': BLACKHOLE
}

# Speed classifier: (threshold, bucket, rgb), checked top to bottom with '>'
SPEED_BUCKETS = [
    (220, 'hot-white', (220, 240, 255)),
    (150, 'yellow-white', (255, 230, 180)),
    (100, 'orange', (255, 150, 50))
]
SLOW_BUCKET = ('deep-red', (180, 60, 30))

# Opacity of primary vs lensed (secondary) images
IMAGE_ALPHA = {
    'primary': 255,
    'secondary': 100
}

# Headless run parameters
SIMULATION = {
    'frames': 2000,
    'log_interval': 100,           # Print a status line every N frames
    'seed': None
}
