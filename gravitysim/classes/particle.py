# classes/particle.py

import numpy as np

class Particle:
    def __init__(self, position, momentum, mass=2.0, color=None):
        self.position = np.array(position, dtype=float)
        self.momentum = np.array(momentum, dtype=float)
        self.mass = mass  # Never changes after creation
        self.consumed = False  # Once set, the particle is no longer integrated
        self.color = color  # Optional fixed tint (galaxy stars)

    @property
    def x(self):
        return self.position[0]

    @property
    def y(self):
        return self.position[1]

    @property
    def velocity(self):
        return self.momentum / self.mass

    @property
    def speed(self):
        return np.linalg.norm(self.momentum) / self.mass

    def __repr__(self):
        return (f"Particle(x={self.x:.2f}, y={self.y:.2f}, px={self.momentum[0]:.2f}, "
                f"py={self.momentum[1]:.2f}, consumed={self.consumed})")
