# classes/attractor.py

import numpy as np

class Attractor:
    def __init__(self, mass, G, position, horizon_radius=None):
        self.mass = mass  # Central mass M
        self.G = G  # Gravitational constant
        self.horizon_radius = horizon_radius  # None when nothing is ever consumed
        self.position = np.array(position, dtype=float)
        self.home = self.position.copy()  # Where the attractor rests when not driven

    def move_to(self, position):
        self.position = np.array(position, dtype=float)

    def park(self):
        self.position = self.home.copy()

    @property
    def x(self):
        return self.position[0]

    @property
    def y(self):
        return self.position[1]
