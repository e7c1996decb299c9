# classes/lensing.py

import numpy as np

BETA_MIN = 0.1  # Keeps the image angle defined at the centre


def primary_radius(beta, lens_radius):
    return 0.5 * (beta + np.sqrt(beta * beta + 4 * lens_radius * lens_radius))


def secondary_radius(beta, lens_radius):
    return 0.5 * (np.sqrt(beta * beta + 4 * lens_radius * lens_radius) - beta)


class LensingProjector:
    """Thin-lens approximation of a compact mass seen through a tilted disk.

    Every particle yields a primary image pushed outward from its true
    position. Particles on the far side of the attractor (w > 0) also yield a
    secondary image on the opposite side, pulled inward, unless it falls inside
    the shadow.
    """

    def __init__(self, lens_radius, tilt, shadow_radius=0.0):
        self.lens_radius = lens_radius
        self.tilt = tilt
        self.shadow_radius = shadow_radius or 0.0
        self.sin_tilt = np.sin(tilt)
        self.cos_tilt = np.cos(tilt)

    def project(self, dx, dy):
        """Image offsets for a particle at (dx, dy) relative to the attractor.

        Returns a list of (offset_x, offset_y, is_secondary) tuples, primary first.
        """
        u = dx
        v = dy * self.sin_tilt
        w = dy * self.cos_tilt  # Depth; positive means behind the attractor

        beta = max(np.sqrt(u * u + v * v), BETA_MIN)
        phi = np.arctan2(v, u)

        r_plus = primary_radius(beta, self.lens_radius)
        images = [(r_plus * np.cos(phi), r_plus * np.sin(phi), False)]

        if w > 0:
            r_minus = secondary_radius(beta, self.lens_radius)
            if r_minus > self.shadow_radius:
                images.append((r_minus * np.cos(phi + np.pi), r_minus * np.sin(phi + np.pi), True))
        return images

    def line_of_sight_velocity(self, momentum):
        return -momentum[1] * self.cos_tilt
