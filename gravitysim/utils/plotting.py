# utils/plotting.py

import matplotlib.pyplot as plt
import numpy as np
from gravitysim.config import IMAGE_ALPHA
from gravitysim.utils.colors import bucket_rgb, doppler_tint, image_rgba


def point_rgba(point):
    if point.color is not None:
        return tuple(point.color) + (255,)
    if point.vz is None:
        return image_rgba(point.bucket, point.is_secondary)
    # Lensed view: beam the bucket colour by the line-of-sight velocity
    rgb, brightness = doppler_tint(bucket_rgb(point.bucket), point.vz)
    alpha = IMAGE_ALPHA['secondary'] if point.is_secondary else IMAGE_ALPHA['primary']
    return rgb + (min(255, int(alpha * brightness)),)



def plot_snapshot(snapshot, shadow_radius=None, title="Snapshot", show=True):
    if snapshot is None or not snapshot.points:
        print("No snapshot data to plot.")
        return None

    fig = plt.figure(figsize=(10, 6))
    ax = plt.gca()
    ax.set_facecolor('black')

    # Lensed images sit behind the shadow, primary images in front of it
    secondary = snapshot.secondary()
    if secondary:
        xs, ys = zip(*[(p.render_x, p.render_y) for p in secondary])
        colors = np.array([point_rgba(p) for p in secondary]) / 255.0
        ax.scatter(xs, ys, c=colors, s=2, marker='s', linewidths=0, label='Secondary image')

    ax_x, ax_y = snapshot.attractor
    if shadow_radius:
        shadow = plt.Circle((ax_x, ax_y), shadow_radius, color='black', zorder=2)
        ring = plt.Circle((ax_x, ax_y), shadow_radius, fill=False, color=(1.0, 0.9, 0.78, 0.3),
                          linewidth=3, zorder=3)
        ax.add_artist(shadow)
        ax.add_artist(ring)
    else:
        ax.scatter([ax_x], [ax_y], color='yellow', s=120, zorder=3, label='Attractor')

    primary = snapshot.primary()
    if primary:
        xs, ys = zip(*[(p.render_x, p.render_y) for p in primary])
        colors = np.array([point_rgba(p) for p in primary]) / 255.0
        ax.scatter(xs, ys, c=colors, s=2, marker='s', linewidths=0, zorder=4, label='Particle')

    plt.xlabel("x")
    plt.ylabel("y")
    plt.title(f"{title} | Particles: {snapshot.active_count} | Consumed: {snapshot.total_consumed}")
    plt.axis('equal')
    ax.invert_yaxis()  # Screen coordinates grow downward
    if show:
        plt.show()
    return fig


def plot_population(history, show=True):
    """Plot active particles and consumption per frame."""
    if not history:
        print("No population data to plot.")
        return None

    frames = [entry['frame'] for entry in history]
    fig = plt.figure()
    plt.plot(frames, [entry['active'] for entry in history], label='Active')
    plt.plot(frames, [entry['consumed'] for entry in history], label='Consumed this frame')
    plt.xlabel("Frame")
    plt.ylabel("Particles")
    plt.title("Population Over Time")
    plt.legend(loc="best")
    plt.grid(True)
    if show:
        plt.show()
    return fig


def plot_energy(energies, dt, show=True):
    if not energies:
        print("No energy data to plot.")
        return None

    time = np.arange(len(energies)) * dt
    fig = plt.figure()
    plt.plot(time, energies)
    plt.xlabel("Time")
    plt.ylabel("Total Energy")
    plt.title("Total Energy Over Time")
    plt.grid(True)
    if show:
        plt.show()
    return fig
