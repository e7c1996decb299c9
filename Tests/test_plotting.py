from gravitysim.classes.snapshot import RenderPoint
from gravitysim.utils.plotting import plot_energy, plot_population, plot_snapshot, point_rgba


def test_plot_snapshot_blackhole(blackhole_sim):
    blackhole_sim.initialize_population(40)
    snapshot = blackhole_sim.advance_frame()
    fig = plot_snapshot(snapshot, shadow_radius=50.0, show=False)
    assert fig is not None
    assert len(fig.axes[0].collections) >= 1


def test_plot_snapshot_galaxy(galaxy_sim):
    galaxy_sim.initialize_population(40)
    fig = plot_snapshot(galaxy_sim.advance_frame(), show=False)
    assert fig is not None


def test_plot_without_data(capsys):
    assert plot_snapshot(None, show=False) is None
    assert plot_population([], show=False) is None
    assert plot_energy([], 0.01, show=False) is None
    out = capsys.readouterr().out
    assert "No snapshot data to plot." in out


def test_plot_history(galaxy_sim):
    galaxy_sim.initialize_population(10)
    galaxy_sim.track_energy = True
    galaxy_sim.run(3, log_interval=0)
    assert plot_population(galaxy_sim.history, show=False) is not None
    assert plot_energy(galaxy_sim.energies, galaxy_sim.config.dt, show=False) is not None


def test_point_colour_is_beamed_by_line_of_sight_velocity():
    approaching = RenderPoint(0.0, 0.0, 120.0, 'orange', True, None, 100.0)
    receding = RenderPoint(0.0, 0.0, 120.0, 'orange', True, None, -100.0)
    still = RenderPoint(0.0, 0.0, 120.0, 'orange', True)

    assert point_rgba(still) == (255, 150, 50, 100)
    assert point_rgba(approaching) == (205, 150, 125, 175)
    assert point_rgba(receding) == (255, 150, 0, 25)
