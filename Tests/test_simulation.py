import numpy as np
import pytest

from gravitysim.classes.snapshot import RenderPoint
from gravitysim.main import initialize_simulation, main


def test_blackhole_snapshot_has_primary_for_each_particle(blackhole_sim):
    blackhole_sim.initialize_population(200)
    snapshot = blackhole_sim.advance_frame()

    assert snapshot.frame == 1
    assert len(snapshot.primary()) == 200
    assert len(snapshot.secondary()) <= 200
    for point in snapshot.points:
        assert isinstance(point, RenderPoint)
        assert np.isfinite(point.render_x) and np.isfinite(point.render_y)


def test_blackhole_primary_images_are_pushed_outward(blackhole_sim):
    blackhole_sim.initialize_population(100)
    snapshot = blackhole_sim.advance_frame()
    ax, ay = snapshot.attractor
    for point in snapshot.primary():
        # r_plus is never smaller than the lens radius
        assert np.hypot(point.render_x - ax, point.render_y - ay) >= 68.0 - 1e-9


def test_blackhole_secondary_images_are_outside_shadow(blackhole_sim):
    blackhole_sim.initialize_population(400)
    snapshot = blackhole_sim.advance_frame()
    ax, ay = snapshot.attractor
    for point in snapshot.secondary():
        assert np.hypot(point.render_x - ax, point.render_y - ay) > 50.0


def test_galaxy_renders_true_positions(galaxy_sim):
    galaxy_sim.initialize_population(50)
    snapshot = galaxy_sim.advance_frame()
    assert not snapshot.secondary()
    for point, particle in zip(snapshot.points, galaxy_sim.population):
        assert point.render_x == pytest.approx(particle.x)
        assert point.render_y == pytest.approx(particle.y)
        assert point.color == particle.color


def test_snapshot_carries_speed_bucket(blackhole_sim):
    blackhole_sim.initialize_population(100)
    snapshot = blackhole_sim.advance_frame()
    for point in snapshot.points:
        if point.speed > 220:
            assert point.bucket == 'hot-white'
        elif point.speed <= 100:
            assert point.bucket == 'deep-red'


def test_attractor_follows_pointer(blackhole_sim):
    blackhole_sim.initialize_population(10)
    snapshot = blackhole_sim.advance_frame((100.0, 120.0))
    assert snapshot.attractor == (100.0, 120.0)
    # No position means the attractor stays put
    assert blackhole_sim.advance_frame().attractor == (100.0, 120.0)


def test_sandbox_spawn_request(sandbox_sim):
    sandbox_sim.request_spawn('circle', (300.0, 300.0))
    sandbox_sim.request_spawn('single', (310.0, 300.0))
    sandbox_sim.advance_frame()
    assert len(sandbox_sim.population) == 101

    with pytest.raises(ValueError):
        sandbox_sim.request_spawn('blob', (0.0, 0.0))


def test_history_and_energy_tracking(galaxy_sim):
    galaxy_sim.initialize_population(20)
    galaxy_sim.track_energy = True
    galaxy_sim.run(5, log_interval=0)

    assert [entry['frame'] for entry in galaxy_sim.history] == [1, 2, 3, 4, 5]
    assert len(galaxy_sim.energies) == 5
    assert np.all(np.isfinite(galaxy_sim.energies))


def test_run_prints_status_lines(blackhole_sim, capsys):
    blackhole_sim.initialize_population(30)
    snapshot = blackhole_sim.run(4, log_interval=2)
    out = capsys.readouterr().out

    assert snapshot.frame == 4
    assert "Frame: 2" in out
    assert "Frame: 4" in out
    assert "Total matter consumed" in out


def test_initialize_simulation_per_variant():
    for variant in ('sandbox', 'galaxy', 'blackhole'):
        sim = initialize_simulation(variant, seed=1)
        assert sim.config.variant == variant
        assert (sim.attractor.x, sim.attractor.y) == (750.0, 400.0)
    assert initialize_simulation('blackhole').projector is not None
    assert initialize_simulation('galaxy').projector is None


def test_main_headless(capsys):
    main(["--variant", "blackhole", "--frames", "3", "--particles", "20",
          "--seed", "4", "--log-interval", "1", "--no-plot"])
    out = capsys.readouterr().out
    assert "Variant: blackhole" in out
    assert "Simulation completed after 3 frames." in out


def test_main_sandbox_with_plots(capsys):
    main(["--variant", "sandbox", "--frames", "2", "--spawn", "hline", "--seed", "4",
          "--log-interval", "0", "--energy"])
    assert "Population size: 100" in capsys.readouterr().out


def test_lensed_points_carry_line_of_sight_velocity(blackhole_sim, galaxy_sim):
    blackhole_sim.initialize_population(30)
    snapshot = blackhole_sim.advance_frame()
    cos_tilt = np.cos(blackhole_sim.config.tilt)
    for point, particle in zip(snapshot.primary(), blackhole_sim.population):
        assert point.vz == pytest.approx(-particle.momentum[1] * cos_tilt)

    galaxy_sim.initialize_population(10)
    assert all(point.vz is None for point in galaxy_sim.advance_frame().points)
