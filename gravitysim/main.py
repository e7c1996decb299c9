import argparse

from gravitysim.config import WINDOW, VARIANTS, SIMULATION, SCATTER_DISTRIBUTION

from gravitysim.classes.attractor import Attractor
from gravitysim.classes.variant import VariantConfig
from gravitysim.classes.spawner import Spawner
from gravitysim.classes.simulation import Simulation

# -------------------- Main Simulation Code --------------------
def initialize_config(variant):
    return VariantConfig.from_dict(VARIANTS[variant])

def initialize_attractor(config):
    centre = [WINDOW['width'] / 2, WINDOW['height'] / 2]  # Window centre
    return Attractor(
        mass=config.M,
        G=config.G,
        position=centre,
        horizon_radius=config.horizon_radius
    )

def initialize_simulation(variant, seed=None):
    config = initialize_config(variant)
    attractor = initialize_attractor(config)
    spawner = Spawner(config, seed=seed, width=WINDOW['width'], height=WINDOW['height'])
    return Simulation(config=config, attractor=attractor, spawner=spawner)

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Particles orbiting a dominant point mass.")
    parser.add_argument("--variant", choices=sorted(VARIANTS), default="blackhole",
                        help="Which configuration of the engine to run.")
    parser.add_argument("--frames", type=int, default=SIMULATION['frames'],
                        help="Number of frames to advance.")
    parser.add_argument("--particles", type=int, default=None,
                        help="Override the variant's start-up population.")
    parser.add_argument("--scatter", action="store_true",
                        help="Black hole only: scatter the start-up population across the screen.")
    parser.add_argument("--spawn", choices=["single", "circle", "hline", "vline"], default="circle",
                        help="Sandbox only: pattern spawned at the window centre before running.")
    parser.add_argument("--seed", type=int, default=SIMULATION['seed'])
    parser.add_argument("--log-interval", type=int, default=SIMULATION['log_interval'])
    parser.add_argument("--energy", action="store_true", help="Track and plot total energy.")
    parser.add_argument("--no-plot", action="store_true", help="Skip the matplotlib figures.")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    # Initialize components
    sim = initialize_simulation(args.variant, seed=args.seed)
    distribution = SCATTER_DISTRIBUTION if (args.scatter and args.variant == 'blackhole') else None
    sim.initialize_population(args.particles, distribution)
    sim.track_energy = args.energy

    if args.variant == 'sandbox':
        # Spawn off-centre so the pattern falls toward the attractor
        sim.request_spawn(args.spawn, (WINDOW['width'] / 4, WINDOW['height'] / 4))

    print(f"Variant: {sim.config.variant}, starting population: {len(sim.population)}")

    # Run the simulation
    sim.run(args.frames, log_interval=args.log_interval)

    if args.no_plot:
        return

    # Plot the final frame
    sim.plot_snapshot()
    sim.plot_population()
    if args.energy:
        sim.plot_energy()

if __name__ == "__main__":
    main()
