import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: watch a perfect maze being carved step by step")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Carve a new maze")
    gen_parser.add_argument("--width", type=int, default=20, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=20, help="Maze Height")
    gen_parser.add_argument("--start-x", type=int, default=0, help="Start column (clamped into the maze)")
    gen_parser.add_argument("--start-y", type=int, default=0, help="Start row, counted from the bottom (clamped into the maze)")
    gen_parser.add_argument("--delay", type=float, default=0.05, help="Seconds between wall-breaks")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time headless carving with no step delay")
    bench_parser.add_argument("--size", type=int, default=500, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    from maze_carver.core.config import GenerationConfig
    from maze_carver.core.errors import MazeError
    from maze_carver.core.session import MazeSession

    if args.command == "generate":
        config = GenerationConfig(
            width=args.width,
            height=args.height,
            start=(args.start_x, args.start_y),
            step_delay=args.delay,
            seed=args.seed,
        )
        # Malformed configuration must stop us before anything is carved
        try:
            config.validate()
        except (MazeError, ValueError) as e:
            parser.error(str(e))

        session = MazeSession(config)
        logger.info(f"Carving {config.width}x{config.height} maze, delay {config.step_delay}s...")

        if args.visual or args.record:
            logger.info("Visual mode enabled - Opening window...")
            from maze_carver.viz.renderer import Renderer
            renderer = Renderer(session, record=args.record)

            if args.record:
                import datetime
                if not os.path.exists("recordings"):
                    os.makedirs("recordings")

                ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
                fname = f"carve_{config.width}x{config.height}_{ts}.mp4"

                renderer.recorder.output_file = os.path.join("recordings", fname)
                logger.info(f"Recording video to {renderer.recorder.output_file}")

            renderer.init_window()
            renderer.regenerate()
            renderer.run_loop()
        else:
            logger.info("Headless generation...")
            session.regenerate()
            session.scheduler.run_blocking()
            print(f"Done. {session.scheduler.steps_taken} steps.")

            from maze_carver.core.complexity import MazeStats
            stats = MazeStats.calculate_stats(session.grid)
            logger.info(f"Stats: {stats}")

    elif args.command == "benchmark":
        import time
        from maze_carver.core.complexity import MazeStats

        logger.info(f"Carving {args.size}x{args.size} with no delay...")
        session = MazeSession(GenerationConfig(width=args.size, height=args.size, step_delay=0.0, seed=args.seed))

        t0 = time.time()
        try:
            session.regenerate()
        except MazeError as e:
            parser.error(str(e))
        session.scheduler.run_blocking()
        duration = time.time() - t0

        cells = args.size * args.size
        print(f"\n{'CELLS':<12} | {'STEPS':<12} | {'TIME (s)':<10} | {'STEPS/SEC':<12}")
        print("-" * 54)
        rate = session.scheduler.steps_taken / duration if duration > 0 else 0
        print(f"{cells:<12,} | {session.scheduler.steps_taken:<12,} | {duration:<10.4f} | {rate:<12,.0f}")
        logger.info(f"Perfect: {MazeStats.is_perfect(session.grid)}")

if __name__ == "__main__":
    main()
