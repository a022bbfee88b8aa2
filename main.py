"""
Entrypoint for Moon Lander.

Parses window / seed / audio / report options and runs the game loop.
"""
import argparse
from pathlib import Path

from moon_lander import config as C
from moon_lander.game_loop import run


def main():
    parser = argparse.ArgumentParser(description="Moon Lander: touch down on a pad, gently and upright")
    parser.add_argument("--width", type=int, default=C.WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=C.HEIGHT, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=C.FPS, help="Frame (and simulation tick) rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Seed terrain and spawn randomness")
    parser.add_argument("--mute", action="store_true", help="Disable sound cues")
    parser.add_argument("--no-footprint", action="store_false", dest="footprint",
                        help="Only test ground contact under the craft's centre")
    parser.add_argument("--report-dir", type=Path, default=None, dest="report_dir",
                        help="Export the flight log (CSV/JSON) into this directory on exit")
    args = parser.parse_args()

    run(
        width=args.width,
        height=args.height,
        fps=args.fps,
        seed=args.seed,
        mute=args.mute,
        footprint=args.footprint,
        report_dir=args.report_dir,
    )


if __name__ == "__main__":
    main()
