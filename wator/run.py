"""
CLI entry: run a headless simulation and print a short report.

    python -m wator.run --ticks 500 --seed 7
"""
import argparse
import sys
from dataclasses import fields

from .config import WorldConfig, load_config
from .logging_config import configure_logging
from .runner import simulate, summarize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wator", description="Wa-Tor predator/prey simulation")
    parser.add_argument("--config", help="JSON file of world parameters")
    parser.add_argument("--ticks", type=int, default=1000, help="ticks to run (default: 1000)")
    parser.add_argument("--keep-going", action="store_true",
                        help="keep running after a species dies out")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING ...")
    for f in fields(WorldConfig):
        parser.add_argument(f"--{f.name.replace('_', '-')}", dest=f.name, type=int, default=None)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
        cfg = load_config(args.config)
        overrides = {f.name: getattr(args, f.name) for f in fields(WorldConfig)
                     if getattr(args, f.name) is not None}
        cfg = WorldConfig.from_dict({**cfg.to_dict(), **overrides}).validate()
    except ValueError as exc:
        print(f"wator: {exc}", file=sys.stderr)
        return 2

    history = simulate(cfg, args.ticks, stop_on_extinction=not args.keep_going,
                       progress=not args.no_progress)
    report = summarize(history)
    print("Ticks run:", report["ticks"])
    print(f"Fish:   {report['fish']:>8} (peak {report['peak_fish']}, born {report['born_fish']}, eaten {report['eaten']})")
    print(f"Sharks: {report['sharks']:>8} (peak {report['peak_sharks']}, born {report['born_sharks']}, starved {report['starved']})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
