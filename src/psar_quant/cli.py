"""
PSAR Quant Command Line Interface.

Usage:
    psar-quant --help
    psar-quant info
    psar-quant presets list --file presets.yaml
    psar-quant compute prices.csv --preset aggressive --trim-warmup
    psar-quant compute prices.csv --step 0.02 --max-factor 0.2 --output sar.csv
"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

EXIT_USAGE = 1
EXIT_BAD_INPUT = 2


def _fail(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)
    sys.exit(EXIT_BAD_INPUT)


def cmd_info(args) -> None:
    """Show package information."""
    from . import __version__
    from .common.config_manager import ConfigError, list_presets

    try:
        presets = list_presets(args.settings.presets_file)
    except ConfigError as exc:
        _fail(str(exc))

    print(f"PSAR Quant v{__version__}")
    print(f"\nDefaults: step={args.settings.acceleration_step} "
          f"max={args.settings.max_acceleration_factor} "
          f"initial={args.settings.initial_step or args.settings.acceleration_step}")
    print(f"Available Presets: {', '.join(presets)}")


def cmd_presets_list(args) -> None:
    """List parameter presets."""
    from .common.config_manager import ConfigError, load_presets

    try:
        presets = load_presets(args.file or args.settings.presets_file)
    except ConfigError as exc:
        _fail(str(exc))

    print(f"Available Presets ({len(presets)}):\n")
    for name in sorted(presets):
        config = presets[name]
        initial = config.get("initial_step") or config["acceleration_step"]
        description = str(config.get("description", ""))[:60]
        line = (f"  - {name}: step={config['acceleration_step']} "
                f"max={config['max_acceleration_factor']} initial={initial}")
        print(f"{line}  {description}" if description else line)


def _resolve_parameters(args):
    from .common.config_manager import get_preset
    from .engines.types import SarParameters

    params = args.settings.parameters
    if args.preset:
        params = get_preset(args.preset, args.presets_file or args.settings.presets_file)

    initial = params.initial_step
    if args.initial_step is not None:
        initial = args.initial_step
    elif args.step is not None and params.initial_step == params.acceleration_step:
        # standard variant: initial step follows an overridden step
        initial = None

    return SarParameters(
        acceleration_step=args.step if args.step is not None else params.acceleration_step,
        max_acceleration_factor=(
            args.max_factor if args.max_factor is not None else params.max_acceleration_factor
        ),
        initial_step=initial,
    )


def cmd_compute(args) -> None:
    """Compute Parabolic SAR for a CSV of OHLC prices."""
    import pandas as pd

    from .common.config_manager import ConfigError
    from .engines.errors import SarEngineError
    from .signals.parabolic_sar_signals import build_parabolic_sar_frame

    try:
        params = _resolve_parameters(args)
    except (ConfigError, ValueError) as exc:
        _fail(str(exc))
    logger.debug("Resolved parameters %s", params.as_dict(), extra={"preset": args.preset})

    try:
        prices = pd.read_csv(args.prices)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        _fail(f"cannot read {args.prices}: {exc}")

    try:
        frame = build_parabolic_sar_frame(
            prices,
            params.acceleration_step,
            params.max_acceleration_factor,
            params.initial_step,
            timestamp_column=args.timestamp_column,
            remove_warmup=args.trim_warmup,
        )
    except SarEngineError as exc:
        _fail(str(exc))

    if args.output:
        frame.to_csv(args.output, index=False)
        print(f"Wrote {len(frame)} rows to {args.output}")
    else:
        sys.stdout.write(frame.to_csv(index=False))


def build_parser() -> argparse.ArgumentParser:
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="psar-quant",
        description="PSAR Quant - Parabolic SAR indicator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, help="Override PSAR_LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    info_parser = subparsers.add_parser("info", help="Show package information")
    info_parser.set_defaults(func=cmd_info)

    presets_parser = subparsers.add_parser("presets", help="Preset operations")
    presets_sub = presets_parser.add_subparsers(dest="presets_cmd")
    presets_list = presets_sub.add_parser("list", help="List parameter presets")
    presets_list.add_argument("--file", default=None, help="YAML presets file")
    presets_list.set_defaults(func=cmd_presets_list)

    compute_parser = subparsers.add_parser("compute", help="Compute Parabolic SAR from a CSV")
    compute_parser.add_argument("prices", help="CSV with timestamp/date, high and low columns")
    compute_parser.add_argument("--preset", default=None, help="Named parameter preset")
    compute_parser.add_argument("--presets-file", default=None, help="YAML presets file")
    compute_parser.add_argument("--step", default=None, help="Acceleration step")
    compute_parser.add_argument("--max-factor", default=None, help="Max acceleration factor")
    compute_parser.add_argument("--initial-step", default=None, help="Initial acceleration step")
    compute_parser.add_argument("--timestamp-column", default=None, help="Timestamp column name")
    compute_parser.add_argument(
        "--trim-warmup", action="store_true", help="Drop rows before the first established SAR"
    )
    compute_parser.add_argument("--output", default=None, help="Write CSV here instead of stdout")
    compute_parser.set_defaults(func=cmd_compute)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    from .observability.logging import configure_from_settings
    from .settings import load_settings

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_USAGE)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(EXIT_USAGE)

    settings = load_settings()
    configure_from_settings(settings, args.log_level)
    args.settings = settings
    logger.debug("Running command %s", args.command, extra={"command": args.command})
    args.func(args)


if __name__ == "__main__":
    main()
