"""Entry point: ``python -m xorshift_mwc``.

Supports two modes:
  - ``python -m xorshift_mwc``        → Launch the FastAPI sample service
  - ``python -m xorshift_mwc cli``    → Print samples for one seed as JSON
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from xorshift_mwc.config import DEFAULT_A, DEFAULT_C, DEFAULT_X1, DEFAULT_X2

logger = logging.getLogger(__name__)

MODES = ("bulk", "sequence", "step")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Multiply-with-carry Xorshift generator")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI sample service (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--master-seed", type=int, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- One-shot CLI mode ---
    cli = sub.add_parser("cli", help="Generate samples and print them as JSON")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--length", type=int, default=10)
    cli.add_argument("--mode", type=str, default="bulk", choices=MODES)
    cli.add_argument("--a", type=int, default=DEFAULT_A)
    cli.add_argument("--c", type=int, default=DEFAULT_C)
    cli.add_argument("--x1", type=int, default=DEFAULT_X1)
    cli.add_argument("--x2", type=int, default=DEFAULT_X2)
    cli.add_argument("--output", type=str, default=None, help="Write JSON here instead of stdout")
    cli.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> int:
    import uvicorn

    from xorshift_mwc.api.app import create_app
    from xorshift_mwc.config import ServiceConfig
    from xorshift_mwc.errors import XorshiftError

    try:
        config = ServiceConfig(
            master_seed=args.master_seed,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
        )
    except XorshiftError as exc:
        logger.error("%s", exc)
        return 2
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


def generate(mode: str, length: int, seed: int, a: int, c: int, x1: int, x2: int) -> list[float]:
    """Produce *length* samples through the chosen access pattern."""
    from itertools import islice

    from xorshift_mwc.core.bulk import generate_samples
    from xorshift_mwc.core.engine import Xorshift
    from xorshift_mwc.core.sequence import sample_sequence
    from xorshift_mwc.errors import InvalidArgument

    if mode == "bulk":
        return generate_samples(length, seed, a, c, x1, x2)
    if length < 0:
        raise InvalidArgument(f"length must be non-negative (got {length})", param_name="length")
    if mode == "sequence":
        return list(islice(sample_sequence(seed, a, c, x1, x2), length))
    return Xorshift(seed, a, c, x1, x2).samples(length)


def _run_cli(args: argparse.Namespace) -> int:
    from xorshift_mwc.errors import XorshiftError
    from xorshift_mwc.utils.logging import setup_logging

    setup_logging(args.log_level)

    try:
        samples = generate(args.mode, args.length, args.seed, args.a, args.c, args.x1, args.x2)
    except XorshiftError as exc:
        logger.error("%s", exc)
        return 2

    payload = {
        "seed": args.seed,
        "params": {"a": args.a, "c": args.c, "x1": args.x1, "x2": args.x2},
        "mode": args.mode,
        "samples": samples,
    }
    text = json.dumps(payload, indent=2)

    if args.output:
        path = Path(args.output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n")
        logger.info("Wrote %d samples to %s", len(samples), path)
    else:
        sys.stdout.write(text + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        return _run_server(args)
    return _run_cli(args)


if __name__ == "__main__":
    sys.exit(main())
