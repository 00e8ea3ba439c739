#!/usr/bin/env python3
"""
Main entry point for the Reverse Iteration Fractal Cipher
Stores symbol sequences as complex coordinates and loads them back
"""

import sys
import json
import logging
import argparse

from rifc import (
    DEMO_BITS,
    DEMO_DEPTH,
    RIFCError,
    CodecFactory,
    load_config,
    log_trace,
    trace_frame
)

logger = logging.getLogger(__name__)


def build_codec(args):
    """Create a codec from environment configuration and CLI overrides."""
    config = load_config(args.env_file)

    overrides = {
        'RIFC_SYMBOLS': args.symbols,
        'RIFC_KEY': args.key,
        'RIFC_ORIGIN': args.origin,
        'RIFC_EPSILON': args.epsilon
    }
    for name, value in overrides.items():
        if value is not None:
            config[name] = value

    return CodecFactory.create_codec(config)


def make_trace(args):
    """
    Build the trace sink for a run.

    Returns:
        tuple: (sink or None, list of collected events)
    """
    events = []
    sinks = []

    if args.trace:
        sinks.append(events.append)
    if args.verbose:
        sinks.append(log_trace)

    if not sinks:
        return None, events

    def sink(event):
        for s in sinks:
            s(event)

    return sink, events


def print_trace(events):
    if events:
        print(trace_frame(events).to_string(index=False))


def run_store(args, codec):
    trace, events = make_trace(args)

    envelope = codec.encode(args.sequence, base=args.base, trace=trace)

    print_trace(events)
    print(json.dumps(envelope, indent=2))
    return 0


def run_load(args, codec):
    trace, events = make_trace(args)

    z = complex(args.real, args.imag)
    symbols = codec.load(z, args.count, base=args.base, trace=trace)

    print_trace(events)
    print(symbols)
    return 0


def run_demo(args, codec):
    """Store and load the reference bit sequence, reporting coherence."""
    trace, events = make_trace(args)

    stored_symbols = DEMO_BITS[:args.bits]

    print(f"\n{'='*60}")
    print("RIFC DEMONSTRATION")
    print(f"{'='*60}")
    print(f"symbols: {codec.alphabet.symbols}")
    print(f"key: {codec.key}")
    print(f"origin: {codec.origin}")
    print(f"stored_symbols.length(): {len(stored_symbols)}")
    print(f"stored_symbols: {stored_symbols}")

    envelope = codec.encode(stored_symbols, trace=trace)
    print(f"base: {envelope['metadata']['base']}")
    print(f"encoded: ({envelope['encoded']['real']!r}, {envelope['encoded']['imag']!r})")

    loaded_symbols = codec.decode(envelope, trace=trace)
    print(f"loaded_symbols: {loaded_symbols}")
    print_trace(events)

    report = codec.validate_roundtrip(stored_symbols, loaded_symbols)
    print(f"{'='*60}")

    if not report['is_coherent']:
        print(f"DATA CORRUPTED!!! ({report['mismatches']} mismatches, "
              f"first at {report['first_mismatch']})")
        return 1

    print("DATA IS COHERENT!!!")
    return 0


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--key', type=str, default=None,
                        help='Secret key, e.g. "-0.75+0.09j" or "-0.75,0.09" (env: RIFC_KEY)')
    common.add_argument('--origin', type=str, default=None,
                        help='Origin coordinate (env: RIFC_ORIGIN, default: 0)')
    common.add_argument('--symbols', type=str, default=None,
                        help='Alphabet, ordered (env: RIFC_SYMBOLS, default: 0-9A-F)')
    common.add_argument('--epsilon', type=str, default=None,
                        help='Decode tolerance (env: RIFC_EPSILON, default: 0.0001)')
    common.add_argument('--env-file', type=str, default=None,
                        help='Path to a .env file with RIFC_* settings')
    common.add_argument('--trace', action='store_true',
                        help='Print a per-step trace table')
    common.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging (includes per-step trace lines)')

    parser = argparse.ArgumentParser(
        description="Reverse Iteration Fractal Cipher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Store a hex sequence (base picked from the symbols used)
  python3 main.py store 3A7F

  # Load it back
  python3 main.py load --real 0.93 --imag 0.12 --count 4 --base 11

  # Run the reference demonstration with a trace table
  python3 main.py demo --trace
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    store_parser = subparsers.add_parser('store', parents=[common],
                                         help='Encode symbols into a coordinate')
    store_parser.add_argument('sequence', type=str, help='Symbols to store')
    store_parser.add_argument('--base', type=int, default=None,
                              help='Branch count (default: minimum for the sequence)')

    load_parser = subparsers.add_parser('load', parents=[common],
                                        help='Decode a coordinate into symbols')
    load_parser.add_argument('--real', type=float, required=True, help='Real part of the coordinate')
    load_parser.add_argument('--imag', type=float, required=True, help='Imaginary part of the coordinate')
    load_parser.add_argument('--count', type=int, required=True, help='Number of symbols to load')
    load_parser.add_argument('--base', type=int, default=None,
                             help='Branch count used when storing (env: RIFC_BASE)')

    demo_parser = subparsers.add_parser('demo', parents=[common],
                                        help='Round-trip the reference bit sequence')
    demo_parser.add_argument('--bits', type=int, default=DEMO_DEPTH,
                             help=f'Use the first N of the {len(DEMO_BITS)} reference bits (default: {DEMO_DEPTH})')

    return parser


def main(argv=None):
    """Main entry point with CLI argument parsing"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    commands = {
        'store': run_store,
        'load': run_load,
        'demo': run_demo
    }

    try:
        codec = build_codec(args)
        return commands[args.command](args, codec)
    except RIFCError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
