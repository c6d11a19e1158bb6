"""Command-line interface for training and generation."""

import argparse
import logging
import sys
from pathlib import Path

from markovgen.models.markov import MarkovModel
from markovgen.utils.trainer import Trainer, Generator


logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_model(args) -> MarkovModel:
    """Create a model and train it on the data file."""
    model = MarkovModel(args.window_length, seed=args.seed)
    Trainer(model).fit(args.data)
    return model


def generate(args):
    """Generate text from a freshly trained model."""
    model = build_model(args)
    generator = Generator(model)
    for output in generator.samples(args.prompt, max_new_chars=args.length, n=args.samples):
        print(output)


def stats(args):
    """Print statistics of a freshly trained model."""
    model = build_model(args)
    for key, value in model.stats().items():
        print(f"{key}: {value}")


def dump(args):
    """Print every window with its next-character distribution."""
    model = build_model(args)
    sys.stdout.write(str(model))


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Train a character-level Markov model and generate text'
    )
    parser.add_argument(
        '--data',
        type=Path,
        default=Path('data.txt'),
        help='Training corpus file'
    )
    parser.add_argument(
        '--window-length',
        type=positive_int,
        default=3,
        help='Number of context characters per window'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Fixed random seed; omit for different output on every run'
    )
    parser.add_argument('--verbose', action='store_true')

    subparsers = parser.add_subparsers(dest='command', required=True)

    generate_parser = subparsers.add_parser('generate')
    generate_parser.add_argument('prompt', type=str)
    generate_parser.add_argument('--length', type=int, default=100)
    generate_parser.add_argument('--samples', type=positive_int, default=1)
    generate_parser.set_defaults(func=generate)

    stats_parser = subparsers.add_parser('stats')
    stats_parser.set_defaults(func=stats)

    dump_parser = subparsers.add_parser('dump')
    dump_parser.set_defaults(func=dump)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if not args.data.is_file():
        logger.error(f"Training data file not found: {args.data}")
        return 1

    args.func(args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
