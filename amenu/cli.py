"""Command-line front door for Amenu.

Parses arguments, applies one-off setting changes, then hands over to
the picker window.
"""
import argparse
import sys
import traceback

from .settings import DEFAULTS, Settings


def _setting_pair(value: str):
    """argparse type for KEY=VALUE setting overrides."""
    key, sep, raw = value.partition('=')
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f'expected KEY=VALUE, got {value!r}')
    if key not in DEFAULTS:
        raise argparse.ArgumentTypeError(
            f'unknown setting {key!r} (choose from {", ".join(sorted(DEFAULTS))})'
        )
    return key, raw.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='amenu',
        description='Pick a named entry from a name:content file and copy it to the clipboard.',
    )
    parser.add_argument('source', nargs='?', default=None,
                        help='entry file (default: the source_file setting, "prompts")')
    parser.add_argument('--debug', action='store_true', help='print loader and exit diagnostics')
    parser.add_argument('--set', dest='overrides', metavar='KEY=VALUE', action='append',
                        type=_setting_pair, default=[], help='persist a setting before launching')
    parser.add_argument('--settings', action='store_true',
                        help='print the effective settings and exit')
    return parser


def main(argv=None, settings_factory=Settings, app_factory=None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_factory()

    for key, value in args.overrides:
        settings.set(key, value)

    if args.settings:
        for key, value in settings.items():
            print(f'{key}={value}')
        settings.close()
        return 0

    if app_factory is None:
        from .app import AmenuApp as app_factory

    try:
        app = app_factory(source=args.source, settings=settings, debug=args.debug)
        app.run()
    except Exception:
        print(f'[Amenu] Failed to start:\n{traceback.format_exc()}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
