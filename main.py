from __future__ import annotations
import re
import sys
import time
from colors import normalize_color
from dimensions import parse_dimensions
from export import generate_shape_png, atomic_write, file_exists
from shape_validation import ShapeNameTable, DimensionReport
from shapes import ShapeKind, ShapeOptions, get_default_filename

VERSION = "0.0.1"

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_IO = 74

numeric_pattern = re.compile(r'^-?\d+$')

class UsageError(ValueError):
    pass

def print_usage(shape_names: ShapeNameTable):
    print("shape - generates solid colour PNG shapes")
    print("Usage: python main.py <shape> <width> <height> <color> [outputFilename] [options]")
    print("\nOptions:")
    print("  -o, --output PATH      Custom output filename")
    print("  -f, --force            Overwrite existing files")
    print("  -v, --verbose          Detailed output")
    print("  -s, --strict-color     Disable color normalization")
    print("  --strict-shape         Disable shape name fuzzy matching")
    print("  --points N             Number of star points (default: 5)")
    print("  --direction DIR        Arrow direction: up, down, left, right (default: right)")
    print("  --thickness T          Donut ring thickness as a fraction of the radius (default: 0.4)")
    print("  --bar PX               Cross bar thickness in pixels (default: min(width, height) / 6)")
    print("  -h, --help             Show this help")
    print("  --version              Show version")
    print("\nExamples:")
    print("  python main.py circle 64 64 red")
    print("  python main.py star 128 128 gold --points 6")
    print("  python main.py arrow 90 60 '#336699' arrow.png --direction up")
    print()
    print(shape_names.help_text())

def parse_cli_arguments(positionals: list[str], options: dict, shape_names: ShapeNameTable):
    if not positionals:
        raise UsageError("Missing arguments. Use --help for usage.")

    first_is_number = bool(numeric_pattern.match(positionals[0]))
    if first_is_number and not shape_names.looks_like_shape_name(positionals[0]):
        if len(positionals) < 3:
            raise UsageError("Expected <width> <height> <color> [outputFilename].")
        print("Warning: Deprecated: Using old format. New format: shape <shape> <width> <height> <color>",
              file=sys.stderr)
        kind = ShapeKind.RECTANGLE
        width_str, height_str, color = positionals[0:3]
        rest = positionals[3:]
    else:
        if len(positionals) < 4:
            raise UsageError("Expected <shape> <width> <height> <color> [outputFilename].")
        kind = shape_names.parse(positionals[0], options['strict_shape'])
        width_str, height_str, color = positionals[1:4]
        rest = positionals[4:]

    if len(rest) > 1:
        raise UsageError(f"Unexpected arguments: {' '.join(rest[1:])}")

    width, height = parse_dimensions(width_str, height_str)

    report = DimensionReport(kind, width, height)
    if not report.is_valid():
        raise UsageError(' '.join(report.validation_errors))
    if options['verbose']:
        report.print_validation_report(file=sys.stderr)

    normalized_color = normalize_color(color, options['strict_color'])

    shape_options = ShapeOptions(**options['shape'])

    output_path = options['output'] or (rest[0] if rest else None) or get_default_filename(kind, width, height)

    return kind, width, height, normalized_color, shape_options, output_path

def generate(kind, width: int, height: int, color: str, output_path: str, options: ShapeOptions = None):
    data = generate_shape_png(kind, width, height, color, options)
    atomic_write(output_path, data)

def _take_value(args: list[str], i: int, flag: str) -> str:
    if i + 1 >= len(args):
        raise UsageError(f"{flag} requires a value")
    return args[i + 1]

def _parse_number(value: str, flag: str, cast):
    try:
        return cast(value)
    except ValueError:
        raise UsageError(f"{flag} expects a number, got '{value}'") from None

def main(argv: list[str] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    shape_names = ShapeNameTable.build()

    if len(args) == 0 or any(arg in ['-h', '--help'] for arg in args):
        print_usage(shape_names)
        return EXIT_OK

    if '--version' in args:
        print(VERSION)
        return EXIT_OK

    options = {
        'output': None,
        'force': False,
        'verbose': False,
        'strict_color': False,
        'strict_shape': False,
        'shape': {},
    }
    positionals = []

    try:
        i = 0
        while i < len(args):
            arg = args[i]
            if arg in ['-o', '--output']:
                options['output'] = _take_value(args, i, arg)
                i += 1
            elif arg in ['-f', '--force']:
                options['force'] = True
            elif arg in ['-v', '--verbose']:
                options['verbose'] = True
            elif arg in ['-s', '--strict-color']:
                options['strict_color'] = True
            elif arg == '--strict-shape':
                options['strict_shape'] = True
            elif arg == '--points':
                options['shape']['star_points'] = _parse_number(_take_value(args, i, arg), arg, int)
                i += 1
            elif arg == '--direction':
                options['shape']['arrow_direction'] = _take_value(args, i, arg)
                i += 1
            elif arg == '--thickness':
                options['shape']['donut_thickness'] = _parse_number(_take_value(args, i, arg), arg, float)
                i += 1
            elif arg == '--bar':
                options['shape']['cross_thickness'] = _parse_number(_take_value(args, i, arg), arg, float)
                i += 1
            elif arg.startswith('-') and not numeric_pattern.match(arg):
                raise UsageError(f"Unknown option: {arg}")
            else:
                positionals.append(arg)
            i += 1

        start = time.perf_counter()
        kind, width, height, color, shape_options, output_path = parse_cli_arguments(
            positionals, options, shape_names)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if file_exists(output_path) and not options['force']:
        print("Error: File exists. Use --force to overwrite.", file=sys.stderr)
        return EXIT_USAGE

    if options['verbose']:
        print(f"Generating {kind.value} {width}x{height} PNG with color {color}")
        print(f"Options: {shape_options}")
        print(f"Output: {output_path}")

    try:
        generate(kind, width, height, color, output_path, shape_options)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except Exception as e:
        print(f"Error: Failed to generate PNG: {e}", file=sys.stderr)
        return EXIT_IO

    duration = int((time.perf_counter() - start) * 1000)
    print(f"[OK] Created {output_path} ({duration}ms)")
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
