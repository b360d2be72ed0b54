import argparse
import sys

from cgobind import logging as cgobind_logging
from cgobind import utils
from cgobind.naming import NameNormalizer
from cgobind.typemap import (Category, TypeDescriptor, native_conversion,
                             resolve, target_conversion, target_type)
from cgobind.writer import BlankLineStrippingWriter, open_output

logger = cgobind_logging.get_logger(__name__)

_CHUNK_SIZE = 64 * 1024


def _add_common_arguments(parser):
    parser.add_argument(
        '--config',
        '-c',
        type=str,
        dest='config_file',
        help='The configuration file to use'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Console log level, overrides logging.console_level from the configuration'
    )


def parse_map_type(parser):
    parser.add_argument(
        'name',
        type=str,
        help='The native type name without modifiers, e.g. GLfloat'
    )

    parser.add_argument(
        '--depth',
        '-d',
        type=int,
        default=0,
        help='Number of pointer levels declared on the type'
    )

    parser.add_argument(
        '--decl',
        type=str,
        default=None,
        help='The raw C declaration the type came from, defaults to the name followed by its pointers'
    )

    parser.add_argument(
        '--var',
        type=str,
        default='x',
        help='Variable name used in the printed conversion expressions'
    )

    _add_common_arguments(parser)


def parse_trim_prefix(parser):
    parser.add_argument(
        'identifiers',
        nargs='+',
        help='Function or constant names to normalize'
    )

    _add_common_arguments(parser)


def parse_strip_blank_lines(parser):
    parser.add_argument(
        'input_file',
        nargs='?',
        default=None,
        help='The file to clean up, stdin when omitted'
    )

    parser.add_argument(
        '--output',
        '-o',
        type=str,
        default=None,
        help='Where to write the result, stdout when omitted'
    )

    _add_common_arguments(parser)


def _configure_logging_from_args(args, config):
    cgobind_logging.configure_logging(
        config,
        console_level_override=args.log_level,
    )


def map_type(parser, args, config):
    if args.depth < 0:
        parser.error('--depth must not be negative')

    declaration = args.decl
    if declaration is None:
        declaration = args.name + ' ' + '*' * args.depth if args.depth else args.name
    descriptor = TypeDescriptor(args.name, args.depth, declaration)

    category, _ = resolve(descriptor)
    print(f'type:      {descriptor}')
    print(f'category:  {category.name}')
    if category is Category.VOID:
        print('void has no Go representation')
        return

    to_c = native_conversion(descriptor, args.var)
    to_go = target_conversion(descriptor, args.var)
    print(f'go type:   {target_type(descriptor)}')
    print(f'to native: {to_c.expression}')
    print(f'to go:     {to_go.expression}')
    if not (to_c.verified and to_go.verified):
        logger.warning(
            "No Go mapping for native type %s; conversions above are unverified",
            descriptor.name,
        )


def trim_prefix(parser, args, config):
    normalizer = NameNormalizer.from_config(config)
    for identifier in args.identifiers:
        print(normalizer.trim_prefix(identifier))


def _copy_stream(source, writer):
    while True:
        chunk = source.read(_CHUNK_SIZE)
        if not chunk:
            break
        writer.write(chunk)


def strip_blank_lines(parser, args, config):
    try:
        if args.input_file is None:
            source = sys.stdin.buffer
        else:
            source = open(args.input_file, 'rb')
        try:
            if args.output is None:
                with BlankLineStrippingWriter(sys.stdout.buffer) as writer:
                    _copy_stream(source, writer)
            else:
                with open_output(args.output) as writer:
                    _copy_stream(source, writer)
        finally:
            if source is not sys.stdin.buffer:
                source.close()
    except OSError as e:
        logger.error("Failed to strip blank lines: %s", e)
        sys.exit(1)

    if args.output is not None:
        logger.info("Wrote %s", args.output)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='cgobind: type mapping and output helpers for cgo binding generators'
    )

    subparsers = parser.add_subparsers(
        dest='subcommand',
        description='valid subcommands',
        help='Use one of these subcommands followed by -h for additional help',
        required=True
    )

    map_type_parser = subparsers.add_parser(
        'map-type',
        help='Show the Go type and conversions for a native type'
    )

    trim_prefix_parser = subparsers.add_parser(
        'trim-prefix',
        help='Strip GL API prefixes from identifiers'
    )

    strip_parser = subparsers.add_parser(
        'strip-blank-lines',
        help='Remove blank lines from a generated source file'
    )

    parse_map_type(map_type_parser)
    parse_trim_prefix(trim_prefix_parser)
    parse_strip_blank_lines(strip_parser)

    args = parser.parse_args(argv)

    config = utils.try_load_config(args.config_file)
    _configure_logging_from_args(args, config)

    match args.subcommand:
        case 'map-type':
            map_type(parser, args, config)
        case 'trim-prefix':
            trim_prefix(parser, args, config)
        case 'strip-blank-lines':
            strip_blank_lines(parser, args, config)
        case _:
            parser.print_help()


if __name__ == '__main__':
    main()
