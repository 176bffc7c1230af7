"""
find_face_landmarks command-line interface.

Detects the main face in a single image and writes its landmarks to a
two-column "x,y" CSV file.

Usage:
    find_face_landmarks -i face.jpg -o landmarks.csv -l face_landmarker.task
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config.constants import EXIT_FAILURE, EXIT_SUCCESS, LAYOUTS
from .config.settings import EngineConfig, ExportConfig
from .processing.pipeline import LandmarkPipeline, default_engine_factory
from .utils.config_loader import get_config
from .utils.exceptions import ArgumentError, ConfigurationError
from .utils.logging_config import get_logger, setup_logging
from .utils.validators import validate_model_path

PROG = 'find_face_landmarks'

logger = get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse 오류를 SystemExit(2) 대신 ArgumentError로 변환"""

    def error(self, message):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage=f'{PROG} [options]',
        description='Detect the main face in an image and dump its landmarks to CSV.'
    )
    parser.add_argument('input_positional', nargs='?', metavar='INPUT',
                        help='path to input image (same as --input)')
    parser.add_argument('-i', '--input', help='path to input image')
    parser.add_argument('-o', '--output', help='output CSV path')
    parser.add_argument('-l', '--landmarks', help='path to landmarks model file')
    parser.add_argument('-c', '--config', help='YAML settings file (default: packaged config.yaml)')
    # choices 는 parse_args 에서 검사 (--help 보다 먼저 실패하지 않도록)
    parser.add_argument('--layout', metavar='{' + ','.join(LAYOUTS) + '}',
                        help='landmark order of the exported points (default: from config)')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    명령행 인자 파싱 및 검증

    Raises:
        ArgumentError: 필수 인자 누락, 중복 입력, 모델 경로가 파일이 아닌 경우
    """
    args = build_parser().parse_args(argv)

    if args.input_positional is not None:
        if args.input is not None:
            raise ArgumentError("option '--input' cannot be specified more than once")
        args.input = args.input_positional

    missing = [f'--{name}' for name in ('input', 'output', 'landmarks')
               if getattr(args, name) is None]
    if missing:
        raise ArgumentError(f"the following arguments are required: {', '.join(missing)}")

    if args.layout is not None and args.layout not in LAYOUTS:
        raise ArgumentError(
            f"argument --layout: invalid choice: '{args.layout}' "
            f"(choose from {', '.join(LAYOUTS)})"
        )

    validate_model_path(args.landmarks)
    return args


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except ArgumentError as e:
        print(f"Error while parsing command-line arguments: {e}", file=sys.stderr)
        print("Use --help to display a list of options.", file=sys.stderr)
        return EXIT_FAILURE

    try:
        config = get_config(args.config)
        setup_logging(config, verbose=args.verbose, force=True)
        engine_config = EngineConfig.from_config(config)
        export_config = ExportConfig.from_config(config)
        if args.layout:
            export_config = ExportConfig(layout=args.layout)
    except (FileNotFoundError, ValueError, ConfigurationError) as e:
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        pipeline = LandmarkPipeline(engine_config, export_config, default_engine_factory)
        result = pipeline.run(args.input, args.output, args.landmarks)
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if not result.success:
        logger.debug(f"Run failed ({result.error_kind.value})")
        print(f"ERROR: {result.message}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info(f"Done: {result.num_landmarks} landmarks in {result.processing_time:.1f}ms")
    return EXIT_SUCCESS


def run():
    """console_scripts 진입점"""
    sys.exit(main())
