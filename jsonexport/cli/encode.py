# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Encode a value from an importable module and print the JSON, or write it to a file.

The target is given as `module:attribute`, the attribute may be dotted (`module:Class.attribute`). If the attribute is
a class it is instantiated with no arguments, if it's any other callable it is called with no arguments, otherwise it
is encoded as is.
"""

import sys
from argparse import ArgumentParser, Namespace
from importlib import import_module
from typing import Any

from structlog import get_logger

logger = get_logger()

EXIT_OK = 0
EXIT_ENCODING_ERROR = 1


def create_parser() -> ArgumentParser:
    from jsonexport.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('target', help='Value to encode, as module:attribute')
    parser.add_argument('--output', help='Write the JSON to this file instead of the standard output')
    parser.add_argument('--untagged-collections', action='store_true',
                        help='Write elements of collections of objects as plain objects')
    return parser


def load_target(target: str) -> Any:
    """ Import `module:attribute` and build the value to encode.
    """
    module_name, sep, attr_path = target.partition(':')
    if not sep or not module_name or not attr_path:
        raise ValueError(f'invalid target {target!r}, expected module:attribute')

    obj: Any = import_module(module_name)
    for attr in attr_path.split('.'):
        obj = getattr(obj, attr)

    if callable(obj):
        return obj()
    return obj


def execute(args: Namespace) -> int:
    from jsonexport.conf.get_settings import get_global_settings
    from jsonexport.exception import JsonExportError
    from jsonexport.serializer import JsonSerializer

    log = logger.new(target=args.target)

    settings = get_global_settings()
    if args.untagged_collections:
        settings = settings.model_copy(update={'TAG_COLLECTION_ELEMENTS': False})
    serializer = JsonSerializer(settings=settings)

    value = load_target(args.target)
    try:
        if args.output:
            serializer.write_to_file(value, args.output)
            log.info('json written', output=args.output)
        else:
            print(serializer.write_to_string(value), file=sys.stdout)
    except JsonExportError as e:
        log.error('could not encode value', error=str(e), error_type=type(e).__name__)
        return EXIT_ENCODING_ERROR
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    return execute(args)
