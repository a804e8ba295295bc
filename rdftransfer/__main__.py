#===============================================================================
#
#  RDF graph transfer tools
#
#  Copyright (c) 2020 - 2025 David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

import logging
import sys
from typing import Optional

#===============================================================================

import structlog

#===============================================================================

from rdftransfer.version import __version__
from rdftransfer.convert import convert, convert_files
from rdftransfer.rdf.factory import BACKENDS
from rdftransfer.rdf.syntax import Syntax
from rdftransfer.utils import Issue, log

#===============================================================================

def rdf_convert(inputs: list[str], output: str, from_syntax: Optional[str]=None,
                to_syntax: Optional[str]=None, backend: Optional[str]=None):
#==============================================================================
    if len(inputs) == 1:
        convert(inputs[0], from_syntax, output, to_syntax, backend=backend)
    else:
        convert_files(inputs, [from_syntax]*len(inputs), output, to_syntax, backend=backend)

#===============================================================================

def main(argv: Optional[list[str]]=None):
    import argparse
    syntaxes = ', '.join(syntax.label for syntax in Syntax)
    parser = argparse.ArgumentParser(description='Convert and merge RDF files')
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('--debug', action='store_true', help='Show each step of the conversion')
    parser.add_argument('--from', dest='from_syntax', metavar='SYNTAX',
                        help=f'Syntax of the input files ({syntaxes}); guessed from file names if not given')
    parser.add_argument('--to', dest='to_syntax', metavar='SYNTAX',
                        help='Syntax of the output file; guessed from its name if not given')
    parser.add_argument('--backend', choices=list(BACKENDS),
                        help='Graph implementation to use (default: $RDFTRANSFER_BACKEND or oxigraph)')
    parser.add_argument('--output', metavar='OUTPUT_FILE', required=True, help='File to write the converted RDF to')
    parser.add_argument('inputs', metavar='INPUT', nargs='+', help='Input RDF files, merged when more than one')

    args = parser.parse_args(argv)

    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(
        logging.DEBUG if args.debug else logging.INFO))
    try:
        rdf_convert(args.inputs, args.output, from_syntax=args.from_syntax,
                    to_syntax=args.to_syntax, backend=args.backend)
    except (OSError, Issue) as e:
        log.error(str(e))
        sys.exit(1)

#===============================================================================

if __name__ == '__main__':
    main()

#===============================================================================
#===============================================================================
