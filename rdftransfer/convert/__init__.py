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

from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Sequence

#===============================================================================

from ..rdf.factory import create_graph
from ..rdf.graph import RdfGraph, RdfGraphSet
from ..rdf.syntax import Syntax
from ..utils import ConversionError, InvalidArgument, log, pretty_log, released

#===============================================================================

SyntaxSpec = Syntax | str | None

def resolve_syntax(syntax: SyntaxSpec, path: Path) -> Syntax:
#============================================================
    if syntax is None:
        return Syntax.for_path(path)
    elif isinstance(syntax, str):
        return Syntax.for_name(syntax)
    return syntax

def check_exists(path: Path):
#============================
    if not path.exists():
        raise FileNotFoundError(f'Input file {path.resolve()} not found')

def make_parent_directory(path: Path):
#=====================================
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConversionError(f'Cannot create directory {path.parent}: {e}') from e

@contextmanager
def rdf_file(path: Path, mode: str) -> Iterator[BinaryIO]:
#=========================================================
    try:
        fp = open(path, mode)
    except OSError as e:
        raise ConversionError(f'Cannot open {path}: {e}') from e
    try:
        with released(fp, str(path)):
            yield fp        # pyright: ignore[reportReturnType]
    except OSError as e:
        raise ConversionError(f'I/O error with {path}: {e}') from e

#===============================================================================

def load_from_file(in_file: str|Path, in_syntax: SyntaxSpec, sink: RdfGraph|RdfGraphSet):
#========================================================================================
    """
    Add the content of ``in_file`` to ``sink``, which must be open.

    Existing content of ``sink`` is kept.
    """
    if not sink.is_open:
        raise InvalidArgument(f'{sink!r} must be open to load {in_file}')
    in_path = Path(in_file)
    check_exists(in_path)
    syntax = resolve_syntax(in_syntax, in_path)
    with rdf_file(in_path, 'rb') as fp:
        sink.read_from(fp, syntax, base_iri=in_path.resolve().as_uri())

def load_graph(in_file: str|Path, in_syntax: SyntaxSpec=None, backend: Optional[str]=None) -> RdfGraph:
#=====================================================================================================
    """A new, open, graph with the content of ``in_file``."""
    graph = create_graph(backend).open()
    try:
        load_from_file(in_file, in_syntax, graph)
    except BaseException:
        graph.close()
        raise
    return graph

def write_to_file(source: RdfGraph|RdfGraphSet, out_file: str|Path, out_syntax: SyntaxSpec=None):
#================================================================================================
    out_path = Path(out_file)
    syntax = resolve_syntax(out_syntax, out_path)
    make_parent_directory(out_path)
    with rdf_file(out_path, 'wb') as fp:
        source.write_to(fp, syntax)

#===============================================================================

def convert(in_file: str|Path, in_syntax: SyntaxSpec, out_file: str|Path, out_syntax: SyntaxSpec,
            backend: Optional[str]=None):
#=================================================================================================
    in_path = Path(in_file)
    out_path = Path(out_file)
    check_exists(in_path)
    in_syntax = resolve_syntax(in_syntax, in_path)
    out_syntax = resolve_syntax(out_syntax, out_path)
    make_parent_directory(out_path)
    with create_graph(backend) as graph:
        load_from_file(in_path, in_syntax, graph)
        write_to_file(graph, out_path, out_syntax)
        log.info(f'Converted {pretty_log(in_path)} to {pretty_log(out_path)} ({len(graph)} statements)')

def convert_files(in_files: Sequence[str|Path], in_syntaxes: Optional[Sequence[SyntaxSpec]],
                  out_file: str|Path, out_syntax: SyntaxSpec, backend: Optional[str]=None):
#=========================================================================================
    """
    Merge several input files into one output file.

    Each input is loaded into its own graph and then added as is to the
    merged graph. Blank nodes are not renamed between inputs, so inputs
    whose blank node labels coincide share those blank nodes.
    """
    in_paths = [Path(in_file) for in_file in in_files]
    if in_syntaxes is None:
        in_syntaxes = [None]*len(in_paths)
    if len(in_syntaxes) != len(in_paths):
        raise InvalidArgument(f'{len(in_paths)} input files but {len(in_syntaxes)} syntaxes')
    for in_path in in_paths:
        check_exists(in_path)
    syntaxes = [resolve_syntax(syntax, in_path) for (in_path, syntax) in zip(in_paths, in_syntaxes)]
    out_path = Path(out_file)
    out_syntax = resolve_syntax(out_syntax, out_path)

    with create_graph(backend) as merged:
        for (in_path, syntax) in zip(in_paths, syntaxes):
            with load_graph(in_path, syntax, backend) as graph:
                with graph.statements() as statements:
                    merged.add_all(statements)
            log.debug(f'Merged {pretty_log(in_path)}')
        write_to_file(merged, out_path, out_syntax)
        log.info(f'Merged {len(in_paths)} files into {pretty_log(out_path)} ({len(merged)} statements)')

#===============================================================================
#===============================================================================
