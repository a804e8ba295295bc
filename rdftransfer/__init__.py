"""

Move RDF statements between graphs
==================================

Graphs and graph sets are containers with an open/close lifecycle, built on
one of several RDF libraries (backends). Statements can be copied between
containers of any two backends:

    Same backend:
        statements are appended as they are.

    Different backends:
        blank node identifiers mean nothing outside the graph that minted
        them, so each distinct source blank node is given a fresh blank node
        in the target for the duration of one copy.

Graph sets are copied graph by graph, named graphs first and then the
default graph. Removal and the set operations (union, intersection and
complement) match statements exactly.

Files are converted between RDF syntaxes by loading them into a graph and
writing it back out, optionally merging several inputs.

"""

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

from .version import __version__

from .rdf import ANY, BlankNode, Literal, NamedNode, Statement, Variable
from .rdf import blankNode, literal, namedNode
from .rdf.factory import create_graph, create_graph_set
from .rdf.graph import RdfGraph, RdfGraphSet, StatementIterator
from .rdf.syntax import Syntax

from .transfer import complement, copy, intersection, remove_from, size, union
from .convert import convert, convert_files, load_from_file, load_graph, write_to_file

from .utils import ConversionError, GraphClosedError, InvalidArgument, Issue

#===============================================================================
