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

import os
from typing import NamedTuple, Optional

#===============================================================================

from ..utils import InvalidArgument
from .graph import Context, RdfGraph, RdfGraphSet
from .oxigraph import OxigraphGraph, OxigraphGraphSet
from .rdflib_store import RdflibGraph, RdflibGraphSet

#===============================================================================

class Backend(NamedTuple):
    graph: type[RdfGraph]
    graph_set: type[RdfGraphSet]

BACKENDS = {
    'oxigraph': Backend(OxigraphGraph, OxigraphGraphSet),
    'rdflib': Backend(RdflibGraph, RdflibGraphSet),
}

BACKEND_ENVIRONMENT = 'RDFTRANSFER_BACKEND'
DEFAULT_BACKEND = 'oxigraph'

#===============================================================================

def default_backend() -> str:
#============================
    return os.environ.get(BACKEND_ENVIRONMENT, DEFAULT_BACKEND)

def get_backend(name: Optional[str]=None) -> Backend:
#====================================================
    if name is None:
        name = default_backend()
    backend = BACKENDS.get(name.lower())
    if backend is None:
        raise InvalidArgument(f'Unknown graph backend: {name} (expected one of {", ".join(BACKENDS)})')
    return backend

def create_graph(backend: Optional[str]=None, context: Optional[Context]=None) -> RdfGraph:
#==========================================================================================
    """A new, empty and closed, graph."""
    return get_backend(backend).graph(context)

def create_graph_set(backend: Optional[str]=None) -> RdfGraphSet:
#================================================================
    """A new, empty and closed, graph set."""
    return get_backend(backend).graph_set()

#===============================================================================
#===============================================================================
