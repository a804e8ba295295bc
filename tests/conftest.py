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

import pytest

#===============================================================================

from rdftransfer import create_graph, create_graph_set
from rdftransfer.rdf.factory import BACKENDS

#===============================================================================

@pytest.fixture(params=list(BACKENDS))
def backend(request) -> str:
    return request.param

@pytest.fixture(params=[('oxigraph', 'rdflib'), ('rdflib', 'oxigraph')], ids=lambda pair: '-to-'.join(pair))
def backend_pair(request) -> tuple[str, str]:
    return request.param

@pytest.fixture
def graph(backend):
    with create_graph(backend) as graph:
        yield graph

@pytest.fixture
def graph_set(backend):
    with create_graph_set(backend) as graph_set:
        yield graph_set

#===============================================================================
#===============================================================================
