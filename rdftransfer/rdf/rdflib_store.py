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

from typing import Any, BinaryIO, Hashable, Iterable, Iterator, Optional

#===============================================================================

import rdflib
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

#===============================================================================

from ..utils import Issue
from . import BlankNode, Literal, NamedNode, Node, Statement
from .graph import Context, RdfGraph, RdfGraphSet
from .syntax import Syntax

#===============================================================================

RDF_FORMATS = {
    Syntax.TURTLE: 'turtle',
    Syntax.N_TRIPLES: 'nt',
    Syntax.N_QUADS: 'nquads',
    Syntax.TRIG: 'trig',
    Syntax.RDF_XML: 'xml',
    Syntax.N3: 'n3',
}

#===============================================================================

def to_rdflib(node: Node) -> Any:
#================================
    if isinstance(node, NamedNode):
        return rdflib.URIRef(node.value)
    elif isinstance(node, BlankNode):
        return rdflib.BNode(node.id)
    elif isinstance(node, Literal):
        datatype = rdflib.URIRef(node.datatype.value) if node.datatype is not None else None
        return rdflib.Literal(node.value, lang=node.language, datatype=datatype)
    raise Issue(f'Cannot store {node!r} in an rdflib graph')

def from_rdflib(term: Any) -> Node:
#==================================
    if isinstance(term, rdflib.URIRef):
        return NamedNode(str(term))
    elif isinstance(term, rdflib.BNode):
        return BlankNode(str(term))
    elif isinstance(term, rdflib.Literal):
        datatype = NamedNode(str(term.datatype)) if term.datatype is not None else None
        return Literal(str(term), language=term.language, datatype=datatype)
    raise Issue(f'Unsupported rdflib term: {term!r}')

def rdf_format(syntax: Syntax) -> str:
#=====================================
    return RDF_FORMATS[syntax]

def triple_pattern(subject: Optional[Node], predicate: Optional[Node], object: Optional[Node]) -> tuple:
#=====================================================================================================
    return tuple(None if node is None else to_rdflib(node) for node in (subject, predicate, object))

#===============================================================================

class RdflibGraph(RdfGraph):
    def __init__(self, context: Optional[Context]=None, dataset: Optional[rdflib.Dataset]=None):
        super().__init__(context)
        self.__dataset = dataset if dataset is not None else rdflib.Dataset()
        if self.context is None:
            self.__graph = self.__dataset.default_graph
        else:
            self.__graph = self.__dataset.graph(rdflib.URIRef(self.context.value))

    @property
    def implementation(self) -> Hashable:
        return type(self.__dataset.store)

    @property
    def graph(self) -> rdflib.Graph:
        return self.__graph

    def _find(self, subject: Optional[Node], predicate: Optional[Node],
                    object: Optional[Node]) -> Iterator[Statement]:
    #===============================================================
        return (Statement(from_rdflib(s), from_rdflib(p), from_rdflib(o))
                    for (s, p, o) in self.__graph.triples(triple_pattern(subject, predicate, object)))

    def _add_all(self, statements: list[Statement]):
    #===============================================
        for statement in statements:
            self.__graph.add(triple_pattern(*statement))

    def _remove_all(self, statements: list[Statement]):
    #==================================================
        for statement in statements:
            self.__graph.remove(triple_pattern(*statement))

    def _create_blank_node(self) -> BlankNode:
    #=========================================
        return BlankNode(str(rdflib.BNode()))

    def _size(self) -> int:
    #======================
        return len(self.__graph)

    def _clear(self):
    #================
        self.__graph.remove((None, None, None))

    def _read_from(self, stream: BinaryIO, syntax: Syntax, base_iri: Optional[str]):
    #===============================================================================
        if syntax.is_dataset:
            # Dataset syntaxes are flattened into this graph
            scratch = rdflib.Dataset()
            scratch.parse(source=stream, format=rdf_format(syntax), publicID=base_iri)
            for (s, p, o, _) in scratch.quads((None, None, None, None)):
                self.__graph.add((s, p, o))
        else:
            self.__graph.parse(source=stream, format=rdf_format(syntax), publicID=base_iri)

    def _write_to(self, stream: BinaryIO, syntax: Syntax):
    #=====================================================
        if syntax.is_dataset:
            scratch = rdflib.Dataset()
            if self.context is None:
                target = scratch.default_graph
            else:
                target = scratch.graph(self.__graph.identifier)
            for triple in self.__graph:
                target.add(triple)
            scratch.serialize(destination=stream, format=rdf_format(syntax))
        else:
            self.__graph.serialize(destination=stream, format=rdf_format(syntax))

#===============================================================================

class RdflibGraphSet(RdfGraphSet):
    def __init__(self, dataset: Optional[rdflib.Dataset]=None):
        super().__init__()
        self.__dataset = dataset if dataset is not None else rdflib.Dataset()

    @property
    def implementation(self) -> Hashable:
        return type(self.__dataset.store)

    @property
    def dataset(self) -> rdflib.Dataset:
        return self.__dataset

    def _graph(self, context: Optional[NamedNode]) -> RdflibGraph:
    #=============================================================
        return RdflibGraph(context, dataset=self.__dataset)

    def _contexts(self) -> Iterable[NamedNode]:
    #==========================================
        return [NamedNode(str(graph.identifier)) for graph in self.__dataset.contexts()
                    if isinstance(graph.identifier, rdflib.URIRef)
                   and graph.identifier != DATASET_DEFAULT_GRAPH_ID]

    def _has_graph(self, context: NamedNode) -> bool:
    #================================================
        return context in self._contexts()

    def _add_graph(self, context: NamedNode):
    #========================================
        self.__dataset.graph(rdflib.URIRef(context.value))

    def _remove_graph(self, context: NamedNode):
    #===========================================
        self.__dataset.remove_graph(rdflib.URIRef(context.value))

    def _read_from(self, stream: BinaryIO, syntax: Syntax, base_iri: Optional[str]):
    #===============================================================================
        if syntax.is_dataset:
            self.__dataset.parse(source=stream, format=rdf_format(syntax), publicID=base_iri)
        else:
            self.__dataset.default_graph.parse(source=stream, format=rdf_format(syntax), publicID=base_iri)

    def _write_to(self, stream: BinaryIO, syntax: Syntax):
    #=====================================================
        if syntax.is_dataset:
            self.__dataset.serialize(destination=stream, format=rdf_format(syntax))
        else:
            self.__dataset.default_graph.serialize(destination=stream, format=rdf_format(syntax))

#===============================================================================
#===============================================================================
