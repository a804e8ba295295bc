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

import pyoxigraph as oxigraph

#===============================================================================

from ..utils import Issue
from . import BlankNode, Literal, NamedNode, Node, Statement
from .graph import Context, RdfGraph, RdfGraphSet
from .syntax import Syntax

#===============================================================================

RDF_FORMATS = {
    Syntax.TURTLE: oxigraph.RdfFormat.TURTLE,
    Syntax.N_TRIPLES: oxigraph.RdfFormat.N_TRIPLES,
    Syntax.N_QUADS: oxigraph.RdfFormat.N_QUADS,
    Syntax.TRIG: oxigraph.RdfFormat.TRIG,
    Syntax.RDF_XML: oxigraph.RdfFormat.RDF_XML,
    Syntax.N3: oxigraph.RdfFormat.N3,
}

#===============================================================================

def to_oxigraph(node: Node) -> Any:
#==================================
    if isinstance(node, NamedNode):
        return oxigraph.NamedNode(node.value)
    elif isinstance(node, BlankNode):
        return oxigraph.BlankNode(node.id)
    elif isinstance(node, Literal):
        if node.language is not None:
            return oxigraph.Literal(node.value, language=node.language)
        elif node.datatype is not None:
            return oxigraph.Literal(node.value, datatype=oxigraph.NamedNode(node.datatype.value))
        return oxigraph.Literal(node.value)
    raise Issue(f'Cannot store {node!r} in an Oxigraph graph')

def from_oxigraph(term: Any) -> Node:
#====================================
    if isinstance(term, oxigraph.NamedNode):
        return NamedNode(term.value)
    elif isinstance(term, oxigraph.BlankNode):
        return BlankNode(term.value)
    elif isinstance(term, oxigraph.Literal):
        return Literal(term.value, language=term.language,
                       datatype=NamedNode(term.datatype.value))
    raise Issue(f'Unsupported Oxigraph term: {term!r}')

def graph_name(context: Optional[NamedNode]) -> Any:
#===================================================
    return oxigraph.DefaultGraph() if context is None else oxigraph.NamedNode(context.value)

def rdf_format(syntax: Syntax) -> oxigraph.RdfFormat:
#=====================================================
    return RDF_FORMATS[syntax]

#===============================================================================

class OxigraphGraph(RdfGraph):
    def __init__(self, context: Optional[Context]=None, store: Optional[oxigraph.Store]=None):
        super().__init__(context)
        self.__store = store if store is not None else oxigraph.Store()
        self.__graph_name = graph_name(self.context)

    @property
    def implementation(self) -> Hashable:
        return oxigraph.Store

    @property
    def store(self) -> oxigraph.Store:
        return self.__store

    def __quad(self, statement: Statement) -> oxigraph.Quad:
        return oxigraph.Quad(to_oxigraph(statement.subject),
                             to_oxigraph(statement.predicate),
                             to_oxigraph(statement.object),
                             self.__graph_name)

    def _find(self, subject: Optional[Node], predicate: Optional[Node],
                    object: Optional[Node]) -> Iterator[Statement]:
    #===============================================================
        quads = self.__store.quads_for_pattern(
            None if subject is None else to_oxigraph(subject),
            None if predicate is None else to_oxigraph(predicate),
            None if object is None else to_oxigraph(object),
            self.__graph_name)
        return (Statement(from_oxigraph(quad.subject),
                          from_oxigraph(quad.predicate),
                          from_oxigraph(quad.object)) for quad in quads)

    def _add_all(self, statements: list[Statement]):
    #===============================================
        self.__store.extend([self.__quad(statement) for statement in statements])

    def _remove_all(self, statements: list[Statement]):
    #==================================================
        for statement in statements:
            self.__store.remove(self.__quad(statement))

    def _create_blank_node(self) -> BlankNode:
    #=========================================
        return BlankNode(oxigraph.BlankNode().value)

    def _size(self) -> int:
    #======================
        return sum(1 for _ in self.__store.quads_for_pattern(None, None, None, self.__graph_name))

    def _clear(self):
    #================
        self.__store.clear_graph(self.__graph_name)

    def _read_from(self, stream: BinaryIO, syntax: Syntax, base_iri: Optional[str]):
    #===============================================================================
        # Dataset syntaxes are flattened into this graph
        self.__store.extend([
            oxigraph.Quad(parsed.subject, parsed.predicate, parsed.object, self.__graph_name)
                for parsed in oxigraph.parse(input=stream, format=rdf_format(syntax), base_iri=base_iri)
        ])

    def _write_to(self, stream: BinaryIO, syntax: Syntax):
    #=====================================================
        quads = self.__store.quads_for_pattern(None, None, None, self.__graph_name)
        if syntax.is_dataset:
            oxigraph.serialize(quads, stream, format=rdf_format(syntax))
        else:
            oxigraph.serialize((quad.triple for quad in quads), stream, format=rdf_format(syntax))

#===============================================================================

class OxigraphGraphSet(RdfGraphSet):
    def __init__(self, store: Optional[oxigraph.Store]=None):
        super().__init__()
        self.__store = store if store is not None else oxigraph.Store()

    @property
    def implementation(self) -> Hashable:
        return oxigraph.Store

    @property
    def store(self) -> oxigraph.Store:
        return self.__store

    def _graph(self, context: Optional[NamedNode]) -> OxigraphGraph:
    #===============================================================
        return OxigraphGraph(context, store=self.__store)

    def _contexts(self) -> Iterable[NamedNode]:
    #==========================================
        return [NamedNode(name.value) for name in self.__store.named_graphs()
                    if isinstance(name, oxigraph.NamedNode)]

    def _has_graph(self, context: NamedNode) -> bool:
    #================================================
        return self.__store.contains_named_graph(oxigraph.NamedNode(context.value))

    def _add_graph(self, context: NamedNode):
    #========================================
        self.__store.add_graph(oxigraph.NamedNode(context.value))

    def _remove_graph(self, context: NamedNode):
    #===========================================
        self.__store.remove_graph(oxigraph.NamedNode(context.value))

    def _read_from(self, stream: BinaryIO, syntax: Syntax, base_iri: Optional[str]):
    #===============================================================================
        self.__store.load(input=stream, format=rdf_format(syntax), base_iri=base_iri)

    def _write_to(self, stream: BinaryIO, syntax: Syntax):
    #=====================================================
        if syntax.is_dataset:
            self.__store.dump(stream, format=rdf_format(syntax))
        else:
            self.__store.dump(stream, format=rdf_format(syntax), from_graph=oxigraph.DefaultGraph())

#===============================================================================
#===============================================================================
