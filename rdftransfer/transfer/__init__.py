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

"""
Copy, remove and combine statements between graphs.

Graphs may come from different backends. Blank node identifiers are only
meaningful inside the graph that created them, so when the backends differ
``copy`` mints a new blank node in the target for each distinct blank node
of the source. The mapping lives for one call only.

Removal and the set operations do no such translation and are meant for
graphs that share blank node identifiers, typically graphs made by the
same backend.
"""

#===============================================================================

from typing import Any, Iterable

#===============================================================================

from ..rdf import BlankNode, Node, isBlankNode
from ..rdf.graph import RdfGraph, RdfGraphSet, StatementIterator
from ..utils import InvalidArgument, log

#===============================================================================

def size(items: Iterable[Any]) -> int:
#=====================================
    """Count items by iterating, releasing a ``StatementIterator`` afterwards."""
    if isinstance(items, StatementIterator):
        with items:
            return sum(1 for _ in items)
    return sum(1 for _ in items)

#===============================================================================

def copy(source: RdfGraph|RdfGraphSet, target: RdfGraph|RdfGraphSet):
#====================================================================
    """
    Add all statements of ``source`` to ``target``.

    Both must be open and either both graphs or both graph sets. Existing
    statements of ``target`` are kept.
    """
    if isinstance(source, RdfGraphSet) and isinstance(target, RdfGraphSet):
        copy_graph_set(source, target)
    elif isinstance(source, RdfGraph) and isinstance(target, RdfGraph):
        copy_graph(source, target)
    else:
        raise InvalidArgument(f'Cannot copy {source!r} to {target!r}')

def copy_graph(source: RdfGraph, target: RdfGraph):
#==================================================
    source.check_open()
    target.check_open()
    if source.implementation == target.implementation:
        log.debug(f'Copying {source!r} to {target!r}')
        with source.statements() as statements:
            target.add_all(statements)
        return

    log.debug(f'Copying {source!r} to {target!r}, translating blank nodes')
    blank_nodes: dict[str, BlankNode] = {}

    def translate(node: Node) -> Node:
        if not isBlankNode(node):
            return node
        target_node = blank_nodes.get(node.id)          # pyright: ignore[reportAttributeAccessIssue]
        if target_node is None:
            target_node = target.create_blank_node()
            blank_nodes[node.id] = target_node          # pyright: ignore[reportAttributeAccessIssue]
        return target_node

    with source.statements() as statements:
        for statement in statements:
            if isBlankNode(statement.subject) or isBlankNode(statement.object):
                target.add_statement(translate(statement.subject),
                                     statement.predicate,
                                     translate(statement.object))
            else:
                target.add(statement)

#===============================================================================

def copy_graph_set(source: RdfGraphSet, target: RdfGraphSet):
#============================================================
    """
    Copy every named graph of ``source`` into the same-named graph of
    ``target``, creating it when needed, and then the default graph.
    """
    source.check_open()
    target.check_open()
    for source_graph in source.graphs():
        with source_graph, target.graph(source_graph.context) as target_graph:    # pyright: ignore[reportArgumentType]
            copy_graph(source_graph, target_graph)
    with source.default_graph() as source_graph, target.default_graph() as target_graph:
        copy_graph(source_graph, target_graph)

def remove_from(source: RdfGraphSet, target: RdfGraphSet):
#=========================================================
    """
    Remove the statements of each graph of ``source`` from the same-named
    graph of ``target``.

    Statements are matched exactly; blank nodes only match when both sets
    share identifiers. Named graphs missing from ``target`` are skipped.
    """
    source.check_open()
    target.check_open()
    for source_graph in source.graphs():
        if not target.has_graph(source_graph.context):      # pyright: ignore[reportArgumentType]
            continue
        with source_graph, target.graph(source_graph.context) as target_graph:    # pyright: ignore[reportArgumentType]
            with source_graph.statements() as statements:
                target_graph.remove_all(statements)
    with source.default_graph() as source_graph, target.default_graph() as target_graph:
        with source_graph.statements() as statements:
            target_graph.remove_all(statements)

#===============================================================================

def intersection(a: RdfGraph, b: RdfGraph, result: RdfGraph) -> RdfGraph:
#========================================================================
    result.check_open()
    with a.statements() as statements:
        common = [statement for statement in statements if b.contains(statement)]
    result.add_all(common)
    return result

def union(a: RdfGraph, b: RdfGraph, result: RdfGraph) -> RdfGraph:
#=================================================================
    result.check_open()
    with a.statements() as statements:
        result.add_all(statements)
    with b.statements() as statements:
        result.add_all(statements)
    return result

def complement(a: RdfGraph, b: RdfGraph, result: RdfGraph) -> RdfGraph:
#======================================================================
    """``result`` receives the statements of ``a`` that are not in ``b``."""
    result.check_open()
    with a.statements() as statements:
        result.add_all(statements)
    with b.statements() as statements:
        result.remove_all(statements)
    return result

#===============================================================================
#===============================================================================
