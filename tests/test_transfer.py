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

from rdftransfer import GraphClosedError, InvalidArgument, Statement
from rdftransfer import blankNode, complement, copy, create_graph, create_graph_set, intersection
from rdftransfer import literal, namedNode, remove_from, size, union
from rdftransfer.rdf import isBlankNode

#===============================================================================

p = namedNode('http://example.org/p')
q = namedNode('http://example.org/q')
o1 = namedNode('http://example.org/o1')
o2 = namedNode('http://example.org/o2')
subject = namedNode('http://example.org/s')

#===============================================================================

def blank_subjects(graph) -> set:
#================================
    return {s.subject for s in graph if isBlankNode(s.subject)}

class StoreFailure(Exception):
    pass

def reject(statements):
#======================
    raise StoreFailure('backend rejected the update')

def rejecting(graph):
#====================
    graph._add_all = reject
    graph._remove_all = reject
    return graph

def recording(graph, iterators: list):
#=====================================
    find = graph.find
    def find_and_record(*pattern):
        iterator = find(*pattern)
        iterators.append(iterator)
        return iterator
    graph.find = find_and_record
    return graph

#===============================================================================

def test_same_backend_copy_is_exact(backend):
#============================================
    with create_graph(backend) as a, create_graph(backend) as b:
        x = a.create_blank_node()
        a.add_all([Statement(x, p, o1), Statement(subject, p, literal('name')), Statement(subject, q, x)])
        copy(a, b)
        assert b.size() == a.size()
        assert set(b) == set(a)

def test_same_backend_copy_of_empty_graph(backend):
#==================================================
    with create_graph(backend) as a, create_graph(backend) as b:
        copy(a, b)
        assert b.is_empty()

def test_shared_blank_node_stays_shared(backend_pair):
#=====================================================
    source_backend, target_backend = backend_pair
    with create_graph(source_backend) as a, create_graph(target_backend) as b:
        x = a.create_blank_node()
        a.add_statement(x, p, o1)
        a.add_statement(x, p, o2)
        copy(a, b)
        assert b.size() == 2
        subjects = {s.subject for s in b}
        assert len(subjects) == 1
        target_x = subjects.pop()
        assert isBlankNode(target_x)
        assert target_x != x
        assert {s.object for s in b} == {o1, o2}

def test_distinct_blank_nodes_stay_distinct(backend_pair):
#=========================================================
    source_backend, target_backend = backend_pair
    with create_graph(source_backend) as a, create_graph(target_backend) as b:
        x = a.create_blank_node()
        y = a.create_blank_node()
        a.add_all([Statement(x, p, o1), Statement(y, p, o1), Statement(x, q, y)])
        copy(a, b)
        assert b.size() == 3
        assert len(blank_subjects(b)) == 2
        with b.find(None, q, None) as statements:
            link = next(statements)
        # The object of the link is the same node as the subject of one of the others
        assert isBlankNode(link.object)
        assert Statement(link.subject, p, o1) in b
        assert Statement(link.object, p, o1) in b
        assert link.subject != link.object

def test_plain_terms_are_not_rewritten(backend_pair):
#====================================================
    source_backend, target_backend = backend_pair
    statements = [Statement(subject, p, o1),
                  Statement(subject, q, literal('chat', language='fr'))]
    with create_graph(source_backend) as a, create_graph(target_backend) as b:
        a.add_all(statements)
        copy(a, b)
        assert set(b) == set(statements)

def test_each_copy_has_its_own_blank_node_map(backend_pair):
#===========================================================
    source_backend, target_backend = backend_pair
    with (create_graph(source_backend) as first,
          create_graph(source_backend) as second,
          create_graph(target_backend) as target):
        # Same identifier, but in two unrelated graphs
        first.add_statement(blankNode('b0'), p, o1)
        second.add_statement(blankNode('b0'), p, o2)
        copy(first, target)
        copy(second, target)
        assert target.size() == 2
        assert len(blank_subjects(target)) == 2

def test_copy_is_additive(backend, backend_pair):
#================================================
    for target_backend in (backend, backend_pair[1]):
        with create_graph(backend) as a, create_graph(target_backend) as b:
            a.add_all([Statement(subject, p, o1), Statement(subject, p, o2)])
            b.add_all([Statement(subject, p, o1), Statement(subject, q, o1)])
            copy(a, b)
            assert b.size() == 3
            assert Statement(subject, q, o1) in b

def test_copy_into_itself(graph):
#================================
    graph.add_all([Statement(subject, p, o1), Statement(subject, p, o2)])
    copy(graph, graph)
    assert graph.size() == 2

def test_copy_needs_open_graphs(backend_pair):
#=============================================
    source_backend, target_backend = backend_pair
    source = create_graph(source_backend)
    with create_graph(target_backend) as target:
        with pytest.raises(GraphClosedError):
            copy(source, target)
    with source:
        with pytest.raises(GraphClosedError):
            copy(source, create_graph(target_backend))

def test_copy_needs_matching_containers(backend):
#================================================
    with create_graph(backend) as graph, create_graph_set(backend) as graph_set:
        with pytest.raises(InvalidArgument):
            copy(graph, graph_set)

def test_size(graph):
#====================
    graph.add_all([Statement(subject, p, o1), Statement(subject, p, o2)])
    statements = graph.statements()
    assert size(statements) == 2
    assert statements.closed
    assert size(graph) == 2
    assert size([]) == 0

#===============================================================================

@pytest.mark.parametrize('operation', [
    copy,
    lambda source, target: union(source, source, target),
    lambda source, target: intersection(source, source, target),
    lambda source, target: complement(source, source, target),
], ids=['copy', 'union', 'intersection', 'complement'])
def test_failed_update_releases_source(backend_pair, operation):
#===============================================================
    source_backend, other_backend = backend_pair
    for target_backend in (source_backend, other_backend):
        iterators = []
        with create_graph(source_backend) as source, create_graph(target_backend) as target:
            x = source.create_blank_node()
            source.add_all([Statement(x, p, o1), Statement(subject, p, o2)])
            recording(source, iterators)
            rejecting(target)
            with pytest.raises(StoreFailure) as info:
                operation(source, target)
            assert type(info.value) is StoreFailure
            assert iterators
            assert all(iterator.closed for iterator in iterators)

def test_failed_removal_releases_source(backend):
#================================================
    iterators = []
    with create_graph_set(backend) as source, create_graph_set(backend) as target:
        for graph_set in (source, target):
            with graph_set.graph('urn:g1') as graph:
                graph.add(Statement(subject, p, o1))
        source_view = source._graph
        source._graph = lambda context: recording(source_view(context), iterators)
        target_view = target._graph
        target._graph = lambda context: rejecting(target_view(context))
        with pytest.raises(StoreFailure):
            remove_from(source, target)
        assert iterators
        assert all(iterator.closed for iterator in iterators)
        assert target.contains('urn:g1', Statement(subject, p, o1))

#===============================================================================
#===============================================================================
