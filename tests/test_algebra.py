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

from rdftransfer import GraphClosedError, Statement
from rdftransfer import complement, create_graph, intersection, namedNode, union

#===============================================================================

ex = lambda name: namedNode(f'http://example.org/{name}')

s1 = Statement(ex('a'), ex('p'), ex('one'))
s2 = Statement(ex('a'), ex('p'), ex('two'))
s3 = Statement(ex('b'), ex('p'), ex('three'))
s4 = Statement(ex('b'), ex('p'), ex('four'))

#===============================================================================

@pytest.fixture
def operands(backend):
    with create_graph(backend) as a, create_graph(backend) as b, create_graph(backend) as result:
        a.add_all([s1, s2, s3])
        b.add_all([s2, s3, s4])
        yield a, b, result

#===============================================================================

def test_intersection(operands):
#===============================
    a, b, result = operands
    assert intersection(a, b, result) is result
    assert set(result) == {s2, s3}
    assert result.size() <= min(a.size(), b.size())

def test_union(operands):
#========================
    a, b, result = operands
    union(a, b, result)
    assert set(result) == {s1, s2, s3, s4}
    for statement in list(a) + list(b):
        assert statement in result

def test_complement(operands):
#=============================
    a, b, result = operands
    complement(a, b, result)
    assert set(result) == {s1}
    for statement in b:
        assert statement not in result

def test_disjoint_intersection_is_empty(backend):
#================================================
    with create_graph(backend) as a, create_graph(backend) as b, create_graph(backend) as result:
        a.add(s1)
        b.add(s4)
        assert intersection(a, b, result).is_empty()

def test_result_may_be_an_operand(operands):
#===========================================
    a, b, _ = operands
    union(a, b, a)
    assert set(a) == {s1, s2, s3, s4}
    complement(a, b, a)
    assert set(a) == {s1}

def test_complement_into_subtrahend_empties_it(operands):
#======================================================
    a, b, _ = operands
    complement(a, b, b)
    assert b.is_empty()

def test_result_must_be_open(backend):
#=====================================
    with create_graph(backend) as a, create_graph(backend) as b:
        with pytest.raises(GraphClosedError):
            union(a, b, create_graph(backend))

#===============================================================================
#===============================================================================
