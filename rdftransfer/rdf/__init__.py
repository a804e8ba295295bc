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
Backend independent RDF terms.

Each graph backend converts between these values and its own native terms,
so statements can be moved between graphs built on different libraries.
"""

#===============================================================================

from collections import namedtuple
from dataclasses import dataclass
from typing import Any, Optional

#===============================================================================

XSD_STRING = 'http://www.w3.org/2001/XMLSchema#string'
RDF_LANG_STRING = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#langString'

#===============================================================================

@dataclass(frozen=True)
class NamedNode:
    value: str

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class BlankNode:
    """
    An anonymous node.

    ``id`` is the identifier assigned by the graph that created the node and
    has no meaning in any other graph.
    """
    id: str

    def __str__(self) -> str:
        return f'_:{self.id}'

@dataclass(frozen=True)
class Literal:
    value: str
    language: Optional[str] = None
    datatype: Optional[NamedNode] = None

    def __post_init__(self):
        # Plain strings compare equal whichever way a backend spells them
        if self.datatype is not None and self.datatype.value in (XSD_STRING, RDF_LANG_STRING):
            object.__setattr__(self, 'datatype', None)

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class Variable:
    name: str

    def __str__(self) -> str:
        return f'?{self.name}'

ANY = Variable('any')

#===============================================================================

Resource = NamedNode | BlankNode
Node = NamedNode | BlankNode | Literal | Variable

Statement = namedtuple('Statement', 'subject, predicate, object')

#===============================================================================

def blankNode(id: str) -> BlankNode:
    return BlankNode(id)

def literal(value: str|int|float|bool, datatype: Optional[NamedNode]=None,
            language: Optional[str]=None) -> Literal:
    if isinstance(value, bool):
        value = 'true' if value else 'false'
    return Literal(str(value), language=language, datatype=datatype)

def namedNode(uri: str) -> NamedNode:
    return NamedNode(uri)

#===============================================================================

def isBlankNode(node: Any) -> bool:
    return isinstance(node, BlankNode)

def isWildcard(node: Any) -> bool:
    return node is None or isinstance(node, Variable)

#===============================================================================
#===============================================================================
