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
Graph containers and graph sets.

An ``RdfGraph`` holds the statements of one context, either a named graph
or the default graph. An ``RdfGraphSet`` owns any number of named graphs
and exactly one default graph. Backends subclass both and implement the
underscored hooks; the public methods check lifecycle state and convert
arguments before calling them.
"""

#===============================================================================

from abc import ABC, abstractmethod
from typing import BinaryIO, Hashable, Iterable, Iterator, Optional, Self

#===============================================================================

from ..utils import ConversionError, GraphClosedError, Issue
from . import BlankNode, NamedNode, Node, Resource, Statement, isWildcard
from .syntax import Syntax

#===============================================================================

Context = NamedNode | str

def context_node(context: Optional[Context]) -> Optional[NamedNode]:
#===================================================================
    if isinstance(context, str):
        return NamedNode(context)
    return context

#===============================================================================

class StatementIterator:
    """
    An iterator over statements that holds backend resources until released.

    Use it as a context manager, or call ``close()``, once finished with it.
    """
    def __init__(self, statements: Iterator[Statement]):
        self.__statements = statements
        self.__closed = False

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc):
        self.close()

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Statement:
        if self.__closed:
            raise Issue('Statement iterator has been closed')
        return next(self.__statements)

    @property
    def closed(self) -> bool:
        return self.__closed

    def close(self):
    #===============
        if not self.__closed:
            self.__closed = True
            close = getattr(self.__statements, 'close', None)
            if close is not None:
                close()

#===============================================================================

class RdfGraph(ABC):
    def __init__(self, context: Optional[Context]=None):
        self.__context = context_node(context)
        self.__open = False

    def __enter__(self) -> Self:
        return self.open()

    def __exit__(self, *exc):
        self.close()

    def __contains__(self, statement: Statement) -> bool:
        return self.contains(statement)

    def __iter__(self) -> Iterator[Statement]:
        with self.statements() as statements:
            yield from statements

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        context = 'default' if self.__context is None else f'<{self.__context}>'
        state = 'open' if self.__open else 'closed'
        return f'{self.__class__.__name__}({context}, {state})'

    @property
    def context(self) -> Optional[NamedNode]:
        return self.__context

    @property
    def is_open(self) -> bool:
        return self.__open

    @property
    @abstractmethod
    def implementation(self) -> Hashable:
        """Graphs with equal implementations share blank node identifiers."""

    def open(self) -> Self:
    #======================
        self.__open = True
        return self

    def close(self):
    #===============
        self.__open = False

    def check_open(self):
    #====================
        if not self.__open:
            raise GraphClosedError(f'{self!r} must be open')

    def statements(self) -> StatementIterator:
    #=========================================
        return self.find(None, None, None)

    def find(self, subject: Optional[Node]=None, predicate: Optional[Node]=None,
                   object: Optional[Node]=None) -> StatementIterator:
    #=================================================================
        self.check_open()
        return StatementIterator(self._find(None if isWildcard(subject) else subject,
                                            None if isWildcard(predicate) else predicate,
                                            None if isWildcard(object) else object))

    def contains(self, statement: Statement) -> bool:
    #================================================
        with self.find(*statement) as statements:
            return next(statements, None) is not None

    def add(self, statement: Statement) -> Self:
    #===========================================
        self.add_all([statement])
        return self

    def add_statement(self, subject: Resource, predicate: NamedNode, object: Node) -> Self:
    #======================================================================================
        return self.add(Statement(subject, predicate, object))

    def add_all(self, statements: Iterable[Statement]):
    #==================================================
        self.check_open()
        # Collected first so a graph can be extended from its own iterator
        self._add_all([Statement(*s) for s in statements])

    def remove(self, statement: Statement) -> Self:
    #==============================================
        self.remove_all([statement])
        return self

    def remove_statement(self, subject: Resource, predicate: NamedNode, object: Node) -> Self:
    #=========================================================================================
        return self.remove(Statement(subject, predicate, object))

    def remove_all(self, statements: Iterable[Statement]):
    #=====================================================
        self.check_open()
        self._remove_all([Statement(*s) for s in statements])

    def create_blank_node(self) -> BlankNode:
    #========================================
        self.check_open()
        return self._create_blank_node()

    def size(self) -> int:
    #=====================
        self.check_open()
        return self._size()

    def is_empty(self) -> bool:
    #==========================
        return self.size() == 0

    def clear(self):
    #===============
        self.check_open()
        self._clear()

    def read_from(self, stream: BinaryIO, syntax: Syntax, base_iri: Optional[str]=None):
    #===================================================================================
        self.check_open()
        try:
            self._read_from(stream, syntax, base_iri)
        except Issue:
            raise
        except Exception as e:
            raise ConversionError(f'Cannot read {syntax} into {self!r}: {e}') from e

    def write_to(self, stream: BinaryIO, syntax: Syntax):
    #====================================================
        self.check_open()
        try:
            self._write_to(stream, syntax)
        except Issue:
            raise
        except Exception as e:
            raise ConversionError(f'Cannot write {self!r} as {syntax}: {e}') from e

    @abstractmethod
    def _find(self, subject: Optional[Node], predicate: Optional[Node],
                    object: Optional[Node]) -> Iterator[Statement]: ...

    @abstractmethod
    def _add_all(self, statements: list[Statement]): ...

    @abstractmethod
    def _remove_all(self, statements: list[Statement]): ...

    @abstractmethod
    def _create_blank_node(self) -> BlankNode: ...

    @abstractmethod
    def _size(self) -> int: ...

    @abstractmethod
    def _clear(self): ...

    @abstractmethod
    def _read_from(self, stream: BinaryIO, syntax: Syntax, base_iri: Optional[str]): ...

    @abstractmethod
    def _write_to(self, stream: BinaryIO, syntax: Syntax): ...

#===============================================================================

class RdfGraphSet(ABC):
    def __init__(self):
        self.__open = False

    def __enter__(self) -> Self:
        return self.open()

    def __exit__(self, *exc):
        self.close()

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        state = 'open' if self.__open else 'closed'
        return f'{self.__class__.__name__}({state})'

    @property
    def is_open(self) -> bool:
        return self.__open

    @property
    @abstractmethod
    def implementation(self) -> Hashable: ...

    def open(self) -> Self:
    #======================
        self.__open = True
        return self

    def close(self):
    #===============
        self.__open = False

    def check_open(self):
    #====================
        if not self.__open:
            raise GraphClosedError(f'{self!r} must be open')

    def default_graph(self) -> RdfGraph:
    #===================================
        """A new, closed, view of the default graph."""
        self.check_open()
        return self._graph(None)

    def graph(self, context: Context) -> RdfGraph:
    #=============================================
        """A new, closed, view of the named graph, creating the graph if needed."""
        self.check_open()
        context = context_node(context)
        if not self._has_graph(context):
            self._add_graph(context)
        return self._graph(context)

    def graphs(self) -> list[RdfGraph]:
    #==================================
        return [self._graph(context) for context in self.contexts()]

    def contexts(self) -> list[NamedNode]:
    #=====================================
        self.check_open()
        return list(self._contexts())

    def has_graph(self, context: Context) -> bool:
    #=============================================
        self.check_open()
        return self._has_graph(context_node(context))

    def remove_graph(self, context: Context):
    #========================================
        self.check_open()
        context = context_node(context)
        if self._has_graph(context):
            self._remove_graph(context)

    def contains(self, context: Optional[Context], statement: Statement) -> bool:
    #============================================================================
        self.check_open()
        context = context_node(context)
        if context is not None and not self._has_graph(context):
            return False
        with self._graph(context) as graph:
            return graph.contains(statement)

    def size(self) -> int:
    #=====================
        self.check_open()
        total = 0
        for graph in [self._graph(None)] + self.graphs():
            with graph:
                total += graph.size()
        return total

    def clear(self):
    #===============
        """Remove every named graph and empty the default graph."""
        self.check_open()
        for context in self.contexts():
            self._remove_graph(context)
        with self._graph(None) as graph:
            graph.clear()

    def read_from(self, stream: BinaryIO, syntax: Syntax, base_iri: Optional[str]=None):
    #===================================================================================
        """Triple syntaxes load into the default graph."""
        self.check_open()
        try:
            self._read_from(stream, syntax, base_iri)
        except Issue:
            raise
        except Exception as e:
            raise ConversionError(f'Cannot read {syntax} into {self!r}: {e}') from e

    def write_to(self, stream: BinaryIO, syntax: Syntax):
    #====================================================
        """Triple syntaxes write the default graph only."""
        self.check_open()
        try:
            self._write_to(stream, syntax)
        except Issue:
            raise
        except Exception as e:
            raise ConversionError(f'Cannot write {self!r} as {syntax}: {e}') from e

    @abstractmethod
    def _graph(self, context: Optional[NamedNode]) -> RdfGraph: ...

    @abstractmethod
    def _contexts(self) -> Iterable[NamedNode]: ...

    @abstractmethod
    def _has_graph(self, context: NamedNode) -> bool: ...

    @abstractmethod
    def _add_graph(self, context: NamedNode): ...

    @abstractmethod
    def _remove_graph(self, context: NamedNode): ...

    @abstractmethod
    def _read_from(self, stream: BinaryIO, syntax: Syntax, base_iri: Optional[str]): ...

    @abstractmethod
    def _write_to(self, stream: BinaryIO, syntax: Syntax): ...

#===============================================================================
#===============================================================================
