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

from enum import Enum
from pathlib import Path

#===============================================================================

from ..utils import InvalidArgument

#===============================================================================

class Syntax(Enum):
    #                 name          mime type                suffixes              dataset
    TURTLE      = ('turtle',    'text/turtle',            ('.ttl',),            False)
    N_TRIPLES   = ('ntriples',  'application/n-triples',  ('.nt',),             False)
    N_QUADS     = ('nquads',    'application/n-quads',    ('.nq',),             True)
    TRIG        = ('trig',      'application/trig',       ('.trig',),           True)
    RDF_XML     = ('rdfxml',    'application/rdf+xml',    ('.rdf', '.owl', '.xml'), False)
    N3          = ('n3',        'text/n3',                ('.n3',),             False)

    def __init__(self, label: str, mime_type: str, suffixes: tuple[str, ...], dataset: bool):
        self.label = label
        self.mime_type = mime_type
        self.suffixes = suffixes
        self.is_dataset = dataset

    def __str__(self) -> str:
        return self.label

    @classmethod
    def for_name(cls, name: str) -> 'Syntax':
    #========================================
        key = name.lower().replace('-', '').replace('_', '')
        for syntax in cls:
            if key in (syntax.label, syntax.name.lower().replace('_', ''),
                       syntax.suffixes[0][1:]):
                return syntax
        raise InvalidArgument(f'Unknown RDF syntax: {name}')

    @classmethod
    def for_path(cls, path: str|Path) -> 'Syntax':
    #=============================================
        suffix = Path(path).suffix.lower()
        for syntax in cls:
            if suffix in syntax.suffixes:
                return syntax
        raise InvalidArgument(f'Cannot determine RDF syntax of {path}')

#===============================================================================
#===============================================================================
