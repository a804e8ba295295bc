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

from contextlib import contextmanager
from typing import Any, Iterator

#===============================================================================

import structlog
from structlog.dev import BRIGHT, GREEN, RESET_ALL

#===============================================================================

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(colors=True)
    ]
)

log = structlog.get_logger()

#===============================================================================

def pretty_log(s: Any) -> str:
#=============================
    return f'{RESET_ALL}{GREEN}{str(s)}{RESET_ALL}{BRIGHT}'

#===============================================================================
#===============================================================================

class Issue(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.__reason = reason

    @property
    def reason(self):
        return self.__reason

class InvalidArgument(Issue, ValueError):
    """A precondition of an operation was not met."""

class GraphClosedError(InvalidArgument):
    """A graph or graph set was used while closed."""

class ConversionError(Issue, RuntimeError):
    """Reading or writing RDF failed; the underlying error is the cause."""

#===============================================================================

@contextmanager
def released(resource: Any, name: str='resource') -> Iterator[Any]:
#==================================================================
    """
    Close ``resource`` on every exit path.

    If the body raised, a failure to close is logged and attached to the
    original exception as a note and the original exception propagates.
    """
    try:
        yield resource
    except BaseException as error:
        try:
            resource.close()
        except Exception as cleanup_error:
            log.warning(f'Cleanup of {name} failed: {cleanup_error}')
            error.add_note(f'Cleanup of {name} also failed: {cleanup_error!r}')
        raise
    else:
        resource.close()

#===============================================================================
#===============================================================================
