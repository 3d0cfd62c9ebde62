# This file is part of minishell.
#
# minishell is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# minishell is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with minishell.  If not, see <https://www.gnu.org/licenses/>.

"""Exceptions used to terminate a command or the shell.

These extend C{BaseException}, so that they cannot be caught by C{except Exception}.
A C{KillCommandException} ends the current command, leaving the shell running.
A C{KillShellException} ends the shell.
"""

from enum import Enum, auto


# Exception for terminating command. By extending BaseException, this exception
# cannot be caught by "except Exception".
class KillCommandException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return str(self.cause)


class KillShellException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)


# Indicates a command terminating with a string missing a terminating quote.
class MissingQuoteException(KillCommandException):

    def __init__(self, text):
        super().__init__(f'Missing quote: {text}')
        self.text = text


class Reason(Enum):
    NO_HOME = auto()
    TOO_MANY_ARGUMENTS = auto()
    OLDPWD_UNSET = auto()
    NOT_FOUND = auto()
    NOT_A_DIRECTORY = auto()
    PERMISSION_DENIED = auto()
    CHANGE_FAILED = auto()

    def needs_path(self):
        return self in (Reason.NOT_FOUND,
                        Reason.NOT_A_DIRECTORY,
                        Reason.PERMISSION_DENIED,
                        Reason.CHANGE_FAILED)


# A failed cd. path is the path that was being resolved or entered, None for
# failures that happen before a path is known.
class CdException(KillCommandException):

    def __init__(self, reason, path=None):
        assert isinstance(reason, Reason), reason
        assert (path is not None) or not reason.needs_path(), reason
        super().__init__(reason.name)
        self.reason = reason
        self.path = path

    def __repr__(self):
        return f'CdException({self.reason.name}, {self.path!r})'
