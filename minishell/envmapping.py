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


# Ordered environment, stored the way a process environment is: a list of NAME=value strings.
# Names are unique. Updates happen in place, so unrelated entries keep their positions.
class EnvironmentMapping(object):

    def __init__(self, entries=None):
        self._entries = []
        if entries:
            for entry in entries:
                name, value = EnvironmentMapping.split_entry(entry)
                self.set(name, value)

    def __repr__(self):
        return f'EnvironmentMapping({self._entries})'

    def __len__(self):
        return len(self._entries)

    def __contains__(self, name):
        return self.index(name) >= 0

    def __iter__(self):
        for entry in self._entries:
            yield EnvironmentMapping.split_entry(entry)

    def __eq__(self, other):
        return isinstance(other, EnvironmentMapping) and self._entries == other._entries

    def entries(self):
        return list(self._entries)

    def to_dict(self):
        return dict(self)

    def names(self):
        return [name for name, _ in self]

    # Returns the value of the named variable, or None if it is not present.
    def getenv(self, name):
        i = self.index(name)
        return None if i < 0 else self._entries[i][len(EnvironmentMapping.key(name)):]

    # Returns the position of the named variable, or -1.
    def index(self, name):
        key = EnvironmentMapping.key(name)
        for i, entry in enumerate(self._entries):
            if entry.startswith(key):
                return i
        return -1

    # Replace-only: a missing variable is not created. Returns True iff the variable was present.
    def replace(self, name, value):
        i = self.index(name)
        if i < 0:
            return False
        self._entries[i] = EnvironmentMapping.entry(name, value)
        return True

    # Replace the variable if present, otherwise append it.
    def set(self, name, value):
        if not self.replace(name, value):
            self._entries.append(EnvironmentMapping.entry(name, value))

    def unset(self, name):
        i = self.index(name)
        if i >= 0:
            del self._entries[i]

    @staticmethod
    def from_environ(environ):
        mapping = EnvironmentMapping()
        for name, value in environ.items():
            mapping.set(name, value)
        return mapping

    @staticmethod
    def key(name):
        EnvironmentMapping.check_name(name)
        return f'{name}='

    @staticmethod
    def entry(name, value):
        if value is None:
            raise ValueError(f'Value of {name} must not be None')
        return f'{EnvironmentMapping.key(name)}{value}'

    @staticmethod
    def split_entry(entry):
        name, eq, value = entry.partition('=')
        if not eq:
            raise ValueError(f'Environment entry must have the form NAME=value: {entry}')
        EnvironmentMapping.check_name(name)
        return name, value

    @staticmethod
    def check_name(name):
        if type(name) is not str or len(name) == 0 or '=' in name:
            raise ValueError(f'Invalid environment variable name: {name!r}')
