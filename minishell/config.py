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

import minishell.exception

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off', '')


class Config(object):
    DEFAULT_SHELL_NAME = 'minishell'

    def __init__(self,
                 shell_name=DEFAULT_SHELL_NAME,
                 errors_to_stderr=False,
                 create_location_vars=False):
        self.shell_name = shell_name
        # cd diagnostics go to stdout unless this is set.
        self.errors_to_stderr = errors_to_stderr
        # If False, cd only replaces PWD and OLDPWD, it never creates them.
        self.create_location_vars = create_location_vars

    def __repr__(self):
        return (f'Config(shell_name={self.shell_name}, '
                f'errors_to_stderr={self.errors_to_stderr}, '
                f'create_location_vars={self.create_location_vars})')

    def override(self, shell_name=None, errors_to_stderr=None, create_location_vars=None):
        if shell_name is not None:
            self.shell_name = shell_name
        if errors_to_stderr is not None:
            self.errors_to_stderr = errors_to_stderr
        if create_location_vars is not None:
            self.create_location_vars = create_location_vars
        return self

    @classmethod
    def from_environ(cls, environ):
        return cls(shell_name=environ.get('MINISHELL_NAME') or Config.DEFAULT_SHELL_NAME,
                   errors_to_stderr=flag(environ, 'MINISHELL_ERRORS_TO_STDERR'),
                   create_location_vars=flag(environ, 'MINISHELL_CREATE_LOCATION_VARS'))


def flag(environ, var):
    value = environ.get(var, '').strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise minishell.exception.KillShellException(f'Invalid value for {var}: {value}')
