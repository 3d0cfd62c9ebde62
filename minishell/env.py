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

import os
import sys

import minishell.config
import minishell.directorystate
import minishell.envmapping
import minishell.exception
import minishell.locations
import minishell.opmodule


# State of one shell: environment variables, arguments of the command being run, and
# the exit status of the most recent command. Every builtin receives this object.
class Environment(object):

    def __init__(self, envp, config, trace=None):
        assert isinstance(envp, minishell.envmapping.EnvironmentMapping), envp
        self.envp = envp
        self.config = config
        self.args = []
        self.exit_status = 0
        self.locations = minishell.locations.Locations(envp)
        self.directory_state = minishell.directorystate.DirectoryState(self)
        self.op_modules = minishell.opmodule.import_op_modules()
        self.trace = trace if trace else Trace()

    def __repr__(self):
        return f'Environment(args={self.args}, exit_status={self.exit_status})'

    def dir_state(self):
        return self.directory_state

    def hasvar(self, var):
        return var in self.envp

    def getvar(self, var):
        return self.envp.getenv(var)

    def setvar(self, var, value):
        self.envp.set(var, value)

    # Returns True iff var was present, and has been updated.
    def replacevar(self, var, value):
        return self.envp.replace(var, value)

    def set_args(self, args):
        self.args = list(args)

    def arg_count(self):
        # args[0] is the name of the command.
        return max(0, len(self.args) - 1)

    @classmethod
    def create(cls, environ=None, config=None, trace=None):
        if environ is None:
            environ = os.environ
        if config is None:
            config = minishell.config.Config.from_environ(environ)
        envp = minishell.envmapping.EnvironmentMapping.from_environ(environ)
        return cls(envp, config, trace)


class EnvironmentInteractive(Environment):
    DEFAULT_PROMPT = '$ '
    UNKNOWN_DIR = '?'

    def __init__(self, envp, config, trace=None):
        super().__init__(envp, config, trace)

    def prompt(self):
        dir = self.getvar('PWD')
        if not dir:
            try:
                dir = self.dir_state().current_dir()
            except OSError:
                # The current directory has been removed.
                dir = EnvironmentInteractive.UNKNOWN_DIR
        home = (self.getvar('HOME') or '').rstrip('/')
        if home and (dir == home or dir.startswith(home + '/')):
            dir = '~' + dir[len(home):]
        return f'{self.config.shell_name} {dir} {EnvironmentInteractive.DEFAULT_PROMPT}'


class Trace(object):

    def __init__(self):
        self.tracefile = None
        self.description = None

    def is_enabled(self):
        return self.tracefile is not None

    def enable(self, target):
        if target is sys.stdout:
            self.tracefile = sys.stdout
            self.description = 'stdout'
        else:
            try:
                self.tracefile = open(target, 'a')
                self.description = target
            except OSError as e:
                raise minishell.exception.KillShellException(
                    f'Unable to start tracing to {target}: {e}')

    def disable(self):
        if self.tracefile and self.tracefile is not sys.stdout:
            self.tracefile.close()
        self.tracefile = None
        self.description = None

    # output argument: what the phase produced
    def write(self, phase, op, output=None):
        assert self.tracefile
        if output is None:
            print(f'{op} {phase}', file=self.tracefile, flush=True)
        else:
            print(f'{op} {phase} -> {output}', file=self.tracefile, flush=True)
