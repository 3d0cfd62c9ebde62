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

import minishell.core
import minishell.exception
import minishell.util

Reason = minishell.exception.Reason
CdException = minishell.exception.CdException

MESSAGES = {
    Reason.NO_HOME: 'No such file or directory',
    Reason.TOO_MANY_ARGUMENTS: 'too many arguments',
    Reason.OLDPWD_UNSET: 'OLDPWD not set',
    Reason.NOT_FOUND: 'No such file or directory',
    Reason.NOT_A_DIRECTORY: 'Not a directory',
    Reason.PERMISSION_DENIED: 'Permission denied',
    Reason.CHANGE_FAILED: 'Failed to change directory',
}

FAILURE = 1


class Cd(minishell.core.Builtin):

    def __init__(self):
        super().__init__()
        self.directory = None

    def __repr__(self):
        return f'cd({self.directory})' if self.directory is not None else 'cd()'

    # Builtin

    def run(self, env):
        try:
            self.directory = resolve(env)
            self.trace(env, 'RESOLVE', self.directory)
            env.dir_state().change_current_dir(self.directory)
            self.trace(env, 'CHDIR', self.directory)
            self.trace(env, 'RECORD', f'OLDPWD={env.getvar("OLDPWD")} PWD={env.getvar("PWD")}')
        except CdException as e:
            self.trace(env, 'FAILED', e.reason.name)
            report(env, e)


# Turns the command's operand, (or its absence), into the path to be entered.
def resolve(env):
    n = env.arg_count()
    if n == 0:
        home = env.getvar('HOME')
        if not home:
            raise CdException(Reason.NO_HOME)
        return home
    if n > 1:
        raise CdException(Reason.TOO_MANY_ARGUMENTS)
    arg = env.args[1]
    if arg.startswith('~'):
        home = env.getvar('HOME')
        if home is None:
            # Reported the same way as an unset OLDPWD.
            raise CdException(Reason.OLDPWD_UNSET)
        return home + arg[1:]
    if arg.startswith('-'):
        old_pwd = env.getvar('OLDPWD')
        if old_pwd is None:
            raise CdException(Reason.OLDPWD_UNSET)
        return old_pwd
    return arg


def message(e):
    text = MESSAGES[e.reason]
    return f'cd: {e.path}: {text}' if e.reason.needs_path() else f'cd: {text}'


def report(env, e):
    minishell.util.print_diagnostic(env, message(e))
    env.exit_status = FAILURE
