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
import stat
import sys


# Utility to print to stderr, flushing stdout first, to minimize weird ordering due to buffering.
def print_to_stderr(env, message):
    sys.stdout.flush()
    if env:
        message = f'{env.config.shell_name}: {message}'
    print(message, file=sys.stderr, flush=True)


# Builtin diagnostics go to stdout, unless the shell is configured to send them to stderr.
def print_diagnostic(env, message):
    if env.config.errors_to_stderr:
        print_to_stderr(env, message)
    else:
        print(f'{env.config.shell_name}: {message}', flush=True)


class InputSource(object):

    def __init__(self, command=None, script=None):
        self._command = False
        self._heredoc = False
        self._interactive = False
        self._script = False
        if command is not None:
            self._command = True
        elif script is not None:
            self._script = True
        else:
            mode = os.fstat(sys.stdin.fileno()).st_mode
            if stat.S_ISFIFO(mode) or stat.S_ISREG(mode) or not sys.stdin.isatty():
                self._heredoc = True
            else:
                self._interactive = True

    def __repr__(self):
        source = ('interactive' if self._interactive else
                  'command' if self._command else
                  'script' if self._script else
                  'heredoc' if self._heredoc else
                  'UNKNOWN')
        return f'InputSource({source})'

    def interactive(self):
        return self._interactive

    def command(self):
        return self._command

    def heredoc(self):
        return self._heredoc

    def script(self):
        return self._script
