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


class Builtin(object):

    def __init__(self):
        super().__init__()

    def __repr__(self):
        assert False, self.op_name()

    # Builtin

    # Called with env.args set to the words of the command, the first being the builtin's name.
    def run(self, env):
        assert False, self.op_name()

    def trace(self, env, phase, output=None):
        if env.trace.is_enabled():
            env.trace.write(phase, self, output)

    @classmethod
    def op_name(cls):
        return cls.__name__.lower()


class Command:

    def __init__(self, source, words):
        self.source = source
        self.words = words

    def __repr__(self):
        return f'Command({self.words})'

    def execute(self, env):
        name = self.words[0]
        op_module = env.op_modules.get(name, None)
        if op_module is None:
            env.exit_status = 127
            raise minishell.exception.KillCommandException(f'{name}: command not found')
        env.set_args(self.words)
        op_module.create_op().run(env)
