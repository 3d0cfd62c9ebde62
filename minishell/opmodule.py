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

import importlib
import inspect

import minishell.core
import minishell.op


class OpModule:

    def __init__(self, op_name):
        self._op_constructor = None
        op_module = importlib.import_module(f'minishell.op.{op_name}')
        # Locate the builtin class, whose lowercased name is the module name.
        for v in op_module.__dict__.values():
            if inspect.isclass(v) and minishell.core.Builtin in inspect.getmro(v):
                # The builtin class, e.g. Cd. Other Builtin subclasses imported by the module are skipped.
                if op_name == v.__name__.lower():
                    self._op_constructor = v
        assert self._op_constructor is not None, op_name

    def create_op(self):
        return self._op_constructor()


def import_op_modules():
    op_modules = {}
    for op_name in minishell.op.all:
        op_modules[op_name] = OpModule(op_name)
    return op_modules
