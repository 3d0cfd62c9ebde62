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

import minishell.exception

Reason = minishell.exception.Reason
CdException = minishell.exception.CdException


class DirectoryState:

    def __init__(self, env):
        self.env = env

    def __repr__(self):
        return f'DirectoryState({self.env.getvar("PWD")})'

    def current_dir(self):
        return os.getcwd()

    # Checks are ordered: existence, then type, then search permission. The first failing check
    # determines the reason. None means the directory can be entered.
    @staticmethod
    def classify(path):
        if not os.path.exists(path):
            return Reason.NOT_FOUND
        if not os.path.isdir(path):
            return Reason.NOT_A_DIRECTORY
        if not os.access(path, os.X_OK):
            return Reason.PERMISSION_DENIED
        return None

    def change_current_dir(self, path):
        reason = DirectoryState.classify(path)
        if reason is not None:
            raise CdException(reason, path)
        try:
            os.chdir(path)
        except OSError:
            # Passed the checks, but the directory changed underneath us, or chdir failed
            # for some other reason.
            raise CdException(Reason.CHANGE_FAILED, path)
        self.record_change()

    # Update OLDPWD and PWD after a successful chdir. Neither variable is created unless
    # the shell is configured to do so.
    def record_change(self):
        env = self.env
        old_pwd = env.getvar('PWD')
        if old_pwd is not None:
            self._update_location_var('OLDPWD', old_pwd)
        try:
            new_pwd = os.getcwd()
        except OSError:
            new_pwd = None
        if new_pwd is not None:
            self._update_location_var('PWD', new_pwd)

    def _update_location_var(self, var, value):
        if self.env.config.create_location_vars:
            self.env.setvar(var, value)
        else:
            self.env.replacevar(var, value)
