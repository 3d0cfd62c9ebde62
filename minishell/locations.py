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

import pathlib

import minishell.exception


# Location structure -> interface
#
#     .local/share/minishell/                     data()
#         history                                 data_hist()

class Locations(object):
    MINISHELL_DIR_NAME = 'minishell'

    def __init__(self, envp):
        self.envp = envp

    def home(self):
        return Locations.normalize_dir(
            'home directory',
            self.envp.getenv('HOME') or None,
            pathlib.Path.home)

    def data_base(self):
        return Locations.normalize_dir(
            'application data directory (e.g. XDG_DATA_HOME)',
            self.envp.getenv('XDG_DATA_HOME') or None,
            lambda: self.home() / '.local' / 'share')

    def data(self):
        return Locations.ensure_dir_exists(self.data_base() /
                                           Locations.MINISHELL_DIR_NAME)

    def data_hist(self):
        return self.data() / 'history'

    @staticmethod
    def ensure_dir_exists(dir):
        if dir.exists():
            if not dir.is_dir():
                raise minishell.exception.KillShellException(f'Not a directory: {dir}')
        else:
            try:
                dir.mkdir(exist_ok=False, parents=True)
            except OSError as e:
                raise minishell.exception.KillShellException(f'Unable to create {dir}: {e}')
        return dir

    # Defaults are functions, evaluated only if needed.
    @staticmethod
    def normalize_dir(description, provided, *defaults):
        dir = provided
        d = 0
        try:
            while dir is None and d < len(defaults):
                dir = defaults[d]()
                d += 1
        except (KeyError, RuntimeError) as e:
            raise minishell.exception.KillShellException(
                f'Unable to start because value of {description} cannot be determined: {e}')
        if dir is None:
            raise minishell.exception.KillShellException(
                f'Unable to start because value of {description} cannot be determined.')
        if not isinstance(dir, pathlib.Path):
            dir = pathlib.Path(dir)
        return dir.expanduser()
