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

import argparse
import shlex
import sys

import minishell.config
import minishell.core
import minishell.env
import minishell.exception
import minishell.reader
import minishell.util
import minishell.version


class Main(object):

    def __init__(self, env):
        self.env = env

    # Main

    def parse_and_run_command(self, text):
        if text:
            env = self.env
            env.exit_status = 0
            try:
                words = parse(text)
                if len(words) > 0:
                    command = minishell.core.Command(text, words)
                    self.execute_command(command)
            except minishell.exception.KillCommandException as e:
                minishell.util.print_to_stderr(env, e)
                if env.exit_status == 0:
                    env.exit_status = 1
        return self.env.exit_status

    def execute_command(self, command):
        command.execute(self.env)


class MainScript(Main):

    def __init__(self, env):
        super().__init__(env)

    def run(self, script):
        for command in commands_in_script(script):
            self.parse_and_run_command(command)
        return self.env.exit_status


class MainInteractive(Main):

    def __init__(self, env):
        super().__init__(env)
        self.reader = minishell.reader.Reader(env)

    def run(self):
        try:
            while True:
                try:
                    text = self.reader.input()
                    self.parse_and_run_command(text)
                except KeyboardInterrupt:  # ctrl-C
                    print()
        except EOFError:  # ctrl-d
            print()
        return self.env.exit_status


def parse(text):
    try:
        return shlex.split(text, comments=True)
    except ValueError:
        raise minishell.exception.MissingQuoteException(text)


def commands_in_script(script):
    command = ''
    for line in script.split('\n'):
        if len(line.strip()) > 0:
            if line.endswith('\\'):
                command += line[:-1]
            else:
                command += line
                yield command
                command = ''
    if len(command) > 0:
        yield command


def read_heredoc():
    return sys.stdin.read()


def read_script(script_path):
    try:
        with open(script_path, 'r') as script_file:
            return script_file.read()
    except OSError as e:
        raise minishell.exception.KillShellException(f'Unable to read {script_path}: {e.strerror}')


def args_parser():
    parser = argparse.ArgumentParser(prog='minishell',
                                     description='A shell with a cd builtin.')
    parser.add_argument('-c', '--command',
                        help='Run COMMAND and exit.')
    parser.add_argument('--trace',
                        metavar='FILE',
                        help='Append a trace of builtin execution to FILE.')
    parser.add_argument('--stderr',
                        action='store_true',
                        default=None,
                        help='Write builtin diagnostics to stderr instead of stdout.')
    parser.add_argument('--create-location-vars',
                        action='store_true',
                        default=None,
                        help='Let cd create PWD and OLDPWD if they are not defined.')
    parser.add_argument('--version',
                        action='version',
                        version=f'%(prog)s {minishell.version.VERSION}')
    parser.add_argument('script',
                        nargs='?',
                        help='File of commands to run.')
    return parser


def main(argv=None):
    args = args_parser().parse_args(argv)
    input_source = minishell.util.InputSource(command=args.command, script=args.script)
    trace = minishell.env.Trace()
    if args.trace:
        trace.enable(args.trace)
    env_class = (minishell.env.EnvironmentInteractive
                 if input_source.interactive() else
                 minishell.env.Environment)
    try:
        env = env_class.create(trace=trace)
        env.config.override(errors_to_stderr=args.stderr,
                            create_location_vars=args.create_location_vars)
        if input_source.interactive():
            return MainInteractive(env).run()
        elif input_source.command():
            return MainScript(env).run(args.command)
        elif input_source.script():
            return MainScript(env).run(read_script(args.script))
        elif input_source.heredoc():
            return MainScript(env).run(read_heredoc())
        else:
            raise minishell.exception.KillShellException('Unable to determine input source!')
    finally:
        trace.disable()


def run():
    try:
        sys.exit(main())
    except minishell.exception.KillShellException as e:
        print(f'{minishell.config.Config.DEFAULT_SHELL_NAME}: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    run()
