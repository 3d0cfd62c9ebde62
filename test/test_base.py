import contextlib
import io
import os
import pathlib
import shutil
import sys
import tempfile
import time
import unittest.mock

import dill.source

import minishell.config
import minishell.env
import minishell.main


TEST_TIMING = False


def timeit(f):
    def timetest():
        start = time.time()
        f()
        stop = time.time()
        usec = (stop - start) * 1000000
        print(f'TEST TIMING -- {f.__name__}: {usec}')
    timetest.__name__ = f.__name__
    return timetest if TEST_TIMING else f


class TestBase:
    start_dir = os.getcwd()

    def __init__(self):
        self.env = None
        self.main = None
        self.failures = 0
        self.reset_environment()

    def reset_environment(self, environ=None, **config):
        os.chdir(TestBase.start_dir)

    def fail(self, command, message):
        print(f'{self.description(command)} failed: {message}', file=sys.__stdout__)
        self.failures += 1
        raise AssertionError(f'{self.description(command)}: {message}')

    def description(self, x):
        if isinstance(x, str):
            return x
        try:
            return dill.source.getsource(x).strip().split('\n')[0]
        except (OSError, TypeError, IndexError):
            return repr(x)

    def to_string(self, x):
        if isinstance(x, str):
            return x
        elif isinstance(x, tuple) or isinstance(x, list):
            return '\n'.join([str(o) for o in x])
        else:
            return str(x)

    def remove_empty_line_at_end(self, lines):
        if len(lines) > 0 and len(lines[-1]) == 0:
            del lines[-1]
        return lines

    def check_ok(self, command, expected, actual):
        expected = self.remove_empty_line_at_end(expected.split('\n'))
        actual = self.remove_empty_line_at_end(actual.split('\n'))
        if expected != actual:
            self.fail(command, f'\n    expected:\n<<<{expected}>>>\n    actual:\n<<<{actual}>>>')

    def check_substring(self, command, expected, actual):
        if expected not in actual:
            self.fail(command,
                      f'Expected substring not found in actual:'
                      f'\n    expected:\n<<<{expected}>>>\n    actual:\n<<<{actual}>>>')

    def check_eq(self, command, expected, actual):
        if expected != actual:
            self.fail(command, f'expected != actual:\n    expected: {expected}\n    actual:   {actual}')

    def report_failures(self, label):
        print(f'{self.failures} failures: {label}')


class TestConsole(TestBase):

    test_home = '/tmp/test_home'

    def __init__(self):
        super().__init__()

    # environ defaults to HOME, PWD and OLDPWD, describing a shell started in start_dir.
    def reset_environment(self, environ=None, **config):
        super().reset_environment()
        if environ is None:
            environ = {'HOME': TestConsole.test_home,
                       'OLDPWD': TestBase.start_dir,
                       'PWD': TestBase.start_dir}
        self.env = minishell.env.Environment.create(environ=environ,
                                                    config=minishell.config.Config(**config))
        self.main = minishell.main.MainScript(self.env)

    def run(self,
            test,
            expected_out=None,
            expected_err=None,
            expected_status=None):
        # test is a command, or a function. A function's return value is checked against expected_status.
        if expected_out is None and expected_err is None and expected_status is None:
            self.execute(test)
        else:
            print(f'TESTING: {self.description(test)}')
            actual_out, actual_err, actual_status = self.run_and_capture_output(test)
            if len(actual_err) > 0 and expected_err is None:
                self.fail(test, f'Unexpected error: {actual_err}')
            if expected_out is not None:
                self.check_ok(test, self.to_string(expected_out), actual_out)
            if expected_err is not None:
                self.check_substring(test, expected_err, actual_err)
            if expected_status is not None:
                self.check_eq(test, expected_status, actual_status)

    def execute(self, test):
        return test() if callable(test) else self.main.parse_and_run_command(test)

    def cd(self, path):
        self.main.parse_and_run_command(f'cd {path}')
        assert self.env.exit_status == 0, path

    def getvar(self, var):
        return self.env.getvar(var)

    def run_and_capture_output(self, command):
        test_stdout = io.StringIO()
        test_stderr = io.StringIO()
        with contextlib.redirect_stdout(test_stdout), contextlib.redirect_stderr(test_stderr):
            actual_status = self.execute(command)
        return test_stdout.getvalue(), test_stderr.getvalue(), actual_status


class TestDir(object):

    def __init__(self, env):
        self.env = env
        self.test_dir = pathlib.Path(os.path.realpath(tempfile.mkdtemp()))

    def __enter__(self):
        return self.test_dir

    def __exit__(self, *_):
        os.chdir(TestBase.start_dir)
        for dir, dirnames, _ in os.walk(self.test_dir):
            for dirname in dirnames:
                os.chmod(os.path.join(dir, dirname), 0o755)
        shutil.rmtree(self.test_dir, ignore_errors=True)


# Deny search permission on path, without depending on the uid running the tests.
@contextlib.contextmanager
def no_search_permission(path):
    path = os.fspath(path)
    real_access = os.access

    def access(p, mode, *args, **kwargs):
        if mode & os.X_OK and os.path.realpath(p) == os.path.realpath(path):
            return False
        return real_access(p, mode, *args, **kwargs)

    os.chmod(path, 0o000)
    try:
        with unittest.mock.patch('os.access', access):
            yield
    finally:
        os.chmod(path, 0o755)
