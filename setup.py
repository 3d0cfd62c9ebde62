import setuptools

import minishell.version

with open("README.md", "r") as readme:
    long_description = readme.read()

setuptools.setup(
    name='minishell',
    version=minishell.version.VERSION,
    description='A small shell, with a cd builtin that keeps PWD and OLDPWD up to date',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages('.', include=['minishell', 'minishell.*']),
    scripts=['bin/minishell'],
    install_requires=['prompt_toolkit'],
    extras_require={
        'test': ['pytest', 'dill'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: POSIX :: Linux'
    ],
    python_requires='>=3.8'
)
