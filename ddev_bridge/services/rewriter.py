"""
Command rewriting for execution inside the DDEV web container.

The agent writes commands against host paths. Inside the container the
working directory already corresponds to the agent's current directory, so
host paths are rewritten in three passes, always in this order:

1. relativize_working_dir    /Users/foo/project/sub/x  ->  x
2. containerize_project_root /Users/foo/project/other  ->  /var/www/html/other
3. strip_noop_cd             cd . && composer install  ->  composer install

Pass 1 must run first: the working directory lies inside the project root,
and pass 2 alone would turn "here" into an absolute container path.

This is pattern substitution, not shell parsing. It targets the commands a
coding agent typically emits.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from ddev_bridge.paths import CONTAINER_ROOT, to_host_path

__all__ = [
    'clean_command',
    'containerize_project_root',
    'quote_for_bash',
    'relativize_working_dir',
    'strip_noop_cd',
    'wrap_command',
]

# Characters that end a path in a command line
_DELIMITERS = r'\s\'"`;&|()<>'

# A match must not continue a longer path on either side
_NOT_PRECEDED_BY_PATH = r'(?<![\w./~-])'
_SUFFIX = rf'(?P<suffix>/[^{_DELIMITERS}]*)?'
_NOT_FOLLOWED_BY_PATH = rf'(?![^{_DELIMITERS}])'

_NOOP_CD = re.compile(r'^\s*(?:cd\s+([\'"]?)\.\1\s*&&\s*)+')

# Characters bash still interprets inside double quotes
_DOUBLE_QUOTE_SPECIAL = re.compile(r'([\\"$`])')


def _path_pattern(path: str) -> re.Pattern[str]:
    """Compile a pattern matching ``path`` literally, plus an optional sub-path."""
    return re.compile(_NOT_PRECEDED_BY_PATH + re.escape(path) + _SUFFIX + _NOT_FOLLOWED_BY_PATH)


def _substitute(command: str, path: str, replace: Callable[[str], str]) -> str:
    return _path_pattern(path).sub(lambda match: replace(match.group('suffix') or ''), command)


def relativize_working_dir(command: str, host_working_dir: str) -> str:
    """
    Replace references to the working directory with relative paths.

    Examples:
        >>> relativize_working_dir('ls /a/b/src', '/a/b')
        'ls src'

        >>> relativize_working_dir('cd /a/b && make', '/a/b')
        'cd . && make'
    """
    return _substitute(command, host_working_dir, lambda suffix: suffix.lstrip('/') or '.')


def containerize_project_root(command: str, project_root: str, container_root: str = CONTAINER_ROOT) -> str:
    """
    Replace references to the project tree with absolute container paths.

    Examples:
        >>> containerize_project_root('cd /a/b/themes && ls', '/a/b')
        'cd /var/www/html/themes && ls'
    """
    base = container_root.rstrip('/')
    return _substitute(command, project_root, lambda suffix: base + suffix if suffix else container_root)


def strip_noop_cd(command: str) -> str:
    """
    Remove leading ``cd . &&`` left behind by relativize_working_dir.

    Examples:
        >>> strip_noop_cd('cd "." && composer install')
        'composer install'
    """
    return _NOOP_CD.sub('', command, count=1)


def clean_command(
    command: str,
    project_root: str | None,
    container_working_dir: str,
    container_root: str = CONTAINER_ROOT,
) -> str:
    """
    Rewrite host paths in ``command`` for execution in ``container_working_dir``.

    Args:
        command: Command as written by the agent
        project_root: Host project root, or None when unknown (no rewriting)
        container_working_dir: Directory the command will run in inside the container
        container_root: Mount point of the project inside the container

    Returns:
        Cleaned command. Applying clean_command again returns it unchanged.
    """
    if not project_root:
        return command

    host_working_dir = to_host_path(container_working_dir, project_root, container_root)
    cleaned = relativize_working_dir(command, host_working_dir)

    if container_working_dir != container_root:
        cleaned = containerize_project_root(cleaned, project_root, container_root)

    return strip_noop_cd(cleaned)


def quote_for_bash(command: str) -> str:
    """
    Quote ``command`` as a single bash double-quoted word.

    Backslash, double quote, dollar and backtick are escaped so the host shell
    neither ends the word nor expands anything in it. Newlines, tabs and
    non-ASCII text are kept literally, which bash accepts inside double quotes.

    Examples:
        >>> print(quote_for_bash('for f in *.php; do php -l "$f"; done'))
        "for f in *.php; do php -l \\"\\$f\\"; done"
    """
    return '"' + _DOUBLE_QUOTE_SPECIAL.sub(r'\\\1', command) + '"'


def wrap_command(
    command: str,
    project_root: str | None,
    container_working_dir: str | None,
    container_root: str = CONTAINER_ROOT,
    ddev_binary: str = 'ddev',
) -> str:
    """
    Build the ``ddev exec`` invocation that runs ``command`` in the container.

    The cleaned command is passed to ``bash -c`` as one double-quoted word
    (see quote_for_bash), so the host shell hands it over unchanged.

    Examples:
        >>> wrap_command('ls', None, None)
        'ddev exec --dir="/var/www/html" bash -c "ls"'
    """
    working_dir = container_working_dir if project_root and container_working_dir else container_root
    cleaned = clean_command(command, project_root, working_dir, container_root)
    return f'{ddev_binary} exec --dir={quote_for_bash(working_dir)} bash -c {quote_for_bash(cleaned)}'
