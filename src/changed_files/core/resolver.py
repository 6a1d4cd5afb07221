from __future__ import annotations

import os
import re
from collections.abc import Iterable
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait

from changed_files.core.config import Options
from changed_files.core.errors import PatternError
from changed_files.io import git as git_queries
from changed_files.io.git import run_query

ChangeSet = frozenset[str]
Query = tuple[str, ...]


def compile_pattern(expr: str | None) -> re.Pattern[str] | None:
    if not expr:
        return None
    try:
        return re.compile(expr)
    except re.error as exc:
        raise PatternError(f"invalid filter regex {expr!r}: {exc}") from exc


def queries_for(options: Options | None) -> list[Query]:
    """Pick the git queries for one resolution, first matching mode wins."""
    if options is None or options.is_default:
        return [git_queries.STAGED, git_queries.WORKING_TREE]
    if options.last_commit:
        return [git_queries.LAST_COMMIT]
    ref = "HEAD^" if options.with_ancestor else (options.changed_since or "")
    return [git_queries.since(ref), git_queries.STAGED, git_queries.WORKING_TREE]


def union(*results: Iterable[str]) -> ChangeSet:
    merged: set[str] = set()
    for paths in results:
        merged.update(paths)
    return frozenset(merged)


def collapse_to_folders(paths: Iterable[str]) -> ChangeSet:
    return union(os.path.dirname(p) for p in paths)


def sorted_paths(change_set: Iterable[str]) -> list[str]:
    return sorted(change_set)


class ChangeSetResolver:
    def __init__(self, git: str = "git") -> None:
        self._git = git

    def resolve(
        self,
        cwd: str,
        options: Options | None = None,
        pattern: re.Pattern[str] | None = None,
    ) -> ChangeSet:
        queries = queries_for(options)
        if len(queries) == 1:
            return union(run_query(cwd, queries[0], pattern, git=self._git))
        return union(*self._run_parallel(cwd, queries, pattern))

    def _run_parallel(
        self,
        cwd: str,
        queries: list[Query],
        pattern: re.Pattern[str] | None,
    ) -> list[list[str]]:
        executor = ThreadPoolExecutor(max_workers=len(queries), thread_name_prefix="git-query")
        try:
            futures: list[Future[list[str]]] = [
                executor.submit(run_query, cwd, args, pattern, git=self._git) for args in queries
            ]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)
            for future in futures:
                if future not in done:
                    continue
                exc = future.exception()
                if exc is not None:
                    raise exc
            return [future.result() for future in futures]
        finally:
            # running git processes are left to finish; only queued work is dropped
            executor.shutdown(wait=False, cancel_futures=True)


def resolve(
    cwd: str,
    options: Options | None = None,
    pattern: re.Pattern[str] | None = None,
    *,
    git: str = "git",
) -> ChangeSet:
    return ChangeSetResolver(git=git).resolve(cwd, options, pattern)
