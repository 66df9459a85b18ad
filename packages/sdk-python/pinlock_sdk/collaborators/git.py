"""
Git Source Control
==================

SCM collaborator that commits lock files with the ``git`` CLI.

Commit sequence:
1. ``git add`` the given paths
2. ``git commit`` them (skipped when nothing is staged for those paths)
3. ``git tag`` when a tag name is given
4. ``git push`` (and the tag), retried up to ``retries`` times with a
   ``git pull --rebase`` between attempts
"""

import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Union

from pinlock_common import get_logger

logger = get_logger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


class GitScm:
    """
    Commits, tags and pushes through the git CLI.

    Attributes:
        root: Work tree root; paths passed to ``commit`` are relative to it
        remote: Remote pushed to
        push: Whether to push at all (False for local-only repositories)
        last_error: stderr of the last failed git command
    """

    def __init__(
        self,
        root: Union[str, Path],
        remote: str = "origin",
        push: bool = True,
        runner: Runner = subprocess.run,
    ):
        self.root = Path(root)
        self.remote = remote
        self.push = push
        self.last_error: Optional[str] = None
        self._runner = runner

    @classmethod
    def detect(cls, root: Union[str, Path], **kwargs) -> Optional["GitScm"]:
        """
        Return a GitScm when ``root`` is inside a git work tree, else None.

        Used to decide whether the commit stage is offered at all.
        """
        scm = cls(root, **kwargs)
        try:
            scm._git("rev-parse", "--is-inside-work-tree")
        except (subprocess.CalledProcessError, FileNotFoundError):
            return None
        return scm

    def _git(self, *args: str) -> subprocess.CompletedProcess:
        return self._runner(
            ["git", *args],
            cwd=self.root,
            capture_output=True,
            text=True,
            check=True,
        )

    @staticmethod
    def _stderr(error: subprocess.CalledProcessError) -> str:
        return (error.stderr or error.stdout or str(error)).strip()

    def _has_staged_changes(self, paths: List[str]) -> bool:
        try:
            self._git("diff", "--cached", "--quiet", "--", *paths)
        except subprocess.CalledProcessError as e:
            if e.returncode == 1:
                return True
            raise
        return False

    def _push_once(self, tag: Optional[str]) -> None:
        self._git("push", self.remote, "HEAD")
        if tag:
            self._git("push", self.remote, tag)

    def commit(
        self,
        paths: List[str],
        message: str,
        tag: Optional[str],
        retries: int,
    ) -> bool:
        if not paths:
            logger.info("No lock files to commit")
            return True

        try:
            self._git("add", "--", *paths)
            if self._has_staged_changes(paths):
                self._git("commit", "-m", message, "--", *paths)
                logger.info("Committed lock files", files=len(paths))
            else:
                logger.info("Lock files unchanged, nothing to commit")
            if tag:
                self._git("tag", tag)
                logger.info("Created tag", tag=tag)
        except subprocess.CalledProcessError as e:
            self.last_error = self._stderr(e)
            logger.error("git command failed", command=" ".join(e.cmd), error=self.last_error)
            return False

        if not self.push:
            return True

        for attempt in range(retries + 1):
            try:
                self._push_once(tag)
                logger.info("Pushed lock commit", remote=self.remote, attempt=attempt + 1)
                return True
            except subprocess.CalledProcessError as e:
                self.last_error = self._stderr(e)
                logger.warning("Push failed", attempt=attempt + 1, error=self.last_error)
            if attempt < retries:
                try:
                    self._git("pull", "--rebase", self.remote)
                except subprocess.CalledProcessError as e:
                    self.last_error = self._stderr(e)
                    logger.warning("Pull before retry failed", error=self.last_error)

        return False
