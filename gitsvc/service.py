"""Link repository directories to git worktrees through symlinks."""

from __future__ import annotations

import os
import subprocess

BACKUP_SUFFIX = ".gitsvc_backup"
_WORKTREES_MARKER = os.sep + ".worktrees" + os.sep


class ServiceError(Exception):
    """Raised when a git operation or a link operation fails."""


def _join(*parts: str) -> str:
    """Join path elements, skipping empty ones, and clean the result."""
    return os.path.normpath(os.sep.join(part for part in parts if part))


def _run(cwd: str | None, *args: str) -> None:
    """Run a command in ``cwd`` with output going to this process's streams."""
    try:
        subprocess.run(args, cwd=cwd or None, check=True)
    except subprocess.CalledProcessError as exc:
        raise ServiceError(
            f"{' '.join(args)} failed: exit status {exc.returncode}"
        ) from exc
    except OSError as exc:
        raise ServiceError(f"{' '.join(args)} failed: {exc}") from exc


def repo_root() -> str:
    """Return the absolute path of the current repository's top level."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ServiceError(f"git rev-parse failed: {exc}") from exc
    return result.stdout.strip()


def init(directory, branch, base, root, create, sparse) -> None:
    """Add a worktree for ``branch`` and link ``directory`` into it.

    With ``create`` a new branch is made, optionally starting at ``base``.
    With ``sparse`` only ``directory`` is checked out in the worktree.
    An existing real directory is moved aside to a backup first.
    """
    top = repo_root()
    worktree_path = _join(top, root, branch)

    args = ["git", "worktree", "add"]
    if sparse:
        args.append("--no-checkout")
    if create:
        args += ["-b", branch, worktree_path]
        if base:
            args.append(base)
    else:
        args += [worktree_path, branch]
    _run(top, *args)

    if sparse:
        _run(worktree_path, "git", "sparse-checkout", "init", "--cone")
        _run(worktree_path, "git", "sparse-checkout", "set", directory)
        _run(worktree_path, "git", "reset", "--hard", "HEAD")

    target = _join(worktree_path, directory)
    link = _join(top, directory)
    if os.path.islink(link):
        os.remove(link)
    elif os.path.lexists(link):
        backup = link + BACKUP_SUFFIX
        try:
            os.stat(backup)
        except FileNotFoundError:
            pass
        else:
            raise ServiceError(f"backup already exists: {backup}")
        os.rename(link, backup)

    os.symlink(os.path.relpath(target, os.path.dirname(link)), link)


def _branch_from_link(link: str) -> str:
    """Return the branch name from a link pointing into a worktree."""
    target = os.path.realpath(link, strict=True)
    index = target.find(_WORKTREES_MARKER)
    if index == -1:
        raise ServiceError("link target not in worktrees")
    rest = target[index + len(_WORKTREES_MARKER):]
    return rest.split(os.sep, 1)[0]


def pull(directory, root) -> None:
    """Fast-forward the worktree that ``directory`` links to."""
    top = repo_root()
    branch = _branch_from_link(_join(top, directory))
    _run(_join(top, root, branch), "git", "pull", "--ff-only")


def clean(directory, root) -> None:
    """Remove the link and its worktree, restoring any backup."""
    top = repo_root()
    link = _join(top, directory)
    branch = _branch_from_link(link)
    worktree_path = _join(top, root, branch)
    _run(top, "git", "worktree", "remove", worktree_path)

    try:
        os.remove(link)
    except FileNotFoundError:
        pass

    backup = link + BACKUP_SUFFIX
    if os.path.exists(backup):
        os.rename(backup, link)


def _walk_error(error: OSError) -> None:
    if isinstance(error, PermissionError):
        return
    raise error


def list_links(root) -> dict[str, str]:
    """Map each managed symlink (relative to the repository) to its branch."""
    top = repo_root()
    worktree_root = _join(top, root)
    links: dict[str, str] = {}
    for dirpath, dirnames, filenames in os.walk(top, onerror=_walk_error):
        dirnames.sort()
        for name in sorted(dirnames + filenames):
            path = os.path.join(dirpath, name)
            if not os.path.islink(path):
                continue
            try:
                target = os.path.realpath(path, strict=True)
            except OSError:
                continue
            rel = os.path.relpath(target, worktree_root)
            if ".." in rel:
                continue
            links[os.path.relpath(path, top)] = rel.split(os.sep, 1)[0]
    return links