# gitsvc

Swap a directory of your repository for the same directory checked out from
another branch. `git-svc` adds a git worktree for the branch and replaces the
directory with a relative symlink into it. If the directory already exists, it
is kept aside as a backup and restored when you clean up.

`git` must be on your `PATH`.

## Installation

```
pip install .
```

## Usage

Run the commands from anywhere inside a git repository.

Link `packages/a` to the existing branch `feature`:

```
git-svc init packages/a feature
```

Create a new branch `feat-a` with `-b`/`--branch`. The second positional
argument is then an optional commit-ish the branch starts from:

```
git-svc init -b feat-a packages/a origin/master
```

Add `--sparse` to check out only the linked directory in the worktree
(cone-mode sparse checkout):

```
git-svc init --sparse packages/a feature
```

If `packages/a` already exists as a real directory, it is renamed to
`packages/a.gitsvc_backup`; if that backup already exists, `init` stops with
an error. An existing symlink is simply replaced.

Show which symlinks in the repository point into the worktree root, and the
branch of each:

```
git-svc list
```

Fast-forward the worktree behind a link (`git pull --ff-only`):

```
git-svc pull packages/a
```

Remove the worktree (`git worktree remove`) and the link, restoring the backup
if there is one:

```
git-svc clean packages/a
```

Errors are printed to standard error and the command exits with status 1.

## Worktree location

Worktrees are placed under `.worktrees/<branch>` at the repository root. Use
`--worktree-root DIR` (before or after the command name) or the
`GITSVC_WORKTREE_ROOT` environment variable to choose another directory,
relative to the repository root.

`pull` and `clean` find the branch of a link by looking for a `.worktrees`
directory in the path the link resolves to, so they only work for worktrees
kept under a directory of that name.

## Library use

The same operations are available from `gitsvc.service`: `init`, `pull`,
`clean`, `list_links` and `repo_root`. Failures of git commands and of link
handling raise `ServiceError`; filesystem errors are raised as `OSError`.
`gitsvc.cli` provides `build_parser` and `main`.