"""Command line interface for managing worktree-backed directories."""

from __future__ import annotations

import argparse
import os
import sys

from gitsvc import service

_DEFAULT_ROOT = ".worktrees"
_ROOT_ENV = "GITSVC_WORKTREE_ROOT"


def _cmd_init(args: argparse.Namespace) -> None:
    if args.branch:
        service.init(
            args.directory,
            args.branch,
            args.base or "",
            args.worktree_root,
            True,
            args.sparse,
        )
        return
    if args.base is None:
        raise service.ServiceError("branch required")
    service.init(args.directory, args.base, "", args.worktree_root, False, args.sparse)


def _cmd_clean(args: argparse.Namespace) -> None:
    service.clean(args.directory, args.worktree_root)


def _cmd_pull(args: argparse.Namespace) -> None:
    service.pull(args.directory, args.worktree_root)


def _cmd_list(args: argparse.Namespace) -> None:
    for directory, branch in service.list_links(args.worktree_root).items():
        print(f"{directory} -> {branch}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``git-svc`` command."""
    default_root = os.environ.get(_ROOT_ENV) or _DEFAULT_ROOT
    root_help = "worktree root directory"

    parser = argparse.ArgumentParser(
        prog="git-svc", description="Manage git worktrees with symlinks"
    )
    parser.add_argument("--worktree-root", default=default_root, help=root_help)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--worktree-root", default=argparse.SUPPRESS, help=root_help)

    commands = parser.add_subparsers(dest="command", metavar="command")

    init_parser = commands.add_parser(
        "init", parents=[common], help="add worktree and link directory"
    )
    init_parser.add_argument("directory", metavar="dir")
    init_parser.add_argument("base", nargs="?", metavar="base")
    init_parser.add_argument("-b", "--branch", default="", help="create new branch")
    init_parser.add_argument(
        "--sparse", action="store_true", help="use git sparse-checkout"
    )
    init_parser.set_defaults(handler=_cmd_init)

    clean_parser = commands.add_parser(
        "clean", parents=[common], help="remove symlink and worktree"
    )
    clean_parser.add_argument("directory", metavar="dir")
    clean_parser.set_defaults(handler=_cmd_clean)

    list_parser = commands.add_parser(
        "list", parents=[common], help="list managed symlinks"
    )
    list_parser.set_defaults(handler=_cmd_list)

    pull_parser = commands.add_parser(
        "pull", parents=[common], help="update worktree linked from dir"
    )
    pull_parser.add_argument("directory", metavar="dir")
    pull_parser.set_defaults(handler=_cmd_pull)

    return parser


def main(argv=None) -> int:
    """Run the command line; return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    try:
        handler(args)
    except (service.ServiceError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())