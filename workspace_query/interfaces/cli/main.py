"""
Name: Workspace Query CLI

Responsibilities:
  - Bind command line arguments to a QueryDescriptor
  - Run ListWorkspacesUseCase and print one JSON object per workspace
  - Map outcomes to exit codes (0 ok, 1 transport error, 2 invalid input)

Collaborators:
  - argparse
  - domain.query.QueryDescriptorBuilder
  - container.get_list_workspaces_use_case
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence, TextIO
from uuid import UUID

from ...application.usecases import ListWorkspacesUseCase
from ...crosscutting.exceptions import QueryValidationError, TransportError
from ...crosscutting.logger import logger
from ...domain.query import QueryDescriptor, QueryDescriptorBuilder, QueryScope
from .schemas import WorkspaceRes

EXIT_OK = 0
EXIT_TRANSPORT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_CONFIG_ERROR = 3


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def _workspace_id(raw: str) -> str:
    try:
        return str(UUID(raw))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid workspace id: {raw!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workspace-query",
        description="List workspaces visible to the caller or to the organization.",
    )
    lookup = parser.add_mutually_exclusive_group()
    lookup.add_argument(
        "--id",
        dest="workspace_id",
        type=_workspace_id,
        help="Workspace id (exact lookup, overrides list options)",
    )
    lookup.add_argument(
        "--name", help="Workspace name (case-insensitive, overrides list options)"
    )
    parser.add_argument(
        "--scope",
        default=QueryScope.INDIVIDUAL.value,
        choices=[scope.value for scope in QueryScope],
        help="Individual (own workspaces) or Organization (admin view)",
    )
    parser.add_argument("--filter", help="OData filter expression")
    parser.add_argument(
        "--user", help="Only workspaces with this member (Organization scope)"
    )
    parser.add_argument(
        "--deleted", action="store_true", help="Only deleted workspaces"
    )
    parser.add_argument(
        "--orphaned",
        action="store_true",
        help="Only workspaces without members or without an admin",
    )
    parser.add_argument(
        "--all",
        dest="exhaustive",
        action="store_true",
        help="Enumerate every workspace (Organization scope, ignores --first/--skip)",
    )
    parser.add_argument("--first", "--top", dest="top", type=_non_negative_int)
    parser.add_argument("--skip", type=_non_negative_int)
    return parser


def descriptor_from_args(args: argparse.Namespace) -> QueryDescriptor:
    builder = QueryDescriptorBuilder(QueryScope(args.scope))
    if args.workspace_id is not None:
        builder.by_id(args.workspace_id)
    if args.name is not None:
        builder.by_name(args.name)
    return (
        builder.with_filter(args.filter)
        .with_member(args.user)
        .deleted_only(args.deleted)
        .orphaned_only(args.orphaned)
        .exhaustive(args.exhaustive)
        .window(top=args.top, skip=args.skip)
        .build()
    )


def _default_use_case() -> ListWorkspacesUseCase:
    from ...container import configure_logging, get_list_workspaces_use_case

    configure_logging()
    return get_list_workspaces_use_case()


def run(
    argv: Sequence[str] | None = None,
    *,
    use_case_factory: Callable[[], ListWorkspacesUseCase] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)

    try:
        descriptor = descriptor_from_args(args)
    except QueryValidationError as exc:
        print(f"error: [{exc.error_code}] {exc.message}", file=err)
        return EXIT_VALIDATION_ERROR

    if use_case_factory is None:
        use_case_factory = _default_use_case

    try:
        use_case = use_case_factory()
    except ValueError as exc:
        # Settings inválidos o access token ausente.
        print(f"error: invalid configuration: {exc}", file=err)
        return EXIT_CONFIG_ERROR

    try:
        result = use_case.execute(descriptor)
    except TransportError as exc:
        logger.error(
            "workspace_query: transport failure",
            extra={
                "error_code": exc.error_code,
                "error_id": exc.error_id,
                "status": exc.status_code,
            },
        )
        print(
            f"error: [{exc.error_code}] {exc.message} (error_id={exc.error_id})",
            file=err,
        )
        return EXIT_TRANSPORT_ERROR

    if result.error is not None:
        print(f"error: [{result.error.code.value}] {result.error.message}", file=err)
        return EXIT_VALIDATION_ERROR

    for workspace in result.workspaces:
        print(WorkspaceRes.from_entity(workspace).to_json(), file=out)
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
