"""Collapses each operation to a single inlined 200 response.

Non-200 status codes are dropped, 200 references to reusable responses are
replaced by the response body, and header parameters are removed.
"""

import click

from jdcloud_spec.errors import ResolveError
from jdcloud_spec.spec.models import GO_NAME, Operation, Parameter, Response, Swagger

OK = "200"


def ref_object_name(ref: str) -> str:
    """Return the last segment of a `#/responses/<name>` pointer."""
    if "/" not in ref:
        raise ResolveError(f"malformed response reference '{ref}'")
    return ref.rsplit("/", 1)[1]


def clean_parameters(parameters: list[Parameter] | None) -> list[Parameter] | None:
    """Drop header parameters, mark body parameters untiered, strip `x-go-name`.

    An emptied list becomes None so it is left out of the output.
    """
    if parameters is None:
        return None
    kept = []
    for param in parameters:
        if param.location == "header":
            continue
        if param.location == "body":
            param.tiered = False
        param.pop_extension(GO_NAME)
        kept.append(param)
    return kept or None


def _resolve_operation(op: Operation, responses: dict[str, Response], unresolved: list[str]) -> None:
    resolved = {}
    response = (op.responses or {}).get(OK)
    if response is not None:
        if response.ref:
            name = ref_object_name(response.ref)
            if name in responses:
                response = responses[name].model_copy(deep=True)
            else:
                click.echo(f"Warning: cannot resolve response object '{name}'", err=True)
                unresolved.append(name)
        resolved[OK] = response

    if op.responses is not None:
        op.responses = resolved
    op.parameters = clean_parameters(op.parameters)


def resolve_responses(swagger: Swagger) -> list[str]:
    """Rewrite every operation in place and clear the root responses.

    Returns the names of 200 references that could not be resolved; those
    entries are left as references.
    """
    responses = swagger.responses or {}
    unresolved: list[str] = []

    for item in (swagger.paths or {}).values():
        item.parameters = clean_parameters(item.parameters)
        for op in item.operations().values():
            _resolve_operation(op, responses, unresolved)

    swagger.responses = None
    return unresolved
