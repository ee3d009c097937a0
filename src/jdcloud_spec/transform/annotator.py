"""Vendor annotations on model definitions and reusable responses."""

from jdcloud_spec.spec.models import GO_NAME, GO_PACKAGE, Schema, Swagger


def strip_go_names(properties: dict[str, Schema] | None) -> dict[str, Schema] | None:
    """Return the properties with `x-go-name` removed from each one."""
    if properties is None:
        return None
    stripped = {}
    for name, prop in properties.items():
        prop.pop_extension(GO_NAME)
        stripped[name] = prop
    return stripped


def annotate(swagger: Swagger, module: str = "") -> Swagger:
    """Tag definitions with the vendor module and drop Go implementation keys.

    An empty `module` skips the tagging; the stripping always happens.
    """
    if swagger.definitions is not None:
        definitions = {}
        for name, schema in swagger.definitions.items():
            if module:
                schema.module = module
            schema.pop_extension(GO_PACKAGE)
            schema.properties = strip_go_names(schema.properties)
            definitions[name] = schema
        swagger.definitions = definitions

    if swagger.responses is not None:
        for response in swagger.responses.values():
            if response.schema_ is not None:
                response.schema_.properties = strip_go_names(response.schema_.properties)

    return swagger
