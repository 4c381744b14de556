"""JSON:API codec.

Turns JSON:API documents into typed resources and back. A resource object
is flattened into one mapping (``id``, ``type``, ``links`` and each member
of ``attributes``) and validated against the target model. Relationship
linkage is resolved against the ``included`` array by ``(type, id)``; a
related resource that was not included keeps only its ``id`` and ``type``.

Decoding errors surface as ``pydantic.ValidationError`` (a ``ValueError``).
"""

from __future__ import annotations

import json
from typing import Any, TypeVar, get_args

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from kitsu.models.documents import (
    CollectionDocument,
    Links,
    ResourceIdentifier,
    ResourceObject,
    SingleDocument,
)
from kitsu.models.resource import Resource

ResourceT = TypeVar("ResourceT", bound=Resource)

_Key = tuple[str, str]

# Envelope fields; everything else on a Resource is an attribute or a relationship.
_ENVELOPE_FIELDS = {"id", "type", "links"}


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def unmarshal_payload(payload: bytes | str, model: type[ResourceT]) -> ResourceT:
    """Decode a single-resource document into ``model``."""
    document = SingleDocument.model_validate_json(payload)
    included = _index(document.included)
    return model.model_validate(_flatten(document.data, included, frozenset()))


def unmarshal_many_payload(
    payload: bytes | str, model: type[ResourceT]
) -> tuple[list[ResourceT], Links]:
    """Decode a collection document into a list of ``model`` and its links."""
    document = CollectionDocument.model_validate_json(payload)
    included = _index(document.included)
    items = [
        model.model_validate(_flatten(obj, included, frozenset()))
        for obj in document.data
    ]
    return items, document.links or Links()


def _index(included: list[ResourceObject]) -> dict[_Key, ResourceObject]:
    return {(obj.type, obj.id): obj for obj in included}


def _flatten(
    obj: ResourceObject,
    included: dict[_Key, ResourceObject],
    seen: frozenset[_Key],
) -> dict[str, Any]:
    flat: dict[str, Any] = dict(obj.attributes)
    flat.update(id=obj.id, type=obj.type, links=obj.links)

    seen = seen | {(obj.type, obj.id)}
    for name, relationship in obj.relationships.items():
        linkage = relationship.data
        if linkage is None:
            continue
        if isinstance(linkage, list):
            flat[name] = [_resolve(ident, included, seen) for ident in linkage]
        else:
            flat[name] = _resolve(linkage, included, seen)
    return flat


def _resolve(
    ident: ResourceIdentifier,
    included: dict[_Key, ResourceObject],
    seen: frozenset[_Key],
) -> dict[str, Any]:
    key = (ident.type, ident.id)
    obj = included.get(key)
    # A resource already on the current path is a cycle: stop at the linkage.
    if obj is None or key in seen:
        return {"id": ident.id, "type": ident.type}
    return _flatten(obj, included, seen)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def relationship_fields(model: type[BaseModel]) -> dict[str, FieldInfo]:
    """Fields of ``model`` whose type is a Resource (or a list/optional of one)."""
    return {
        name: field
        for name, field in model.model_fields.items()
        if name not in _ENVELOPE_FIELDS and _refers_to_resource(field.annotation)
    }


def _refers_to_resource(annotation: Any) -> bool:
    if isinstance(annotation, type) and issubclass(annotation, Resource):
        return True
    return any(_refers_to_resource(arg) for arg in get_args(annotation))


def _identifier(resource: Resource) -> dict[str, str]:
    return {"type": resource.type, "id": resource.id}


def marshal_payload(resource: Resource) -> dict[str, Any]:
    """Encode a resource as a JSON:API single-resource document.

    Unset (None) attributes are left out. Related resources are sent as
    linkage only.
    """
    relationships_by_name = relationship_fields(type(resource))
    attributes = resource.model_dump(
        mode="json",
        by_alias=True,
        exclude_none=True,
        exclude=_ENVELOPE_FIELDS | set(relationships_by_name),
    )

    data: dict[str, Any] = {"type": resource.type}
    if resource.id:
        data["id"] = resource.id
    data["attributes"] = attributes

    relationships: dict[str, Any] = {}
    for name, field in relationships_by_name.items():
        value = getattr(resource, name)
        if value is None:
            continue
        key = field.alias or name
        if isinstance(value, list):
            relationships[key] = {"data": [_identifier(v) for v in value]}
        else:
            relationships[key] = {"data": _identifier(value)}
    if relationships:
        data["relationships"] = relationships

    if resource.links.self_link:
        data["links"] = {"self": resource.links.self_link}

    return {"data": data}


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON:API wire bytes.

    Resources are wrapped in a JSON:API document; other pydantic models and
    plain JSON values are encoded as they are. Raises TypeError or ValueError
    when the value cannot be represented as JSON.
    """
    if isinstance(body, Resource):
        document: Any = marshal_payload(body)
    elif isinstance(body, BaseModel):
        document = body.model_dump(mode="json", by_alias=True)
    else:
        document = body
    return json.dumps(document, separators=(",", ":"), allow_nan=False).encode("utf-8")
