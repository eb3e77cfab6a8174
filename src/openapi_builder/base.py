"""Base classes shared by every OpenAPI object model."""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel


class SpecModel(BaseModel):
    """An OpenAPI object that serializes with camelCase keys and omits unset fields.

    Subclasses list the fields that must appear even when empty in
    ``emit_always`` and the free-form value fields that are only dropped when
    ``None`` in ``emit_unless_none``. Every other field is dropped when it holds
    ``None``, ``False``, an empty string or an empty collection.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    emit_always: ClassVar[frozenset[str]] = frozenset()
    emit_unless_none: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_unset_fields(
        self,
        handler: SerializerFunctionWrapHandler,
        info: SerializationInfo,
    ) -> dict[str, Any]:
        payload = handler(self)
        always = self._always_emitted()
        for name, field in type(self).model_fields.items():
            if name in always:
                continue
            if not _is_unset(getattr(self, name), free_form=name in self.emit_unless_none):
                continue
            key = field.alias if info.by_alias and field.alias else name
            payload.pop(key, None)
        return payload

    def _always_emitted(self) -> frozenset[str]:
        return self.emit_always


class SpecValue(SpecModel):
    """An immutable OpenAPI object whose builders return modified copies.

    Values compare by content but are not hashable, since most of them hold
    lists or mappings.
    """

    model_config = ConfigDict(frozen=True)

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: {type(self).__name__!r}")

    def _with(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced.

        Untouched collections are copied as well, so the copy never shares a
        list or mapping with the receiver.
        """
        return self.model_copy(update=changes, deep=True)


def _is_unset(value: Any, *, free_form: bool) -> bool:
    if value is None:
        return True
    if free_form:
        return False
    if value is False or value == "":
        return True
    return isinstance(value, (list, dict)) and not value
