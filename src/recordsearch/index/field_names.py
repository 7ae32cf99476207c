"""
Field naming for search documents.

Solr dynamic fields are typed by suffix, so the physical name of an index
term is its logical name plus a suffix chosen from the declared index type.
"""

from enum import Enum


class IndexType(str, Enum):
    """Declared value type of an index term."""

    STRING = "indexTypeString"
    ID = "indexTypeId"
    BOOLEAN = "indexTypeBoolean"
    DATE = "indexTypeDate"
    NUMBER = "indexTypeNumber"
    TEXT = "indexTypeText"

    @classmethod
    def parse(cls, value: "str | IndexType | None") -> "IndexType":
        """
        Map a string index type from the record model onto the enum.

        Accepts the record model's names ("indexTypeString") as well as the
        member names ("STRING"). Anything unrecognised falls back to TEXT.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.TEXT
        try:
            return cls(value)
        except ValueError:
            pass
        return cls.__members__.get(str(value).upper(), cls.TEXT)


SUFFIXES = {
    IndexType.STRING: "_s",
    IndexType.ID: "_s",
    IndexType.BOOLEAN: "_b",
    IndexType.DATE: "_dt",
    IndexType.NUMBER: "_l",
}

DEFAULT_SUFFIX = "_t"


def suffix_for(index_type: "IndexType | str | None") -> str:
    """Return the dynamic field suffix for an index type."""
    return SUFFIXES.get(IndexType.parse(index_type), DEFAULT_SUFFIX)


def resolve_field_name(field_name: str, index_type: "IndexType | str | None") -> str:
    """Return the physical field name, e.g. ("title", STRING) -> "title_s"."""
    return field_name + suffix_for(index_type)
