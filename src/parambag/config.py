"""Options model for ParameterBag.

BagOptions controls the string path separator and the serialization
settings used by to_json() and to_yaml(). It is a frozen pydantic model so
one instance can be shared by every wrapper created from the same bag.
"""

import typing as _typing

import pydantic as _pydantic


class BagOptions(_pydantic.BaseModel):
    """
    Options shared by a ParameterBag and every wrapper it hands out.

    Unknown fields are rejected so a typo in an override fails loudly
    instead of being ignored.
    """

    model_config = _pydantic.ConfigDict(extra="forbid", frozen=True)

    separator: str = _pydantic.Field(default=".", min_length=1)
    """Separator between keys in string paths."""

    json_indent: int | None = _pydantic.Field(default=None, ge=0)
    json_sort_keys: bool = False
    json_ensure_ascii: bool = True
    json_allow_nan: bool = False
    """Allow NaN and Infinity in JSON output (not valid strict JSON)."""

    yaml_default_flow_style: bool = False
    yaml_allow_unicode: bool = True

    def with_overrides(self, **overrides: _typing.Any) -> "BagOptions":
        """
        Return a copy with the given fields replaced.

        Unlike model_copy(update=...), the result is validated, so an unknown
        field or a bad value raises pydantic.ValidationError.
        """
        if not overrides:
            return self
        return BagOptions.model_validate({**self.model_dump(), **overrides})

    def json_kwargs(self) -> dict[str, _typing.Any]:
        """Keyword arguments for json.dumps()."""
        return {
            "indent": self.json_indent,
            "sort_keys": self.json_sort_keys,
            "ensure_ascii": self.json_ensure_ascii,
            "allow_nan": self.json_allow_nan,
        }

    def yaml_kwargs(self) -> dict[str, _typing.Any]:
        """Keyword arguments for yaml.safe_dump()."""
        return {
            "default_flow_style": self.yaml_default_flow_style,
            "allow_unicode": self.yaml_allow_unicode,
            "sort_keys": False,
        }


DEFAULT_OPTIONS = BagOptions()
