"""Base models for the package"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from spatial_types.exceptions import SpatialConflictingArguments


def make_model_config(**kwargs: Any) -> ConfigDict:
    """Return a Pydantic config"""
    return ConfigDict(
        str_strip_whitespace=True,
        validate_default=True,
        extra="forbid",
        use_enum_values=False,
        populate_by_name=True,
        **kwargs,  # type: ignore
    )


class SpatialBaseModel(BaseModel):
    """Base class for all mutable models in the package"""

    model_config = make_model_config(validate_assignment=True)


class SpatialValueModel(BaseModel):
    """Base class for immutable spatial values.

    Instances are frozen after creation. Use :meth:`with_changes` to derive a modified copy.
    """

    model_config = make_model_config(frozen=True)

    def with_changes(
        self, context: Optional[dict[str, Any]] = None, **changes: Any
    ) -> "SpatialValueModel":
        """Return a new instance with the given fields replaced. context is passed to
        validation of the new instance.

        Raises
        ------
        SpatialConflictingArguments
            Raised if a name in changes is not a field of the model.
        """
        data = self.model_dump()
        unknown = set(changes).difference(data)
        if unknown:
            msg = f"{self.__class__.__name__} does not have field(s) {sorted(unknown)}"
            raise SpatialConflictingArguments(msg)
        data.update(changes)
        return self.__class__.model_validate(data, context=context)

    @classmethod
    def example(cls) -> "SpatialValueModel":
        """Return an example instance of the model.

        Raises
        ------
        NotImplementedError
            Raised if the model does not implement this method.
        """
        msg = f"{cls.__name__} does not implement example()"
        raise NotImplementedError(msg)
