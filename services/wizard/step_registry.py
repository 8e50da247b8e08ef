# -*- coding: utf-8 -*-
"""
Step Registry - Immutable table of the event wizard steps.

Each StepDefinition pairs the validation rules of its fields with the
rendering contract the Presentation Shell uses to build its inputs.
The table is built once at import time.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from app.config import Config
from services.validation.field_rules import (
    FieldRule, RequiredText, OptionalText, PostalCode, Price, ImageFile
)


class FieldKind(Enum):
    """Input widget families the shell knows how to render."""
    TEXT = "text"
    DATE = "date"
    TEXTAREA = "textarea"
    IMAGE = "image"


@dataclass(frozen=True)
class FieldSpec:
    """Rendering contract for one input."""
    name: str
    label_key: str
    kind: FieldKind = FieldKind.TEXT
    max_length: Optional[int] = None
    placeholder_key: Optional[str] = None
    suffix: Optional[str] = None
    column_span: int = 4
    # Field whose value pre-fills this one while it is empty
    default_from: Optional[str] = None


@dataclass(frozen=True)
class StepDefinition:
    """Validation + rendering contract for an individual wizard step."""

    key: str
    title_key: str
    subtitle_key: str
    field_schema: Mapping[str, FieldRule]
    render: Tuple[FieldSpec, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "field_schema", MappingProxyType(dict(self.field_schema)))
        object.__setattr__(self, "render", tuple(self.render))

        rendered = [spec.name for spec in self.render]
        if len(rendered) != len(set(rendered)):
            raise ValueError(f"Step '{self.key}' renders a field twice")
        unknown = set(rendered) - set(self.field_schema)
        if unknown:
            raise ValueError(f"Step '{self.key}' renders fields without a rule: {sorted(unknown)}")
        hidden = set(self.field_schema) - set(rendered)
        if hidden:
            raise ValueError(f"Step '{self.key}' has rules for fields it never renders: {sorted(hidden)}")

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.render)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(name for name, rule in self.field_schema.items() if rule.required)

    def owns(self, field_name: str) -> bool:
        return field_name in self.field_schema


class StepRegistry(Sequence):
    """
    Ordered, read-only collection of steps.

    Rejects field names shared between steps: each field belongs to
    exactly one step.
    """

    def __init__(self, steps: Sequence[StepDefinition]):
        if not steps:
            raise ValueError("A wizard needs at least one step")

        owners = {}
        for step in steps:
            for name in step.field_schema:
                if name in owners:
                    raise ValueError(
                        f"Field '{name}' declared by both '{owners[name]}' and '{step.key}'"
                    )
                owners[name] = step.key
            for spec in step.render:
                if spec.default_from is not None and (
                        spec.default_from == spec.name or spec.default_from not in owners):
                    raise ValueError(
                        f"Field '{spec.name}' defaults from '{spec.default_from}', "
                        f"which no earlier field declares"
                    )

        self._steps: Tuple[StepDefinition, ...] = tuple(steps)
        self._owners = MappingProxyType(owners)

    def __getitem__(self, index):
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def owner_of(self, field_name: str) -> Optional[str]:
        """Key of the step owning a field."""
        return self._owners.get(field_name)

    def index_of(self, key: str) -> int:
        for index, step in enumerate(self._steps):
            if step.key == key:
                return index
        raise KeyError(key)


def build_event_steps(allowed_image_types: Optional[Sequence[str]] = None) -> StepRegistry:
    """Build the five steps of the event creation wizard."""
    if allowed_image_types is None:
        allowed_image_types = Config.ALLOWED_IMAGE_TYPES

    return StepRegistry([
        StepDefinition(
            key="general",
            title_key="step.general.title",
            subtitle_key="step.general.subtitle",
            field_schema={
                "name": RequiredText("validation.name.required"),
                "address": RequiredText("validation.address.required"),
                "zipCode": PostalCode("validation.zipCode.invalid"),
                "city": RequiredText("validation.city.required"),
            },
            render=(
                FieldSpec("name", "field.name"),
                FieldSpec("address", "field.address"),
                FieldSpec("zipCode", "field.zipCode",
                          max_length=Config.ZIP_CODE_MAX_LENGTH, column_span=2),
                FieldSpec("city", "field.city", column_span=2),
            ),
        ),
        StepDefinition(
            key="dates",
            title_key="step.dates.title",
            subtitle_key="step.dates.subtitle",
            field_schema={
                "startingDate": RequiredText("validation.startingDate.required"),
                "endingDate": OptionalText(),
            },
            render=(
                FieldSpec("startingDate", "field.startingDate", FieldKind.DATE,
                          placeholder_key="field.date.placeholder", column_span=2),
                FieldSpec("endingDate", "field.endingDate", FieldKind.DATE,
                          placeholder_key="field.endingDate.placeholder", column_span=2,
                          default_from="startingDate"),
            ),
        ),
        StepDefinition(
            key="image",
            title_key="step.image.title",
            subtitle_key="step.image.subtitle",
            field_schema={
                "image": ImageFile(
                    "validation.image.required",
                    "validation.image.not_file",
                    "validation.image.type",
                    allowed_types=allowed_image_types,
                ),
            },
            render=(
                FieldSpec("image", "field.image", FieldKind.IMAGE),
            ),
        ),
        StepDefinition(
            key="price",
            title_key="step.price.title",
            subtitle_key="step.price.subtitle",
            field_schema={
                "price": Price("validation.price.type", "validation.price.min", minimum=0),
            },
            render=(
                FieldSpec("price", "field.price", suffix="€", column_span=2),
            ),
        ),
        StepDefinition(
            key="details",
            title_key="step.details.title",
            subtitle_key="step.details.subtitle",
            field_schema={
                "description": RequiredText("validation.description.required"),
                "website": OptionalText(),
            },
            render=(
                FieldSpec("description", "field.description", FieldKind.TEXTAREA),
                FieldSpec("website", "field.website", column_span=2),
            ),
        ),
    ])


EVENT_STEPS: StepRegistry = build_event_steps()
