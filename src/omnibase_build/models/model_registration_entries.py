# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Typed view of the Spring registration mapping file (spring.factories)."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

BOOTSTRAP_CONFIGURATION_KEY: Final[str] = (
    "org.springframework.cloud.bootstrap.BootstrapConfiguration"
)
AUTO_CONFIGURATION_KEY: Final[str] = (
    "org.springframework.boot.autoconfigure.EnableAutoConfiguration"
)


def _split_class_names(value: str) -> tuple[str, ...]:
    return tuple(name.strip() for name in value.split(",") if name.strip())


class ModelRegistrationEntries(BaseModel):
    """The two registration points the build conventions care about.

    Only these two keys are modelled; any other spring.factories entry is
    ignored. A field is ``None`` when the key is absent from the file, and an
    empty tuple when the key is present with no class names.

    Attributes:
        bootstrap_configuration: Classes registered under
            ``org.springframework.cloud.bootstrap.BootstrapConfiguration``.
        auto_configuration: Classes registered under
            ``org.springframework.boot.autoconfigure.EnableAutoConfiguration``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bootstrap_configuration: tuple[str, ...] | None = Field(
        default=None,
        description="Fully-qualified classes registered for bootstrap configuration",
    )
    auto_configuration: tuple[str, ...] | None = Field(
        default=None,
        description="Fully-qualified classes registered for auto-configuration",
    )

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> ModelRegistrationEntries:
        """Extract the two known keys from parsed properties."""
        bootstrap = properties.get(BOOTSTRAP_CONFIGURATION_KEY)
        auto = properties.get(AUTO_CONFIGURATION_KEY)
        return cls(
            bootstrap_configuration=(
                _split_class_names(bootstrap) if bootstrap is not None else None
            ),
            auto_configuration=_split_class_names(auto) if auto is not None else None,
        )

    def iter_registrations(self) -> Iterator[tuple[str, str]]:
        """Yield ``(registration_key, class_name)`` pairs, bootstrap key first."""
        if self.bootstrap_configuration is not None:
            for class_name in self.bootstrap_configuration:
                yield BOOTSTRAP_CONFIGURATION_KEY, class_name
        if self.auto_configuration is not None:
            for class_name in self.auto_configuration:
                yield AUTO_CONFIGURATION_KEY, class_name


__all__: list[str] = [
    "AUTO_CONFIGURATION_KEY",
    "BOOTSTRAP_CONFIGURATION_KEY",
    "ModelRegistrationEntries",
]
