"""
AreaWithCount Value Object

Read-only projection of an area together with how many active personas
reference it. Computed on demand, never persisted.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AreaWithCount:
    id: int
    nombre: str
    descripcion: str
    personas: int

    def __post_init__(self):
        if self.personas < 0:
            raise ValueError(f"Persona count cannot be negative: {self.personas}")
