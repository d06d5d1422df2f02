"""
Persisted record shapes: ingredients and recipe components.
"""
from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    PROTEIN = "protein"
    DAIRY = "dairy"
    GRAIN = "grain"
    SPICE = "spice"
    OTHER = "other"


class ComponentType(str, Enum):
    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    CARB = "carb"
    SAUCE_BASE = "sauce_base"
    COOKING_METHOD = "cooking_method"
    INSTRUCTION_TEMPLATE = "instruction_template"
    FLAVOR_PROFILE = "flavor_profile"
    SPICE = "spice"
    DAIRY = "dairy"
    FRUIT = "fruit"
    OTHER = "other"


@dataclass(frozen=True)
class Ingredient:
    name: str
    category: Category = Category.OTHER

    def to_dict(self) -> dict:
        return {"name": self.name, "category": self.category.value}

    @classmethod
    def from_dict(cls, d: dict) -> "Ingredient":
        return cls(
            name=d["name"],
            category=Category(d.get("category") or Category.OTHER.value),
        )


@dataclass(frozen=True)
class RecipeComponent:
    name: str
    type: ComponentType
    tags: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type.value,
            "tags": list(self.tags),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "RecipeComponent":
        return cls(
            name=d["name"],
            type=ComponentType(d["type"]),
            tags=tuple(d.get("tags") or ()),
            description=d.get("description") or "",
        )
