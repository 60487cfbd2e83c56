#!/usr/bin/env python3
"""Recipe and nginx template models."""

from dataclasses import dataclass
from typing import Any, List, Optional
from models.base import ForgeModel, ModelCollection, UNSET


@dataclass(frozen=True)
class Recipe(ForgeModel):
    id: int
    key: Optional[str] = None
    name: Optional[str] = None
    user: Optional[str] = None
    script: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateRecipe(ForgeModel):
    name: str
    user: str
    script: str


@dataclass(frozen=True)
class UpdateRecipe(ForgeModel):
    name: Any = UNSET
    user: Any = UNSET
    script: Any = UNSET


@dataclass(frozen=True)
class RunRecipe(ForgeModel):
    servers: List[int]
    notify: Any = UNSET


@dataclass(frozen=True)
class RecipeCollection(ModelCollection):
    item_model = Recipe
    key = "recipes"


@dataclass(frozen=True)
class NginxTemplate(ForgeModel):
    id: int
    server_id: Optional[int] = None
    name: Optional[str] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class CreateNginxTemplate(ForgeModel):
    name: str
    content: str


@dataclass(frozen=True)
class UpdateNginxTemplate(ForgeModel):
    name: Any = UNSET
    content: Any = UNSET


@dataclass(frozen=True)
class NginxTemplateCollection(ModelCollection):
    item_model = NginxTemplate
    key = "templates"
