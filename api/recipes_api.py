#!/usr/bin/env python3
"""Recipes and nginx templates API façades."""

from api.base_resource import BaseResource
from api.endpoints import get, post, put, delete
from models.recipe import (
    CreateNginxTemplate, CreateRecipe, NginxTemplate, NginxTemplateCollection, Recipe,
    RecipeCollection, RunRecipe, UpdateNginxTemplate, UpdateRecipe,
)

RECIPE = "/recipes/{recipe_id}"
TEMPLATES = "/servers/{server_id}/nginx/templates"
TEMPLATE = TEMPLATES + "/{template_id}"
SERVER_CTX = ("server_id",)

LIST_RECIPES = get("/recipes", RecipeCollection)
GET_RECIPE = get(RECIPE, Recipe, "recipe")
CREATE_RECIPE = post("/recipes", Recipe, "recipe")
UPDATE_RECIPE = put(RECIPE, Recipe, "recipe")
DELETE_RECIPE = delete(RECIPE)
RUN_RECIPE = post(RECIPE + "/run")

LIST_TEMPLATES = get(TEMPLATES, NginxTemplateCollection, context=SERVER_CTX)
GET_TEMPLATE = get(TEMPLATE, NginxTemplate, "template", SERVER_CTX)
DEFAULT_TEMPLATE = get(TEMPLATES + "/default", NginxTemplate, "template", SERVER_CTX)
CREATE_TEMPLATE = post(TEMPLATES, NginxTemplate, "template", SERVER_CTX)
UPDATE_TEMPLATE = put(TEMPLATE, NginxTemplate, "template", SERVER_CTX)
DELETE_TEMPLATE = delete(TEMPLATE)


class RecipesAPI(BaseResource):
    """Reusable bash scripts run across servers."""

    async def list(self) -> RecipeCollection:
        return await self._send(LIST_RECIPES)

    async def get(self, recipe_id: int) -> Recipe:
        return await self._send(GET_RECIPE, recipe_id=recipe_id)

    async def create(self, data: CreateRecipe) -> Recipe:
        return await self._send(CREATE_RECIPE, data)

    async def update(self, recipe_id: int, data: UpdateRecipe) -> Recipe:
        return await self._send(UPDATE_RECIPE, data, recipe_id=recipe_id)

    async def delete(self, recipe_id: int) -> None:
        await self._call(DELETE_RECIPE, recipe_id=recipe_id)

    async def run(self, recipe_id: int, data: RunRecipe) -> None:
        await self._call(RUN_RECIPE, data, recipe_id=recipe_id)


class NginxTemplatesAPI(BaseResource):

    async def list(self, server_id: int) -> NginxTemplateCollection:
        return await self._send(LIST_TEMPLATES, server_id=server_id)

    async def get(self, server_id: int, template_id: int) -> NginxTemplate:
        return await self._send(GET_TEMPLATE, server_id=server_id, template_id=template_id)

    async def default(self, server_id: int) -> NginxTemplate:
        return await self._send(DEFAULT_TEMPLATE, server_id=server_id)

    async def create(self, server_id: int, data: CreateNginxTemplate) -> NginxTemplate:
        return await self._send(CREATE_TEMPLATE, data, server_id=server_id)

    async def update(self, server_id: int, template_id: int, data: UpdateNginxTemplate) -> NginxTemplate:
        return await self._send(UPDATE_TEMPLATE, data, server_id=server_id, template_id=template_id)

    async def delete(self, server_id: int, template_id: int) -> None:
        await self._call(DELETE_TEMPLATE, server_id=server_id, template_id=template_id)
