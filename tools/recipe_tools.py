#!/usr/bin/env python3
"""Recipe and nginx template tools."""

from models.recipe import (
    CreateNginxTemplate, CreateRecipe, RunRecipe, UpdateNginxTemplate, UpdateRecipe,
)
from tools.operation_tool import array, boolean, destroy, read, string, write

TEMPLATE = ("server_id", "template_id")

OPERATIONS = [
    read("list-recipes-tool", "recipes.list", "List the account's recipes (saved bash scripts)."),
    read("get-recipe-tool", "recipes.get", "Get a recipe including its script.", ids=("recipe_id",)),
    write("create-recipe-tool", "recipes.create",
          "Save a bash script as a recipe.",
          payload=CreateRecipe,
          params=(
              string("name", "Recipe name", required=True, min_length=1, max_length=255),
              string("user", "User the script runs as, e.g. root", required=True, min_length=1),
              string("script", "Bash script", required=True, min_length=1),
          )),
    write("update-recipe-tool", "recipes.update",
          "Change a recipe. Omitted fields are left unchanged.",
          ids=("recipe_id",), payload=UpdateRecipe,
          params=(
              string("name", "Recipe name", max_length=255),
              string("user", "User the script runs as"),
              string("script", "Bash script"),
          ),
          idempotent=True),
    destroy("delete-recipe-tool", "recipes.delete", "Delete a recipe.",
            ids=("recipe_id",), message="Recipe {recipe_id} deleted."),
    write("run-recipe-tool", "recipes.run",
          "Run a recipe on one or more servers as the recipe's user.",
          ids=("recipe_id",), payload=RunRecipe, destructive=True,
          params=(
              array("servers", "IDs of the target servers", required=True, min_items=1,
                    item_schema={"type": "integer", "minimum": 1}),
              boolean("notify", "Email the output when finished"),
          ),
          message="Recipe {recipe_id} started."),
    read("list-nginx-templates-tool", "nginx_templates.list",
         "List nginx templates available on a server.", ids=("server_id",)),
    read("get-nginx-template-tool", "nginx_templates.get", "Get one nginx template.", ids=TEMPLATE),
    read("get-default-nginx-template-tool", "nginx_templates.default",
         "Get the default nginx template of a server.", ids=("server_id",)),
    write("create-nginx-template-tool", "nginx_templates.create",
          "Create an nginx template usable when creating sites.",
          ids=("server_id",), payload=CreateNginxTemplate,
          params=(
              string("name", "Template name", required=True, min_length=1, max_length=255),
              string("content", "Nginx configuration template", required=True, min_length=1),
          )),
    write("update-nginx-template-tool", "nginx_templates.update",
          "Change an nginx template. Omitted fields are left unchanged.",
          ids=TEMPLATE, payload=UpdateNginxTemplate,
          params=(
              string("name", "Template name", max_length=255),
              string("content", "Nginx configuration template"),
          ),
          idempotent=True),
    destroy("delete-nginx-template-tool", "nginx_templates.delete", "Delete an nginx template.",
            ids=TEMPLATE, message="Nginx template {template_id} deleted."),
]
