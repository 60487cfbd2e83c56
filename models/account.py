#!/usr/bin/env python3
"""Account-level models: the authenticated user, provider credentials, regions and PHP versions."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
from models.base import ForgeModel, ModelCollection, ModelError


@dataclass(frozen=True)
class User(ForgeModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    card_last_four: Optional[str] = None
    connected_to_github: Optional[bool] = None
    connected_to_gitlab: Optional[bool] = None
    connected_to_bitbucket: Optional[bool] = None
    connected_to_bitbucket_two: Optional[bool] = None
    connected_to_digitalocean: Optional[bool] = None
    connected_to_linode: Optional[bool] = None
    connected_to_vultr: Optional[bool] = None
    connected_to_aws: Optional[bool] = None
    connected_to_hetzner: Optional[bool] = None
    ready_for_billing: Optional[bool] = None
    stripe_is_active: Optional[int] = None
    can_create_servers: Optional[bool] = None


@dataclass(frozen=True)
class Credential(ForgeModel):
    id: int
    type: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class CredentialCollection(ModelCollection):
    item_model = Credential
    key = "credentials"


@dataclass(frozen=True)
class Region(ForgeModel):
    id: str
    name: Optional[str] = None
    provider: Optional[str] = None
    sizes: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class RegionCollection(ModelCollection):
    item_model = Region
    key = "regions"

    @classmethod
    def from_wire(cls, data: Any, context=None, key=None):
        # Regions come back grouped by provider: {"regions": {"ocean2": [...], ...}}
        if not isinstance(data, Mapping) or not isinstance(data.get(key or cls.key), Mapping):
            return super().from_wire(data, context, key)
        flattened = []
        for provider, regions in data[key or cls.key].items():
            if regions is None:
                continue
            if not isinstance(regions, (list, tuple)):
                raise ModelError(f"{cls.__name__} expects a list of regions for '{provider}'")
            for region in regions:
                if not isinstance(region, Mapping):
                    raise ModelError(f"{cls.__name__} item must be an object, got {type(region).__name__}")
                flattened.append({"provider": provider, **region})
        return super().from_wire(flattened, context)


@dataclass(frozen=True)
class PhpVersion(ForgeModel):
    id: Optional[int] = None
    version: Optional[str] = None
    status: Optional[str] = None
    displayable_version: Optional[str] = None
    binary_name: Optional[str] = None
    used_as_default: Optional[bool] = None
    used_on_cli: Optional[bool] = None


@dataclass(frozen=True)
class PhpVersionCollection(ModelCollection):
    item_model = PhpVersion
    key = "versions"
