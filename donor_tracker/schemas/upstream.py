"""Schemas for pass-through responses from the upstream donor API."""

from typing import Any

from pydantic import BaseModel


class City(BaseModel):
    id: int
    name: str


class CitiesResponse(BaseModel):
    data: list[City]


class DonorSearchResponse(BaseModel):
    """Upstream donor rows as received: column headers plus positional rows."""

    headers: list[str]
    data: list[list[Any]]
