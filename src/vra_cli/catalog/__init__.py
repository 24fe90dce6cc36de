"""Catalog entities: resources and the requests submitted against them."""

from vra_cli.catalog.request import Request
from vra_cli.catalog.resource import Resource
from vra_cli.catalog.resources import Resources

__all__ = ["Request", "Resource", "Resources"]
