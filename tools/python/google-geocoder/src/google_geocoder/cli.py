"""
Google Geocoder — CLI Entry Point
==================================
Installed as the ``geo-google-geocode`` command via ``pyproject.toml``.

Usage:
    geo-google-geocode --api-key KEY geocode "1600 Amphitheatre Parkway"
    geo-google-geocode --language de reverse 37.4224 -122.0842
    geo-google-geocode --component country:US batch \\
        --input data/addresses.csv --output output/addresses.geojson
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from shared.python.base_tool import configure_logging
from shared.python.exceptions import GeoScriptHubError, InputValidationError

from google_geocoder.batch import BatchGeocoder
from google_geocoder.config import ComponentFilter, GeocoderConfig
from google_geocoder.credentials import BusinessKey
from google_geocoder.geocoder import GoogleGeocoder
from google_geocoder.types import Bounds, GoogleAddress


def _parse_bounds(value: str | None) -> Bounds | None:
    if not value:
        return None
    try:
        sw_lat, sw_lng, ne_lat, ne_lng = (float(part) for part in value.split(","))
    except ValueError as exc:
        raise InputValidationError(
            f"--bounds must be 'swLat,swLng,neLat,neLng', got {value!r}"
        ) from exc
    return Bounds.from_coordinates(sw_lat, sw_lng, ne_lat, ne_lng)


def _feature_collection(results: list[GoogleAddress]) -> str:
    return json.dumps(
        {
            "type": "FeatureCollection",
            "features": [r.to_geojson_feature() for r in results],
        },
        indent=2,
        ensure_ascii=False,
    )


def _run(ctx: click.Context, coro_factory) -> None:
    """Build the geocoder from group options, run *coro_factory* and print."""
    try:
        geocoder = ctx.obj["build"]()
        results = asyncio.run(coro_factory(geocoder))
    except GeoScriptHubError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)
    click.echo(_feature_collection(results))


@click.group(
    name="geo-google-geocode",
    help="Geocode addresses and coordinates with the Google Maps Geocoding API.",
)
@click.option(
    "--api-key",
    default=None,
    envvar="GOOGLE_MAPS_API_KEY",
    help="Google Maps API key.  Can also be set via GOOGLE_MAPS_API_KEY.",
)
@click.option(
    "--client-id",
    default=None,
    envvar="GOOGLE_MAPS_CLIENT_ID",
    help="Premium plan client id (use with --signing-key instead of --api-key).",
)
@click.option(
    "--signing-key",
    default=None,
    envvar="GOOGLE_MAPS_SIGNING_KEY",
    help="URL signing secret for --client-id.",
)
@click.option("--channel", default=None, help="Usage-reporting channel for --client-id.")
@click.option("--language", default=None, help="Result language, e.g. 'en'.")
@click.option("--region", default=None, help="Region bias ccTLD, e.g. 'us'.")
@click.option("--bounds", default=None, help="Bounds bias as 'swLat,swLng,neLat,neLng'.")
@click.option(
    "--component",
    "components",
    multiple=True,
    help="Component filter 'key:value' (repeatable), e.g. country:US.",
)
@click.option("--proxy", default=None, help="Outbound proxy URL.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    api_key: str | None,
    client_id: str | None,
    signing_key: str | None,
    channel: str | None,
    language: str | None,
    region: str | None,
    bounds: str | None,
    components: tuple[str, ...],
    proxy: str | None,
    verbose: bool,
) -> None:
    """CLI entry point — wires Click options into a GoogleGeocoder."""
    configure_logging(verbose)

    def build() -> GoogleGeocoder:
        config = GeocoderConfig(
            language=language,
            region_bias=region,
            bounds_bias=_parse_bounds(bounds),
            component_filters=[ComponentFilter.parse(c) for c in components],
            proxy=proxy,
        )
        business_key = None
        if client_id or signing_key:
            business_key = BusinessKey(client_id or "", signing_key or "", channel)
        return GoogleGeocoder(config, api_key=api_key or None, business_key=business_key)

    ctx.ensure_object(dict)
    ctx.obj["build"] = build
    ctx.obj["verbose"] = verbose


@main.command(help="Geocode a free-form ADDRESS.")
@click.argument("address")
@click.pass_context
def geocode(ctx: click.Context, address: str) -> None:
    _run(ctx, lambda g: g.geocode(address))


# Negative coordinates would otherwise be parsed as options.
@main.command(
    help="Reverse geocode a LATITUDE LONGITUDE pair.",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("latitude", type=float)
@click.argument("longitude", type=float)
@click.pass_context
def reverse(ctx: click.Context, latitude: float, longitude: float) -> None:
    _run(ctx, lambda g: g.reverse_geocode(latitude, longitude))


@main.command(help="Geocode a CSV of addresses into a GeoJSON FeatureCollection.")
@click.option(
    "--input", "-i", "input_path",
    required=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Path to the input CSV file.",
)
@click.option(
    "--output", "-o", "output_path",
    required=True,
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    help="Path for the output GeoJSON file.",
)
@click.option(
    "--address-col",
    default="address",
    show_default=True,
    help="CSV column containing address strings.",
)
@click.option(
    "--extra-cols",
    default="",
    help="Comma-separated list of extra CSV columns to include in GeoJSON properties.",
)
@click.pass_context
def batch(
    ctx: click.Context,
    input_path: Path,
    output_path: Path,
    address_col: str,
    extra_cols: str,
) -> None:
    extra = [c.strip() for c in extra_cols.split(",") if c.strip()]
    try:
        tool = BatchGeocoder(
            input_path=input_path,
            output_path=output_path,
            geocoder=ctx.obj["build"](),
            address_col=address_col,
            extra_cols=extra,
            verbose=ctx.obj["verbose"],
        )
        tool.run()
    except GeoScriptHubError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    success = sum(1 for row in tool.rows if row.success)
    click.echo(f"\nGeoJSON written to: {output_path}")
    click.echo(f"Geocoded: {success}/{len(tool.rows)} addresses successfully.")


if __name__ == "__main__":
    main()
